from urllib.parse import unquote, urlsplit

import httpx
from bs4 import BeautifulSoup

from content_fetch.fetch.base import BaseFetchClient
from content_fetch.fetch.exceptions import FetchError
from content_fetch.fetch.models import FetchResult

_HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


def title_from_url(url: str) -> str:
    """Fallback title: last non-empty path segment, else the host."""
    parts = urlsplit(url)
    segments = [s for s in parts.path.split("/") if s]
    if segments:
        return unquote(segments[-1])
    return parts.netloc or url


class HttpFetchClient(BaseFetchClient):
    """Fetches pages with a plain HTTP GET (no JavaScript rendering)."""

    def __init__(
        self,
        *,
        timeout_seconds: int,
        user_agent: str,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._user_agent = user_agent
        self._transport = transport

    def fetch(
        self,
        url: str,
        locale: str | None = None,
        timezone: str | None = None,
    ) -> FetchResult:
        headers = {"User-Agent": self._user_agent}
        if locale:
            headers["Accept-Language"] = locale
        try:
            with httpx.Client(
                follow_redirects=True,
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.get(url, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"fetch of {url} returned HTTP {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"fetch of {url} failed: {exc}") from exc

        final_url = str(response.url)
        content_type = response.headers.get("content-type", "").split(";")[0].strip().lower()
        if content_type not in _HTML_CONTENT_TYPES:
            return FetchResult(
                final_url=final_url,
                title=title_from_url(final_url),
                content_type=content_type or "application/octet-stream",
            )

        html = response.text
        return FetchResult(
            final_url=final_url,
            title=self._extract_title(html) or title_from_url(final_url),
            content_type=content_type,
            content=html or None,
        )

    @staticmethod
    def _extract_title(html: str) -> str:
        soup = BeautifulSoup(html, "html.parser")
        if soup.title is None or soup.title.string is None:
            return ""
        return soup.title.string.strip()
