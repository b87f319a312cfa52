import httpx

from content_fetch.fetch.base import BaseFetchClient
from content_fetch.fetch.exceptions import FetchError
from content_fetch.fetch.models import FetchResult


class RendererFetchClient(BaseFetchClient):
    """Delegates fetching to an external headless-browser rendering service.

    The service receives ``{url, locale, timezone}`` and answers with
    ``{finalUrl, title, content, contentType}``.
    """

    def __init__(
        self,
        *,
        renderer_url: str,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not renderer_url:
            raise ValueError("renderer_url is required for fetch_engine=renderer")
        self._renderer_url = renderer_url
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def fetch(
        self,
        url: str,
        locale: str | None = None,
        timezone: str | None = None,
    ) -> FetchResult:
        try:
            with httpx.Client(timeout=self._timeout_seconds, transport=self._transport) as client:
                response = client.post(
                    self._renderer_url,
                    json={"url": url, "locale": locale, "timezone": timezone},
                )
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"renderer returned HTTP {exc.response.status_code} for {url}"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"renderer request for {url} failed: {exc}") from exc
        except ValueError as exc:
            raise FetchError(f"renderer returned invalid JSON for {url}: {exc}") from exc

        return self._to_result(url, body)

    @staticmethod
    def _to_result(url: str, body: object) -> FetchResult:
        if not isinstance(body, dict):
            raise FetchError(f"renderer reply for {url} must be an object")
        content = body.get("content")
        if content is not None and not isinstance(content, str):
            raise FetchError(f"renderer reply for {url} has non-text content")
        return FetchResult(
            final_url=str(body.get("finalUrl") or url),
            title=str(body.get("title") or ""),
            content_type=str(body.get("contentType") or "text/html"),
            content=content or None,
        )
