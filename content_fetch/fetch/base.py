from abc import ABC, abstractmethod

from content_fetch.fetch.models import FetchResult


class BaseFetchClient(ABC):
    """Contract for all page fetch adapters."""

    @abstractmethod
    def fetch(
        self,
        url: str,
        locale: str | None = None,
        timezone: str | None = None,
    ) -> FetchResult:
        """Retrieve a page.

        Args:
            url: Page URL as requested by the user.
            locale: Optional rendering hint, passed through unmodified.
            timezone: Optional rendering hint, passed through unmodified.

        Returns:
            FetchResult with the final URL after redirects.

        Raises:
            FetchError: on network error, timeout or render error.
        """
