from content_fetch.config.settings import Settings
from content_fetch.fetch.base import BaseFetchClient
from content_fetch.fetch.http_adapter import HttpFetchClient
from content_fetch.fetch.renderer_adapter import RendererFetchClient


class FetchClientFactory:
    """Creates the configured fetch adapter."""

    ENGINES = ("http", "renderer")

    @classmethod
    def create(cls, settings: Settings) -> BaseFetchClient:
        engine = settings.fetch_engine.lower()
        if engine == "http":
            return HttpFetchClient(
                timeout_seconds=settings.fetch_timeout_seconds,
                user_agent=settings.fetch_user_agent,
            )
        if engine == "renderer":
            return RendererFetchClient(
                renderer_url=settings.renderer_url,
                timeout_seconds=settings.renderer_timeout_seconds,
            )
        raise ValueError(
            f"Unknown fetch engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
