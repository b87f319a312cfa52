from pathlib import Path

from content_fetch.config.settings import Settings
from content_fetch.storage.base import BaseContentStore
from content_fetch.storage.database_adapter import DatabaseContentStore
from content_fetch.storage.local_adapter import LocalContentStore


class ContentStoreFactory:
    """Creates the correct content store based on settings."""

    ENGINES = ("local", "database")

    @classmethod
    def create(cls, settings: Settings, root: Path | None = None) -> BaseContentStore:
        engine = settings.content_store_engine.lower()
        if engine == "local":
            return LocalContentStore(
                root=root if root is not None else Path(settings.content_store_root),
                prefix=settings.content_store_prefix,
            )
        if engine == "database":
            return DatabaseContentStore()
        raise ValueError(
            f"Unknown content store engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
