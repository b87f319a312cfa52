import psycopg

from content_fetch.database.connection import get_connection
from content_fetch.storage.base import BaseContentStore
from content_fetch.storage.exceptions import StorageError


class DatabaseContentStore(BaseContentStore):
    """Stores content blobs in the original_contents table."""

    def put(self, digest: str, content: str | bytes) -> None:
        data = content.encode("utf-8") if isinstance(content, str) else content
        try:
            with get_connection() as conn:
                conn.execute(
                    """
                    INSERT INTO original_contents (digest, content, created_at)
                    VALUES (%s, %s, NOW())
                    ON CONFLICT (digest) DO NOTHING
                    """,
                    (digest, data),
                )
                conn.commit()
        except psycopg.Error as exc:
            raise StorageError(f"failed to write content {digest}: {exc}") from exc
