import os
import tempfile
from pathlib import Path

from content_fetch.storage.base import BaseContentStore
from content_fetch.storage.exceptions import StorageError


def content_file_path(root: Path, prefix: str, digest: str) -> Path:
    """Build path to a stored blob: {root}/{prefix}/{digest}"""
    return root / prefix / digest


class LocalContentStore(BaseContentStore):
    """Stores content blobs on the local filesystem."""

    def __init__(self, root: Path, prefix: str = "originalContent") -> None:
        self._root = root
        self._prefix = prefix

    def put(self, digest: str, content: str | bytes) -> None:
        data = content.encode("utf-8") if isinstance(content, str) else content
        path = content_file_path(self._root, self._prefix, digest)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Readers must never observe a partially written blob.
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{digest}.")
            try:
                with os.fdopen(fd, "wb") as tmp:
                    tmp.write(data)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"failed to write content {digest}: {exc}") from exc
