from abc import ABC, abstractmethod


class BaseContentStore(ABC):
    """Contract for content-addressed, write-once blob storage."""

    @abstractmethod
    def put(self, digest: str, content: str | bytes) -> None:
        """Persist content under its digest.

        Writing a digest that is already present must succeed; equal digests
        imply identical content, so an overwrite or a skip are both correct.

        Raises:
            StorageError: if the content cannot be persisted.
        """
