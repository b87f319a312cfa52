from dataclasses import dataclass

from content_fetch.pipeline.models import Priority


@dataclass(frozen=True)
class SavePagePayload:
    """Data handed to the save-page consumer for one user."""

    user_id: str
    url: str
    final_url: str
    save_request_id: str
    source: str
    title: str
    content_type: str
    state: str | None = None
    labels: tuple[str, ...] | None = None
    folder: str | None = None
    rss_feed_url: str | None = None
    saved_at: str | None = None
    published_at: str | None = None
    task_id: str | None = None
    content_hash: str | None = None

    def to_wire(self) -> dict[str, object]:
        """Serialize with the camelCase keys the save-page consumer reads."""
        return {
            "userId": self.user_id,
            "url": self.url,
            "finalUrl": self.final_url,
            "articleSavingRequestId": self.save_request_id,
            "state": self.state,
            "labels": list(self.labels) if self.labels is not None else None,
            "source": self.source,
            "folder": self.folder,
            "rssFeedUrl": self.rss_feed_url,
            "savedAt": self.saved_at,
            "publishedAt": self.published_at,
            "taskId": self.task_id,
            "title": self.title,
            "contentType": self.content_type,
            "contentHash": self.content_hash,
        }


@dataclass(frozen=True)
class JobDescriptor:
    """One save-page job per recipient."""

    user_id: str
    payload: SavePagePayload
    is_rss: bool
    is_import: bool
    priority: Priority


@dataclass(frozen=True)
class JobHandle:
    """Acknowledgement for one accepted job."""

    id: int
    user_id: str
