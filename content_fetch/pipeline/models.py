from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class Priority(str, Enum):
    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class Recipient:
    """A user the fetched page is saved for."""

    user_id: str
    folder: str | None = None


@dataclass(frozen=True)
class SaveRequest:
    """Decoded save request. Owned by exactly one pipeline run.

    Recipients are carried as received (``users`` list or the legacy
    ``user_id``/``folder`` pair) and resolved by the pipeline.
    """

    url: str
    save_request_id: str
    priority: Priority
    source: str
    users: tuple[Mapping[str, object], ...] = ()
    user_id: str | None = None
    folder: str | None = None
    state: str | None = None
    labels: tuple[str, ...] | None = None
    task_id: str | None = None
    locale: str | None = None
    timezone: str | None = None
    rss_feed_url: str | None = None
    saved_at: str | None = None
    published_at: str | None = None


@dataclass(frozen=True)
class PipelineOutcome:
    """Result of one pipeline run, produced exactly once."""

    success: bool
    total_elapsed_ms: int
    error_message: str | None = None


class PipelineState(str, Enum):
    RECEIVED = "received"
    FETCHING = "fetching"
    CONTENT_PROCESSING = "content_processing"
    BUILDING = "building"
    ENQUEUING = "enqueuing"
    REPORTING = "reporting"
    DONE = "done"