from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class PipelineEvent:
    """One structured record per pipeline run."""

    url: str
    save_request_id: str
    source: str
    result: str  # "success" or "failure"
    total_time_ms: int
    user_ids: list[str] = field(default_factory=list)
    folders: list[str | None] = field(default_factory=list)
    state: str | None = None
    labels: list[str] | None = None
    task_id: str | None = None
    locale: str | None = None
    timezone: str | None = None
    rss_feed_url: str | None = None
    saved_at: str | None = None
    published_at: str | None = None
    final_url: str | None = None
    content_hash: str | None = None
    jobs_queued: int = 0
    error: str | None = None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
