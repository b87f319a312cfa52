from dataclasses import dataclass, field


@dataclass
class RequestRecord:
    """A claimed row from the content_fetch_requests table."""

    id: int
    payload: dict[str, object] = field(default_factory=dict)
    attempts: int = 0
