from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from content_fetch.fetch.models import FetchResult
from content_fetch.jobs.models import JobDescriptor, JobHandle
from content_fetch.pipeline.models import PipelineOutcome, PipelineState, Recipient, SaveRequest


@dataclass(slots=True)
class PipelineContext:
    request: SaveRequest
    started_at: float
    state: PipelineState = PipelineState.RECEIVED
    recipients: tuple[Recipient, ...] = ()
    fetch_result: FetchResult | None = None
    content_digest: str | None = None
    jobs: list[JobDescriptor] = field(default_factory=list)
    handles: list[JobHandle] = field(default_factory=list)
    error_message: str = ""
    outcome: PipelineOutcome | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
