import time
from collections.abc import Callable, Sequence
from pathlib import Path

from content_fetch.config.settings import Settings
from content_fetch.events.factory import EventSinkFactory
from content_fetch.fetch import FetchClientFactory
from content_fetch.jobs.builder import JobBuilder
from content_fetch.jobs.database_queue import DatabaseJobQueue
from content_fetch.logging.logger import Log
from content_fetch.pipeline.context import PipelineContext, PipelineStep
from content_fetch.pipeline.exceptions import PipelineError
from content_fetch.pipeline.models import PipelineOutcome, SaveRequest
from content_fetch.pipeline.steps import (
    BuildJobsStep,
    EnqueueJobsStep,
    FetchStep,
    ReportOutcomeStep,
    ResolveRecipientsStep,
    StoreContentStep,
)
from content_fetch.storage.factory import ContentStoreFactory
from content_fetch.storage.hasher import ContentHasher


class PipelineOrchestrator:
    """Runs one save request through the content-fetch pipeline.

    Pipeline: resolve recipients -> fetch -> hash + store -> build jobs ->
    enqueue. The first failing step aborts the rest. The report step runs
    exactly once on every path and errors never escape ``run``.
    """

    def __init__(
        self,
        *,
        steps: Sequence[PipelineStep],
        report_step: PipelineStep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._steps = list(steps)
        self._report_step = report_step
        self._clock = clock

    def run(self, request: SaveRequest) -> PipelineOutcome:
        context = PipelineContext(request=request, started_at=self._clock())
        try:
            for step in self._steps:
                context = step.run(context)
        except PipelineError as exc:
            context.error_message = str(exc) or type(exc).__name__
            Log.error(
                f"Save request {request.save_request_id} failed in state "
                f"{context.state.value}: {context.error_message}"
            )
        except Exception as exc:
            context.error_message = f"unknown error: {exc}"
            Log.error(
                f"Save request {request.save_request_id} crashed in state "
                f"{context.state.value}: {exc!r}"
            )
        except BaseException:
            context.error_message = "run interrupted"
            raise
        finally:
            context = self._report_step.run(context)

        if context.outcome is None:
            raise ValueError("PipelineContext.outcome must be set by the report step")
        return context.outcome


def build_orchestrator(
    settings: Settings,
    content_root: Path | None = None,
) -> PipelineOrchestrator:
    """Build a PipelineOrchestrator with all required adapters."""
    clock = time.monotonic
    return PipelineOrchestrator(
        steps=[
            ResolveRecipientsStep(),
            FetchStep(FetchClientFactory.create(settings)),
            StoreContentStep(
                hasher=ContentHasher(settings.content_hash_algorithm),
                content_store=ContentStoreFactory.create(settings, root=content_root),
            ),
            BuildJobsStep(JobBuilder()),
            EnqueueJobsStep(DatabaseJobQueue()),
        ],
        report_step=ReportOutcomeStep(EventSinkFactory.create(settings), clock=clock),
        clock=clock,
    )
