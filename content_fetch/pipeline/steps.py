import time
from collections.abc import Callable

from content_fetch.events.base import BaseEventSink
from content_fetch.events.models import PipelineEvent
from content_fetch.fetch.base import BaseFetchClient
from content_fetch.jobs.base import BaseJobQueue
from content_fetch.jobs.builder import JobBuilder
from content_fetch.jobs.exceptions import QueueError
from content_fetch.logging.logger import Log
from content_fetch.pipeline.context import PipelineContext, PipelineStep
from content_fetch.pipeline.models import PipelineOutcome, PipelineState
from content_fetch.pipeline.request_parser import normalize_recipients
from content_fetch.storage.base import BaseContentStore
from content_fetch.storage.hasher import ContentHasher


class ResolveRecipientsStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        request = context.request
        Log.info(
            "Article parsing request",
            url=request.url,
            save_request_id=request.save_request_id,
            source=request.source,
            state=request.state,
            labels=request.labels,
            task_id=request.task_id,
            locale=request.locale,
            timezone=request.timezone,
            rss_feed_url=request.rss_feed_url,
            saved_at=request.saved_at,
            published_at=request.published_at,
            priority=request.priority.value,
            user_id=request.user_id,
            users=list(request.users),
        )
        context.recipients = normalize_recipients(
            request.users, request.user_id, request.folder
        )
        return context


class FetchStep(PipelineStep):
    def __init__(self, fetch_client: BaseFetchClient) -> None:
        self._fetch_client = fetch_client

    def run(self, context: PipelineContext) -> PipelineContext:
        context.state = PipelineState.FETCHING
        request = context.request
        context.fetch_result = self._fetch_client.fetch(
            request.url,
            locale=request.locale,
            timezone=request.timezone,
        )
        Log.info(
            f"Fetched {request.url}",
            final_url=context.fetch_result.final_url,
            content_type=context.fetch_result.content_type,
            has_content=context.fetch_result.content is not None,
        )
        return context


class StoreContentStep(PipelineStep):
    def __init__(self, hasher: ContentHasher, content_store: BaseContentStore) -> None:
        self._hasher = hasher
        self._content_store = content_store

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.fetch_result is None:
            raise ValueError("PipelineContext.fetch_result must be set before storing content")
        content = context.fetch_result.content
        if not content:
            Log.info(f"No content to store for {context.request.url}")
            return context
        context.state = PipelineState.CONTENT_PROCESSING
        digest = self._hasher.hash(content)
        self._content_store.put(digest, content)
        context.content_digest = digest
        Log.info("content uploaded to bucket", content_hash=digest)
        return context


class BuildJobsStep(PipelineStep):
    def __init__(self, job_builder: JobBuilder) -> None:
        self._job_builder = job_builder

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.fetch_result is None:
            raise ValueError("PipelineContext.fetch_result must be set before building jobs")
        context.state = PipelineState.BUILDING
        context.jobs = self._job_builder.build(
            context.request,
            context.fetch_result,
            context.content_digest,
            context.recipients,
        )
        return context


class EnqueueJobsStep(PipelineStep):
    def __init__(self, job_queue: BaseJobQueue) -> None:
        self._job_queue = job_queue

    def run(self, context: PipelineContext) -> PipelineContext:
        context.state = PipelineState.ENQUEUING
        handles = self._job_queue.submit(context.jobs)
        if len(handles) != len(context.jobs):
            raise QueueError(
                f"queue accepted {len(handles)} of {len(context.jobs)} save-page jobs"
            )
        context.handles = handles
        Log.info("save-page jobs queued", count=len(handles))
        return context


class ReportOutcomeStep(PipelineStep):
    """Finalizer: records timing and outcome, then emits one event."""

    def __init__(
        self,
        event_sink: BaseEventSink,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._event_sink = event_sink
        self._clock = clock

    def run(self, context: PipelineContext) -> PipelineContext:
        context.state = PipelineState.REPORTING
        elapsed_ms = max(0, int((self._clock() - context.started_at) * 1000))
        success = not context.error_message
        context.outcome = PipelineOutcome(
            success=success,
            total_elapsed_ms=elapsed_ms,
            error_message=None if success else context.error_message,
        )

        event = self._build_event(context)
        Log.info("parse-page result", **event.to_dict())
        try:
            self._event_sink.capture(event)
        except Exception as exc:
            Log.warning(f"Failed to emit event for {context.request.save_request_id}: {exc}")

        context.state = PipelineState.DONE
        return context

    @staticmethod
    def _build_event(context: PipelineContext) -> PipelineEvent:
        request = context.request
        outcome = context.outcome
        if outcome is None:
            raise ValueError("PipelineContext.outcome must be set before building the event")
        recipients = context.recipients
        return PipelineEvent(
            url=request.url,
            save_request_id=request.save_request_id,
            source=request.source,
            result="success" if outcome.success else "failure",
            total_time_ms=outcome.total_elapsed_ms,
            user_ids=[r.user_id for r in recipients],
            folders=[r.folder for r in recipients],
            state=request.state,
            labels=list(request.labels) if request.labels is not None else None,
            task_id=request.task_id,
            locale=request.locale,
            timezone=request.timezone,
            rss_feed_url=request.rss_feed_url,
            saved_at=request.saved_at,
            published_at=request.published_at,
            final_url=context.fetch_result.final_url if context.fetch_result else None,
            content_hash=context.content_digest,
            jobs_queued=len(context.handles),
            error=outcome.error_message,
        )
