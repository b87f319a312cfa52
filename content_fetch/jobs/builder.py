from collections.abc import Sequence

from content_fetch.fetch.models import FetchResult
from content_fetch.jobs.models import JobDescriptor, SavePagePayload
from content_fetch.pipeline.models import Recipient, SaveRequest


class JobBuilder:
    """Builds one save-page job descriptor per recipient, in recipient order."""

    def build(
        self,
        request: SaveRequest,
        fetch_result: FetchResult,
        content_digest: str | None,
        recipients: Sequence[Recipient],
    ) -> list[JobDescriptor]:
        return [
            self._build_one(request, fetch_result, content_digest, recipient)
            for recipient in recipients
        ]

    def _build_one(
        self,
        request: SaveRequest,
        fetch_result: FetchResult,
        content_digest: str | None,
        recipient: Recipient,
    ) -> JobDescriptor:
        payload = SavePagePayload(
            user_id=recipient.user_id,
            url=request.url,
            final_url=fetch_result.final_url,
            save_request_id=request.save_request_id,
            state=request.state,
            labels=request.labels,
            source=request.source,
            folder=recipient.folder,
            rss_feed_url=request.rss_feed_url,
            saved_at=request.saved_at,
            published_at=request.published_at,
            task_id=request.task_id,
            title=fetch_result.title,
            content_type=fetch_result.content_type,
            content_hash=content_digest,
        )
        return JobDescriptor(
            user_id=recipient.user_id,
            payload=payload,
            is_rss=bool(request.rss_feed_url),
            is_import=bool(request.task_id),
            priority=request.priority,
        )
