from pathlib import Path
from unittest.mock import MagicMock

import pytest

from content_fetch.config.settings import Settings
from content_fetch.database.connection import get_connection
from content_fetch.database.models import RequestRecord
from content_fetch.database.repositories.request_repository import RequestRepository
from content_fetch.events.log_sink import LogEventSink
from content_fetch.fetch.base import BaseFetchClient
from content_fetch.fetch.models import FetchResult
from content_fetch.jobs.builder import JobBuilder
from content_fetch.jobs.database_queue import DatabaseJobQueue
from content_fetch.pipeline.orchestrator import PipelineOrchestrator
from content_fetch.pipeline.steps import (
    BuildJobsStep,
    EnqueueJobsStep,
    FetchStep,
    ReportOutcomeStep,
    ResolveRecipientsStep,
    StoreContentStep,
)
from content_fetch.storage.hasher import ContentHasher
from content_fetch.storage.local_adapter import LocalContentStore
from content_fetch.worker.request_runner import RequestRunner
from content_fetch.worker.worker import Worker


def _build_orchestrator(fetch_client: BaseFetchClient, root: Path) -> PipelineOrchestrator:
    return PipelineOrchestrator(
        steps=[
            ResolveRecipientsStep(),
            FetchStep(fetch_client),
            StoreContentStep(hasher=ContentHasher(), content_store=LocalContentStore(root)),
            BuildJobsStep(JobBuilder()),
            EnqueueJobsStep(DatabaseJobQueue()),
        ],
        report_step=ReportOutcomeStep(LogEventSink()),
    )


@pytest.mark.integration
class TestWorkerIntegration:
    def test_worker_fetches_stores_and_fans_out(
        self,
        seed_request: RequestRecord,
        test_settings: Settings,
        sample_html: str,
        tmp_path: Path,
    ) -> None:
        fetch_client = MagicMock(spec=BaseFetchClient)
        fetch_client.fetch.return_value = FetchResult(
            final_url="https://a.com/amp",
            title="Sample Article",
            content_type="text/html",
            content=sample_html,
        )
        request_repo = RequestRepository(
            max_attempts=test_settings.max_request_attempts,
            lock_timeout_seconds=test_settings.request_lock_timeout_seconds,
        )
        runner = RequestRunner(
            _build_orchestrator(fetch_client, tmp_path), request_repo, test_settings
        )
        Worker(request_repo, runner, test_settings).run(max_requests=1)

        digest = ContentHasher().hash(sample_html)
        assert (tmp_path / "originalContent" / digest).read_text() == sample_html
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT status FROM content_fetch_requests WHERE id = %s",
                    (seed_request.id,),
                )
                status_row = cur.fetchone()
                cur.execute("SELECT user_id, payload FROM save_page_jobs ORDER BY id")
                job_rows = cur.fetchall()
        assert status_row is not None
        assert status_row[0] == "done"
        assert [row[0] for row in job_rows] == ["u1", "u2"]
        assert job_rows[0][1]["folder"] == "inbox"
        assert all(row[1]["contentHash"] == digest for row in job_rows)
