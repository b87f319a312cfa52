from content_fetch.config.settings import Settings
from content_fetch.database.models import RequestRecord
from content_fetch.database.repositories.request_repository import RequestRepository
from content_fetch.logging.logger import Log
from content_fetch.pipeline.exceptions import SaveRequestValidationError
from content_fetch.pipeline.orchestrator import PipelineOrchestrator
from content_fetch.pipeline.request_parser import parse_save_request


class RequestRunner:
    """Run one save request and apply retry logic based on its outcome."""

    def __init__(
        self,
        orchestrator: PipelineOrchestrator,
        request_repo: RequestRepository,
        settings: Settings,
    ) -> None:
        self._orchestrator = orchestrator
        self._request_repo = request_repo
        self._settings = settings

    def run(self, record: RequestRecord) -> None:
        """Execute a single save request with error handling."""
        Log.info(f"Running request {record.id} (attempt {record.attempts + 1})")
        try:
            request = parse_save_request(record.payload, self._settings.default_source)
        except SaveRequestValidationError as exc:
            # Malformed payloads never succeed on retry.
            Log.error(f"Request {record.id} rejected: {exc}")
            self._request_repo.fail(record.id, str(exc))
            return

        try:
            outcome = self._orchestrator.run(request)
        except Exception as exc:
            self._handle_failure(record, str(exc) or type(exc).__name__)
            return

        if outcome.success:
            self._request_repo.complete(record.id)
            Log.info(f"Request {record.id} completed in {outcome.total_elapsed_ms} ms")
        else:
            self._handle_failure(record, outcome.error_message or "unknown error")

    def _handle_failure(self, record: RequestRecord, error: str) -> None:
        """Fail the request at max attempts, otherwise release it for a retry."""
        Log.error(f"Request {record.id} failed: {error}")
        if record.attempts + 1 >= self._settings.max_request_attempts:
            self._request_repo.fail(record.id, error)
            Log.error(
                f"Request {record.id} permanently failed after {record.attempts + 1} attempts"
            )
        else:
            self._request_repo.release_for_retry(record.id, error)
            Log.warning(f"Request {record.id} will be retried (attempt {record.attempts + 1})")
