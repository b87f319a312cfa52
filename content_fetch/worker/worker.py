import time

import psycopg

from content_fetch.config.settings import Settings
from content_fetch.database.models import RequestRecord
from content_fetch.database.repositories.request_repository import RequestRepository
from content_fetch.logging.logger import Log
from content_fetch.worker.request_runner import RequestRunner


class Worker:
    """Poll loop: sleep -> claim -> dispatch."""

    def __init__(
        self,
        request_repo: RequestRepository,
        request_runner: RequestRunner,
        settings: Settings,
    ) -> None:
        self._request_repo = request_repo
        self._request_runner = request_runner
        self._settings = settings

    def run(self, max_requests: int | None = None) -> None:
        """Main poll loop. Runs forever until interrupted.

        If max_requests is set, stop after processing that many requests.
        """
        Log.info("Worker started, polling for save requests")
        handled = 0
        try:
            while max_requests is None or handled < max_requests:
                record = self._try_claim_request()
                if record:
                    self._request_runner.run(record)
                    handled += 1
                else:
                    Log.debug("No save requests available, sleeping")
                    time.sleep(self._settings.request_poll_interval_seconds)
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")

    def _try_claim_request(self) -> RequestRecord | None:
        """Attempt to claim the next pending request. Gracefully handle DB errors."""
        try:
            return self._request_repo.claim_next_request()
        except psycopg.Error as exc:
            Log.warning(f"Database error, will retry: {exc}")
            return None
