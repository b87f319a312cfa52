from content_fetch.config.settings import Settings
from content_fetch.database.connection import close_pool, init_pool
from content_fetch.database.repositories.request_repository import RequestRepository
from content_fetch.logging.logger import Log
from content_fetch.pipeline.orchestrator import build_orchestrator
from content_fetch.worker.request_runner import RequestRunner
from content_fetch.worker.worker import Worker


def main() -> None:
    """Entry point: initialize pool -> build dependencies -> start worker loop."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        orchestrator = build_orchestrator(settings)
        request_repo = RequestRepository(
            settings.max_request_attempts, settings.request_lock_timeout_seconds
        )
        request_runner = RequestRunner(orchestrator, request_repo, settings)
        worker = Worker(request_repo, request_runner, settings)
        worker.run()
    finally:
        close_pool()


if __name__ == "__main__":
    main()
