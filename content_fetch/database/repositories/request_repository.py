from psycopg.rows import dict_row

from content_fetch.database.connection import get_connection
from content_fetch.database.models import RequestRecord


class RequestRepository:
    """Claim and settle save requests queued in content_fetch_requests.

    A row is ``pending`` until a worker claims it (``processing``, stamped with
    ``locked_at``), then ends ``done`` or ``failed``, or goes back to
    ``pending`` for another attempt. A ``processing`` row whose lock is older
    than ``lock_timeout_seconds`` belonged to a worker that died mid-run; it is
    claimable again and the lost run counts as an attempt.
    """

    def __init__(self, max_attempts: int, lock_timeout_seconds: int) -> None:
        self._max_attempts = max_attempts
        self._lock_timeout_seconds = lock_timeout_seconds

    def claim_next_request(self) -> RequestRecord | None:
        """Atomically claim the oldest pending or stale request, if any."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    UPDATE content_fetch_requests
                    SET status = 'processing',
                        attempts = attempts
                            + CASE WHEN status = 'processing' THEN 1 ELSE 0 END,
                        locked_at = NOW(),
                        updated_at = NOW()
                    WHERE id = (
                        SELECT id
                        FROM content_fetch_requests
                        WHERE attempts < %(max_attempts)s
                          AND (
                            status = 'pending'
                            OR (
                              status = 'processing'
                              AND locked_at < NOW() - %(lock_timeout)s * INTERVAL '1 second'
                            )
                          )
                        ORDER BY created_at
                        LIMIT 1
                        FOR UPDATE SKIP LOCKED
                    )
                    RETURNING id, payload, attempts
                    """,
                    {
                        "max_attempts": self._max_attempts,
                        "lock_timeout": self._lock_timeout_seconds,
                    },
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            return None
        return RequestRecord(id=row["id"], payload=row["payload"] or {}, attempts=row["attempts"])

    def complete(self, request_id: int) -> None:
        self._settle(request_id, status="done", error=None, count_attempt=False)

    def fail(self, request_id: int, error: str) -> None:
        """Give up on a request; it is never claimed again."""
        self._settle(request_id, status="failed", error=error, count_attempt=True)

    def release_for_retry(self, request_id: int, error: str) -> None:
        """Return a request to the queue, recording the failed attempt."""
        self._settle(request_id, status="pending", error=error, count_attempt=True)

    def _settle(
        self,
        request_id: int,
        *,
        status: str,
        error: str | None,
        count_attempt: bool,
    ) -> None:
        with get_connection() as conn:
            conn.execute(
                """
                UPDATE content_fetch_requests
                SET status = %s,
                    error_message = %s,
                    attempts = attempts + %s,
                    locked_at = NULL,
                    updated_at = NOW()
                WHERE id = %s AND status = 'processing'
                """,
                (status, error, 1 if count_attempt else 0, request_id),
            )
            conn.commit()
