import psycopg
from psycopg.types.json import Jsonb

from content_fetch.database.connection import get_connection
from content_fetch.events.base import BaseEventSink
from content_fetch.events.exceptions import SinkError
from content_fetch.events.models import PipelineEvent


class DatabaseEventSink(BaseEventSink):
    """Persists pipeline events in the content_fetch_events table."""

    def capture(self, event: PipelineEvent) -> None:
        try:
            with get_connection() as conn:
                conn.execute(
                    """
                    INSERT INTO content_fetch_events
                    (save_request_id, url, result, total_time_ms, user_ids,
                     properties, created_at)
                    VALUES (%s, %s, %s, %s, %s, %s, NOW())
                    """,
                    (
                        event.save_request_id,
                        event.url,
                        event.result,
                        event.total_time_ms,
                        event.user_ids,
                        Jsonb(event.to_dict()),
                    ),
                )
                conn.commit()
        except (psycopg.Error, RuntimeError) as exc:
            raise SinkError(f"failed to store event: {exc}") from exc
