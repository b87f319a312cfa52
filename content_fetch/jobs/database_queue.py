from collections.abc import Sequence
from typing import ClassVar

import psycopg
from psycopg.types.json import Jsonb

from content_fetch.database.connection import get_connection
from content_fetch.jobs.base import BaseJobQueue
from content_fetch.jobs.exceptions import QueueError
from content_fetch.jobs.models import JobDescriptor, JobHandle
from content_fetch.pipeline.models import Priority


class DatabaseJobQueue(BaseJobQueue):
    """Enqueues save-page jobs into the save_page_jobs table."""

    # Consumers claim with ORDER BY priority_rank, created_at.
    PRIORITY_RANKS: ClassVar[dict[Priority, int]] = {
        Priority.HIGH: 1,
        Priority.LOW: 10,
    }

    def submit(self, jobs: Sequence[JobDescriptor]) -> list[JobHandle]:
        if not jobs:
            return []
        handles: list[JobHandle] = []
        try:
            with get_connection() as conn:
                with conn.transaction():
                    with conn.cursor() as cur:
                        for job in jobs:
                            cur.execute(
                                """
                                INSERT INTO save_page_jobs
                                (user_id, payload, is_rss, is_import, priority,
                                 priority_rank, status, created_at, updated_at)
                                VALUES (%s, %s, %s, %s, %s, %s, 'pending', NOW(), NOW())
                                RETURNING id
                                """,
                                (
                                    job.user_id,
                                    Jsonb(job.payload.to_wire()),
                                    job.is_rss,
                                    job.is_import,
                                    job.priority.value,
                                    self.PRIORITY_RANKS[job.priority],
                                ),
                            )
                            row = cur.fetchone()
                            if row is None:
                                raise QueueError(f"no id returned for job of user {job.user_id}")
                            handles.append(JobHandle(id=row[0], user_id=job.user_id))
        except psycopg.Error as exc:
            raise QueueError(f"failed to enqueue {len(jobs)} save-page jobs: {exc}") from exc
        return handles
