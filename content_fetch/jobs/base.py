from abc import ABC, abstractmethod
from collections.abc import Sequence

from content_fetch.jobs.models import JobDescriptor, JobHandle


class BaseJobQueue(ABC):
    """Contract for save-page job queues."""

    @abstractmethod
    def submit(self, jobs: Sequence[JobDescriptor]) -> list[JobHandle]:
        """Enqueue a batch of jobs as one unit.

        Either every job is accepted or none is.

        Returns:
            One handle per job, in input order.

        Raises:
            QueueError: if the batch could not be accepted.
        """
