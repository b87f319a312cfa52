from abc import ABC, abstractmethod

from content_fetch.events.models import PipelineEvent


class BaseEventSink(ABC):
    """Contract for observability sinks. Fire-and-forget from the pipeline's view."""

    @abstractmethod
    def capture(self, event: PipelineEvent) -> None:
        """Emit one event.

        Raises:
            SinkError: if the event could not be emitted.
        """
