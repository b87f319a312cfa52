from content_fetch.events.base import BaseEventSink
from content_fetch.events.exceptions import SinkError
from content_fetch.events.models import PipelineEvent
from content_fetch.logging.logger import Log


class LogEventSink(BaseEventSink):
    """Emits pipeline events as structured log records."""

    def capture(self, event: PipelineEvent) -> None:
        try:
            Log.info("content-fetch event", **event.to_dict())
        except (TypeError, ValueError) as exc:
            raise SinkError(f"failed to log event: {exc}") from exc
