from content_fetch.config.settings import Settings
from content_fetch.events.base import BaseEventSink
from content_fetch.events.database_sink import DatabaseEventSink
from content_fetch.events.log_sink import LogEventSink


class EventSinkFactory:
    """Creates the configured observability sink."""

    ADAPTERS: dict[str, type[BaseEventSink]] = {
        "log": LogEventSink,
        "database": DatabaseEventSink,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseEventSink:
        engine = settings.event_sink_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown event sink '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
