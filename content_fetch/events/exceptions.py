from content_fetch.pipeline.exceptions import PipelineError


class SinkError(PipelineError):
    """Raised when an observability event cannot be emitted. Never fatal."""
