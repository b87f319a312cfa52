from content_fetch.pipeline.exceptions import PipelineError


class QueueError(PipelineError):
    """Raised when a batch of save-page jobs cannot be enqueued."""
