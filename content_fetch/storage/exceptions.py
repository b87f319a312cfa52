from content_fetch.pipeline.exceptions import PipelineError


class StorageError(PipelineError):
    """Raised when content cannot be written to the content store."""
