from content_fetch.pipeline.exceptions import PipelineError


class FetchError(PipelineError):
    """Raised when page content cannot be retrieved for any reason."""
