class PipelineError(Exception):
    """Base exception for all content-fetch pipeline errors."""


class SaveRequestValidationError(PipelineError):
    """Raised when a save request is malformed or resolves to no recipients."""
