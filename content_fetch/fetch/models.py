from dataclasses import dataclass


@dataclass(frozen=True)
class FetchResult:
    """Output of the fetch step.

    ``content`` is None when the page was retrieved but has no extractable
    text (e.g. a PDF or image). That is not a fetch failure.
    """

    final_url: str
    title: str
    content_type: str
    content: str | None = None
