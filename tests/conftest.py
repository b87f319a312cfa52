import pytest

from content_fetch.fetch.models import FetchResult
from content_fetch.pipeline.models import Priority, SaveRequest

SAMPLE_HTML = (
    "<html><head><title>Sample Article</title></head>"
    "<body><p>Hello content world</p></body></html>"
)


@pytest.fixture()
def sample_html() -> str:
    return SAMPLE_HTML


@pytest.fixture()
def save_request() -> SaveRequest:
    """A single-recipient, high-priority save request."""
    return SaveRequest(
        url="https://a.com",
        save_request_id="req-1",
        priority=Priority.HIGH,
        source="puppeteer-parse",
        users=({"id": "u1"},),
    )


@pytest.fixture()
def html_fetch_result() -> FetchResult:
    return FetchResult(
        final_url="https://a.com/amp",
        title="Sample Article",
        content_type="text/html",
        content=SAMPLE_HTML,
    )
