import logging

from content_fetch.logging.logger import _FieldsFormatter


def _make_record(fields: dict[str, object] | None) -> logging.LogRecord:
    record = logging.LogRecord(
        name="content_fetch",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="save-page jobs queued",
        args=None,
        exc_info=None,
    )
    if fields is not None:
        record.fields = fields
    return record


class TestFieldsFormatter:
    def test_appends_fields_as_key_value_pairs(self) -> None:
        formatter = _FieldsFormatter("%(message)s")

        line = formatter.format(_make_record({"count": 2, "url": "https://a.com"}))

        assert line == "save-page jobs queued count=2 url='https://a.com'"

    def test_plain_message_without_fields(self) -> None:
        formatter = _FieldsFormatter("%(message)s")

        assert formatter.format(_make_record({})) == "save-page jobs queued"
        assert formatter.format(_make_record(None)) == "save-page jobs queued"
