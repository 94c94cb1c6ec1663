"""Tests for the session-id logging filter."""

import logging

from carbon_assistant.logging_context import (
    SessionIdFilter,
    get_session_id,
    get_session_logger,
    set_session_id,
)


class TestSessionLogging:
    def test_filter_tags_records(self):
        set_session_id("web-7")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        assert SessionIdFilter().filter(record) is True
        assert record.session_id == "web-7"

    def test_round_trip(self):
        set_session_id("abc")
        assert get_session_id() == "abc"

    def test_filter_attached_once(self):
        logger = get_session_logger("carbon_assistant.test_logger")
        get_session_logger("carbon_assistant.test_logger")
        filters = [f for f in logger.filters if isinstance(f, SessionIdFilter)]
        assert len(filters) == 1
