"""Unit tests for token masking in logs."""

import logging

from qiita_mcp.utils.logging import TokenMaskingFilter, get_logger, setup_logging


def make_record(msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord("qiita_mcp", logging.INFO, __file__, 1, msg, args, None)


class TestTokenMaskingFilter:
    """Tests for TokenMaskingFilter."""

    def test_masks_bearer_token(self) -> None:
        record = make_record("headers: Authorization: Bearer abc123secret")

        TokenMaskingFilter().filter(record)

        assert "abc123secret" not in record.getMessage()
        assert "Bearer [MASKED]" in record.getMessage()

    def test_masks_env_assignment(self) -> None:
        record = make_record("env QIITA_API_TOKEN=abc123secret loaded")

        TokenMaskingFilter().filter(record)

        assert record.getMessage() == "env QIITA_API_TOKEN=[MASKED] loaded"

    def test_masks_token_in_dict_repr(self) -> None:
        record = make_record("credential %s", "{'token': 'abc123secret'}")

        TokenMaskingFilter().filter(record)

        assert "abc123secret" not in record.getMessage()

    def test_leaves_other_text(self) -> None:
        record = make_record("GET %s params=%s", "/items/abc", {"page": 1})

        assert TokenMaskingFilter().filter(record) is True
        assert record.getMessage() == "GET /items/abc params={'page': 1}"


class TestSetupLogging:
    """Tests for setup_logging and get_logger."""

    def test_single_handler_with_filter(self) -> None:
        setup_logging(logging.DEBUG)
        logger = setup_logging(logging.DEBUG)

        assert logger.name == "qiita_mcp"
        assert len(logger.handlers) == 1
        assert any(isinstance(f, TokenMaskingFilter) for f in logger.handlers[0].filters)

    def test_get_logger_namespace(self) -> None:
        assert get_logger("api").name == "qiita_mcp.api"
        assert get_logger().name == "qiita_mcp"
