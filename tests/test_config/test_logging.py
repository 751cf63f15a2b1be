"""Testes para config.logging.

Cobre: configure_logging, configure_logging_from_settings, get_logger,
log_fallback, CorrelationIdFilter, PaymentDataRedactionFilter,
create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    PaymentDataRedactionFilter,
    configure_logging,
    configure_logging_from_settings,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from config.logging.filters import REDACTED, SENSITIVE_FIELDS
from config.settings import BraintreeSettings


def _record(msg: str = "msg", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        """Nível é case-insensitive."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_installs_filters(self) -> None:
        configure_logging(correlation_id_getter=lambda: "req-1")
        filters = logging.getLogger().handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, PaymentDataRedactionFilter) for f in filters)

    def test_valid_log_levels_constant(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS

    def test_default_service_name_constant(self) -> None:
        assert DEFAULT_SERVICE_NAME == "braintree_gateway"


class TestConfigureLoggingFromSettings:
    """Testes para configure_logging_from_settings."""

    def test_uses_settings_level(self) -> None:
        configure_logging_from_settings(BraintreeSettings(log_level="DEBUG"))
        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_level_falls_back_to_info(self) -> None:
        configure_logging_from_settings(BraintreeSettings(log_level="VERBOSE"))
        assert logging.getLogger().level == logging.INFO


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("api.connectors.braintree")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "api.connectors.braintree"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestLogFallback:
    """Testes para log_fallback."""

    def test_log_fallback_basic(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "nil_stripping")
        logger.info.assert_called_once()
        call_args = logger.info.call_args
        assert call_args[0][0] == "Fallback applied for %s"
        assert call_args[0][1] == "nil_stripping"
        extra = call_args[1]["extra"]
        assert extra["fallback_used"] is True
        assert extra["component"] == "nil_stripping"
        assert "reason" not in extra
        assert "elapsed_ms" not in extra

    def test_log_fallback_with_all_params(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "nil_stripping", reason="XMLSyntaxError", elapsed_ms=1.5)
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "XMLSyntaxError"
        assert extra["elapsed_ms"] == 1.5


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("braintree_gateway", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "braintree_gateway"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record(correlation_id="explicit-id")
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = CorrelationIdFilter("svc")
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""


class TestPaymentDataRedactionFilter:
    """Testes para PaymentDataRedactionFilter."""

    def test_redacts_sensitive_extra_fields(self) -> None:
        record = _record(token="cc-token-1", number="4111111111111111", status_code=200)
        assert PaymentDataRedactionFilter().filter(record) is True
        assert record.token == REDACTED
        assert record.number == REDACTED
        assert record.status_code == 200

    def test_ignores_absent_fields(self) -> None:
        record = _record()
        PaymentDataRedactionFilter().filter(record)
        assert not hasattr(record, "cvv")

    def test_custom_field_set(self) -> None:
        record = _record(customer_id="cust-1", token="t")
        PaymentDataRedactionFilter(fields={"customer_id"}).filter(record)
        assert record.customer_id == REDACTED
        assert record.token == "t"

    def test_body_is_sensitive(self) -> None:
        assert "body" in SENSITIVE_FIELDS


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert set(REQUIRED_LOG_FIELDS) == expected

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        formatter = create_json_formatter()
        record = _record(
            "response_body_read",
            correlation_id="abc-123",
            service="braintree_gateway",
            body_bytes=512,
        )
        payload = json.loads(formatter.format(record))
        assert payload["message"] == "response_body_read"
        assert payload["logger"] == "test.logger"
        assert payload["level"] == "INFO"
        assert payload["body_bytes"] == 512


class TestLoggingIntegration:
    """Fluxo completo: configure, get_logger, log."""

    def test_full_logging_flow(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(
            level="DEBUG",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )
        logger = get_logger("integration.test")
        logger.info("payment_method_decoded", extra={"token": "secret-token"})

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["correlation_id"] == "int-test-001"
        assert payload["service"] == "integration_test"
        assert payload["token"] == REDACTED
