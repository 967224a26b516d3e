"""Unit tests for structured logging helpers."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from mp_authz.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_emits_structured_event(self) -> None:
        with capture_logs() as logs:
            get_logger("mp_authz.test").info("hello", answer=42)
        assert logs == [{"event": "hello", "answer": 42, "log_level": "info"}]

    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("mp_authz.test", component="voting").warning("careful")
        assert logs[0]["component"] == "voting"
        assert logs[0]["log_level"] == "warning"


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        result = SensitiveFieldsFilter().redact({"password": "s3cr3t", "subject": "alice"})
        assert result["password"] == SensitiveFieldsFilter.REDACTED
        assert result["subject"] == "alice"

    def test_redacts_all_default_fields(self) -> None:
        data = {field: "value" for field in DEFAULT_SENSITIVE_FIELDS}
        result = SensitiveFieldsFilter().redact(data)
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive_keys(self) -> None:
        result = SensitiveFieldsFilter().redact({"Token": "t", "resource": "r"})
        assert result == {"Token": SensitiveFieldsFilter.REDACTED, "resource": "r"}

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"subject"}))
        assert f.redact({"subject": "alice", "password": "keep"}) == {
            "subject": SensitiveFieldsFilter.REDACTED,
            "password": "keep",
        }

    def test_redact_deep(self) -> None:
        data: dict[str, Any] = {"ctx": {"credentials": {"a": 1}, "resource": "r"}}
        result = SensitiveFieldsFilter().redact_deep(data)
        assert result["ctx"]["credentials"] == SensitiveFieldsFilter.REDACTED
        assert result["ctx"]["resource"] == "r"

    def test_processor_interface(self) -> None:
        event = SensitiveFieldsFilter()(None, "info", {"event": "x", "token": "t"})
        assert event == {"event": "x", "token": SensitiveFieldsFilter.REDACTED}


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_renders_json_through_root_handler(
        self, restore_root_logger: logging.Logger, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure(logging.DEBUG, cache_logger_on_first_use=False)
        structlog.get_logger("mp_authz.json").info("authz.decision", granted=True)
        err = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(err)
        assert payload["event"] == "authz.decision"
        assert payload["granted"] is True
        assert payload["level"] == "info"
        assert payload["logger"] == "mp_authz.json"
        assert "timestamp" in payload

    def test_redacts_sensitive_fields(
        self, restore_root_logger: logging.Logger, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure(
            logging.INFO, frozenset({"token"}), cache_logger_on_first_use=False
        )
        structlog.get_logger("mp_authz.json").info("login", token="abc")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["token"] == SensitiveFieldsFilter.REDACTED

    def test_sets_level(self, restore_root_logger: logging.Logger) -> None:
        JsonLoggerFactory.configure(logging.WARNING, cache_logger_on_first_use=False)
        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
