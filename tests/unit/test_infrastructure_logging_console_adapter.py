"""Unit tests for ConsoleAdapter (structlog)."""

import json

import pytest
import structlog

from claimdesk.infrastructure.logging import ConsoleAdapter


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.mark.unit
class TestConsoleAdapter:
    def test_json_output_includes_context(self, capsys):
        ConsoleAdapter(use_json=True).info("login_succeeded", user_id="u-1")

        line = json.loads(capsys.readouterr().out.strip())
        assert line["event"] == "login_succeeded"
        assert line["user_id"] == "u-1"
        assert line["level"] == "info"
        assert "timestamp" in line

    def test_error_flattens_exception(self, capsys):
        ConsoleAdapter(use_json=True).error(
            "audit_write_failed", error=RuntimeError("db down"), action="LOGIN"
        )

        line = json.loads(capsys.readouterr().out.strip())
        assert line["error_type"] == "RuntimeError"
        assert line["error_message"] == "db down"
        assert line["action"] == "LOGIN"

    def test_bind_returns_new_adapter_with_context(self, capsys):
        adapter = ConsoleAdapter(use_json=True)

        bound = adapter.bind(module="auth")
        bound.warning("account_locked")

        assert bound is not adapter
        line = json.loads(capsys.readouterr().out.strip())
        assert line["module"] == "auth"
        assert line["level"] == "warning"

    def test_level_filtering(self, capsys):
        ConsoleAdapter(use_json=True, level="WARNING").info("hidden")

        assert capsys.readouterr().out == ""
