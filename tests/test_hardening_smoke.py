# File: tests/test_hardening_smoke.py | Version: 1.1 | Title: Coverage bump for logging, sentry and error handlers
import json
import logging
import sys
import types

from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from workspace_service.core.error_handlers import (
    register_exception_handlers,
    register_service_error_handler,
)
from workspace_service.core.errors import BuildError, InvariantViolation
from workspace_service.core.logging import JsonConsoleFormatter, configure_logging
from workspace_service.observability.sentry import init_sentry_if_configured


def test_configure_logging_plain_and_json(monkeypatch):
    # Plain text path
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_JSON", "false")
    configure_logging()
    logging.getLogger(__name__).debug("plain-log")
    # JSON path
    monkeypatch.setenv("LOG_JSON", "true")
    configure_logging()
    logging.getLogger(__name__).info("json-log")
    assert any(
        isinstance(h.formatter, JsonConsoleFormatter) for h in logging.getLogger().handlers
    )

    monkeypatch.setenv("LOG_JSON", "false")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    configure_logging()


def test_json_formatter_includes_error_kind():
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom %s", ("now",), None)
    record.error_kind = "invariant"
    out = json.loads(JsonConsoleFormatter().format(record))
    assert out == {"level": "ERROR", "logger": "x", "message": "boom now", "error_kind": "invariant"}


def _app_with_handlers():
    app = FastAPI()
    register_service_error_handler(app)
    register_exception_handlers(app)

    @app.get("/build")
    def build():
        raise BuildError("UPDATE of view_table has an empty SET clause")

    @app.get("/invariant")
    def invariant():
        raise InvariantViolation("View id x is not unique")

    @app.get("/http")
    def http():
        raise HTTPException(status_code=409, detail="nope")

    return app


def test_error_envelopes():
    client = TestClient(_app_with_handlers())

    r = client.get("/build")
    assert r.status_code == 500
    assert r.json()["error"]["code"] == "BUILD_ERROR"

    # invariant violations surface as plain infra failures
    r = client.get("/invariant")
    assert r.status_code == 500
    assert r.json()["error"] == {
        "code": "INTERNAL_SERVER_ERROR",
        "message": "Internal server error",
    }

    r = client.get("/http")
    assert r.status_code == 409
    assert r.json() == {"error": {"code": "CONFLICT", "message": "nope"}}


def test_sentry_init_disabled_then_enabled(monkeypatch):
    # Disabled path (no DSN)
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    init_sentry_if_configured()  # should be a no-op

    # Enabled path: stub out sentry_sdk so no network client is created.
    class DummySDK(types.SimpleNamespace):
        @staticmethod
        def init(**kwargs):
            # capture kwargs to ensure function executed at least once
            DummySDK.last_init = kwargs

    sentry_pkg = types.ModuleType("sentry_sdk")
    sentry_pkg.init = DummySDK.init  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "sentry_sdk", sentry_pkg)

    monkeypatch.setenv("SENTRY_DSN", "https://dummy-public@o0.ingest.sentry.io/0")
    monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "0.05")
    monkeypatch.setenv("SENTRY_PROFILES_SAMPLE_RATE", "0.0")

    init_sentry_if_configured()
    assert DummySDK.last_init["traces_sample_rate"] == 0.05
