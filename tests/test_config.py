"""
Tests for settings and start-up
===============================
"""

import logging

import pytest

from taskhub import main as entry
from taskhub.config import Settings
from taskhub.logging_config import configure_logging


def test_defaults(monkeypatch):
    for name in ("DATABASE_URL", "SEED_SAMPLE_DATA", "MCP_TRANSPORT", "ELICITATION_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings.database_url == "sqlite://"
    assert settings.seed_sample_data is True
    assert settings.transport == "stdio"
    assert settings.elicitation_timeout_seconds == 300.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SEED_SAMPLE_DATA", "false")
    monkeypatch.setenv("MCP_TRANSPORT", "SSE")
    monkeypatch.setenv("MCP_PORT", "9001")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()
    assert settings.seed_sample_data is False
    assert settings.transport == "sse"
    assert settings.port == 9001
    assert settings.log_level == "DEBUG"


def test_create_store_seeds_unless_disabled():
    seeded = entry.create_store(Settings())
    empty = entry.create_store(Settings(seed_sample_data=False))
    try:
        assert seeded.users.get("user-1").name == "Alice Johnson"
        assert empty.users.list() == []
    finally:
        seeded.close()
        empty.close()


def test_main_rejects_unknown_transport(monkeypatch):
    monkeypatch.setenv("MCP_TRANSPORT", "carrier-pigeon")
    with pytest.raises(ValueError, match="Unsupported MCP_TRANSPORT"):
        entry.main()


def test_main_runs_server_and_closes_store(monkeypatch):
    runs = []
    monkeypatch.setenv("MCP_TRANSPORT", "stdio")
    monkeypatch.setattr(
        "taskhub.mcp.server.TaskHubMCP.run",
        lambda self, transport="stdio": runs.append(transport),
    )

    entry.main()
    assert runs == ["stdio"]


def test_configure_logging_installs_one_handler():
    handler = configure_logging("INFO")
    assert configure_logging("INFO") is handler

    root = logging.getLogger()
    assert root.handlers.count(handler) == 1
    record = logging.makeLogRecord({"name": "taskhub.test", "levelname": "INFO", "msg": "hello"})
    assert handler.format(record).endswith(" - taskhub.test - INFO - hello")
