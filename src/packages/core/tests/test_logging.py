"""Tests for logging configuration."""
import json

import structlog

from study_processing_core.logging import configure_logging
from study_processing_core.settings import get_settings
from study_processing_core.text import chunk_text


def test_json_logs_with_level_filter(capsys):
    configure_logging("INFO", json_logs=True)
    try:
        logger = structlog.get_logger()
        logger.debug("hidden_event")
        logger.info("source_loaded", chars=10)
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["event"] == "source_loaded"
        assert record["level"] == "info"
        assert record["chars"] == 10
        assert "timestamp" in record
    finally:
        structlog.reset_defaults()


def test_debug_level_shows_chunking(capsys):
    configure_logging("debug", json_logs=True)
    try:
        chunk_text("A" * 300, chunk_size=100, overlap=10)
        events = [json.loads(line)["event"] for line in capsys.readouterr().out.splitlines()]
        assert "chunking_complete" in events
    finally:
        structlog.reset_defaults()


def test_level_and_format_from_settings(monkeypatch, capsys):
    monkeypatch.setenv("STUDY_LOG_LEVEL", "warning")
    monkeypatch.setenv("STUDY_LOG_JSON", "false")
    get_settings.cache_clear()
    configure_logging()
    try:
        logger = structlog.get_logger()
        logger.info("hidden_event")
        logger.warning("transcript_short", chars=12)
        out = capsys.readouterr().out
        assert "hidden_event" not in out
        assert "transcript_short" in out
        assert "chars=12" in out
        assert not out.lstrip().startswith("{")
    finally:
        structlog.reset_defaults()
        get_settings.cache_clear()
