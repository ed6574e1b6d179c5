"""Tests for logging configuration."""

from __future__ import annotations

import json

import pytest
import structlog

from wikidata_search.logging import configure_logging


@pytest.fixture
def restore_structlog():
    yield
    structlog.reset_defaults()


def test_configure_logging_outputs_json(capsys, restore_structlog):
    configure_logging()
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    out = capsys.readouterr().out
    record = json.loads(out.strip().splitlines()[-1])
    assert record["event"] == "unit-test"
    assert record["foo"] == "bar"
    assert record["level"] == "info"


def test_configure_logging_accepts_level_names(capsys, restore_structlog):
    configure_logging("WARNING")
    logger = structlog.get_logger()
    logger.info("hidden")
    logger.warning("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out
