import json
import logging

import pytest
import structlog

from .config import Settings, get_settings
from .diff_parser import DiffAggregateParser
from .logging import configure_logging


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in (
        "PRPATCH_MIN_FRAGMENT_LENGTH",
        "PRPATCH_EXCERPT_LENGTH",
        "PRPATCH_LOG_LEVEL",
        "PRPATCH_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.min_fragment_length == 10
    assert settings.excerpt_length == 200
    assert settings.log_level == "info"
    assert settings.log_format == "console"


def test_parser_reads_environment(monkeypatch, fresh_settings):
    monkeypatch.setenv("PRPATCH_MIN_FRAGMENT_LENGTH", "3")
    monkeypatch.setenv("PRPATCH_EXCERPT_LENGTH", "16")

    parser = DiffAggregateParser()

    assert parser.min_fragment_length == 3
    assert parser.excerpt_length == 16
    assert DiffAggregateParser(min_fragment_length=0).min_fragment_length == 0


@pytest.fixture
def reset_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger("prpatch").handlers.clear()
    logging.getLogger("prpatch").propagate = True


def test_configure_logging_json(capsys, reset_logging):
    configure_logging(Settings(log_format="json", log_level="debug"))

    structlog.get_logger("prpatch.test").info("Selected pull request", files=2)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "Selected pull request"
    assert record["files"] == 2
    assert record["level"] == "info"
    assert record["logger"] == "prpatch.test"


def test_configure_logging_filters_by_level(capsys, reset_logging):
    configure_logging(Settings(log_format="json", log_level="warning"))

    structlog.get_logger("prpatch.test").info("hidden")
    structlog.get_logger("prpatch.test").warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out
