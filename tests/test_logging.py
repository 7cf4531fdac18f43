from __future__ import annotations

import json
import logging

import pytest
import structlog

from core.config import AppSettings
from core.logging import configure_logging, get_logger


def test_json_logs_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(AppSettings(log_level="INFO", log_json=True))

    get_logger("reqcli.test").info("request_dispatch", url="http://example.com/")

    captured = capsys.readouterr()
    assert captured.out == ""
    event = json.loads(captured.err.strip().splitlines()[-1])
    assert event["event"] == "request_dispatch"
    assert event["level"] == "info"
    assert event["url"] == "http://example.com/"
    assert "timestamp" in event


def test_default_level_hides_info(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(AppSettings())

    get_logger("reqcli.test").info("response_received", status_code=200)

    assert capsys.readouterr().err == ""


def test_unknown_level_falls_back_to_warning(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(AppSettings(log_level="chatty"))

    logger = get_logger("reqcli.test")
    logger.info("hidden")
    logger.warning("data_ignored", method="PUT")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "data_ignored" in err


def test_get_logger_leaves_root_handlers_alone() -> None:
    structlog.reset_defaults()
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    try:
        get_logger("reqcli.test")
        get_logger()
        assert sentinel in root.handlers
        assert not structlog.is_configured()
    finally:
        root.removeHandler(sentinel)
