"""Tests for settings-aware logging."""

from unittest.mock import patch

import pytest
from templateparser.config.settings import App
from templateparser.lib import log


@pytest.fixture
def mock_logger():
    with patch.object(log, "app_logger") as mock:
        yield mock


def test_log_emits_debug(mock_logger):
    with patch("templateparser.config.settings.appsettings", App(beQuiet=False)):
        log.LOG("parsed")
    mock_logger.opt.return_value.debug.assert_called_once_with("parsed")


def test_log_respects_be_quiet(mock_logger):
    with patch("templateparser.config.settings.appsettings", App(beQuiet=True)):
        log.LOG("parsed")
    mock_logger.opt.assert_not_called()


def test_complain_emits_warning(mock_logger):
    with patch("templateparser.config.settings.appsettings", App(noComplain=False)):
        log.COMPLAIN("unterminated")
    mock_logger.opt.return_value.warning.assert_called_once_with("unterminated")


def test_complain_respects_no_complain(mock_logger):
    with patch("templateparser.config.settings.appsettings", App(noComplain=True)):
        log.COMPLAIN("unterminated")
    mock_logger.opt.assert_not_called()


def test_logging_failure_is_contained(mock_logger, capsys):
    mock_logger.opt.side_effect = RuntimeError("sink down")
    log.LOG("parsed")
    assert "Logging error: sink down" in capsys.readouterr().err
