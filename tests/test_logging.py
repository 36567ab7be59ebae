import logging

import pytest

from gambitgroups import utils
from gambitgroups.cli import main
from gambitgroups.constants import LOG_LEVEL_ENV_VAR
from gambitgroups.utils import ROOT_LOGGER_NAME, configure_logging, setup_logger


@pytest.fixture(autouse=True)
def _reset_package_logger(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if utils._stream_handler is not None:
        root.removeHandler(utils._stream_handler)
        utils._stream_handler = None
    root.setLevel(logging.NOTSET)


def test_module_loggers_live_under_the_package():
    assert setup_logger("storage").name == "gambitgroups.storage"
    assert setup_logger("gambitgroups.cli").name == "gambitgroups.cli"


def test_default_level_is_warning():
    assert configure_logging().level == logging.WARNING


@pytest.mark.parametrize(
    "value, expected",
    [("debug", logging.DEBUG), ("INFO", logging.INFO), (" error ", logging.ERROR)],
)
def test_level_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert configure_logging().level == expected


def test_verbose_wins_over_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "error")
    assert configure_logging(verbose=True).level == logging.DEBUG


def test_explicit_level():
    assert configure_logging(level="info").level == logging.INFO
    assert configure_logging(level=logging.ERROR).level == logging.ERROR


def test_unknown_level_falls_back_to_warning(monkeypatch, caplog):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "loud")

    assert configure_logging().level == logging.WARNING
    assert "Unknown log level 'loud'" in caplog.text


def test_handler_is_attached_once():
    configure_logging()
    configure_logging(verbose=True)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    assert root.handlers.count(utils._stream_handler) == 1


def test_commands_run_with_an_unknown_level(monkeypatch, capsys):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "loud")
    assert main(["options", "9"]) == 0
    assert "1 group of 6 and 1 group of 3" in capsys.readouterr().out
