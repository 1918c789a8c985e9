"""
Tests for configuration loading and error-log setup.
"""

import importlib
import logging
import sys
import types

import pytest

from statelesspass.config import config_pass, logging_config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config_pass with a local override module installed."""
    def load(**overrides):
        local = types.ModuleType("statelesspass.config.config_local")
        local.__dict__.update(overrides)
        monkeypatch.setitem(sys.modules, "statelesspass.config.config_local", local)
        return importlib.reload(config_pass)

    yield load

    monkeypatch.undo()
    importlib.reload(config_pass)


class TestLocalOverrides:

    def test_user_defaults_can_be_overridden(self, reload_config):
        config = reload_config(CLIPBOARD_TIMEOUT=5)
        assert config.CLIPBOARD_TIMEOUT == 5

    def test_derivation_parameters_cannot_be_overridden(self, reload_config):
        config = reload_config(
            PBKDF2_ITERATIONS=1,
            KEY_LEN=16,
            CHARSETS={"lowercase": "ab", "uppercase": "", "digits": "", "symbols": ""},
        )
        assert config.PBKDF2_ITERATIONS == 100_000
        assert config.KEY_LEN == 32
        assert config.CHARSETS["lowercase"] == "abcdefghijklmnopqrstuvwxyz"
        assert len("".join(config.CHARSETS.values())) == 88


class TestSetupLogging:

    def test_notice_names_configured_log_file(self, monkeypatch, tmp_path, capsys):
        configured = []
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: configured.append(kw))
        monkeypatch.setattr(sys, "excepthook", sys.excepthook)
        monkeypatch.setattr(logging_config, "_log_file", logging_config.LOG_FILE)
        log_file = str(tmp_path / "custom.log")

        logging_config.setup_logging(log_file)
        logging_config.log_uncaught_exceptions(RuntimeError, RuntimeError("boom"), None)

        assert configured[0]["filename"] == log_file
        assert sys.excepthook is logging_config.log_uncaught_exceptions
        assert f"Details saved to {log_file}" in capsys.readouterr().err

    def test_already_configured_is_left_alone(self, monkeypatch):
        monkeypatch.setattr(logging.getLogger(), "handlers", [logging.NullHandler()])
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: pytest.fail("reconfigured"))
        monkeypatch.setattr(logging_config, "_log_file", logging_config.LOG_FILE)
        logging_config.setup_logging("other.log")
        assert logging_config._log_file == logging_config.LOG_FILE
