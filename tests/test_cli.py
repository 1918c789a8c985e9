"""
Tests for the terminal front end and logging setup.
"""

import logging

import pytest

from statelesspass import StatelessPass_CLI as cli
from statelesspass.config import logging_config
from statelesspass.utils.Profile import Profile


@pytest.fixture
def copied(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "copy_to_clipboard", lambda text, **kw: calls.append(text))
    return calls


class TestGenerateForProfile:

    def test_generates_and_copies(self, monkeypatch, copied):
        monkeypatch.setattr(cli.getpass, "getpass", lambda _: "correct horse")
        profile = Profile(site="example.com", login="alice")
        assert cli.generate_for_profile(profile) == "s!(C:WL]]q,LAijy"
        assert copied == ["s!(C:WL]]q,LAijy"]

    def test_empty_master_password(self, monkeypatch, copied, capsys):
        monkeypatch.setattr(cli.getpass, "getpass", lambda _: "")
        assert cli.generate_for_profile(Profile(site="s", login="l")) is None
        assert copied == []
        assert "master password" in capsys.readouterr().out

    def test_rejected_derivation_is_logged_without_secret(self, monkeypatch, copied, caplog):
        monkeypatch.setattr(cli.getpass, "getpass", lambda _: "hunter2")
        profile = Profile(site="s", login="l")
        profile.length = 9999
        with caplog.at_level(logging.ERROR):
            assert cli.generate_for_profile(profile) is None
        assert copied == []
        assert "Length must be between" in caplog.text
        assert "hunter2" not in caplog.text


class TestProfileMenus:

    def test_new_profile_saved(self, monkeypatch, tmp_path):
        saved = []
        monkeypatch.setattr(cli, "ask_profile_fields", lambda: {
            "site": "example.com", "login": "alice", "length": 12, "counter": 1,
            "lowercase": True, "uppercase": False, "numbers": True, "symbols": False})
        monkeypatch.setattr(cli, "save_profiles", lambda p: saved.append(list(p)))
        profiles = []

        profile = cli.new_profile(profiles)

        assert profiles == [profile]
        assert profile.length == 12
        assert saved

    def test_new_profile_rejected(self, monkeypatch, capsys):
        monkeypatch.setattr(cli, "ask_profile_fields", lambda: {
            "site": "", "login": "alice", "length": 12, "counter": 1,
            "lowercase": True, "uppercase": False, "numbers": False, "symbols": False})
        monkeypatch.setattr(cli, "save_profiles", lambda p: pytest.fail("must not save"))
        profiles = []
        assert cli.new_profile(profiles) is None
        assert profiles == []
        assert "Site cannot be empty" in capsys.readouterr().out

    def test_edit_profile_bumps_counter(self, monkeypatch):
        profile = Profile(site="example.com", login="alice")
        profiles = [profile]
        monkeypatch.setattr(cli, "ask_profile_fields", lambda current: {**current, "counter": 2})
        monkeypatch.setattr(cli, "save_profiles", lambda p: None)

        updated = cli.edit_profile(profiles, profile)

        assert updated.counter == 2
        assert updated.pid == profile.pid
        assert profiles == [updated]

    def test_delete_from_menu(self, monkeypatch):
        profile = Profile(site="example.com", login="alice")
        profiles = [profile]
        answers = iter(["d", "del"])
        monkeypatch.setattr("builtins.input", lambda *_: next(answers))
        monkeypatch.setattr(cli, "save_profiles", lambda p: None)
        monkeypatch.setattr(cli, "wipe_terminal", lambda force=False: None)

        assert cli.profile_menu(profiles, profile.pid) == 0
        assert profiles == []

    def test_menu_unknown_profile(self):
        assert cli.profile_menu([], "missing") == 1


class TestLoggingConfig:

    def test_uncaught_exception_logged(self, caplog, capsys):
        with caplog.at_level(logging.ERROR):
            logging_config.log_uncaught_exceptions(ValueError, ValueError("boom"), None)
        assert "Uncaught exception: ValueError: boom" in caplog.text
        assert "Something went wrong" in capsys.readouterr().err

    def test_timestamp_is_iso8601(self):
        assert "T" in logging_config.timestamp()
