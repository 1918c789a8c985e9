"""
Tests for profile import and export.
"""

import json

import pendulum
import pytest

from statelesspass.utils.errors import ProfileStoreError
from statelesspass.utils.import_export import export_profiles, import_profiles
from statelesspass.utils.Profile import Profile


@pytest.fixture
def profiles():
    return [
        Profile(site="example.com", login="alice"),
        Profile(site="mail.org", login="bob", counter=4, symbols=False),
    ]


class TestExport:

    def test_file_name_and_content(self, tmp_path, profiles):
        path = export_profiles(profiles, tmp_path)
        assert path.parent == tmp_path
        assert path.name.startswith("statelesspass-profiles-")
        assert path.name.endswith(".json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert [d["site"] for d in data] == ["example.com", "mail.org"]
        assert data[1]["counter"] == 4

    def test_file_name_is_dated(self, tmp_path, profiles):
        today = pendulum.now().format("YYYY-MM-DD")
        path = export_profiles(profiles, tmp_path)
        assert today in path.name


class TestImport:

    def test_round_trip_assigns_new_ids(self, tmp_path, profiles):
        path = export_profiles(profiles, tmp_path)
        target = list(profiles)

        count = import_profiles(path, target)

        assert count == 2
        assert len(target) == 4
        assert len({p.pid for p in target}) == 4
        assert target[2].site == "example.com"
        assert target[3].counter == 4

    def test_invalid_format(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"profiles": []}', encoding="utf-8")
        with pytest.raises(ProfileStoreError, match="Invalid file format"):
            import_profiles(path, [])

    def test_not_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("garbage", encoding="utf-8")
        with pytest.raises(ProfileStoreError):
            import_profiles(path, [])

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"site": "caf\xe9", "login": "me", "numbers": true}]')
        target = []
        with pytest.raises(ProfileStoreError):
            import_profiles(path, target)
        assert target == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            import_profiles(tmp_path / "missing.json", [])

    def test_invalid_records_skipped(self, tmp_path, capsys):
        path = tmp_path / "mixed.json"
        path.write_text(json.dumps([
            {"site": "ok.com", "login": "me", "numbers": True, "length": "8"},
            {"site": "ok.com", "login": ""},
        ]), encoding="utf-8")
        target = []

        assert import_profiles(path, target) == 1
        assert target[0].length == 8
        assert "Skipped record #1" in capsys.readouterr().out
