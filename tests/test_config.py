"""
Tests for settings persistence and VLC path checks.
"""

import os
from pathlib import Path

from vlcdriver.config import load_settings, save_settings
from vlcdriver.models import DriverSettings
from vlcdriver.paths import validate_binary


class TestSettings:

    def test_round_trip(self, tmp_path):
        path = tmp_path / "settings.json"
        settings = DriverSettings(start_port=9100, end_port=9200, http_password="secret",
                                  vlc_path=Path("/usr/bin/cvlc"), status_timeout=5.0)
        save_settings(settings, path)
        assert load_settings(path) == settings

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "nope.json") == DriverSettings()

    def test_malformed_file_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == DriverSettings()

    def test_partial_file_fills_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('{"start_port": 7000}', encoding="utf-8")
        settings = load_settings(path)
        assert settings.start_port == 7000
        assert settings.http_password == DriverSettings().http_password
        assert settings.vlc_path is None


class TestValidateBinary:

    def test_missing(self, tmp_path):
        errors = validate_binary(tmp_path / "vlc")
        assert errors and errors[0].startswith("Binary not found")

    def test_directory(self, tmp_path):
        assert validate_binary(tmp_path)[0].startswith("Not a file")

    def test_executable_file(self, tmp_path):
        binary = tmp_path / "vlc"
        binary.write_text("#!/bin/sh\n")
        os.chmod(binary, 0o755)
        assert validate_binary(binary) == []
