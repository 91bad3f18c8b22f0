"""Shared fixtures for applabel tests."""

import os

import pytest


CONSTANTS_DART = '''class AppConstants {
  static const String appVersion = "2.1.0";
  static const String appName = "Acme";
  static const String apiBase = "https://api.example.com";
}
'''


@pytest.fixture
def write_constants(tmp_path):
    """Write text to lib/constants.dart under tmp_path and return its path."""
    def _write(text=CONSTANTS_DART, name="lib/constants.dart"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def clear_applabel_env(monkeypatch):
    """Keep APPLABEL_* variables from the host out of tests."""
    for key in list(os.environ):
        if key.startswith("APPLABEL_"):
            monkeypatch.delenv(key)
