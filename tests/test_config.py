from __future__ import annotations

import sys
from pathlib import Path

# Make the schoolboard package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from schoolboard.core import config as core_config  # noqa: E402


def _fresh_settings():
    core_config.get_settings.cache_clear()
    try:
        return core_config.get_settings()
    finally:
        core_config.get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("PORT", "HOST", "SCHOOLBOARD_DATA_FILE", "SCHOOLBOARD_WEB_DIR", "SCHOOLBOARD_TIMEZONE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = _fresh_settings()

    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.data_file == Path("schoolData.json")
    assert settings.web_dir == ROOT / "web"
    assert settings.timezone == "Asia/Kolkata"
    assert settings.log_level == "INFO"


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert _fresh_settings().port == 8080


def test_invalid_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    assert _fresh_settings().port == 3000
