"""
vlcdriver.config
~~~~~~~~~~~~~~~~
Persists DriverSettings to a JSON file in the platform's standard
config directory.

Config location
---------------
  Windows  : %APPDATA%\\VlcDriver\\settings.json
  macOS    : ~/Library/Application Support/VlcDriver/settings.json
  Linux    : ~/.config/VlcDriver/settings.json
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from vlcdriver.models import DriverSettings

log = logging.getLogger(__name__)


# ── Config directory ──────────────────────────────────────────────────────────

def config_dir() -> Path:
    if sys.platform == "win32":
        base = Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path.home() / ".config"
    return base / "VlcDriver"


def settings_file() -> Path:
    return config_dir() / "settings.json"


# ── Public API ────────────────────────────────────────────────────────────────

def save_settings(settings: DriverSettings, path: Path | None = None) -> None:
    """
    Serialise *settings*, overwriting any previous file.
    Logs and ignores I/O errors so a config issue never stops a transcode.
    """
    path = path or settings_file()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(_settings_to_dict(settings), indent=2), encoding="utf-8")
    except OSError as exc:
        log.warning("Could not write settings to %s: %s", path, exc)


def load_settings(path: Path | None = None) -> DriverSettings:
    """
    Read the settings file and return DriverSettings.
    Returns defaults if the file is missing, empty, or malformed.
    """
    path = path or settings_file()
    if not path.exists():
        return DriverSettings()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        return _dict_to_settings(payload)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        log.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return DriverSettings()


# ── Serialisation helpers ─────────────────────────────────────────────────────

def _settings_to_dict(settings: DriverSettings) -> dict:
    return {
        "start_port":     settings.start_port,
        "end_port":       settings.end_port,
        "http_password":  settings.http_password,
        "vlc_path":       str(settings.vlc_path) if settings.vlc_path else None,
        "status_timeout": settings.status_timeout,
    }


def _dict_to_settings(d: dict) -> DriverSettings:
    defaults = DriverSettings()
    end_port = d.get("end_port")
    vlc_path = d.get("vlc_path")
    return DriverSettings(
        start_port     = int(d.get("start_port", defaults.start_port)),
        end_port       = int(end_port) if end_port is not None else None,
        http_password  = str(d.get("http_password", defaults.http_password)),
        vlc_path       = Path(vlc_path) if vlc_path else None,
        status_timeout = float(d.get("status_timeout", defaults.status_timeout)),
    )
