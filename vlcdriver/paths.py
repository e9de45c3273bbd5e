"""
vlcdriver.paths
~~~~~~~~~~~~~~~
Finding and checking the VLC executable.
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

# Where VLC's installers put the binary when it is not on PATH
_KNOWN_LOCATIONS = {
    "win32":  [Path(r"C:\Program Files\VideoLAN\VLC\vlc.exe"),
               Path(r"C:\Program Files (x86)\VideoLAN\VLC\vlc.exe")],
    "darwin": [Path("/Applications/VLC.app/Contents/MacOS/VLC")],
}


def locate_vlc() -> Path | None:
    """Return the first VLC executable found on PATH or in a known location."""
    found = shutil.which("vlc") or shutil.which("cvlc")
    if found:
        return Path(found)
    for candidate in _KNOWN_LOCATIONS.get(sys.platform, []):
        if candidate.is_file():
            return candidate
    return None


def validate_binary(binary: Path) -> list[str]:
    """
    Return a list of error strings if *binary* is missing or not executable.
    Empty list means all good.
    """
    errors: list[str] = []
    if not binary.exists():
        errors.append(f"Binary not found: {binary}")
    elif not binary.is_file():
        errors.append(f"Not a file: {binary}")
    elif sys.platform != "win32" and not binary.stat().st_mode & 0o111:
        errors.append(f"Not executable: {binary}")
    return errors
