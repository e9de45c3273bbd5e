"""
vlcdriver.starter
~~~~~~~~~~~~~~~~~
Launches VLC processes and reports when they exit.

VlcStarter.start() spawns the process; VlcInstance.watch() attaches the
one and only exit callback and starts a daemon thread that drains
stderr, waits for the process and then calls the callback exactly once.
Keeping launch and watch separate lets the driver register the job
before an exit can possibly be reported.
"""

from __future__ import annotations

import logging
import subprocess
import threading
from pathlib import Path
from typing import Callable

from vlcdriver.errors import LaunchError
from vlcdriver.paths import validate_binary

log = logging.getLogger(__name__)

ExitCallback = Callable[["VlcInstance"], None]


class VlcInstance:
    """A running VLC process."""

    def __init__(self, process: subprocess.Popen):
        self._process = process
        self._watcher: threading.Thread | None = None
        self._watch_lock = threading.Lock()
        self.stderr_lines: list[str] = []

    def __repr__(self) -> str:
        return f"VlcInstance(pid={self.pid})"

    @property
    def pid(self) -> int:
        return self._process.pid

    @property
    def returncode(self) -> int | None:
        return self._process.returncode

    def is_running(self) -> bool:
        return self._process.poll() is None

    def watch(self, callback: ExitCallback) -> None:
        """Call *callback(self)* once, on a background thread, when VLC exits."""
        with self._watch_lock:
            if self._watcher is not None:
                raise RuntimeError(f"{self!r} already has an exit callback")
            self._watcher = threading.Thread(
                target=self._wait_and_notify,
                args=(callback,),
                name=f"vlc-watch-{self.pid}",
                daemon=True,
            )
            self._watcher.start()

    def wait(self, timeout: float | None = None) -> None:
        """Block until the exit callback has run."""
        if self._watcher is not None:
            self._watcher.join(timeout)

    def terminate(self) -> None:
        if self.is_running():
            self._process.terminate()
            log.info("Terminated VLC pid %d", self.pid)
        else:
            log.debug("terminate(): pid %d is not running", self.pid)

    # ── Internal ──────────────────────────────────────────────────────────────

    def _wait_and_notify(self, callback: ExitCallback) -> None:
        try:
            # Drain stderr so VLC never blocks on a full pipe buffer
            if self._process.stderr is not None:
                for line in self._process.stderr:
                    stripped = line.rstrip()
                    if stripped:
                        self.stderr_lines.append(stripped)
        finally:
            self._process.wait()
            log.info("VLC pid %d exited with code %s", self.pid, self._process.returncode)
            if self.stderr_lines:
                log.debug("VLC pid %d stderr (%d lines):\n%s", self.pid, len(self.stderr_lines),
                          "\n".join(f"  {l}" for l in self.stderr_lines))
            callback(self)


class VlcStarter:

    def start(self, arguments: list[str], vlc_path: Path) -> VlcInstance:
        """
        Spawn VLC with *arguments*.

        Raises:
            LaunchError – if the executable is missing, not executable, or
                          the OS refuses to start it
        """
        errors = validate_binary(vlc_path)
        if errors:
            raise LaunchError("; ".join(errors))

        cmd = [str(vlc_path), *arguments]
        try:
            process = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise LaunchError(f"Could not start {vlc_path}: {exc}") from exc

        log.info("Started VLC pid %d", process.pid)
        return VlcInstance(process)
