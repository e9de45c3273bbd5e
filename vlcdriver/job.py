"""
vlcdriver.job
~~~~~~~~~~~~~
VlcJob: one transcoding request and its lifecycle.

State machine
-------------
NOT_STARTED → STARTED   claim() then mark_started(), called by the driver at launch
STARTED     → FINISHED  complete(), called by the driver when VLC exits
any         → ERROR     mark_error(), argument or launch failure

FINISHED and ERROR are terminal. The job lock guards every transition,
so a progress poll that races with complete() can never write a
percentage into a finished job.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

from vlcdriver.command_builder import arguments_as_string, build_vlc_arguments, status_url
from vlcdriver.errors import (
    JobStateError,
    MissingInputError,
    MissingOutputError,
    StatusUnavailableError,
)
from vlcdriver.models import JobState, TranscodeSpec
from vlcdriver.ports import PortAllocator

log = logging.getLogger(__name__)


class VlcJob:

    def __init__(
        self,
        spec: TranscodeSpec,
        allocator: PortAllocator,
        status_parser,
        status_source,
        http_password: str = "",
        input_file: Path | None = None,
        output_file: Path | None = None,
    ):
        self.spec = spec
        self.input_file = input_file
        self.output_file = output_file
        self.quit_after_completion = False
        self.http_password = http_password

        # Runtime state, managed by the driver
        self.state = JobState.NOT_STARTED
        self.percent_complete = 0.0
        self.allocated_port: int | None = None
        self.instance: Any = None
        self.last_status_error: StatusUnavailableError | None = None
        self.error_message = ""

        self._allocator = allocator
        self._parser = status_parser
        self._source = status_source
        self._lock = threading.Lock()
        self._claimed = False

    def __repr__(self) -> str:
        return (f"VlcJob({type(self.spec).__name__}, input={self.input_file}, "
                f"state={self.state.name}, port={self.allocated_port})")

    # ── Arguments ─────────────────────────────────────────────────────────────

    def build_arguments(self) -> list[str]:
        """
        Allocate a control port and return the VLC argument list.

        Raises MissingInputError / MissingOutputError before any port is
        taken from the allocator.
        """
        if self.input_file is None:
            raise MissingInputError()
        if self.output_file is None:
            raise MissingOutputError()

        self.allocated_port = self._allocator.new_port()
        args = build_vlc_arguments(
            self.http_password,
            self.allocated_port,
            Path(self.input_file),
            self.spec,
            Path(self.output_file),
            self.quit_after_completion,
        )
        log.debug("Arguments for %s: %s", self.input_file, arguments_as_string(args))
        return args

    # ── Transitions ───────────────────────────────────────────────────────────

    def claim(self) -> None:
        """
        Reserve a NOT_STARTED job for one start attempt.

        Raises JobStateError if the job was already claimed or has left
        NOT_STARTED, so concurrent starts never both allocate a port.
        """
        with self._lock:
            if self._claimed or self.state != JobState.NOT_STARTED:
                raise JobStateError("start", self.state)
            self._claimed = True

    def mark_started(self, instance: Any = None) -> None:
        with self._lock:
            if self.state != JobState.NOT_STARTED:
                raise JobStateError("start", self.state)
            self.state = JobState.STARTED
            self.instance = instance
        log.debug("Job %s: NOT_STARTED → STARTED (port %s)",
                  self.input_file, self.allocated_port)

    def mark_error(self, message: str) -> None:
        with self._lock:
            previous = self.state
            self.state = JobState.ERROR
            self.error_message = message
            port, self.allocated_port = self.allocated_port, None
        if port is not None:
            self._allocator.release_port(port)
        log.debug("Job %s: %s → ERROR (%s)", self.input_file, previous.name, message)

    def complete(self) -> None:
        """Mark the job FINISHED and hand its port back to the allocator."""
        with self._lock:
            if self.state != JobState.STARTED:
                raise JobStateError("complete", self.state)
            self.state = JobState.FINISHED
            port = self.allocated_port
        self._allocator.release_port(port)
        log.debug("Job %s: STARTED → FINISHED (released port %s)", self.input_file, port)

    # ── Progress ──────────────────────────────────────────────────────────────

    def update_progress(self) -> bool:
        """
        Poll VLC once and update percent_complete.

        Returns True when a fresh value was stored. A failed poll keeps the
        last known percentage and is recorded in last_status_error.
        """
        with self._lock:
            if self.state != JobState.STARTED:
                return False
            port = self.allocated_port

        try:
            self._source.url = status_url(port)
            document = self._source.get_document()
            position = self._parser.parse(document)
        except StatusUnavailableError as exc:
            log.warning("Status poll failed for %s: %s", self.input_file, exc)
            with self._lock:
                self.last_status_error = exc
            return False

        with self._lock:
            if self.state != JobState.STARTED:
                return False
            self.percent_complete = position
            self.last_status_error = None
        return True
