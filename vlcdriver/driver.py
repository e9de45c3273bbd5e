"""
vlcdriver.driver
~~~~~~~~~~~~~~~~
VlcDriver launches one VLC process per job, tracks which process
belongs to which job, and announces each job once its process exits.

Signals
-------
job_state_changed(VlcJob)   emitted once per job, after it is FINISHED

The signal is emitted on the exit-watcher thread, so every receiver gets
it queued: slots on QObjects run in the QObject's thread, and plain
callables run in the thread that called connect(). Either way delivery
needs that thread's Qt event loop running (app.exec(), or
QCoreApplication.processEvents() in tests).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from PySide6.QtCore import QObject, Signal

import vlcdriver
from vlcdriver.config import load_settings
from vlcdriver.errors import (
    ConfigurationError,
    LaunchError,
    PortAllocationError,
    RegistryConsistencyError,
)
from vlcdriver.job import VlcJob
from vlcdriver.models import (
    AudioConfig, AudioSpec, DriverSettings, VideoConfig, VideoSpec,
)
from vlcdriver.paths import locate_vlc
from vlcdriver.ports import PortAllocator
from vlcdriver.registry import JobRegistry
from vlcdriver.starter import VlcInstance, VlcStarter
from vlcdriver.status import HttpStatusSource, VlcStatusParser

log = logging.getLogger(__name__)


class VlcDriver(QObject):

    job_state_changed = Signal(object)

    def __init__(
        self,
        starter: VlcStarter | None = None,
        allocator: PortAllocator | None = None,
        settings: DriverSettings | None = None,
        status_parser_factory: Callable | None = None,
        status_source_factory: Callable | None = None,
        parent=None,
    ):
        super().__init__(parent)
        self.settings = settings or load_settings()
        self._starter = starter or VlcStarter()
        self.allocator = allocator or PortAllocator(
            self.settings.start_port, self.settings.end_port
        )
        self._parser_factory = status_parser_factory or VlcStatusParser
        self._source_factory = status_source_factory or self._default_status_source
        self._registry = JobRegistry()
        self._vlc_path: Path | None = None

        log.debug("VLC driver created. Version %s", vlcdriver.__version__)

    # ── VLC executable ────────────────────────────────────────────────────────

    @property
    def vlc_path(self) -> Path:
        if self._vlc_path is not None:
            return self._vlc_path
        found = self.settings.vlc_path or locate_vlc()
        if found is None:
            message = ("VLC cannot be located on this system. "
                       "Set 'vlc_path' to the path of the VLC executable")
            log.error(message)
            raise LaunchError(message)
        self._vlc_path = Path(found)
        return self._vlc_path

    @vlc_path.setter
    def vlc_path(self, value: Path | str | None) -> None:
        self._vlc_path = Path(value) if value is not None else None

    # ── Job factories ─────────────────────────────────────────────────────────

    def create_audio_job(self, config: AudioConfig | None = None) -> VlcJob:
        return self._create_job(AudioSpec(config or AudioConfig()))

    def create_video_job(self, config: VideoConfig | None = None) -> VlcJob:
        return self._create_job(VideoSpec(config or VideoConfig()))

    def _create_job(self, spec) -> VlcJob:
        return VlcJob(
            spec,
            self.allocator,
            self._parser_factory(),
            self._source_factory(),
            http_password=self.settings.http_password,
        )

    def _default_status_source(self) -> HttpStatusSource:
        return HttpStatusSource(self.settings.http_password, self.settings.status_timeout)

    # ── Running jobs ──────────────────────────────────────────────────────────

    def start_instance(self, arguments: list[str] | None = None) -> VlcInstance:
        """Launch a plain VLC with custom arguments. Not tracked as a job."""
        return self._starter.start(list(arguments or []), self.vlc_path)

    def start_job(self, job: VlcJob) -> None:
        """
        Launch VLC for *job* and track it until the process exits.

        Raises:
            ConfigurationError – input or output path missing
            LaunchError        – VLC missing, not executable, or failed to spawn
        The job is marked ERROR in both cases and never registered.
        """
        log.debug("Call to start job. Input file: %s Output file: %s",
                  job.input_file, job.output_file)
        job.claim()
        # VLC must quit on its own, or the exit watcher never fires
        job.quit_after_completion = True

        try:
            arguments = job.build_arguments()
        except (ConfigurationError, PortAllocationError) as exc:
            log.error("Cannot start job for %s: %s", job.input_file, exc)
            job.mark_error(str(exc))
            raise

        job.mark_started()
        try:
            instance = self._starter.start(arguments, self.vlc_path)
        except LaunchError as exc:
            log.error("Launch failed for %s: %s", job.input_file, exc)
            job.mark_error(str(exc))
            raise

        job.instance = instance
        self._registry.add(instance, job)
        instance.watch(self.handle_instance_exit)
        log.info("Job started: %s → %s on port %d",
                 job.input_file, job.output_file, job.allocated_port)

    def handle_instance_exit(self, instance) -> VlcJob:
        """
        Exit callback for a launched instance: complete its job and emit
        job_state_changed.

        Raises:
            RegistryConsistencyError – *instance* was never registered, or
                                       its exit was already handled
        """
        try:
            job = self._registry.pop(instance)
        except RegistryConsistencyError as exc:
            log.error("%s", exc)
            raise

        job.complete()
        log.info("Job finished: %s", job.output_file)
        self.job_state_changed.emit(job)
        return job

    # ── Queries ───────────────────────────────────────────────────────────────

    @property
    def jobs(self) -> list[VlcJob]:
        """Jobs whose VLC process is still running."""
        return self._registry.jobs()

    def update_all_progress(self) -> None:
        """Poll every running job once. Meant to be driven by a timer."""
        for job in self._registry.jobs():
            job.update_progress()
