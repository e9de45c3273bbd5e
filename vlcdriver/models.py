"""
vlcdriver.models
~~~~~~~~~~~~~~~~
Pure dataclasses. No Qt, no I/O.
Job state, transcode settings and driver settings live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Union


# ── Enums ─────────────────────────────────────────────────────────────────────

class JobState(Enum):
    NOT_STARTED = auto()  # created, never handed to the driver
    STARTED     = auto()  # VLC is running for this job
    ERROR       = auto()  # arguments or launch failed
    FINISHED    = auto()  # VLC exited, port released


# ── Codec settings ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class AudioConfig:
    codec: str = "mp3"
    bitrate_kbps: int = 128
    channels: int = 2
    sample_rate: int = 44100


@dataclass(frozen=True)
class VideoConfig:
    codec: str = "h264"
    bitrate_kbps: int = 1024
    scale: float = 1.0
    fps: float | None = None
    deinterlace: bool = False
    audio: AudioConfig = field(default_factory=lambda: AudioConfig(codec="mp4a"))


# ── Transcode spec (tagged variant) ───────────────────────────────────────────

@dataclass(frozen=True)
class AudioSpec:
    """Audio-only transcode: the video track is dropped."""
    config: AudioConfig = field(default_factory=AudioConfig)


@dataclass(frozen=True)
class VideoSpec:
    config: VideoConfig = field(default_factory=VideoConfig)


TranscodeSpec = Union[AudioSpec, VideoSpec]


# ── Driver settings (persisted by vlcdriver.config) ───────────────────────────

@dataclass
class DriverSettings:
    """
    Everything the driver reads from the user's config file.

    `end_port` of None means the allocator never runs out; the OS port
    range is then the caller's problem.
    """
    start_port: int = 8090
    end_port: int | None = None
    http_password: str = "vlcdriver"
    vlc_path: Path | None = None
    status_timeout: float = 2.0
