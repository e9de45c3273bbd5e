__version__ = "0.1.0"

from .models import (
    JobState, AudioConfig, VideoConfig, AudioSpec, VideoSpec, TranscodeSpec, DriverSettings,
)
from .errors import (
    VlcDriverError, ConfigurationError, MissingInputError, MissingOutputError,
    LaunchError, RegistryConsistencyError, StatusUnavailableError,
    StatusFetchError, StatusParseError, PortAllocationError, PortsExhaustedError,
    JobStateError,
)
from .ports import PortAllocator
from .status import HttpStatusSource, VlcStatusParser
from .command_builder import spec_fragment, build_vlc_arguments, arguments_as_string
from .job import VlcJob
from .registry import JobRegistry
from .starter import VlcStarter, VlcInstance
from .driver import VlcDriver

__all__ = [
    "JobState", "AudioConfig", "VideoConfig", "AudioSpec", "VideoSpec",
    "TranscodeSpec", "DriverSettings",
    "VlcDriverError", "ConfigurationError", "MissingInputError", "MissingOutputError",
    "LaunchError", "RegistryConsistencyError", "StatusUnavailableError",
    "StatusFetchError", "StatusParseError", "PortAllocationError",
    "PortsExhaustedError", "JobStateError",
    "PortAllocator",
    "HttpStatusSource", "VlcStatusParser",
    "spec_fragment", "build_vlc_arguments", "arguments_as_string",
    "VlcJob", "JobRegistry",
    "VlcStarter", "VlcInstance",
    "VlcDriver",
]
