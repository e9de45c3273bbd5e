"""
vlcdriver.errors
~~~~~~~~~~~~~~~~
Every failure the driver raises derives from VlcDriverError.
"""

from __future__ import annotations


class VlcDriverError(Exception):
    """Base exception for all driver failures."""


# ── Job configuration ─────────────────────────────────────────────────────────

class ConfigurationError(VlcDriverError):
    """A job is missing something it needs before VLC can be launched."""


class MissingInputError(ConfigurationError):

    def __init__(self):
        super().__init__("No input file specified for job")


class MissingOutputError(ConfigurationError):

    def __init__(self):
        super().__init__("No output file specified for job")


class JobStateError(VlcDriverError):
    """Raised on an illegal job state transition."""

    def __init__(self, action: str, state):
        self.action = action
        self.state = state
        super().__init__(f"Cannot {action} a job in state {state.name}")


# ── Process launch ────────────────────────────────────────────────────────────

class LaunchError(VlcDriverError):
    """VLC could not be located, is not executable, or failed to spawn."""


class RegistryConsistencyError(VlcDriverError):
    """
    An exit was observed for a process the driver never registered,
    or whose registration was already consumed.
    """


# ── Status polling ────────────────────────────────────────────────────────────

class StatusUnavailableError(VlcDriverError):
    """The status endpoint could not be read or understood."""


class StatusFetchError(StatusUnavailableError):
    """The status endpoint was unreachable or returned an HTTP error."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not fetch {url}: {reason}")


class StatusParseError(StatusUnavailableError):
    """The status document was malformed or had no usable position."""


# ── Ports ─────────────────────────────────────────────────────────────────────

class PortAllocationError(VlcDriverError):
    """Raised when a port is released that was never handed out."""


class PortsExhaustedError(PortAllocationError):

    def __init__(self, start_port: int, end_port: int):
        self.start_port = start_port
        self.end_port = end_port
        super().__init__(f"All ports between {start_port} and {end_port} are in use")
