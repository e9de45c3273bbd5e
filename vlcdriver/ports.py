"""
vlcdriver.ports
~~~~~~~~~~~~~~~
Hands out the HTTP control port each VLC instance listens on.

One allocator is owned by the driver and shared by every job it creates.
"""

from __future__ import annotations

import logging
import threading

from vlcdriver.errors import PortAllocationError, PortsExhaustedError

log = logging.getLogger(__name__)


class PortAllocator:

    def __init__(self, start_port: int = 8090, end_port: int | None = None):
        if end_port is not None and end_port < start_port:
            raise ValueError(f"end_port {end_port} is below start_port {start_port}")
        self.start_port = start_port
        self.end_port = end_port
        self._in_use: set[int] = set()
        self._lock = threading.Lock()

    def new_port(self) -> int:
        """Return the lowest port >= start_port that nobody currently holds."""
        with self._lock:
            port = self.start_port
            while port in self._in_use:
                port += 1
                if self.end_port is not None and port > self.end_port:
                    raise PortsExhaustedError(self.start_port, self.end_port)
            self._in_use.add(port)
        log.debug("Allocated port %d", port)
        return port

    def release_port(self, port: int) -> None:
        with self._lock:
            if port not in self._in_use:
                raise PortAllocationError(f"Port {port} is not allocated")
            self._in_use.remove(port)
        log.debug("Released port %d", port)

    @property
    def in_use(self) -> frozenset[int]:
        with self._lock:
            return frozenset(self._in_use)
