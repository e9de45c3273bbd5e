"""
In-memory registry of running jobs, keyed by the VLC instance that runs them.

Instances hash by identity, so two launches can never collide even if
the OS reuses a PID.
"""

from __future__ import annotations

import threading
from typing import Any

from vlcdriver.errors import RegistryConsistencyError
from vlcdriver.job import VlcJob


class JobRegistry:

    def __init__(self):
        # instance -> job
        self._jobs: dict[Any, VlcJob] = {}
        self._lock = threading.Lock()

    def add(self, instance: Any, job: VlcJob) -> None:
        """
        Register *job* as the owner of *instance*.

        Raises:
            RegistryConsistencyError: if the instance is already registered
        """
        with self._lock:
            if instance in self._jobs:
                raise RegistryConsistencyError(
                    f"Instance {instance!r} is already registered to {self._jobs[instance]!r}"
                )
            self._jobs[instance] = job

    def pop(self, instance: Any) -> VlcJob:
        """
        Remove and return the job owning *instance*.

        Raises:
            RegistryConsistencyError: if the instance was never registered
                or has already been consumed
        """
        with self._lock:
            try:
                return self._jobs.pop(instance)
            except KeyError:
                raise RegistryConsistencyError(
                    f"Exit observed for unregistered instance {instance!r}"
                ) from None

    def jobs(self) -> list[VlcJob]:
        with self._lock:
            return list(self._jobs.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)

    def __contains__(self, instance: Any) -> bool:
        with self._lock:
            return instance in self._jobs
