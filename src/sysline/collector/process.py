"""Process disk I/O collector – cumulative read/write bytes per process."""

from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass, field

import psutil

from .base import BaseCollector

logger = logging.getLogger(__name__)


class IoPolicy(str, enum.Enum):
    """How per-process I/O counters are folded into the disk totals.

    ``ALL`` sums every process; it fits platforms whose per-process counters
    are cumulative and cheap to read (Linux, macOS).  ``FIRST`` samples only
    the first process the enumerator yields; it fits platforms whose
    per-process accounting does not compose additively (Windows, FreeBSD).
    """

    ALL = "all"
    FIRST = "first"


def default_io_policy(platform: str | None = None) -> IoPolicy:
    """Return the I/O policy for *platform* (defaults to ``sys.platform``)."""
    platform = sys.platform if platform is None else platform
    if platform in ("win32", "cygwin") or platform.startswith("freebsd"):
        return IoPolicy.FIRST
    return IoPolicy.ALL


@dataclass(frozen=True)
class ProcessIo:
    pid: int
    read_bytes: int
    write_bytes: int


@dataclass(frozen=True)
class ProcessIoReading:
    """Per-process cumulative I/O counters in enumeration (pid) order."""

    processes: list[ProcessIo] = field(default_factory=list)


class ProcessIoCollector(BaseCollector[ProcessIoReading]):
    """Collects cumulative disk I/O byte counters of running processes.

    Processes that vanish mid-scan or deny access are skipped.  On platforms
    where psutil offers no ``io_counters()`` every process reports zero, so
    the aggregated totals stay at zero instead of failing the category.
    With :attr:`IoPolicy.FIRST` only the first yielded process is read.
    """

    def __init__(self, policy: IoPolicy | None = None) -> None:
        self._policy = policy or default_io_policy()

    @property
    def name(self) -> str:
        return "process_io"

    @property
    def policy(self) -> IoPolicy:
        return self._policy

    def collect(self) -> ProcessIoReading:
        processes: list[ProcessIo] = []
        unreadable = 0
        for proc in psutil.process_iter():
            io = _read_io(proc)
            if io is None:
                unreadable += 1
                io = ProcessIo(pid=proc.pid, read_bytes=0, write_bytes=0)
            processes.append(io)
            if self._policy is IoPolicy.FIRST:
                break
        if unreadable:
            logger.debug("I/O counters unreadable for %d of %d processes", unreadable, len(processes))
        return ProcessIoReading(processes=processes)

    def empty(self) -> ProcessIoReading:
        return ProcessIoReading()


def _read_io(proc: psutil.Process) -> ProcessIo | None:
    try:
        io = proc.io_counters()
    except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
        return None
    except AttributeError:
        # io_counters() is not available on all platforms (macOS)
        return None
    return ProcessIo(pid=proc.pid, read_bytes=int(io.read_bytes), write_bytes=int(io.write_bytes))
