"""Snapshot records emitted by sysline, one :class:`SysStats` per sample."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


class _Record:
    def to_dict(self) -> dict[str, Any]:
        """Return plain JSON-compatible data, fields in declaration order."""
        return asdict(self)


@dataclass(frozen=True)
class MemStats(_Record):
    """RAM and swap figures in bytes."""

    total: int
    used: int
    free: int
    available: int
    total_swap: int
    used_swap: int
    free_swap: int


@dataclass(frozen=True)
class CpuCoreStats(_Record):
    """Usage of one logical core, in percent."""

    usage: float


@dataclass(frozen=True)
class CpuStats(_Record):
    """Mean usage over all cores plus the per-core list."""

    usage: float
    cpus: tuple[CpuCoreStats, ...]


@dataclass(frozen=True)
class DiskPartStats(_Record):
    """One mounted partition; ``used + free == total``."""

    name: str
    mount_point: str
    total: int
    free: int
    used: int


@dataclass(frozen=True)
class DiskStats(_Record):
    """Partition sums plus cumulative process read/write bytes."""

    total: int
    free: int
    used: int
    read: int
    write: int
    disks: tuple[DiskPartStats, ...]


@dataclass(frozen=True)
class NetInterfaceStats(_Record):
    """Bytes one interface moved since the previous sample."""

    name: str
    up: int
    down: int


@dataclass(frozen=True)
class NetStats(_Record):
    """Cumulative counter sums and per-sample deltas over all interfaces."""

    total_up: int
    total_down: int
    up: int
    down: int
    interfaces: tuple[NetInterfaceStats, ...]


@dataclass(frozen=True)
class SysStats(_Record):
    """One snapshot: the record written per output line."""

    mem: MemStats
    cpu: CpuStats
    disks: DiskStats
    net: NetStats
