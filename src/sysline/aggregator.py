"""Aggregation – turns a refreshed probe state into a :class:`SysStats` record.

Every emitted record satisfies:

* ``disks.total``, ``disks.free`` and ``disks.used`` are the sums over
  ``disks.disks``, and each partition has ``used + free == total``;
* ``cpu.usage`` is the mean of the per-core usages (0.0 with no cores);
* ``net.total_up``/``net.total_down`` sum the cumulative interface counters
  and ``net.up``/``net.down`` sum the per-interface deltas.

Disk I/O totals depend on the platform.  On Linux, macOS and other POSIX
hosts ``disks.read``/``disks.write`` sum the cumulative I/O counters of all
processes.  On Windows and FreeBSD, whose per-process counters do not add
up meaningfully, only the first process yielded by the enumerator is
sampled; the value is an activity indicator rather than a host total.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from .collector.cpu import CpuReading
from .collector.disk import DiskReading
from .collector.memory import MemoryReading
from .collector.network import NetworkReading
from .collector.process import IoPolicy, ProcessIo, ProcessIoReading, default_io_policy
from .models import (
    CpuCoreStats,
    CpuStats,
    DiskPartStats,
    DiskStats,
    MemStats,
    NetInterfaceStats,
    NetStats,
    SysStats,
)

__all__ = [
    "IoPolicy",
    "aggregate_cpu",
    "aggregate_disks",
    "aggregate_memory",
    "aggregate_network",
    "aggregate_process_io",
    "build_snapshot",
    "default_io_policy",
]


class ProbeReadings(Protocol):
    """The readings a snapshot is built from (see :class:`ProbeState`)."""

    cpu: CpuReading
    memory: MemoryReading
    disks: DiskReading
    process_io: ProcessIoReading
    network: NetworkReading


def aggregate_memory(reading: MemoryReading) -> MemStats:
    return MemStats(
        total=reading.total,
        used=reading.used,
        free=reading.free,
        available=reading.available,
        total_swap=reading.total_swap,
        used_swap=reading.used_swap,
        free_swap=reading.free_swap,
    )


def aggregate_cpu(reading: CpuReading) -> CpuStats:
    cpus = tuple(CpuCoreStats(usage=usage) for usage in reading.per_core)
    usage = sum(core.usage for core in cpus) / len(cpus) if cpus else 0.0
    return CpuStats(usage=usage, cpus=cpus)


def aggregate_process_io(processes: Iterable[ProcessIo], policy: IoPolicy) -> tuple[int, int]:
    """Fold per-process I/O counters into ``(read, write)`` byte totals."""
    read = write = 0
    for proc in processes:
        read += proc.read_bytes
        write += proc.write_bytes
        if policy is IoPolicy.FIRST:
            break
    return read, write


def aggregate_disks(
    reading: DiskReading,
    process_io: ProcessIoReading,
    policy: IoPolicy,
) -> DiskStats:
    parts: list[DiskPartStats] = []
    total = free = used = 0
    for part in reading.partitions:
        stats = DiskPartStats(
            name=part.device,
            mount_point=part.mount_point,
            total=part.total,
            free=part.free,
            used=part.total - part.free,
        )
        total += stats.total
        free += stats.free
        used += stats.used
        parts.append(stats)

    read, write = aggregate_process_io(process_io.processes, policy)
    return DiskStats(
        total=total,
        free=free,
        used=used,
        read=read,
        write=write,
        disks=tuple(parts),
    )


def aggregate_network(reading: NetworkReading) -> NetStats:
    interfaces: list[NetInterfaceStats] = []
    total_up = total_down = up = down = 0
    for iface in reading.interfaces:
        total_up += iface.bytes_sent
        total_down += iface.bytes_recv
        up += iface.delta_sent
        down += iface.delta_recv
        interfaces.append(NetInterfaceStats(
            name=iface.name,
            up=iface.delta_sent,
            down=iface.delta_recv,
        ))
    return NetStats(
        total_up=total_up,
        total_down=total_down,
        up=up,
        down=down,
        interfaces=tuple(interfaces),
    )


def build_snapshot(state: ProbeReadings, policy: IoPolicy | None = None) -> SysStats:
    """Build a :class:`SysStats` from *state* without modifying it."""
    policy = policy or default_io_policy()
    return SysStats(
        mem=aggregate_memory(state.memory),
        cpu=aggregate_cpu(state.cpu),
        disks=aggregate_disks(state.disks, state.process_io, policy),
        net=aggregate_network(state.network),
    )
