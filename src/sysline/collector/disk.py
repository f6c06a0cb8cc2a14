"""Disk space collector – one entry per mounted physical partition."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import psutil

from .base import BaseCollector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartitionReading:
    """Space figures for one mounted partition, in bytes."""

    device: str
    mount_point: str
    total: int
    free: int


@dataclass(frozen=True)
class DiskReading:
    partitions: list[PartitionReading] = field(default_factory=list)


class DiskCollector(BaseCollector[DiskReading]):
    """Collects capacity and free space of every mounted partition.

    ``free`` is the space available to unprivileged users, which is what
    ``df`` reports as *Avail*.  Partitions that cannot be stat'ed (removable
    media without a disk, permission-restricted mounts) are skipped.
    """

    @property
    def name(self) -> str:
        return "disks"

    def collect(self) -> DiskReading:
        partitions: list[PartitionReading] = []
        for part in psutil.disk_partitions(all=False):
            try:
                usage = psutil.disk_usage(part.mountpoint)
            except OSError as exc:
                logger.debug("Skipping %s (%s): %s", part.device, part.mountpoint, exc)
                continue
            total = int(usage.total)
            partitions.append(PartitionReading(
                device=part.device,
                mount_point=part.mountpoint,
                total=total,
                free=min(int(usage.free), total),
            ))
        return DiskReading(partitions=partitions)

    def empty(self) -> DiskReading:
        return DiskReading()
