"""CPU resource collector."""

from __future__ import annotations

from dataclasses import dataclass, field

import psutil

from .base import BaseCollector


@dataclass(frozen=True)
class CpuReading:
    """Per-logical-core busy percentages, indexed by core number."""

    per_core: list[float] = field(default_factory=list)


class CpuCollector(BaseCollector[CpuReading]):
    """Collects per-core CPU usage.

    psutil computes usage against the previous call, so every
    :meth:`collect` reports the busy share since the previous one.  The very
    first call in a process has nothing to compare against and reports 0.0
    for every core.
    """

    @property
    def name(self) -> str:
        return "cpu"

    def collect(self) -> CpuReading:
        per_cpu = psutil.cpu_percent(interval=None, percpu=True)
        return CpuReading(per_core=[float(pct) for pct in per_cpu])

    def empty(self) -> CpuReading:
        return CpuReading()
