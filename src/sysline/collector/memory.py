"""Memory resource collector."""

from __future__ import annotations

from dataclasses import dataclass

import psutil

from .base import BaseCollector


@dataclass(frozen=True)
class MemoryReading:
    """Physical memory and swap figures in bytes."""

    total: int = 0
    used: int = 0
    free: int = 0
    available: int = 0
    total_swap: int = 0
    used_swap: int = 0
    free_swap: int = 0


class MemoryCollector(BaseCollector[MemoryReading]):
    """Collects physical memory and swap usage."""

    @property
    def name(self) -> str:
        return "memory"

    def collect(self) -> MemoryReading:
        mem = psutil.virtual_memory()
        swap = psutil.swap_memory()
        return MemoryReading(
            total=int(mem.total),
            used=int(mem.used),
            free=int(mem.free),
            available=int(mem.available),
            total_swap=int(swap.total),
            used_swap=int(swap.used),
            free_swap=int(swap.free),
        )

    def empty(self) -> MemoryReading:
        return MemoryReading()
