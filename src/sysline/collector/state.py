"""Probe state – the long-lived set of collectors and their latest readings."""

from __future__ import annotations

import logging
from typing import Any

from ..config import SamplerConfig
from .base import BaseCollector
from .cpu import CpuCollector, CpuReading
from .disk import DiskCollector, DiskReading
from .memory import MemoryCollector, MemoryReading
from .network import NetworkCollector, NetworkReading
from .process import ProcessIoCollector, ProcessIoReading, default_io_policy

logger = logging.getLogger(__name__)


class ProbeState:
    """Owns every enabled collector and the most recent reading of each.

    The state is populated once on construction and afterwards only changes
    through :meth:`refresh`.  A collector that raises is logged and its
    category reset to the empty reading, so a refresh never aborts.
    Disabled categories keep their empty reading forever.
    """

    def __init__(self, config: SamplerConfig | None = None) -> None:
        config = config or SamplerConfig()
        self.io_policy = default_io_policy()

        self._collectors: dict[str, BaseCollector[Any]] = {}
        if config.cpu:
            self._collectors["cpu"] = CpuCollector()
        if config.memory:
            self._collectors["memory"] = MemoryCollector()
        if config.disks:
            self._collectors["disks"] = DiskCollector()
        if config.process_io:
            self._collectors["process_io"] = ProcessIoCollector(self.io_policy)
        if config.network:
            self._collectors["network"] = NetworkCollector()

        self.cpu = CpuReading()
        self.memory = MemoryReading()
        self.disks = DiskReading()
        self.process_io = ProcessIoReading()
        self.network = NetworkReading()
        self.refresh_count = 0

        self.refresh()

    @property
    def categories(self) -> list[str]:
        """Names of the enabled categories."""
        return list(self._collectors)

    def refresh(self) -> None:
        """Re-read every enabled category from the OS."""
        for category, collector in self._collectors.items():
            try:
                reading = collector.collect()
            except Exception as exc:
                logger.warning("Probe %s unavailable: %s", collector.name, exc)
                logger.debug("Probe %s failure details", collector.name, exc_info=True)
                reading = collector.empty()
            setattr(self, category, reading)
        self.refresh_count += 1
