"""Base interface for snapshot exporters."""

from __future__ import annotations

import abc

from ..models import SysStats


class BaseExporter(abc.ABC):
    """Abstract base for exporters that receive snapshot records."""

    @abc.abstractmethod
    def export(self, stats: SysStats) -> None:
        """Export one snapshot record."""

    def shutdown(self) -> None:
        """Flush and release resources."""
