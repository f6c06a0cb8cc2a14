"""Network resource collector."""

from __future__ import annotations

from dataclasses import dataclass, field

import psutil

from .base import BaseCollector


@dataclass(frozen=True)
class InterfaceReading:
    """Counters for one network interface.

    ``bytes_sent``/``bytes_recv`` are cumulative; ``delta_sent``/``delta_recv``
    cover the time since the previous collection.
    """

    name: str
    bytes_sent: int
    bytes_recv: int
    delta_sent: int = 0
    delta_recv: int = 0


@dataclass(frozen=True)
class NetworkReading:
    interfaces: list[InterfaceReading] = field(default_factory=list)


class NetworkCollector(BaseCollector[NetworkReading]):
    """Collects per-interface network I/O counters and their deltas.

    Interfaces are reported in the order they were first seen; new ones are
    appended and vanished ones dropped.  A newly seen interface, or one whose
    counter went backwards (wrap, reset), reports a delta of zero.
    """

    def __init__(self) -> None:
        self._prev_counters: dict[str, tuple[int, int]] = {}

    @property
    def name(self) -> str:
        return "network"

    def collect(self) -> NetworkReading:
        counters = psutil.net_io_counters(pernic=True)

        order = [iface for iface in self._prev_counters if iface in counters]
        order.extend(iface for iface in counters if iface not in self._prev_counters)

        current: dict[str, tuple[int, int]] = {}
        interfaces: list[InterfaceReading] = []
        for iface in order:
            nio = counters[iface]
            sent, recv = int(nio.bytes_sent), int(nio.bytes_recv)
            current[iface] = (sent, recv)

            prev_sent, prev_recv = self._prev_counters.get(iface, (sent, recv))
            interfaces.append(InterfaceReading(
                name=iface,
                bytes_sent=sent,
                bytes_recv=recv,
                delta_sent=max(sent - prev_sent, 0),
                delta_recv=max(recv - prev_recv, 0),
            ))

        self._prev_counters = current
        return NetworkReading(interfaces=interfaces)

    def empty(self) -> NetworkReading:
        return NetworkReading()
