"""Table exporter – renders a snapshot for humans using Rich."""

from __future__ import annotations

from typing import TextIO

from ..models import SysStats
from .base import BaseExporter


def format_bytes(val: int) -> str:
    if val >= 1_099_511_627_776:
        return f"{val / 1_099_511_627_776:.1f} TB"
    if val >= 1_073_741_824:
        return f"{val / 1_073_741_824:.1f} GB"
    if val >= 1_048_576:
        return f"{val / 1_048_576:.1f} MB"
    if val >= 1024:
        return f"{val / 1024:.0f} KB"
    return f"{val} B"


class TableExporter(BaseExporter):
    """Prints memory, CPU, disk and network tables for one snapshot."""

    def __init__(self, stream: TextIO | None = None) -> None:
        from rich.console import Console

        self._console = Console(file=stream)

    def export(self, stats: SysStats) -> None:
        from rich.table import Table

        mem = Table(title="Memory")
        mem.add_column("", style="magenta")
        mem.add_column("Total", justify="right")
        mem.add_column("Used", justify="right")
        mem.add_column("Free", justify="right")
        mem.add_column("Available", justify="right")
        mem.add_row(
            "RAM",
            format_bytes(stats.mem.total),
            format_bytes(stats.mem.used),
            format_bytes(stats.mem.free),
            format_bytes(stats.mem.available),
        )
        mem.add_row(
            "Swap",
            format_bytes(stats.mem.total_swap),
            format_bytes(stats.mem.used_swap),
            format_bytes(stats.mem.free_swap),
            "",
        )

        cpu = Table(title=f"CPU ({stats.cpu.usage:.1f}% average)")
        cpu.add_column("Core", justify="right", style="cyan")
        cpu.add_column("Usage %", justify="right")
        for idx, core in enumerate(stats.cpu.cpus):
            cpu.add_row(str(idx), f"{core.usage:.1f}")

        disks = Table(
            title=(
                f"Disks (read {format_bytes(stats.disks.read)}, "
                f"written {format_bytes(stats.disks.write)})"
            ),
        )
        disks.add_column("Device", style="green")
        disks.add_column("Mount point")
        disks.add_column("Total", justify="right")
        disks.add_column("Used", justify="right")
        disks.add_column("Free", justify="right")
        for part in stats.disks.disks:
            disks.add_row(
                part.name,
                part.mount_point,
                format_bytes(part.total),
                format_bytes(part.used),
                format_bytes(part.free),
            )
        disks.add_row(
            "[bold]total[/bold]",
            "",
            format_bytes(stats.disks.total),
            format_bytes(stats.disks.used),
            format_bytes(stats.disks.free),
        )

        net = Table(
            title=(
                f"Network (sent {format_bytes(stats.net.total_up)}, "
                f"received {format_bytes(stats.net.total_down)})"
            ),
        )
        net.add_column("Interface", style="green")
        net.add_column("Up", justify="right")
        net.add_column("Down", justify="right")
        for iface in stats.net.interfaces:
            net.add_row(iface.name, format_bytes(iface.up), format_bytes(iface.down))

        for table in (mem, cpu, disks, net):
            self._console.print(table)
