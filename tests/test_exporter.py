"""Tests for the JSON encoder and the snapshot exporters."""

import io
import json

import pytest

from sysline.encoder import EncodingError, JsonEncoder
from sysline.exporter.stream import StreamExporter
from sysline.exporter.table import TableExporter, format_bytes
from sysline.models import (
    CpuCoreStats,
    CpuStats,
    DiskPartStats,
    DiskStats,
    MemStats,
    NetInterfaceStats,
    NetStats,
    SysStats,
)


def _stats(cpu_usage: float = 25.0) -> SysStats:
    return SysStats(
        mem=MemStats(
            total=8_000_000_000, used=3_000_000_000, free=2_000_000_000,
            available=4_500_000_000, total_swap=1_000_000_000, used_swap=0,
            free_swap=1_000_000_000,
        ),
        cpu=CpuStats(usage=cpu_usage, cpus=(CpuCoreStats(usage=20.0), CpuCoreStats(usage=30.0))),
        disks=DiskStats(
            total=1000, free=250, used=750, read=4096, write=512,
            disks=(DiskPartStats(name="/dev/sda1", mount_point="/", total=1000, free=250, used=750),),
        ),
        net=NetStats(
            total_up=123, total_down=456, up=7, down=9,
            interfaces=(
                NetInterfaceStats(name="eth0", up=7, down=9),
                NetInterfaceStats(name="lo", up=0, down=0),
            ),
        ),
    )


class TestJsonEncoder:
    """Tests for the compact JSON encoder."""

    def test_single_compact_line(self):
        line = JsonEncoder().encode(_stats())
        assert "\n" not in line
        assert " " not in line
        assert line == line.strip()

    def test_field_names_and_order(self):
        doc = json.loads(JsonEncoder().encode(_stats()))
        assert list(doc) == ["mem", "cpu", "disks", "net"]
        assert list(doc["mem"]) == [
            "total", "used", "free", "available", "total_swap", "used_swap", "free_swap",
        ]
        assert list(doc["cpu"]) == ["usage", "cpus"]
        assert list(doc["disks"]) == ["total", "free", "used", "read", "write", "disks"]
        assert list(doc["disks"]["disks"][0]) == ["name", "mount_point", "total", "free", "used"]
        assert list(doc["net"]) == ["total_up", "total_down", "up", "down", "interfaces"]
        assert doc["net"]["interfaces"][1] == {"name": "lo", "up": 0, "down": 0}
        assert doc["cpu"]["cpus"] == [{"usage": 20.0}, {"usage": 30.0}]

    def test_deterministic(self):
        encoder = JsonEncoder()
        assert encoder.encode(_stats()) == encoder.encode(_stats())

    def test_nan_is_an_encoding_error(self):
        with pytest.raises(EncodingError):
            JsonEncoder().encode(_stats(cpu_usage=float("nan")))


class TestStreamExporter:
    """Tests for the line-per-record stream exporter."""

    def test_writes_one_line_per_record(self):
        buf = io.StringIO()
        exporter = StreamExporter(buf)
        exporter.export(_stats())
        exporter.export(_stats())
        exporter.shutdown()

        lines = buf.getvalue().split("\n")
        assert lines[-1] == ""
        assert len(lines) == 3
        for line in lines[:2]:
            assert json.loads(line)["disks"]["read"] == 4096
        assert exporter.records_written == 2

    def test_single_write_then_flush(self):
        class RecordingStream(io.StringIO):
            def __init__(self):
                super().__init__()
                self.calls = []

            def write(self, s):
                self.calls.append(("write", s))
                return super().write(s)

            def flush(self):
                self.calls.append(("flush", None))
                super().flush()

        stream = RecordingStream()
        StreamExporter(stream).export(_stats())
        assert [name for name, _ in stream.calls] == ["write", "flush"]
        assert stream.calls[0][1].endswith("}\n")

    def test_custom_encoder(self):
        class NameEncoder:
            def encode(self, stats):
                return ",".join(i.name for i in stats.net.interfaces)

        buf = io.StringIO()
        StreamExporter(buf, encoder=NameEncoder()).export(_stats())
        assert buf.getvalue() == "eth0,lo\n"

    def test_write_errors_propagate(self):
        class ClosedPipe(io.StringIO):
            def write(self, s):
                raise BrokenPipeError(32, "Broken pipe")

        with pytest.raises(BrokenPipeError):
            StreamExporter(ClosedPipe()).export(_stats())


class TestTableExporter:
    """Tests for the human-readable table view."""

    def test_renders_all_sections(self):
        buf = io.StringIO()
        TableExporter(buf).export(_stats())
        out = buf.getvalue()
        for title in ("Memory", "CPU", "Disks", "Network"):
            assert title in out
        assert "/dev/sda1" in out
        assert "eth0" in out

    def test_format_bytes(self):
        assert format_bytes(512) == "512 B"
        assert format_bytes(2048) == "2 KB"
        assert format_bytes(5 * 1_048_576) == "5.0 MB"
        assert format_bytes(3 * 1_073_741_824) == "3.0 GB"
        assert format_bytes(2 * 1_099_511_627_776) == "2.0 TB"
