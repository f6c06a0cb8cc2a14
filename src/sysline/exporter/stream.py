"""Stream exporter – writes one encoded record per line to a text stream."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..encoder import Encoder, JsonEncoder
from ..models import SysStats
from .base import BaseExporter

logger = logging.getLogger(__name__)


class StreamExporter(BaseExporter):
    """Writes snapshot records as newline-terminated lines.

    Each record goes out in a single ``write`` call followed by ``flush``,
    so concurrent readers never see a record split across two writes by
    this process.  Write errors (a closed pipe, a full disk) propagate to
    the caller.
    """

    def __init__(self, stream: TextIO | None = None, encoder: Encoder | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._encoder = encoder or JsonEncoder()
        self.records_written = 0

    def export(self, stats: SysStats) -> None:
        line = self._encoder.encode(stats)
        self._stream.write(line + "\n")
        self._stream.flush()
        self.records_written += 1

    def shutdown(self) -> None:
        logger.debug("StreamExporter shut down after %d records", self.records_written)
