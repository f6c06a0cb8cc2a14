"""Encoders that turn a :class:`SysStats` record into one line of text."""

from __future__ import annotations

import json
from typing import Protocol

from .models import SysStats


class EncodingError(ValueError):
    """Raised when a record cannot be serialized."""


class Encoder(Protocol):
    def encode(self, stats: SysStats) -> str:
        """Return *stats* as a single line without the trailing newline."""


class JsonEncoder:
    """Compact, deterministic JSON encoding.

    Keys follow the record's field order, no whitespace is emitted and
    non-finite floats are rejected, so every line is strict JSON.
    """

    def encode(self, stats: SysStats) -> str:
        try:
            return json.dumps(stats.to_dict(), separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"cannot encode snapshot: {exc}") from exc
