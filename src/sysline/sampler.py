"""Sampler – owns the probe state and produces snapshots from it."""

from __future__ import annotations

import logging

from .aggregator import build_snapshot
from .collector.process import IoPolicy
from .collector.state import ProbeState
from .models import SysStats

logger = logging.getLogger(__name__)


class Sampler:
    """Refreshes a :class:`ProbeState` and turns it into :class:`SysStats`.

    The sampler is single-threaded: the probe state is mutated only by
    :meth:`refresh`, and :meth:`snapshot` reflects the state as of the last
    completed refresh.  CPU and network deltas span the time between two
    refreshes, so the first snapshot after start-up may report zeros.
    """

    def __init__(self, state: ProbeState) -> None:
        self._state = state
        self._io_policy = state.io_policy
        logger.debug(
            "Sampler ready (categories=%s, io_policy=%s)",
            ",".join(state.categories),
            self._io_policy.value,
        )

    @property
    def state(self) -> ProbeState:
        return self._state

    @property
    def io_policy(self) -> IoPolicy:
        return self._io_policy

    def refresh(self) -> None:
        self._state.refresh()

    def snapshot(self) -> SysStats:
        return build_snapshot(self._state, self._io_policy)

    def sample(self) -> SysStats:
        """Refresh, then snapshot."""
        self.refresh()
        return self.snapshot()
