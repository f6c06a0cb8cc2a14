"""Base interface for system resource collectors."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

R = TypeVar("R")


class BaseCollector(abc.ABC, Generic[R]):
    """Abstract base class for system resource collectors.

    A collector reads one category of OS counters and returns an immutable
    reading.  :meth:`empty` is the reading reported when the category is
    disabled or cannot be serviced on this platform.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Collector name used in configuration and log output."""

    @abc.abstractmethod
    def collect(self) -> R:
        """Read the current counters for this category."""

    @abc.abstractmethod
    def empty(self) -> R:
        """Return the zero reading for this category."""
