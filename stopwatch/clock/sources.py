"""Time sources used by the registry to sample the clock."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union


class TimeMode(str, Enum):
    """Which clock a registry samples."""

    NONE = "NONE"
    CPU_TIME = "CPU_TIME"
    REAL_TIME = "REAL_TIME"


class TimeSource(ABC):
    """Strategy returning raw clock samples in its own native unit."""

    mode: TimeMode = TimeMode.NONE
    ticks_per_second: float = 1.0

    @abstractmethod
    def take_time(self) -> float:
        """Return the current raw sample."""

    def to_seconds(self, raw_lapse: float) -> float:
        return raw_lapse / self.ticks_per_second


class WallClockSource(TimeSource):
    """Monotonic wall-clock seconds from an arbitrary fixed epoch."""

    mode = TimeMode.REAL_TIME
    ticks_per_second = 1.0

    def take_time(self) -> float:
        return time.perf_counter()


class CpuTimeSource(TimeSource):
    """Process CPU time in nanosecond ticks."""

    mode = TimeMode.CPU_TIME
    ticks_per_second = 1_000_000_000.0

    def take_time(self) -> float:
        return float(time.process_time_ns())


def make_source(mode: Union[TimeMode, str]) -> Optional[TimeSource]:
    """Build the strategy for ``mode``.

    Args:
        mode: A :class:`TimeMode` or its name (case-insensitive), as found in config files.
    Returns:
        A fresh source, or ``None`` for :attr:`TimeMode.NONE`.
    """

    if isinstance(mode, str) and not isinstance(mode, TimeMode):
        try:
            mode = TimeMode(mode.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown time mode: {mode!r}") from None
    if mode is TimeMode.REAL_TIME:
        return WallClockSource()
    if mode is TimeMode.CPU_TIME:
        return CpuTimeSource()
    return None


__all__ = ["TimeMode", "TimeSource", "WallClockSource", "CpuTimeSource", "make_source"]
