"""Per-name timing statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class TimerRecord:
    """Aggregated statistics for one named timer.

    ``segment_start`` holds a raw sample in the unit of whichever source took it;
    every other duration is in seconds.
    """

    accumulated_total: float = 0.0
    min_lapse: Optional[float] = None
    max_lapse: Optional[float] = None
    last_lapse: float = 0.0
    stop_count: int = 0
    segment_start: float = 0.0
    is_paused: bool = False

    def record_lapse(self, lapse: float) -> None:
        """Account for a completed start/stop span."""

        self.stop_count += 1
        self.last_lapse = lapse
        if self.max_lapse is None or lapse >= self.max_lapse:
            self.max_lapse = lapse
        if self.min_lapse is None or lapse <= self.min_lapse:
            self.min_lapse = lapse
        self.accumulated_total += lapse

    def add_partial(self, lapse: float) -> None:
        """Account for a span closed by a pause."""

        self.last_lapse += lapse
        self.accumulated_total += lapse

    def clear(self) -> None:
        self.segment_start = 0.0
        self.accumulated_total = 0.0
        self.min_lapse = None
        self.max_lapse = None
        self.last_lapse = 0.0
        self.stop_count = 0
        self.is_paused = False

    @property
    def average(self) -> float:
        return self.accumulated_total / self.stop_count if self.stop_count else math.nan

    def as_dict(self) -> Dict[str, object]:
        return {
            "accumulated_total": self.accumulated_total,
            "min_lapse": self.min_lapse,
            "max_lapse": self.max_lapse,
            "last_lapse": self.last_lapse,
            "stop_count": self.stop_count,
            "segment_start": self.segment_start,
            "is_paused": self.is_paused,
        }


__all__ = ["TimerRecord"]
