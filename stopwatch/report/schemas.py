"""Pydantic models describing timer snapshots."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from ..core.records import TimerRecord


class TimerSummary(BaseModel):
    name: str
    total: float
    average: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    last: float
    stops: int
    paused: bool = False

    @classmethod
    def from_record(cls, name: str, record: TimerRecord) -> "TimerSummary":
        return cls(
            name=name,
            total=record.accumulated_total,
            average=record.average if record.stop_count else None,
            min=record.min_lapse,
            max=record.max_lapse,
            last=record.last_lapse,
            stops=record.stop_count,
            paused=record.is_paused,
        )


__all__ = ["TimerSummary"]
