"""Render timer statistics as the fixed-format text report."""

from __future__ import annotations

from typing import List

from ..core.records import TimerRecord

HEADER_PAD = "=" * len("Tracking performance: ")


def format_report(name: str, record: TimerRecord) -> str:
    """Return the report block for ``name``, blank lines included."""

    bar = HEADER_PAD + "=" * len(name)
    min_lapse = record.min_lapse if record.min_lapse is not None else 0.0
    max_lapse = record.max_lapse if record.max_lapse is not None else 0.0
    lines: List[str] = [
        "",
        bar,
        f"Tracking performance: {name}",
        bar,
        f"  *  Avg. time {record.average} sec",
        f"  *  Min. time {min_lapse} sec",
        f"  *  Max. time {max_lapse} sec",
        f"  *  Tot. time {record.accumulated_total} sec",
        f"  *  Stops {record.stop_count}",
        "",
    ]
    return "\n".join(lines) + "\n"


__all__ = ["format_report", "HEADER_PAD"]
