from __future__ import annotations

import io
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from stopwatch.clock.sources import TimeMode, TimeSource
from stopwatch.core.records import TimerRecord
from stopwatch.core.registry import TimerRegistry
from stopwatch.report.formatter import format_report


class StepClock(TimeSource):
    mode = TimeMode.REAL_TIME

    def __init__(self):
        self.now = 0.0

    def take_time(self) -> float:
        return self.now


def test_report_layout():
    clock = StepClock()
    registry = TimerRegistry()
    registry.set_source(clock)
    registry.start("a")
    clock.now = 0.5
    registry.stop("a")
    registry.start("a")
    clock.now = 2.0
    registry.stop("a")

    sink = io.StringIO()
    registry.report("a", sink)
    assert sink.getvalue().split("\n") == [
        "",
        "=======================",
        "Tracking performance: a",
        "=======================",
        "  *  Avg. time 1.0 sec",
        "  *  Min. time 0.5 sec",
        "  *  Max. time 1.5 sec",
        "  *  Tot. time 2.0 sec",
        "  *  Stops 2",
        "",
        "",
    ]
    assert len("=======================") == 22 + len("a")


def test_report_without_stops():
    text = format_report("name", TimerRecord())
    lines = text.split("\n")
    assert lines[1] == "=" * 26
    assert lines[4] == "  *  Avg. time nan sec"
    assert lines[5] == "  *  Min. time 0.0 sec"
    assert lines[8] == "  *  Stops 0"


def test_report_all_in_insertion_order():
    registry = TimerRegistry()
    registry.set_source(StepClock())
    for name in ("zeta", "alpha", "mid"):
        registry.start(name)
        registry.stop(name)
    sink = io.StringIO()
    registry.report_all(sink)
    titles = [line for line in sink.getvalue().splitlines() if line.startswith("Tracking")]
    assert titles == [
        "Tracking performance: zeta",
        "Tracking performance: alpha",
        "Tracking performance: mid",
    ]


def test_report_defaults_to_stdout(capsys):
    registry = TimerRegistry()
    registry.set_source(StepClock())
    registry.start("x")
    registry.report("x")
    assert "Tracking performance: x" in capsys.readouterr().out
