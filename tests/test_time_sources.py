from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from stopwatch.clock.sources import CpuTimeSource, TimeMode, WallClockSource, make_source


def test_make_source_by_mode():
    assert isinstance(make_source(TimeMode.REAL_TIME), WallClockSource)
    assert isinstance(make_source("cpu_time"), CpuTimeSource)
    assert make_source(TimeMode.NONE) is None
    assert make_source("none") is None


def test_make_source_rejects_unknown_name():
    with pytest.raises(ValueError):
        make_source("sundial")


def test_wall_clock_is_monotonic_seconds():
    source = WallClockSource()
    first = source.take_time()
    second = source.take_time()
    assert second >= first
    assert source.to_seconds(2.5) == 2.5


def test_cpu_time_uses_ticks():
    source = CpuTimeSource()
    start = source.take_time()
    sum(i * i for i in range(100000))
    assert source.take_time() >= start
    assert source.to_seconds(1_500_000_000) == pytest.approx(1.5)
