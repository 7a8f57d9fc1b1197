"""Named-timer registry: start/stop/pause bookkeeping and queries."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, TextIO, Union

from loguru import logger

from ..clock.sources import CpuTimeSource, TimeMode, TimeSource, make_source
from ..report.formatter import format_report
from ..report.schemas import TimerSummary
from .errors import ModeNotInitializedError, NoCompletedStopsError, PerformanceNotInitializedError
from .records import TimerRecord


@dataclass
class StopwatchConfig:
    """Initial registry settings."""

    mode: str = TimeMode.NONE.value
    active: bool = True
    # Reproduce the historical pause: raw CPU ticks, no normalisation, never marks the timer paused.
    legacy_pause: bool = False


class TimerRegistry:
    """Collection of named timers sharing one time source.

    Not thread-safe: callers must serialise access to an instance.
    """

    def __init__(self, config: Optional[StopwatchConfig] = None, cpu_ticks: Optional[TimeSource] = None):
        self.config = config or StopwatchConfig()
        self.records: Dict[str, TimerRecord] = {}
        self._active = bool(self.config.active)
        self._source: Optional[TimeSource] = make_source(self.config.mode)
        self._cpu_ticks = cpu_ticks if cpu_ticks is not None else CpuTimeSource()

    # ------------------------------------------------------------------ configuration
    @property
    def active(self) -> bool:
        return self._active

    @property
    def mode(self) -> TimeMode:
        return self._source.mode if self._source is not None else TimeMode.NONE

    def set_mode(self, mode: Union[TimeMode, str]) -> None:
        self._source = make_source(mode)
        logger.debug("Stopwatch mode set to {}", self.mode.value)

    def set_source(self, source: Optional[TimeSource]) -> None:
        """Install an arbitrary time source, e.g. a custom or fake clock."""

        self._source = source
        logger.debug("Stopwatch source set to {}", type(source).__name__)

    def set_cpu_ticks(self, source: TimeSource) -> None:
        """Replace the raw CPU-tick clock read by the legacy pause."""

        self._cpu_ticks = source

    def enable(self) -> None:
        print("Stopwatch active.")
        self._active = True

    def disable(self) -> None:
        print("Stopwatch inactive.")
        self._active = False

    # ------------------------------------------------------------------ lookup
    def exists(self, name: str) -> bool:
        return name in self.records

    def __contains__(self, name: object) -> bool:
        return name in self.records

    def __len__(self) -> int:
        return len(self.records)

    def names(self) -> List[str]:
        return list(self.records)

    def _record(self, name: str) -> TimerRecord:
        try:
            return self.records[name]
        except KeyError:
            logger.warning("Timer {!r} used before start", name)
            raise PerformanceNotInitializedError(name) from None

    def _require_source(self) -> TimeSource:
        if self._source is None:
            raise ModeNotInitializedError()
        return self._source

    def take_time(self) -> float:
        """Raw sample from the active source, in its native unit."""

        return self._require_source().take_time()

    # ------------------------------------------------------------------ timing
    def start(self, name: str) -> None:
        if not self._active:
            return
        source = self._require_source()
        record = self.records.get(name)
        if record is None:
            logger.debug("Creating timer {!r}", name)
            record = self.records[name] = TimerRecord()
        # sample last so bookkeeping stays outside the measured span
        record.segment_start = source.take_time()
        if not record.is_paused:
            record.last_lapse = 0.0
        record.is_paused = False

    def stop(self, name: str) -> None:
        if not self._active:
            return
        record = self._record(name)
        source = self._require_source()
        lapse = source.to_seconds(source.take_time() - record.segment_start)
        record.record_lapse(lapse)

    def pause(self, name: str) -> None:
        if not self._active:
            return
        record = self._record(name)
        if self.config.legacy_pause:
            record.add_partial(self._cpu_ticks.take_time() - record.segment_start)
            return
        source = self._require_source()
        record.add_partial(source.to_seconds(source.take_time() - record.segment_start))
        record.is_paused = True

    @contextmanager
    def track(self, name: str) -> Iterator[None]:
        """Time the enclosed block under ``name``.

        Nothing is stopped if the timer was never created, e.g. when the registry
        was disabled on entry.
        """

        self.start(name)
        try:
            yield
        finally:
            if name in self.records:
                self.stop(name)

    def reset(self, name: str) -> None:
        if not self._active:
            return
        self._record(name).clear()
        logger.debug("Reset timer {!r}", name)

    def reset_all(self) -> None:
        if not self._active:
            return
        for name in self.records:
            self.reset(name)

    # ------------------------------------------------------------------ reporting
    def report(self, name: str, output: Optional[TextIO] = None) -> None:
        if not self._active:
            return
        record = self._record(name)
        sink = output if output is not None else sys.stdout
        sink.write(format_report(name, record))

    def report_all(self, output: Optional[TextIO] = None) -> None:
        if not self._active:
            return
        for name in self.records:
            self.report(name, output)

    # ------------------------------------------------------------------ queries
    def get_elapsed_since_start(self, name: str) -> float:
        """Seconds since the last start or resume, without touching the record."""

        record = self._record(name)
        source = self._require_source()
        return source.to_seconds(source.take_time() - record.segment_start)

    def get_total(self, name: str) -> float:
        return self._record(name).accumulated_total

    def get_average(self, name: str) -> float:
        record = self._record(name)
        if record.stop_count == 0:
            raise NoCompletedStopsError(name)
        return record.average

    def get_min(self, name: str) -> Optional[float]:
        return self._record(name).min_lapse

    def get_max(self, name: str) -> Optional[float]:
        return self._record(name).max_lapse

    def get_last(self, name: str) -> float:
        return self._record(name).last_lapse

    def get_stop_count(self, name: str) -> int:
        return self._record(name).stop_count

    def summary(self, name: str) -> TimerSummary:
        return TimerSummary.from_record(name, self._record(name))


__all__ = ["TimerRegistry", "StopwatchConfig"]
