"""Errors raised by the timer registry."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    UNKNOWN_PERFORMANCE = "unknown_performance"
    MODE_NOT_INITIALIZED = "mode_not_initialized"
    NO_COMPLETED_STOPS = "no_completed_stops"


class StopwatchError(Exception):
    """Base class for every registry failure."""

    kind: ErrorKind


class PerformanceNotInitializedError(StopwatchError):
    """Operation on a timer name that was never started."""

    kind = ErrorKind.UNKNOWN_PERFORMANCE

    def __init__(self, name: str):
        super().__init__("Performance not initialized.")
        self.name = name


class ModeNotInitializedError(StopwatchError):
    kind = ErrorKind.MODE_NOT_INITIALIZED

    def __init__(self) -> None:
        super().__init__("Clock not initialized to a time taking mode!")


class NoCompletedStopsError(StopwatchError):
    """Average requested for a timer that was never stopped."""

    kind = ErrorKind.NO_COMPLETED_STOPS

    def __init__(self, name: str):
        super().__init__(f"No completed stops for {name!r}.")
        self.name = name


__all__ = [
    "ErrorKind",
    "StopwatchError",
    "PerformanceNotInitializedError",
    "ModeNotInitializedError",
    "NoCompletedStopsError",
]
