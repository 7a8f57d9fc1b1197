"""Result-returning wrapper around :class:`TimerRegistry`.

Every method of :class:`SafeRegistry` mirrors the registry method of the same name
but returns an :class:`Outcome` instead of raising :class:`StopwatchError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TextIO, TypeVar

from .errors import ErrorKind, StopwatchError
from .registry import TimerRegistry

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Tagged success/failure value."""

    value: Optional[T] = None
    error: Optional[StopwatchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def _capture(fn: Callable[..., T], *args: Any) -> Outcome[T]:
    try:
        return Outcome(value=fn(*args))
    except StopwatchError as exc:
        return Outcome(error=exc)


class SafeRegistry:
    def __init__(self, registry: Optional[TimerRegistry] = None):
        self.registry = registry if registry is not None else TimerRegistry()

    def start(self, name: str) -> Outcome[None]:
        return _capture(self.registry.start, name)

    def stop(self, name: str) -> Outcome[None]:
        return _capture(self.registry.stop, name)

    def pause(self, name: str) -> Outcome[None]:
        return _capture(self.registry.pause, name)

    def reset(self, name: str) -> Outcome[None]:
        return _capture(self.registry.reset, name)

    def reset_all(self) -> Outcome[None]:
        return _capture(self.registry.reset_all)

    def report(self, name: str, output: Optional[TextIO] = None) -> Outcome[None]:
        return _capture(self.registry.report, name, output)

    def report_all(self, output: Optional[TextIO] = None) -> Outcome[None]:
        return _capture(self.registry.report_all, output)

    def get_elapsed_since_start(self, name: str) -> Outcome[float]:
        return _capture(self.registry.get_elapsed_since_start, name)

    def get_total(self, name: str) -> Outcome[float]:
        return _capture(self.registry.get_total, name)

    def get_average(self, name: str) -> Outcome[float]:
        return _capture(self.registry.get_average, name)

    def get_min(self, name: str) -> Outcome[Optional[float]]:
        return _capture(self.registry.get_min, name)

    def get_max(self, name: str) -> Outcome[Optional[float]]:
        return _capture(self.registry.get_max, name)

    def get_last(self, name: str) -> Outcome[float]:
        return _capture(self.registry.get_last, name)

    def get_stop_count(self, name: str) -> Outcome[int]:
        return _capture(self.registry.get_stop_count, name)


__all__ = ["Outcome", "SafeRegistry"]
