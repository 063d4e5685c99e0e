"""Progress reporters, null-safe reporting, and decimation wrappers.

A reporter is anything with ``report(value)``. :class:`Progress` adapts a
plain callable. The decimation wrappers forward only a subset of calls to
the reporter they wrap:

- :func:`decimate_by_count` forwards every N-th call, starting with the first.
- :func:`decimate_by_time` forwards a call only when a minimum interval has
  elapsed since the last forwarded one. The first call is always forwarded.

Both wrappers are safe to call from several threads. The wrapped reporter
is invoked outside the wrapper's lock.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

import structlog

from stdshims.errors import OperationCancelledError, require_not_none

log = structlog.get_logger(__name__)

_T = TypeVar("_T")
_T_contra = TypeVar("_T_contra", contravariant=True)


@runtime_checkable
class ProgressReporter(Protocol[_T_contra]):
    """Receives progress values."""

    def report(self, value: _T_contra) -> None: ...


class Progress(Generic[_T]):
    """Reporter forwarding every value to *callback*."""

    def __init__(self, callback: Callable[[_T], Any]) -> None:
        self._callback = require_not_none(callback, "callback")

    def report(self, value: _T) -> None:
        self._callback(value)


def _as_reporter(reporter: ProgressReporter[_T] | Callable[[_T], Any]) -> ProgressReporter[_T]:
    require_not_none(reporter, "reporter")
    if isinstance(reporter, ProgressReporter):
        return reporter
    if callable(reporter):
        return Progress(reporter)
    raise TypeError(f"Expected a progress reporter or callable, got {type(reporter).__name__}")


def report(reporter: ProgressReporter[_T] | None, value: _T) -> None:
    """Report *value* to *reporter*, doing nothing when it is None."""
    if reporter is not None:
        reporter.report(value)


class CountDecimator(Generic[_T]):
    """Forwards calls 1, step+1, 2*step+1, ... to the wrapped reporter."""

    def __init__(self, inner: ProgressReporter[_T], step: int) -> None:
        if step < 1:
            raise ValueError(f"step must be >= 1, got {step}")
        self.inner = inner
        self.step = step
        self._calls = 0
        self._lock = threading.Lock()

    def report(self, value: _T) -> None:
        with self._lock:
            forward = self._calls % self.step == 0
            self._calls += 1
        if forward:
            self.inner.report(value)


class TimeDecimator(Generic[_T]):
    """Forwards a call only if *interval* seconds passed since the last forward."""

    def __init__(
        self,
        inner: ProgressReporter[_T],
        interval: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval < 0:
            raise ValueError(f"interval must be >= 0, got {interval}")
        self.inner = inner
        self.interval = interval
        self._clock = clock
        self._last: float | None = None
        self._lock = threading.Lock()

    def report(self, value: _T) -> None:
        with self._lock:
            now = self._clock()
            forward = self._last is None or now - self._last >= self.interval
            if forward:
                self._last = now
        if forward:
            self.inner.report(value)


def decimate_by_count(
    reporter: ProgressReporter[_T] | Callable[[_T], Any],
    step: int | None = None,
) -> CountDecimator[_T]:
    """Wrap *reporter* so that only every *step*-th call is forwarded.

    *step* defaults to the ``[progress] step`` setting.
    """
    inner = _as_reporter(reporter)
    if step is None:
        from stdshims.config.settings import get_settings

        step = get_settings().progress.step
    decimator = CountDecimator(inner, step)
    log.debug("progress.decimate_by_count", step=step)
    return decimator


def decimate_by_time(
    reporter: ProgressReporter[_T] | Callable[[_T], Any],
    interval: float | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> TimeDecimator[_T]:
    """Wrap *reporter* so that forwarded calls are at least *interval* seconds apart.

    *interval* defaults to the ``[progress] interval`` setting. *clock*
    returns the current time in seconds.
    """
    inner = _as_reporter(reporter)
    if interval is None:
        from stdshims.config.settings import get_settings

        interval = get_settings().progress.interval
    decimator = TimeDecimator(inner, interval, clock)
    log.debug("progress.decimate_by_time", interval=interval)
    return decimator


@dataclass(frozen=True)
class ProgressControl(Generic[_T]):
    """An optional reporter bundled with a cancellation flag."""

    progress: ProgressReporter[_T] | None = None
    cancel: threading.Event = field(default_factory=threading.Event)

    def report(self, value: _T) -> None:
        report(self.progress, value)

    @property
    def cancelled(self) -> bool:
        return self.cancel.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise :class:`OperationCancelledError` if cancellation was requested."""
        if self.cancel.is_set():
            raise OperationCancelledError("Operation was cancelled")
