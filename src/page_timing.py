"""
Per-page-load timing. Every backend call made while a page callback runs is
attributed to that callback, so one log line tells how much of the load was
spent waiting on the API, on which HTTP verbs, and how many calls failed.
"""
from __future__ import annotations

from collections import Counter
from contextlib import contextmanager
import contextvars
from dataclasses import dataclass, field
import functools
import logging
import time
from typing import Callable, Dict, Generator, Optional, TypeVar

DEFAULT_LOGGER_NAME = "uvicorn.error"
logger = logging.getLogger(DEFAULT_LOGGER_NAME)

T = TypeVar("T")

_CURRENT_TIMING: contextvars.ContextVar["PageTiming | None"] = contextvars.ContextVar(
    "page_timing", default=None
)


@dataclass
class PageTiming:
    page: str
    callback: str
    start: float
    api_seconds: float = 0.0
    api_calls: int = 0
    api_errors: int = 0
    method_seconds: Dict[str, float] = field(default_factory=dict)
    method_calls: Counter = field(default_factory=Counter)

    def add_api(self, seconds: float, method: Optional[str] = None, failed: bool = False) -> None:
        self.api_seconds += seconds
        self.api_calls += 1
        if failed:
            self.api_errors += 1
        verb = (method or "?").upper()
        self.method_calls[verb] += 1
        self.method_seconds[verb] = self.method_seconds.get(verb, 0.0) + seconds

    def methods_summary(self) -> str:
        """``GET:2/12.50ms,DELETE:1/3.00ms`` in first-call order, ``-`` when idle."""
        if not self.method_calls:
            return "-"
        return ",".join(
            f"{verb}:{self.method_calls[verb]}/{self.method_seconds[verb] * 1000:.2f}ms"
            for verb in self.method_calls
        )


def record_api_time(seconds: float, method: Optional[str] = None, failed: bool = False) -> None:
    timing = _CURRENT_TIMING.get()
    if timing is None:
        return
    timing.add_api(seconds, method=method, failed=failed)


@contextmanager
def page_load_timing(
    page: str, callback: str, log: Optional[logging.Logger] = None
) -> Generator[PageTiming, None, None]:
    start = time.perf_counter()
    timing = PageTiming(page=page, callback=callback, start=start)
    token = _CURRENT_TIMING.set(timing)
    try:
        yield timing
    finally:
        total = time.perf_counter() - start
        non_api = max(0.0, total - timing.api_seconds)
        resolved_log = log or logger
        resolved_log.info(
            "page_load.timing page=%s callback=%s total_ms=%.2f api_ms=%.2f api_calls=%s "
            "api_errors=%s api_methods=%s non_api_ms=%.2f",
            page,
            callback,
            total * 1000,
            timing.api_seconds * 1000,
            timing.api_calls,
            timing.api_errors,
            timing.methods_summary(),
            non_api * 1000,
        )
        _CURRENT_TIMING.reset(token)


def timed_page_load(
    page: str,
    func: Callable[..., T],
    label: Optional[str] = None,
    log: Optional[logging.Logger] = None,
) -> Callable[..., T]:
    callback = label or func.__name__
    resolved_logger = log or logging.getLogger(DEFAULT_LOGGER_NAME)

    @functools.wraps(func)
    def _wrapped(*args, **kwargs) -> T:
        with page_load_timing(page, callback, resolved_logger):
            return func(*args, **kwargs)

    return _wrapped
