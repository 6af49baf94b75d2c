"""WSGI middleware."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import Any, Callable

logger = logging.getLogger(__name__)

WSGIApp = Callable[[dict, Callable[..., Any]], Iterable[bytes]]


def _format_duration(nanoseconds: int) -> str:
    if nanoseconds < 1_000:
        return f"{nanoseconds}ns"
    if nanoseconds < 1_000_000:
        return f"{nanoseconds / 1_000:g}µs"
    if nanoseconds < 1_000_000_000:
        return f"{nanoseconds / 1_000_000:g}ms"
    return f"{nanoseconds / 1_000_000_000:g}s"


class LoggerMiddleware:
    """Logs the method, path and duration of every request."""

    def __init__(self, app: WSGIApp) -> None:
        self.app = app

    def __call__(self, environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
        start = time.perf_counter_ns()
        try:
            return self.app(environ, start_response)
        finally:
            logger.info(
                "%s %s %s",
                environ.get("REQUEST_METHOD", ""),
                environ.get("PATH_INFO") or "/",
                _format_duration(time.perf_counter_ns() - start),
            )