"""Request tracing for services.

Off by default; ``--verbose`` turns it on. While on, every ``@traced``
service call records a tree of timed spans. Inner stages opened with
:func:`trace_span` carry counts such as the number of closure roots or
graph edges. The tree is attached to ``ServiceResult.meta["telemetry"]``
and one ``span.complete`` debug line is logged per call.

Span state lives in context variables, so concurrent calls never share
a tree.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from confctl.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("confctl_telemetry", default=False)
_current_span: ContextVar[Span | None] = ContextVar("confctl_span", default=None)


@dataclass
class Span:
    """One timed stage, its counts, and the stages nested inside it."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return round((self.finished - self.started) * 1000, 2)

    def finish(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, **counts: Any) -> None:
        self.annotations.update(counts)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "duration_ms": self.duration_ms}
        if self.annotations:
            data["annotations"] = dict(self.annotations)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@contextmanager
def _activate(span: Span) -> Iterator[Span]:
    token = _current_span.set(span)
    try:
        yield span
    finally:
        span.finish()
        _current_span.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Record a stage under the ``@traced`` call in progress.

    Yields None when tracing is off or nothing is being traced, so callers
    guard their ``annotate`` calls with ``if span:``.
    """
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name)
    parent.children.append(child)
    with _activate(child):
        yield child


def _log_span(span: Span, **fields: Any) -> None:
    structlog.get_logger("confctl.telemetry").debug(
        "span.complete",
        span=span.name,
        duration_ms=span.duration_ms,
        stages=[child.name for child in span.children],
        **fields,
    )

P = ParamSpec("P")
R = TypeVar("R")


def traced(func: Callable[P, R]) -> Callable[P, R]:
    """Trace a service method and attach the span tree to its ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(func.__qualname__)
        try:
            with _activate(root):
                result = func(*args, **kwargs)
        except Exception:
            _log_span(root, ok=False)
            raise

        if not isinstance(result, ServiceResult):
            _log_span(root, ok=True)
            return result

        if result.error is None:
            _log_span(root, ok=True, op=result.op)
        else:
            _log_span(root, ok=False, op=result.op, code=result.error.code)
        meta = {**(result.meta or {}), "telemetry": root.to_dict()}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    """Turn tracing on for the current context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    """Turn tracing off for the current context."""
    _enabled.set(False)
