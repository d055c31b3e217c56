"""
Step timing for demonstration runs.

``log_step`` opens a span around a block of work: it pushes a fresh
``span_id`` into the log context (the enclosing span becomes
``parent_span_id``), logs ``<event>.start`` at DEBUG and then either
``<event>.end`` at the requested level or ``<event>.error`` at ERROR.
"""

import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from pattern_spine.logging.context import get_context, get_logger, push_context


@dataclass
class StepTimer:
    """Clock and extra log fields for one ``log_step`` block."""

    event: str
    span_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    parent_span_id: str | None = None
    fields: dict[str, Any] = field(default_factory=dict)
    failure: str | None = None
    _started: float = field(default_factory=time.perf_counter, repr=False)
    _stopped: float | None = field(default=None, repr=False)

    @property
    def finished(self) -> bool:
        return self._stopped is not None

    @property
    def duration_seconds(self) -> float:
        end = self._stopped if self._stopped is not None else time.perf_counter()
        return end - self._started

    def note(self, **fields: Any) -> None:
        """Attach fields to the closing log event."""
        self.fields.update(fields)

    def _close(self) -> dict[str, Any]:
        if self._stopped is None:
            self._stopped = time.perf_counter()
        span = {"span_id": self.span_id}
        if self.parent_span_id:
            span["parent_span_id"] = self.parent_span_id
        return {"duration_ms": round(self.duration_seconds * 1000, 2), **span, **self.fields}


@contextmanager
def log_step(event: str, level: str = "info", **fields: Any) -> Iterator[StepTimer]:
    """
    Time a block and log its outcome.

    Usage:
        with log_step("demonstration.run", pattern="builder") as timer:
            lines = list(example.demonstrate())
            timer.note(lines=len(lines))

    Exceptions are logged as ``<event>.error`` and re-raised.
    """
    log = get_logger("pattern_spine.timing")
    timer = StepTimer(event=event, parent_span_id=get_context().span_id, fields=dict(fields))
    token = push_context(span_id=timer.span_id, parent_span_id=timer.parent_span_id, step=event)

    log.debug(f"{event}.start", span_id=timer.span_id, **fields)
    try:
        yield timer
    except Exception as e:
        timer.failure = f"{type(e).__name__}: {e}"
        log.error(f"{event}.error", error=timer.failure, **timer._close())
        raise
    finally:
        token.restore()

    getattr(log, level)(f"{event}.end", **timer._close())
