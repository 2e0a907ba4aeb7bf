"""Stage tracing for the resource engine, coloured for the terminal.

Every handler call walks RECEIVED → VALIDATE → AUTHORIZE → EXECUTE →
COMPLETE (or ERROR). ``StageLogger`` writes one line per step so the path
a request took can be read straight off the console:

    📨 [RECEIVED] services.create (principal=u1)
    🔎 [VALIDATE] services.create (schema=ServiceCreate)
    💾 [EXECUTE] services.create ✓ 0.004s
    ✅ [COMPLETE] services.create ✓ (outcome=created)

Trace lines are INFO and skipped cheaply when the logger is above INFO;
errors are always written.
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_GRAY = "\033[90m"
_RED = "\033[91m"
_GREEN = "\033[92m"


@dataclass(frozen=True)
class Stage:
    label: str
    color: str
    icon: str


class HandlerStage:
    """The fixed set of stages a handler call can be in."""

    RECEIVED = Stage("RECEIVED", "\033[97m", "📨")
    VALIDATE = Stage("VALIDATE", "\033[94m", "🔎")
    AUTHORIZE = Stage("AUTHORIZE", "\033[95m", "🔐")
    EXECUTE = Stage("EXECUTE", "\033[93m", "💾")
    COMPLETE = Stage("COMPLETE", _GREEN, "✅")
    ERROR = Stage("ERROR", _RED, "❌")


def _context(fields: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v}" for k, v in fields.items())


class StageLogger:
    """Per-component stage tracer.

    ``use_color=False`` drops the ANSI codes, for log files and CI output.
    """

    def __init__(self, component_name: str, use_color: bool = True):
        self._logger = logging.getLogger(component_name)
        self._color = use_color

    @property
    def enabled(self) -> bool:
        return self._logger.isEnabledFor(logging.INFO)

    def _paint(self, text: str, *codes: str) -> str:
        if not self._color or not codes:
            return text
        return f"{''.join(codes)}{text}{_RESET}"

    def _line(self, stage: Stage, message: str, mark: str, fields: dict[str, Any]) -> str:
        head = self._paint(f"{stage.icon} [{stage.label}]", stage.color, _BOLD)
        body = self._paint(f"{message}{mark}", stage.color)
        if fields:
            body += " " + self._paint(f"({_context(fields)})", _GRAY)
        return f"{head} {body}"

    def step_start(self, stage: Stage, message: str, **fields: Any) -> None:
        if self.enabled:
            self._logger.info(self._line(stage, message, "", fields))

    def step_complete(self, stage: Stage, message: str, **fields: Any) -> None:
        if self.enabled:
            self._logger.info(self._line(stage, message, " ✓", fields))

    def step_error(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        """Always written, whatever the configured level."""
        line = self._paint(f"{HandlerStage.ERROR.icon} [{stage.label}] {message}", _RED, _BOLD)
        if error is not None:
            line += " " + self._paint(f"→ {type(error).__name__}: {error}", _DIM)
        self._logger.error(line)

    def detail(self, message: str, **fields: Any) -> None:
        if not self.enabled:
            return
        line = self._paint(f"   ├─ {message}", _GRAY)
        if fields:
            line += " " + self._paint(f"({_context(fields)})", _DIM)
        self._logger.info(line)

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **fields: Any) -> Iterator[None]:
        """Trace the wrapped block with its elapsed time; failures are logged and re-raised."""
        self.step_start(stage, message, **fields)
        started = time.perf_counter()
        try:
            yield
        except Exception as exc:
            self.step_error(
                stage, f"{message} failed after {time.perf_counter() - started:.3f}s", error=exc
            )
            raise
        self.step_complete(stage, f"{message} {time.perf_counter() - started:.3f}s", **fields)
