"""Structured logging: one JSON object per line."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


class StructuredLogger:
    """JSON-line logger keyed by a short trace id."""

    def __init__(self, trace_id: Optional[str] = None, output=None, enabled: bool = True):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self.enabled = enabled
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        if not self.enabled:
            return
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(line + "\n")
            self._output.flush()
        except (OSError, TypeError, ValueError) as exc:
            # Last-resort fallback to avoid silent logger failures.
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
            sys.stderr.flush()

    def evaluation_start(self, **extra: Any) -> None:
        self._timers["evaluation"] = time.time()
        self._emit({"event": "evaluation_start", **extra})

    def rule_selected(self, rule_name: str, **extra: Any) -> None:
        self._emit({"event": "rule_selected", "rule": rule_name, **extra})

    def evaluation_end(self, *, messages_count: int = 0, **extra: Any) -> float:
        start = self._timers.pop("evaluation", time.time())
        duration_ms = round((time.time() - start) * 1000, 3)
        self._emit({
            "event": "evaluation_end",
            "duration_ms": duration_ms,
            "messages_count": messages_count,
            **extra,
        })
        return duration_ms

    def error(self, stage: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "stage": stage, "error": error, **extra})

    def warning(self, stage: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "stage": stage, "message": message, **extra})


def get_logger(trace_id: Optional[str] = None, *, enabled: bool = True) -> StructuredLogger:
    """Fresh logger per evaluation; evaluations share no state."""
    return StructuredLogger(trace_id=trace_id, enabled=enabled)


__all__ = ["StructuredLogger", "get_logger"]
