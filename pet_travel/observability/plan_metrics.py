"""In-process metrics for plan evaluations."""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass, field

_HISTORY_LIMIT = 200
_LATENCY_SAMPLES = 5000


@dataclass
class _LatencyAgg:
    total_ms: float = 0.0
    count: int = 0
    max_ms: float = 0.0
    values: list[float] = field(default_factory=list)

    def add(self, value_ms: float) -> None:
        val = max(0.0, float(value_ms))
        self.total_ms += val
        self.count += 1
        if val > self.max_ms:
            self.max_ms = val
        self.values.append(val)
        if len(self.values) > _LATENCY_SAMPLES:
            self.values = self.values[-_LATENCY_SAMPLES:]

    def p95(self) -> float:
        if not self.values:
            return 0.0
        rows = sorted(self.values)
        idx = max(0, min(len(rows) - 1, math.ceil(len(rows) * 0.95) - 1))
        return rows[idx]

    def snapshot(self) -> dict[str, float]:
        avg_ms = (self.total_ms / self.count) if self.count else 0.0
        return {
            "count": self.count,
            "avg_ms": round(avg_ms, 3),
            "max_ms": round(self.max_ms, 3),
            "p95_ms": round(self.p95(), 3),
        }


class PlanMetrics:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._reset_unlocked()

    def _reset_unlocked(self) -> None:
        self._total_evaluations = 0
        self._branch_counts: dict[str, int] = {}
        self._status_counts: dict[str, int] = {}
        self._latency = _LatencyAgg()
        self._history: list[dict[str, object]] = []

    def record(
        self,
        *,
        branch: str,
        status_counts: dict[str, int],
        latency_ms: float,
        trace_id: str = "",
    ) -> None:
        key_branch = (branch or "unknown").strip().lower() or "unknown"
        with self._lock:
            self._total_evaluations += 1
            self._branch_counts[key_branch] = self._branch_counts.get(key_branch, 0) + 1
            for status, count in status_counts.items():
                self._status_counts[status] = self._status_counts.get(status, 0) + max(0, int(count))
            self._latency.add(latency_ms)
            self._history.append(
                {
                    "trace_id": trace_id,
                    "branch": key_branch,
                    "messages": sum(status_counts.values()),
                    "latency_ms": round(max(0.0, float(latency_ms)), 3),
                }
            )
            if len(self._history) > _HISTORY_LIMIT:
                self._history = self._history[-_HISTORY_LIMIT:]

    def snapshot(self) -> dict[str, object]:
        with self._lock:
            return {
                "total_evaluations": self._total_evaluations,
                "branch_counts": dict(self._branch_counts),
                "status_counts": dict(self._status_counts),
                "latency": self._latency.snapshot(),
                "last_evaluations": list(self._history),
            }

    def reset(self) -> None:
        with self._lock:
            self._reset_unlocked()


_metrics_lock = threading.Lock()
_metrics: PlanMetrics | None = None


def get_plan_metrics() -> PlanMetrics:
    global _metrics
    with _metrics_lock:
        if _metrics is None:
            _metrics = PlanMetrics()
        return _metrics


def observe_evaluation(
    *,
    branch: str,
    status_counts: dict[str, int],
    latency_ms: float,
    trace_id: str = "",
) -> None:
    get_plan_metrics().record(
        branch=branch,
        status_counts=status_counts,
        latency_ms=latency_ms,
        trace_id=trace_id,
    )


__all__ = ["PlanMetrics", "get_plan_metrics", "observe_evaluation"]
