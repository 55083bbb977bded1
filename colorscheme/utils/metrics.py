"""
ColorScheme Metrics Collection
In-process counters and per scheme kind timings for the /metrics endpoint.
"""
import time
from collections import defaultdict, Counter
from typing import Any, Dict, List, Optional
from threading import Lock


class MetricsCollector:
    """Simple in-process metrics collector."""

    def __init__(self):
        self._lock = Lock()
        self._counters: Dict[str, int] = Counter()
        self._scheme_timings: Dict[str, List[float]] = defaultdict(list)
        self._start_time = time.time()

    def increment_request_count(self):
        """Increment total scheme request counter."""
        with self._lock:
            self._counters["scheme_requests_total"] += 1

    def increment_preset_count(self):
        """Increment preset endpoint counter."""
        with self._lock:
            self._counters["preset_requests_total"] += 1

    def increment_failure_count(self, error_type: str):
        """Increment failure counter by error type."""
        with self._lock:
            self._counters[f"scheme_failed_total_{error_type}"] += 1

    def record_scheme(self, kind: str, color_count: int, duration_ms: float):
        """
        Record one generated scheme.

        Args:
            kind: Scheme kind name as requested (aliases kept)
            color_count: Number of hex colors produced
            duration_ms: Time spent configuring and rendering
        """
        with self._lock:
            self._counters[f"scheme_kind_total_{kind}"] += 1
            self._counters["scheme_colors_total"] += color_count
            self._scheme_timings[kind].append(duration_ms)

    def get_counters(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counters)

    def get_scheme_timings(self) -> Dict[str, Dict[str, float]]:
        """Mean and median generation time per scheme kind."""
        with self._lock:
            return {
                kind: {
                    "count": len(timings),
                    "mean_ms": sum(timings) / len(timings),
                    "p50_ms": self._median(timings)
                }
                for kind, timings in self._scheme_timings.items()
                if timings
            }

    def get_summary(self) -> Dict[str, Any]:
        """Get complete metrics summary."""
        return {
            "uptime_seconds": time.time() - self._start_time,
            "counters": self.get_counters(),
            "scheme_timings": self.get_scheme_timings()
        }

    def reset(self):
        """Reset all metrics (for testing)."""
        with self._lock:
            self._counters.clear()
            self._scheme_timings.clear()
            self._start_time = time.time()

    @staticmethod
    def _median(data: List[float]) -> float:
        ordered = sorted(data)
        mid = len(ordered) // 2
        if len(ordered) % 2:
            return ordered[mid]
        return (ordered[mid - 1] + ordered[mid]) / 2


# Global metrics instance
_metrics: Optional[MetricsCollector] = None


def get_metrics() -> MetricsCollector:
    """Get or create global metrics collector."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics


def reset_metrics():
    """Reset global metrics (for testing)."""
    global _metrics
    if _metrics is not None:
        _metrics.reset()
