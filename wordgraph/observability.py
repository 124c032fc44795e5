"""
Observability Module
====================

Per-Session metrics: how long the analyses take and how walks end.

Two kinds of entries share one collector:
- timings, recorded by @timed Session methods (build, queries, PageRank)
- counts, such as "walks_cancelled" from the Session and the
  "walk_<state>" / "walk_steps" pair the RandomWalker records when a walk
  finishes, possibly on its background thread

Example:
    session = Session.from_text(text, enable_metrics=True)
    session.random_walks()
    session.get_metrics()["walk_steps"]        # {'count': 7}
    print(session.get_metrics_summary())

The package logs through the standard logging module and never installs
handlers; only the command-line front end calls logging.basicConfig.
"""

import functools
import logging
import threading
import time
from collections import Counter
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


class _Timing:
    """Running count / total / min / max of one timed operation."""

    __slots__ = ('count', 'total_ms', 'min_ms', 'max_ms')

    def __init__(self):
        self.count = 0
        self.total_ms = 0.0
        self.min_ms = float('inf')
        self.max_ms = 0.0

    def add(self, duration_ms: float) -> None:
        self.count += 1
        self.total_ms += duration_ms
        self.min_ms = min(self.min_ms, duration_ms)
        self.max_ms = max(self.max_ms, duration_ms)

    def as_dict(self) -> Dict[str, Any]:
        return {
            'count': self.count,
            'total_ms': self.total_ms,
            'avg_ms': self.total_ms / self.count,
            'min_ms': self.min_ms,
            'max_ms': self.max_ms,
        }


class MetricsCollector:
    """
    Thread-safe timing and count metrics.

    Every mutation and read takes the collector's lock, so a background walk
    can record its outcome while the caller's thread is timing a query.

    Attributes:
        enabled: When False, record_* calls are ignored
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._lock = threading.Lock()
        self._timings: Dict[str, _Timing] = {}
        self._counts: Counter = Counter()

    def record_timing(self, operation: str, duration_ms: float) -> None:
        """Add one duration (milliseconds) to an operation's timing."""
        if not self.enabled:
            return
        with self._lock:
            self._timings.setdefault(operation, _Timing()).add(duration_ms)

    def record_count(self, metric_name: str, count: int = 1) -> None:
        """Increase a count metric such as "walks_cancelled"."""
        if not self.enabled:
            return
        with self._lock:
            self._counts[metric_name] += count

    def record_walk(self, state_name: str, steps: int) -> None:
        """
        Record a finished walk.

        Args:
            state_name: Terminal WalkState value, e.g. "terminated_cycle"
            steps: Number of words the walk visited
        """
        if not self.enabled:
            return
        with self._lock:
            self._counts[f"walk_{state_name}"] += 1
            self._counts["walk_steps"] += steps

    def get_operation_stats(self, operation: str) -> Dict[str, Any]:
        """
        Statistics for one metric.

        Returns:
            count/total_ms/avg_ms/min_ms/max_ms for a timing, {'count': n}
            for a count, {} if nothing was recorded under that name
        """
        with self._lock:
            if operation in self._timings:
                return self._timings[operation].as_dict()
            if operation in self._counts:
                return {'count': self._counts[operation]}
            return {}

    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        with self._lock:
            stats = {name: {'count': n} for name, n in self._counts.items()}
            stats.update((name, t.as_dict()) for name, t in self._timings.items())
        return stats

    def reset(self) -> None:
        with self._lock:
            self._timings.clear()
            self._counts.clear()

    def get_summary(self) -> str:
        """Timings then counts, one metric per line, sorted by name."""
        stats = self.get_all_stats()
        if not stats:
            return "No metrics collected."

        lines = ["Session metrics"]
        for name in sorted(stats):
            entry = stats[name]
            if 'avg_ms' in entry:
                lines.append(f"  {name:<24} x{entry['count']:<6} "
                             f"avg {entry['avg_ms']:.2f}ms  max {entry['max_ms']:.2f}ms")
        for name in sorted(stats):
            entry = stats[name]
            if 'avg_ms' not in entry:
                lines.append(f"  {name:<24} {entry['count']}")
        return "\n".join(lines)


def timed(operation_name: Optional[str] = None):
    """
    Time a Session method into the instance's `_metrics` collector.

    Runs the method untimed when the instance has no enabled collector.
    A method that raises is still timed.
    """
    def decorator(func: Callable) -> Callable:
        op_name = operation_name or func.__name__

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            metrics = getattr(self, '_metrics', None)
            if metrics is None or not metrics.enabled:
                return func(self, *args, **kwargs)

            start = time.perf_counter()
            try:
                return func(self, *args, **kwargs)
            finally:
                duration_ms = (time.perf_counter() - start) * 1000.0
                metrics.record_timing(op_name, duration_ms)
                logger.debug(f"{op_name} took {duration_ms:.2f}ms")

        return wrapper
    return decorator
