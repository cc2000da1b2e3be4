"""Timing helpers for model construction and analytics passes.

Provides context managers that record how long each phase of an operation
takes and log the resulting report.
"""
from __future__ import annotations

import logging
import threading
import time
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

MAX_FINISHED_REPORTS = 256


@dataclass
class TimingMetric:
    """Container for a single timing measurement."""

    name: str
    duration_ms: float
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        meta_str = ", ".join(f"{k}={v}" for k, v in self.metadata.items()) if self.metadata else ""
        return f"{self.name}: {self.duration_ms:.2f}ms" + (f" ({meta_str})" if meta_str else "")


@dataclass
class PerformanceReport:
    """Aggregated timings for one operation."""

    operation: str
    total_duration_ms: float = 0.0
    phases: List[TimingMetric] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_phase(self, phase: TimingMetric) -> None:
        self.phases.append(phase)

    def format_report(self) -> str:
        lines = [f"{self.operation}: {self.total_duration_ms:.2f}ms"]
        for key, value in self.metadata.items():
            lines.append(f"  {key}: {value}")
        for phase in sorted(self.phases, key=lambda p: p.duration_ms, reverse=True):
            lines.append(f"  - {phase}")
        return "\n".join(lines)


class PerformanceProfiler:
    """Process-wide registry of in-flight and finished reports.

    In-flight reports are keyed by (operation, thread id) so the same
    operation can run on several threads at once. Only the most recent
    ``max_finished`` reports are kept.
    """

    _enabled = True

    def __init__(self, max_finished: int = MAX_FINISHED_REPORTS) -> None:
        self._lock = threading.Lock()
        self._active: Dict[Tuple[str, int], PerformanceReport] = {}
        self._finished: Deque[PerformanceReport] = deque(maxlen=max_finished)

    @classmethod
    def enable(cls) -> None:
        cls._enabled = True

    @classmethod
    def disable(cls) -> None:
        cls._enabled = False

    @classmethod
    def is_enabled(cls) -> bool:
        return cls._enabled

    @staticmethod
    def _key(operation: str) -> Tuple[str, int]:
        return operation, threading.get_ident()

    def start_report(self, operation: str, metadata: Optional[Dict[str, Any]] = None) -> PerformanceReport:
        report = PerformanceReport(operation=operation, metadata=dict(metadata or {}))
        with self._lock:
            self._active[self._key(operation)] = report
        return report

    def finish_report(self, operation: str, duration_ms: float) -> Optional[PerformanceReport]:
        with self._lock:
            report = self._active.pop(self._key(operation), None)
            if report is not None:
                report.total_duration_ms = duration_ms
                self._finished.append(report)
        if report is None:
            logger.warning(f"No active report found for operation: {operation}")
        return report

    def add_phase_to_report(self, operation: str, phase: TimingMetric) -> None:
        with self._lock:
            report = self._active.get(self._key(operation))
            if report is not None:
                report.add_phase(phase)

    def get_all_reports(self) -> List[PerformanceReport]:
        with self._lock:
            return list(self._finished)

    def clear_reports(self) -> None:
        with self._lock:
            self._active.clear()
            self._finished.clear()


_profiler = PerformanceProfiler()


def get_profiler() -> PerformanceProfiler:
    """Get the global profiler instance."""
    return _profiler


@contextmanager
def profile_operation(operation: str, metadata: Optional[Dict[str, Any]] = None, verbose: bool = False):
    """Time a whole operation; phases opened with the same name attach to it.

    Usage:
        with profile_operation("build_network_model", {"pairs": 120}):
            with profile_phase("register_users", "build_network_model"):
                ...
    """
    if not PerformanceProfiler.is_enabled():
        yield None
        return

    report = _profiler.start_report(operation, metadata)
    start = time.perf_counter()
    try:
        yield report
    finally:
        final_report = _profiler.finish_report(operation, (time.perf_counter() - start) * 1000)
        if final_report is not None:
            if verbose:
                logger.info(final_report.format_report())
            else:
                logger.debug(final_report.format_report())


@contextmanager
def profile_phase(phase_name: str, operation: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
    """Time a phase, attaching it to ``operation``'s report when one is open."""
    if not PerformanceProfiler.is_enabled():
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        metric = TimingMetric(name=phase_name, duration_ms=duration_ms, metadata=metadata or {})
        if operation:
            _profiler.add_phase_to_report(operation, metric)
        logger.debug(f"Phase [{phase_name}]: {duration_ms:.2f}ms")
