from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from socnet.graph import NetworkModel
from socnet.performance_profiler import (
    PerformanceProfiler,
    get_profiler,
    profile_operation,
    profile_phase,
)


@pytest.mark.unit
def test_phases_attach_to_operation():
    with profile_operation("outer", {"size": 3}) as report:
        with profile_phase("first", "outer"):
            pass
        with profile_phase("second", "outer", {"note": "x"}):
            pass

    assert [phase.name for phase in report.phases] == ["first", "second"]
    assert report.total_duration_ms >= 0
    assert report in get_profiler().get_all_reports()
    text = report.format_report()
    assert text.startswith("outer:")
    assert "size: 3" in text
    assert "second" in text


@pytest.mark.unit
def test_model_build_is_profiled():
    NetworkModel.from_pairs([("a", "b")])
    reports = [r for r in get_profiler().get_all_reports() if r.operation == "build_network_model"]
    assert len(reports) == 1
    assert reports[0].metadata == {"pairs": 1}
    assert [phase.name for phase in reports[0].phases] == ["add_relations"]


@pytest.mark.unit
def test_disabled_profiler_records_nothing():
    PerformanceProfiler.disable()
    try:
        with profile_operation("skipped") as report:
            with profile_phase("inner", "skipped"):
                pass
    finally:
        PerformanceProfiler.enable()
    assert report is None
    assert get_profiler().get_all_reports() == []


@pytest.mark.unit
def test_same_operation_on_two_threads_keeps_separate_reports(caplog):
    barrier = threading.Barrier(2)
    reports = {}

    def worker(tag):
        with profile_operation("shared", {"tag": tag}) as report:
            barrier.wait(timeout=5)
            with profile_phase(f"phase-{tag}", "shared"):
                pass
            barrier.wait(timeout=5)
        reports[tag] = report

    with caplog.at_level(logging.WARNING, logger="socnet.performance_profiler"):
        threads = [threading.Thread(target=worker, args=(tag,)) for tag in ("a", "b")]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    assert "No active report" not in caplog.text
    assert [phase.name for phase in reports["a"].phases] == ["phase-a"]
    assert [phase.name for phase in reports["b"].phases] == ["phase-b"]
    assert len(get_profiler().get_all_reports()) == 2


@pytest.mark.unit
def test_concurrent_summaries_agree(analytics_for, star_pairs):
    analytics = analytics_for(star_pairs)
    expected = analytics.summary()
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda _: analytics.summary(), range(16)))
    assert all(result == expected for result in results)


@pytest.mark.unit
def test_finished_history_is_bounded():
    profiler = PerformanceProfiler(max_finished=3)
    for i in range(5):
        profiler.start_report(f"op{i}")
        profiler.finish_report(f"op{i}", 1.0)
    assert [report.operation for report in profiler.get_all_reports()] == ["op2", "op3", "op4"]
