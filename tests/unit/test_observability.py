"""
Unit Tests for Session Metrics
==============================

Tests for the metrics a Session collects:
- @timed analyses on the caller's thread
- walk outcomes recorded by the RandomWalker, including from its thread
- concurrent recording into one collector
"""

import random
import threading

import pytest

from wordgraph import Session, WordGraph, WordGraphConfig
from wordgraph.observability import MetricsCollector, timed
from wordgraph.walk import RandomWalker


@pytest.fixture
def metered_session(walk_config):
    return Session.from_text("a b c", config=walk_config, enable_metrics=True)


class TestSessionTimings:
    """Session analyses are timed when metrics are enabled."""

    def test_disabled_by_default(self, walk_config):
        session = Session.from_text("a b c", config=walk_config)
        session.calc_shortest_path("a")
        session.random_walks()
        assert session.get_metrics() == {}
        assert session.get_metrics_summary() == "No metrics collected."

    def test_analyses_are_timed(self, metered_session):
        metered_session.query_bridge_words("a", "c")
        metered_session.calc_shortest_path("a", "c")
        metered_session.calc_shortest_path("b")
        metered_session.cal_page_rank("b")

        stats = metered_session.get_metrics()
        assert stats["build"]["count"] == 1
        assert stats["query_bridge_words"]["count"] == 1
        assert stats["shortest_path_report"]["count"] == 2
        assert stats["page_rank_table"]["count"] == 1
        timing = stats["shortest_path_report"]
        assert 0 <= timing["min_ms"] <= timing["avg_ms"] <= timing["max_ms"]

    def test_failing_call_is_still_timed(self, metered_session):
        class Broken:
            _metrics = metered_session._metrics

            @timed("explode")
            def explode(self):
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            Broken().explode()
        assert metered_session.get_metrics()["explode"]["count"] == 1

    def test_reset(self, metered_session):
        metered_session.reset_metrics()
        assert metered_session.get_metrics() == {}


class TestWalkMetrics:
    """Finished walks record their terminal state and step count."""

    def test_synchronous_walk(self, metered_session):
        words = metered_session.random_walks().split(" -> ")
        stats = metered_session.get_metrics()
        assert stats["walk_terminated_no_neighbors"] == {"count": 1}
        assert stats["walk_steps"] == {"count": len(words)}
        assert stats["random_walks"]["count"] == 1

    def test_background_walk_records_from_its_thread(self, metered_session):
        metered_session.start_walk(walk_delay=False)
        result = metered_session.wait_walk()
        stats = metered_session.get_metrics()
        assert stats["walk_terminated_no_neighbors"] == {"count": 1}
        assert stats["walk_steps"] == {"count": len(result.path)}

    def test_steps_accumulate_across_walks(self, walk_config):
        session = Session.from_text("x x", config=walk_config, enable_metrics=True)
        session.random_walks()
        session.random_walks()
        stats = session.get_metrics()
        # "x x" always walks x -> x and stops on the repeated self-loop
        assert stats["walk_terminated_cycle"] == {"count": 2}
        assert stats["walk_steps"] == {"count": 4}

    def test_failed_walk_is_counted(self, tmp_path):
        config = WordGraphConfig(random_seed=0, walk_log_path=str(tmp_path))
        session = Session.from_text("a b", config=config, enable_metrics=True)
        session.random_walks()
        assert session.get_metrics()["walk_failed"] == {"count": 1}

    def test_walker_without_collector(self, tmp_path):
        walker = RandomWalker(
            WordGraph.from_text("a b"),
            rng=random.Random(0),
            log_path=str(tmp_path / "walk_log.txt"),
        )
        assert walker.walk().path[-1] == "b"

    def test_summary_lists_walk_counts(self, metered_session):
        metered_session.random_walks()
        summary = metered_session.get_metrics_summary()
        assert summary.startswith("Session metrics")
        assert "walk_steps" in summary
        assert "random_walks" in summary


class TestCollector:
    """MetricsCollector behavior the Session relies on."""

    def test_disabled_collector_ignores_records(self):
        metrics = MetricsCollector(enabled=False)
        metrics.record_timing("build", 1.0)
        metrics.record_count("walks_cancelled")
        metrics.record_walk("cancelled", 3)
        assert metrics.get_all_stats() == {}

    def test_unknown_metric(self):
        assert MetricsCollector().get_operation_stats("nothing") == {}

    def test_concurrent_records_are_not_lost(self):
        metrics = MetricsCollector()

        def record():
            for _ in range(1000):
                metrics.record_walk("terminated_cycle", 2)
                metrics.record_timing("build", 0.5)

        threads = [threading.Thread(target=record) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert metrics.get_operation_stats("walk_terminated_cycle") == {"count": 8000}
        assert metrics.get_operation_stats("walk_steps") == {"count": 16000}
        assert metrics.get_operation_stats("build")["count"] == 8000
