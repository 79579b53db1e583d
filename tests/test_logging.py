"""
Tests for the logging module.
"""

from watch_quotes.logging import (
    PipelineTimer,
    add_context_info,
    get_source_name,
    get_trace_id,
    logging_context,
)


class TestLoggingContext:
    """Test logging context management."""

    def test_logging_context_sets_values(self):
        """Test that logging context sets values correctly."""
        with logging_context(trace_id="trace_123", source_name="chat.txt"):
            assert get_trace_id() == "trace_123"
            assert get_source_name() == "chat.txt"

    def test_logging_context_restores_values(self):
        """Test that context is restored after exiting."""
        with logging_context(trace_id="outer"):
            assert get_trace_id() == "outer"

            with logging_context(trace_id="inner"):
                assert get_trace_id() == "inner"

            assert get_trace_id() == "outer"

        assert get_trace_id() is None

    def test_logging_context_partial_values(self):
        """Test that partial context values work."""
        with logging_context(source_name="only.txt"):
            assert get_source_name() == "only.txt"
            assert get_trace_id() is None

    def test_processor_adds_context(self):
        with logging_context(trace_id="t1", source_name="s1"):
            event = add_context_info(None, "info", {"event": "x"})

        assert event == {"event": "x", "trace_id": "t1", "source_name": "s1"}

    def test_processor_without_context(self):
        assert add_context_info(None, "info", {"event": "x"}) == {"event": "x"}


class TestPipelineTimer:
    """Test pipeline timing functionality."""

    def test_timer_records_stages(self):
        """Test that timer records stage durations."""
        timer = PipelineTimer()

        with timer.stage("segmentation"):
            pass

        with timer.stage("assembly"):
            pass

        assert timer.stages["segmentation"] >= 0
        assert timer.stages["assembly"] >= 0

    def test_timer_summary(self):
        timer = PipelineTimer()
        timer.stages["segmentation"] = 1.234

        summary = timer.summary()

        assert summary["stages"] == {"segmentation": 1.23}
        assert summary["total_ms"] >= 0
