from __future__ import annotations

from gen_examples.models import StopReason, StreamReport


def test_stream_report_defaults_to_completed() -> None:
    report = StreamReport(rows_requested=4)

    assert report.rows_written == 0
    assert report.stop_reason == StopReason.COMPLETED
    assert not report.stopped_early


def test_stop_reason_values_are_strings() -> None:
    assert StopReason.BROKEN_PIPE == "broken_pipe"
    assert StreamReport(rows_requested=1, stop_reason="write_error").stopped_early
