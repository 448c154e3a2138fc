"""Row sampling and streaming to an output sink."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TextIO

from gen_examples.cities import DELIMITER
from gen_examples.exceptions import EmptyCityPoolError, OutputFlushError
from gen_examples.models import StopReason, StreamReport

MIN_VALUE = -999  # inclusive, tenths
MAX_VALUE = 999  # inclusive, tenths


def sample_value(rng: random.Random) -> float:
    """Sample a value in [-99.9, 99.9] with one fractional digit."""
    return rng.randint(MIN_VALUE, MAX_VALUE) / 10.0


def format_row(city: str, value: float) -> str:
    return f"{city}{DELIMITER}{value:.1f}\n"


def stream_rows(
    cities: Sequence[str],
    nof_rows: int,
    city_rng: random.Random,
    value_rng: random.Random,
    sink: TextIO,
) -> StreamReport:
    """Write ``nof_rows`` sampled rows to ``sink``.

    A broken pipe ends emission quietly. Any other OSError also ends emission
    and is recorded on the returned report. The sink is not flushed here.
    """
    if nof_rows < 0:
        raise ValueError(f"Row count must be non-negative, got {nof_rows}.")
    if not cities:
        raise EmptyCityPoolError("No cities provided!")

    written = 0
    stop_reason = StopReason.COMPLETED
    error: str | None = None
    for _ in range(nof_rows):
        city = city_rng.choice(cities)
        value = sample_value(value_rng)
        try:
            sink.write(format_row(city, value))
        except BrokenPipeError:
            stop_reason = StopReason.BROKEN_PIPE
            break
        except OSError as exc:
            stop_reason = StopReason.WRITE_ERROR
            error = str(exc)
            break
        written += 1
    return StreamReport(
        rows_requested=nof_rows,
        rows_written=written,
        stop_reason=stop_reason,
        error=error,
    )


def flush_sink(sink: TextIO) -> bool:
    """Flush buffered output. Returns False if the reader has gone away."""
    try:
        sink.flush()
    except BrokenPipeError:
        return False
    except OSError as exc:
        raise OutputFlushError(f"Error flushing buffer: {exc}") from exc
    return True
