"""CLI entrypoint for the example row generator."""

from __future__ import annotations

import os
import sys
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from gen_examples.cities import build_city_pool
from gen_examples.config import load_config
from gen_examples.exceptions import (
    CityPoolExhaustedError,
    EmptyCityPoolError,
    InvalidArgumentsError,
    OutputFlushError,
)
from gen_examples.models import StopReason
from gen_examples.rows import flush_sink, stream_rows
from gen_examples.sampling import derive_streams

app = typer.Typer(
    help="Generate '<city>;<value>' example rows on standard output.",
    add_completion=False,
)
# Standard output carries the generated rows; everything else goes to stderr.
console = Console(stderr=True)


def _vprint(enabled: bool, message: str) -> None:
    """Print verbose progress messages."""
    if enabled:
        console.print(f"[cyan]verbose:[/cyan] {escape(message)}")


def _fail(message: str, code: int) -> typer.Exit:
    console.print(f"[red]{escape(message)}[/red]")
    return typer.Exit(code=code)


@app.command()
def generate(
    max_cities: Annotated[
        int,
        typer.Argument(min=0, help="Maximum number of distinct cities to generate."),
    ],
    rows: Annotated[
        int,
        typer.Argument(min=0, help="Number of rows to generate."),
    ],
    seed: Annotated[
        int | None,
        typer.Argument(min=0, help="Seed for reproducible output. Random when omitted."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose/--no-verbose", help="Print progress to stderr."),
    ] = False,
) -> None:
    """Write ROWS lines of '<city>;<value>' sampled from MAX_CITIES random cities."""
    try:
        config = load_config(overrides={"max_cities": max_cities, "rows": rows, "seed": seed})
    except InvalidArgumentsError as exc:
        raise _fail(str(exc), code=2) from exc

    seed_label = "entropy" if config.seed is None else str(config.seed)
    _vprint(verbose, f"Seeding sampling streams from {seed_label}.")
    streams = derive_streams(config.seed)

    try:
        cities = build_city_pool(config.max_cities, streams.name_length, streams.name_chars)
    except CityPoolExhaustedError as exc:
        raise _fail(str(exc), code=3) from exc
    _vprint(verbose, f"Built city pool with {len(cities)} names.")

    sink = sys.stdout
    try:
        report = stream_rows(cities, config.rows, streams.city, streams.value, sink)
    except EmptyCityPoolError as exc:
        raise _fail(str(exc), code=3) from exc

    if report.stop_reason == StopReason.BROKEN_PIPE:
        _silence_stdout()
        return
    if report.stop_reason == StopReason.WRITE_ERROR:
        console.print(f"[red]Error writing to STDOUT: {escape(report.error or '')}[/red]")

    try:
        flushed = flush_sink(sink)
    except OutputFlushError as exc:
        raise _fail(str(exc), code=5) from exc
    if not flushed:
        _silence_stdout()
        return

    if report.stop_reason == StopReason.WRITE_ERROR:
        raise typer.Exit(code=4)
    _vprint(verbose, f"Wrote {report.rows_written} rows.")


def _silence_stdout() -> None:
    """Point the stdout descriptor at devnull once the reader has gone away.

    Rows still sitting in the buffer are discarded instead of failing again
    when the interpreter flushes stdout at exit.
    """
    try:
        fileno = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fileno)
    finally:
        os.close(devnull)


def main() -> None:
    """Script entrypoint."""
    app()


if __name__ == "__main__":
    main()
