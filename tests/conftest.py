from __future__ import annotations

import errno
import io
import re

import pytest

ROW_RE = re.compile(r"^(?P<city>[A-Za-z0-9]{1,32});(?P<value>-?\d+\.\d)$")


class FailingSink(io.StringIO):
    """Text sink that raises once a number of writes have succeeded."""

    def __init__(self, fail_after: int, error: OSError) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.error = error
        self.writes = 0

    def write(self, text: str) -> int:
        if self.writes >= self.fail_after:
            raise self.error
        self.writes += 1
        return super().write(text)


class FailingFlushSink(io.StringIO):
    def __init__(self, error: OSError) -> None:
        super().__init__()
        self.error = error

    def flush(self) -> None:
        raise self.error


def parse_rows(text: str) -> list[tuple[str, float]]:
    rows: list[tuple[str, float]] = []
    for line in text.splitlines():
        match = ROW_RE.match(line)
        assert match is not None, f"Malformed row: {line!r}"
        rows.append((match.group("city"), float(match.group("value"))))
    return rows


@pytest.fixture
def broken_pipe_sink() -> FailingSink:
    return FailingSink(fail_after=3, error=BrokenPipeError(errno.EPIPE, "Broken pipe"))


@pytest.fixture
def disk_full_sink() -> FailingSink:
    return FailingSink(fail_after=2, error=OSError(errno.ENOSPC, "No space left on device"))
