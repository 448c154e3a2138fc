"""Core typed models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

MAX_SEED = 2**64


class StopReason(StrEnum):
    """Why row emission ended."""

    COMPLETED = "completed"
    BROKEN_PIPE = "broken_pipe"
    WRITE_ERROR = "write_error"


class GeneratorConfig(BaseModel):
    """Runtime configuration resolved from the command line."""

    max_cities: int = Field(ge=0)
    rows: int = Field(ge=0)
    seed: int | None = Field(default=None, ge=0, lt=MAX_SEED)


class StreamReport(BaseModel):
    """Result of a row streaming run."""

    rows_requested: int
    rows_written: int = 0
    stop_reason: StopReason = StopReason.COMPLETED
    error: str | None = None

    @property
    def stopped_early(self) -> bool:
        return self.stop_reason != StopReason.COMPLETED
