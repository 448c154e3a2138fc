"""Configuration loading and validation."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from gen_examples.exceptions import InvalidArgumentsError
from gen_examples.models import GeneratorConfig


def load_config(overrides: dict[str, Any] | None = None) -> GeneratorConfig:
    """Build config from explicit command-line values."""
    payload: dict[str, Any] = {}
    if overrides:
        for key, value in overrides.items():
            if value is not None:
                payload[key] = value

    try:
        return GeneratorConfig(**payload)
    except ValidationError as exc:
        raise InvalidArgumentsError(f"Invalid arguments: {_describe_errors(exc)}") from exc


def _describe_errors(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "value"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
