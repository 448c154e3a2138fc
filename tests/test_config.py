from __future__ import annotations

import pytest

from gen_examples.config import load_config
from gen_examples.exceptions import InvalidArgumentsError
from gen_examples.models import MAX_SEED


def test_load_config_accepts_cli_values() -> None:
    config = load_config(overrides={"max_cities": 5, "rows": 3, "seed": 42})

    assert config.max_cities == 5
    assert config.rows == 3
    assert config.seed == 42


def test_load_config_skips_missing_seed() -> None:
    config = load_config(overrides={"max_cities": 5, "rows": 3, "seed": None})

    assert config.seed is None


def test_load_config_accepts_largest_unsigned_seed() -> None:
    config = load_config(overrides={"max_cities": 1, "rows": 1, "seed": MAX_SEED - 1})

    assert config.seed == MAX_SEED - 1


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_cities": -1, "rows": 3},
        {"max_cities": 5, "rows": -3},
        {"max_cities": 5, "rows": 3, "seed": -1},
        {"max_cities": 5, "rows": 3, "seed": MAX_SEED},
        {"rows": 3},
    ],
)
def test_load_config_rejects_invalid_values(overrides: dict[str, int]) -> None:
    with pytest.raises(InvalidArgumentsError, match="Invalid arguments"):
        load_config(overrides=overrides)
