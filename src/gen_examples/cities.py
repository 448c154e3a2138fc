"""Random city name pool generation."""

from __future__ import annotations

import random
import string

from gen_examples.exceptions import CityPoolExhaustedError

DELIMITER = ";"
CITY_NAME_ALPHABET = string.ascii_letters + string.digits
MIN_CITY_NAME_LEN = 1
MAX_CITY_NAME_LEN = 32  # inclusive
DEFAULT_MAX_ATTEMPTS = 10_000


def generate_city_name(length_rng: random.Random, char_rng: random.Random) -> str:
    """Sample one ASCII alphanumeric name of random length."""
    length = length_rng.randint(MIN_CITY_NAME_LEN, MAX_CITY_NAME_LEN)
    return "".join(char_rng.choice(CITY_NAME_ALPHABET) for _ in range(length))


def build_city_pool(
    count: int,
    length_rng: random.Random,
    char_rng: random.Random,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> tuple[str, ...]:
    """Generate ``count`` unique city names, returned sorted.

    Candidates containing the delimiter or repeating an accepted name are
    redrawn. A slot that sees ``max_attempts`` rejections in a row raises
    CityPoolExhaustedError.
    """
    if count < 0:
        raise ValueError(f"City count must be non-negative, got {count}.")
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}.")

    cities: set[str] = set()
    for slot in range(count):
        for _ in range(max_attempts):
            name = generate_city_name(length_rng, char_rng)
            if DELIMITER in name:
                continue
            if name not in cities:
                cities.add(name)
                break
        else:
            raise CityPoolExhaustedError(
                f"City pool exhausted: no new unique name for slot {slot + 1} of {count} "
                f"after {max_attempts} attempts."
            )
    # Sorted so the order does not depend on string hashing.
    return tuple(sorted(cities))
