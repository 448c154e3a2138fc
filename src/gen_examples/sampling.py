"""Seeded random streams for each sampling purpose."""

from __future__ import annotations

import random
from dataclasses import dataclass

_STREAM_SEED_BITS = 64


@dataclass(frozen=True, slots=True)
class SamplingStreams:
    """Independent generators, one per sampled quantity."""

    name_length: random.Random
    name_chars: random.Random
    value: random.Random
    city: random.Random


def derive_streams(seed: int | None = None) -> SamplingStreams:
    """Seed a root generator and derive one child generator per stream.

    The root is seeded from OS entropy when ``seed`` is None. Children are
    derived in a fixed order, so a given seed always yields the same streams,
    and the number of draws taken from one stream never shifts another.
    """
    root = random.Random(seed)
    return SamplingStreams(
        name_length=_child(root),
        name_chars=_child(root),
        value=_child(root),
        city=_child(root),
    )


def _child(root: random.Random) -> random.Random:
    return random.Random(root.getrandbits(_STREAM_SEED_BITS))
