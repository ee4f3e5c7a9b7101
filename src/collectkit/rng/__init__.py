"""Random-number wrappers around the standard library generator."""

from collectkit.rng.core import (
    RandomSource,
    choice,
    get_source,
    random,
    random_bit,
    random_int,
    sample,
    seed,
    shuffle,
)

__all__ = [
    "RandomSource",
    "get_source",
    "seed",
    "random",
    "random_int",
    "random_bit",
    "choice",
    "shuffle",
    "sample",
]
