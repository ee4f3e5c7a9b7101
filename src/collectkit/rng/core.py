"""Random-number wrappers.

Module-level functions draw from a shared `RandomSource`. Seed it for
reproducible draws:

    from collectkit import rng

    rng.seed(42)
    rng.random_int(0, 10)

    # Or build an independent source from settings
    source = RandomSource.from_settings(RandomSettings(seed=7))
"""

from __future__ import annotations

import random as _random
from collections.abc import MutableSequence, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collectkit.config.settings import RandomSettings


class RandomSource:
    """Thin wrapper around `random.Random` with the collectkit draw helpers.

    Args:
        seed: Seed for the generator; None seeds from system entropy.
        bit_probability: Default probability used by `random_bit()`.
    """

    def __init__(self, seed: int | None = None, bit_probability: float = 0.5):
        if not 0.0 <= bit_probability <= 1.0:
            raise ValueError(f"bit_probability must be within [0, 1], got {bit_probability}")
        self._random = _random.Random(seed)
        self.bit_probability = bit_probability

    @classmethod
    def from_settings(cls, settings: RandomSettings | None = None) -> RandomSource:
        """Create a source configured from `RandomSettings`.

        Args:
            settings: Settings to use; loaded from the environment when omitted.

        Returns:
            New RandomSource.
        """
        if settings is None:
            from collectkit.config.settings import RandomSettings

            settings = RandomSettings()
        return cls(seed=settings.seed, bit_probability=settings.bit_probability)

    def seed(self, value: int | None = None) -> None:
        """Reseed the generator."""
        self._random.seed(value)

    def random(self, min: float = 0.0, max: float = 1.0) -> float:
        """Uniform float in `[min, max)`."""
        return min + self._random.random() * (max - min)

    def random_int(self, min: int = 0, max: int = 2) -> int:
        """Uniform integer in `[min, max)`.

        Raises:
            ValueError: If the range is empty.
        """
        if max <= min:
            raise ValueError(f"Empty range for random_int({min}, {max})")
        return self._random.randrange(min, max)

    def random_bit(self, p: float | None = None) -> bool:
        """Return True with probability `p` (the configured default when omitted)."""
        threshold = self.bit_probability if p is None else p
        return self._random.random() < threshold

    def choice[T](self, seq: Sequence[T]) -> T:
        """Pick a random element.

        Raises:
            IndexError: If `seq` is empty.
        """
        return self._random.choice(seq)

    def shuffle[T](self, lst: MutableSequence[T]) -> MutableSequence[T]:
        """Shuffle `lst` in place and return it."""
        self._random.shuffle(lst)
        return lst

    def sample[T](self, seq: Sequence[T], k: int) -> list[T]:
        """Return `k` distinct elements chosen without replacement.

        Raises:
            ValueError: If `k` exceeds the number of elements.
        """
        return self._random.sample(list(seq), k)


# Module-level source instance
_source = RandomSource()


def get_source() -> RandomSource:
    """Access the shared random source used by the module functions."""
    return _source


def seed(value: int | None = None) -> None:
    """Reseed the shared random source."""
    _source.seed(value)


def random(min: float = 0.0, max: float = 1.0) -> float:
    return _source.random(min, max)


def random_int(min: int = 0, max: int = 2) -> int:
    return _source.random_int(min, max)


def random_bit(p: float | None = None) -> bool:
    return _source.random_bit(p)


def choice(seq: Sequence[Any]) -> Any:
    return _source.choice(seq)


def shuffle(lst: MutableSequence[Any]) -> MutableSequence[Any]:
    return _source.shuffle(lst)


def sample(seq: Sequence[Any], k: int) -> list[Any]:
    return _source.sample(seq, k)
