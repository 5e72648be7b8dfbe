from __future__ import annotations

from typing import Optional, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class SamplingSource(Protocol):
    def uniform(self, low: int, high: int) -> int:
        ...


class Sampler:
    """
    Uniform integer source over inclusive ranges.

    Without a seed the generator is initialised from OS entropy; with a
    seed every draw sequence is reproducible.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        if low == high:
            return low
        return int(self._rng.integers(low, high, endpoint=True))


def choose(sampler: SamplingSource, items: Sequence[T]) -> T:
    """
    Pick one element of a non-empty sequence by index.
    """
    return items[sampler.uniform(0, len(items) - 1)]
