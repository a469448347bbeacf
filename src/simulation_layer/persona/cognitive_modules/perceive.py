"""
Perceive module: samples the conditions the agent finds in its environment.

Weather, traffic, bus crowding and local goods availability are unbiased
coin flips. The source of those flips is injectable so a run can be
replayed from a fixed sequence.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator, Optional, Sequence

import numpy as np

from .base import CognitiveModule


class BinarySource(ABC):
    """Produces 0 or 1 on every call."""

    @abstractmethod
    def next(self) -> int:
        ...


class RandomBinarySource(BinarySource):
    """Independent uniform 0/1 draws. Unseeded unless a seed is given."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def next(self) -> int:
        return int(self._rng.integers(0, 2))


class ScriptedBinarySource(BinarySource):
    """Replays a fixed sequence of 0/1 values. Raises once the script runs out."""

    def __init__(self, values: Iterable[int]):
        self._values: Iterator[int] = iter(values)

    def next(self) -> int:
        try:
            value = next(self._values)
        except StopIteration:
            raise RuntimeError("Scripted binary source is exhausted") from None
        if value not in (0, 1):
            raise ValueError(f"Binary source values must be 0 or 1, got {value!r}")
        return int(value)


class PerceiveModule(CognitiveModule):
    """
    Samples one fresh draw per named factor, in the order given.
    """

    def __init__(self, source: BinarySource):
        self.source = source

    def process(self, factors: Sequence[str]) -> Dict[str, int]:
        return {name: self.source.next() for name in factors}
