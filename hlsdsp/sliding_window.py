"""Half-overlapping sliding window over a stream of sample blocks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class SlidingWindow(Generic[T]):
    """Builds windows of ``length`` samples, half old and half new.

    Each pushed block of ``length // 2`` samples yields a window made of the
    previous block (zeros at first) followed by the new block.
    """

    def __init__(self, length: int) -> None:
        if length < 2 or length % 2:
            raise ValueError(f"window length must be an even number >= 2, got {length}")
        self.length = length
        self._delay: deque = deque([0] * (length // 2), maxlen=length // 2)

    def push_block(self, samples: Iterable[T]) -> list[T]:
        """Shift in one block of ``length // 2`` samples and return the window."""
        block = list(samples)
        half = self.length // 2
        if len(block) != half:
            raise ValueError(f"expected a block of {half} samples, got {len(block)}")
        delayed = []
        for sample in block:
            delayed.append(self._delay[0])
            self._delay.append(sample)
        return delayed + block