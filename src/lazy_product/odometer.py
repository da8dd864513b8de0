from __future__ import annotations
from typing import Any, List, Sequence, Tuple
import math
import operator

import numpy as np


def as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an int, got {type(value).__name__}") from None


class Odometer:
    """
    Mixed-radix counter, least significant digit rightmost.
    radices[i] is the number of values digit i can take (the length of the
    source feeding that position). Digits start at zero; `completed` flips to
    True once the counter runs past its last combination and never flips back.
    """

    def __init__(self, radices: Sequence[int]):
        self.radices: Tuple[int, ...] = tuple(int(r) for r in radices)
        if any(r < 0 for r in self.radices):
            raise ValueError(f"radices must be >= 0, got {self.radices}")
        self.digits: List[int] = [0] * len(self.radices)
        # a zero radix leaves no valid digit for its position -> nothing to enumerate
        self.completed: bool = 0 in self.radices

    def __repr__(self) -> str:
        return f"Odometer(radices={self.radices}, digits={self.digits}, completed={self.completed})"

    @property
    def total(self) -> int:
        return math.prod(self.radices)

    @property
    def position(self) -> int:
        """Rank of the current digits in lexicographic order (== total once completed)."""
        if self.completed:
            return self.total
        pos = 0
        for d, r in zip(self.digits, self.radices):
            pos = pos * r + d
        return pos

    @property
    def remaining(self) -> int:
        return self.total - self.position

    def increment(self) -> None:
        for i in reversed(range(len(self.digits))):
            self.digits[i] += 1
            if self.digits[i] < self.radices[i]:
                return
            self.digits[i] = 0  # carry
        # carry ran past the most significant digit
        self.completed = True

    def seek(self, position: int) -> None:
        position = as_int(position, "position")
        total = self.total
        if not (0 <= position <= total):
            raise IndexError(f"position {position} out of range [0, {total}]")
        if self.completed:
            if position == total:
                return
            raise RuntimeError("cannot seek a completed odometer")
        if position == total:
            self.digits = [0] * len(self.radices)
            self.completed = True
            return
        for i in reversed(range(len(self.digits))):
            position, self.digits[i] = divmod(position, self.radices[i])

    def take_digits(self, count: int) -> np.ndarray:
        """
        Returns the next `count` digit rows (fewer if the odometer runs out)
        as int64 array of shape (rows, len(radices)) and advances past them.
        """
        count = as_int(count, "count")
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        n = min(count, self.remaining)
        out = np.empty((n, len(self.radices)), dtype=np.int64)
        for row in range(n):
            out[row] = self.digits
            self.increment()
        return out
