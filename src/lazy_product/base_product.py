from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Iterator, List, Optional, Sequence, Tuple
import sys

import numpy as np

from lazy_product.odometer import Odometer, as_int
from lazy_product.product_conf import ProductConfig


def check_repeat(repeat: Any) -> int:
    repeat = as_int(repeat, "repeat")
    if repeat < 0:
        raise ValueError(f"repeat must be >= 0, got {repeat}")
    return repeat


def as_source(source: Any, snapshot: bool) -> Sequence[Any]:
    """Only finite, sized, integer-indexable collections are accepted."""
    if isinstance(source, Mapping):
        raise TypeError(f"mappings are not indexable by position: {type(source).__name__}")
    if not (hasattr(source, "__len__") and hasattr(source, "__getitem__")):
        raise TypeError(
            f"source must be a finite indexable sequence (len + indexing), got {type(source).__name__}"
        )
    return tuple(source) if snapshot else source


class BaseProductIter:
    """
    Lazy Cartesian product driven by an Odometer.

    Subclasses provide the radices and build the item for the current digits.
    Items hold the source's own element objects, so the sources have to stay
    alive and unchanged while the iterator and its items are in use.
    """

    def __init__(self, sources: Sequence[Sequence[Any]], config: Optional[ProductConfig] = None):
        self.cfg = config if config is not None else ProductConfig()
        self.cfg.validate()
        self._sources: List[Sequence[Any]] = [as_source(s, self.cfg.snapshot) for s in sources]
        self._lengths: Tuple[int, ...] = tuple(len(s) for s in self._sources)
        self._odometer = Odometer(self._radices())
        self._yielded = 0

    def _radices(self) -> Sequence[int]:
        raise NotImplementedError

    def _build_item(self, digits: List[int]) -> Tuple[Any, ...]:
        raise NotImplementedError

    def _log(self, msg: str) -> None:
        if self.cfg.verbose:
            print(f"{self.cfg.log_prefix} {msg}")

    def _check_stable(self) -> None:
        for i, (src, n) in enumerate(zip(self._sources, self._lengths)):
            if len(src) != n:
                raise RuntimeError(f"source {i} changed size during iteration ({n} -> {len(src)})")

    def __iter__(self) -> Iterator[Tuple[Any, ...]]:
        return self

    def __next__(self) -> Tuple[Any, ...]:
        odo = self._odometer
        if odo.completed:
            raise StopIteration
        if self.cfg.check_stable:
            self._check_stable()
        # read before the increment mutates the digits
        item = self._build_item(odo.digits)
        odo.increment()
        self._yielded += 1
        if odo.completed:
            self._log(f"exhausted after {self._yielded} items")
        return item

    def __length_hint__(self) -> int:
        remaining = self._odometer.remaining
        if remaining > sys.maxsize:
            return NotImplemented
        return remaining

    @property
    def total(self) -> int:
        return self._odometer.total

    @property
    def position(self) -> int:
        return self._odometer.position

    @property
    def remaining(self) -> int:
        return self._odometer.remaining

    @property
    def digits(self) -> Tuple[int, ...]:
        return tuple(self._odometer.digits)

    def seek(self, position: int) -> None:
        self._odometer.seek(position)

    def take_digits(self, count: int) -> np.ndarray:
        if self.cfg.check_stable:
            self._check_stable()
        odo = self._odometer
        was_completed = odo.completed
        rows = odo.take_digits(count)
        self._yielded += len(rows)
        if odo.completed and not was_completed:
            self._log(f"exhausted after {self._yielded} items")
        return rows
