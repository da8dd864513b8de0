from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence, Tuple

from lazy_product.base_product import BaseProductIter, check_repeat
from lazy_product.product_conf import ProductConfig


class FixedRepeatProductIter(BaseProductIter):
    """
    Same enumeration as RepeatProductIter, but the tuple length is a class
    constant chosen by subscription instead of a constructor argument:

        >>> Pairs = FixedRepeatProductIter[2]
        >>> list(Pairs([0, 1]))
        [(0, 0), (0, 1), (1, 0), (1, 1)]

    FixedRepeatProductIter[R] is created once per R and cached, so
    `FixedRepeatProductIter[2] is FixedRepeatProductIter[2]`.
    """

    REPEAT: Optional[int] = None
    _sized: Dict[int, type] = {}

    def __class_getitem__(cls, repeat: int) -> type:
        if cls.REPEAT is not None:
            raise TypeError(f"{cls.__name__} already has a fixed repeat length")
        repeat = check_repeat(repeat)
        sized = FixedRepeatProductIter._sized.get(repeat)
        if sized is None:
            sized = type(
                f"FixedRepeatProductIter[{repeat}]",
                (FixedRepeatProductIter,),
                {"REPEAT": repeat, "__module__": cls.__module__, "__doc__": cls.__doc__},
            )
            FixedRepeatProductIter._sized[repeat] = sized
        return sized

    def __init__(self, source: Sequence[Any], config: Optional[ProductConfig] = None):
        if self.REPEAT is None:
            raise TypeError("repeat length missing: use FixedRepeatProductIter[R](source)")
        super().__init__([source], config)
        self._log(f"repeat={self.REPEAT} (fixed) radix={self._lengths[0]} total={self.total}")

    @property
    def source(self) -> Sequence[Any]:
        return self._sources[0]

    def _radices(self) -> Sequence[int]:
        return (self._lengths[0],) * self.REPEAT

    def _build_item(self, digits: List[int]) -> Tuple[Any, ...]:
        src = self._sources[0]
        slots: List[Any] = [None] * self.REPEAT
        for i, d in enumerate(digits):
            slots[i] = src[d]
        # every slot is filled here, the tuple is the only thing handed out
        return tuple(slots)


def fixed_product_with_repeat(source: Sequence[Any], repeat: int,
                              config: Optional[ProductConfig] = None) -> FixedRepeatProductIter:
    return FixedRepeatProductIter[repeat](source, config)
