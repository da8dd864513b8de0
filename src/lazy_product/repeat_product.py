from __future__ import annotations
from typing import Any, List, Optional, Sequence, Tuple

from lazy_product.base_product import BaseProductIter, check_repeat
from lazy_product.product_conf import ProductConfig


class RepeatProductIter(BaseProductIter):
    """
    All length-`repeat` tuples over `source`, with repetition, in lexicographic
    order of the element indices:

        >>> list(RepeatProductIter("ab", 2))
        [('a', 'a'), ('a', 'b'), ('b', 'a'), ('b', 'b')]

    Yields len(source) ** repeat tuples; exactly one empty tuple for repeat=0.
    """

    def __init__(self, source: Sequence[Any], repeat: int, config: Optional[ProductConfig] = None):
        self.repeat: int = check_repeat(repeat)
        super().__init__([source], config)
        self._log(f"repeat={self.repeat} radix={self._lengths[0]} total={self.total}")

    @property
    def source(self) -> Sequence[Any]:
        return self._sources[0]

    def _radices(self) -> Sequence[int]:
        return (self._lengths[0],) * self.repeat

    def _build_item(self, digits: List[int]) -> Tuple[Any, ...]:
        src = self._sources[0]
        return tuple(src[d] for d in digits)


def product_with_repeat(source: Sequence[Any], repeat: int,
                        config: Optional[ProductConfig] = None) -> RepeatProductIter:
    return RepeatProductIter(source, repeat, config)
