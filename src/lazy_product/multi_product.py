from __future__ import annotations
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, Tuple

from lazy_product.base_product import BaseProductIter
from lazy_product.product_conf import ProductConfig


class MultiProductIter(BaseProductIter):
    """
    Cartesian product of N independent sources. Position i of every tuple
    comes from sources[i] and its digit wraps at len(sources[i]).

        >>> list(MultiProductIter([["A", "B"], [1, 2, 3]]))
        [('A', 1), ('A', 2), ('A', 3), ('B', 1), ('B', 2), ('B', 3)]
    """

    def __init__(self, sources: Sequence[Sequence[Any]], config: Optional[ProductConfig] = None):
        if isinstance(sources, Mapping) or not (hasattr(sources, "__len__") and hasattr(sources, "__getitem__")):
            raise TypeError(f"sources must be a sequence of sources, got {type(sources).__name__}")
        super().__init__(sources, config)
        self._log(f"sources={len(self._sources)} radices={self._lengths} total={self.total}")

    @property
    def sources(self) -> Tuple[Sequence[Any], ...]:
        return tuple(self._sources)

    def _radices(self) -> Sequence[int]:
        return self._lengths

    def _build_item(self, digits: List[int]) -> Tuple[Any, ...]:
        return tuple(src[d] for src, d in zip(self._sources, digits))


def product(sources: Sequence[Sequence[Any]], config: Optional[ProductConfig] = None) -> MultiProductIter:
    return MultiProductIter(sources, config)
