from __future__ import annotations
import typing
import logging
from collections import Counter
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import MutableSeq

logger = logging.getLogger(__name__)


def make_pairs(data: List[T], transform: Selector[T, U], weight: Weigher[T]) -> List[WeightedPair]:
    """
    weighted pairs over every unordered pair of elements with distinct keys.

    each element is mapped through transform before pairing. for each
    pair the weight is computed once, as weight(later, earlier), and both
    directions are emitted with it. pairs whose keys are equal, or where
    either key is None, produce nothing.
    """
    result = []
    for i in range(len(data) - 1, -1, -1):
        later = data[i]
        first = transform(later)
        for j in range(i):
            earlier = data[j]
            second = transform(earlier)
            if first is None or second is None or first == second:
                continue
            w = float(weight(later, earlier))
            result.append(WeightedPair(first, second, w))
            result.append(WeightedPair(second, first, w))
    logger.debug(f"generated {len(result)} weighted pairs from {len(data)} elements")
    return result


def pair_count(data: List[T], transform: Selector[T, U]) -> int:
    """number of entries make_pairs would produce, without computing weights. keys must be hashable"""
    counts = Counter(key for key in (transform(item) for item in data) if key is not None)
    n = sum(counts.values())
    # ordered pairs minus the ones that share a key
    return n * (n - 1) - sum(c * (c - 1) for c in counts.values())


class PairAccessor(Generic[T]):
    def __init__(self, seq_instance: 'MutableSeq[T]'):
        self._seq = seq_instance

    def make(self, transform: Selector[T, U], weight: Weigher[T]) -> 'MutableSeq[WeightedPair]':
        """weighted pairs of all distinct-keyed elements; the sequence is kept"""
        from ..sequence import MutableSeq
        return MutableSeq(make_pairs(self._seq._get_data('pairs.make'), transform, weight))

    def count(self, transform: Selector[T, U]) -> int:
        return pair_count(self._seq._get_data('pairs.count'), transform)
