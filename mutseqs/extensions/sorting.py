from __future__ import annotations
import typing
from ..types import *
from ..errors import EmptyInputError

if typing.TYPE_CHECKING:
    from ..sequence import MutableSeq


def _natural(value: T, other: T) -> bool:
    return value < other


def insert_sort(data: List[T], before: Optional[Before[T]] = None) -> List[T]:
    """
    stable in-place insertion sort.
    before(value, other) answers whether value should move ahead of other;
    only strictly-before elements are shifted, so equal elements keep their
    original relative order. without before, natural < ordering is used.
    returns data itself.
    """
    should_move = before or _natural
    for i in range(1, len(data)):
        value = data[i]
        j = i
        while j > 0 and should_move(value, data[j - 1]):
            data[j] = data[j - 1]
            j -= 1
        data[j] = value
    return data


def median_index(length: int) -> int:
    """odd lengths take the middle, even lengths the upper of the two middles"""
    return (length - 1) // 2 if length % 2 else length // 2


def get_median(data: List[T], before: Optional[Before[T]] = None) -> T:
    """median element by before (consuming, no averaging)"""
    if not data: raise EmptyInputError('median')
    insert_sort(data, before)
    result = data[median_index(len(data))]
    data.clear()
    return result


class SortAccessor(Generic[T]):
    def __init__(self, seq_instance: 'MutableSeq[T]'):
        self._seq = seq_instance

    def insert(self, before: Optional[Before[T]] = None) -> 'MutableSeq[T]':
        """sort the owned data in place and return the same sequence"""
        insert_sort(self._seq._get_data('sort.insert'), before)
        return self._seq

    def median(self, before: Optional[Before[T]] = None) -> T:
        """median element (consuming)"""
        return get_median(self._seq._take_data('sort.median'), before)
