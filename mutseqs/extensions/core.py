from __future__ import annotations
import typing
from ..types import *
from ..errors import EmptyInputError

if typing.TYPE_CHECKING:
    from ..sequence import MutableSeq

# --- sequence primitives on plain lists ---
# consuming functions empty the list they are given; the rest leave it alone.

def take(data: List[T], count: int) -> List[T]:
    """first min(count, len) elements, none for a negative count; always empties data"""
    result = data[:max(count, 0)]
    data.clear()
    return result


def clone(data: List[T]) -> List[T]:
    """independent shallow copy"""
    return list(data)


def extract(data: List[T], selector: Selector[T, U]) -> List[U]:
    """map each element through selector, order preserved"""
    return [selector(item) for item in data]


def transform(data: List[T], selector: Selector[T, U]) -> List[U]:
    """consuming map: same result as extract, data is emptied"""
    result = extract(data, selector)
    data.clear()
    return result


def grep(data: List[T], predicate: Predicate[T]) -> List[T]:
    """keep elements satisfying predicate, order preserved"""
    return [item for item in data if predicate(item)]


def zip_with_index(data: List[T]) -> List[IndexedItem]:
    return [IndexedItem(index, item) for index, item in enumerate(data)]


def min_of(data: List[T]) -> T:
    """smallest element by <; the first of equal minima wins"""
    if not data: raise EmptyInputError('minimum')
    result = data[0]
    for item in data:
        if item < result:
            result = item
    return result


def flat_map(data: List[T], selector: Selector[T, Iterable[U]]) -> List[U]:
    """
    expand each element into a sub-sequence and concatenate them.
    walks from the last element to the first, releasing each one as it goes,
    so sub-sequences appear in reverse input order.
    """
    result = []
    while data:
        result.extend(selector(data.pop()))
    return result


def reverse(data: List[T]) -> List[T]:
    """new list in reverse order"""
    return data[::-1]


# --- fluent methods ---

class _CoreOperations(Generic[T]):
    def take(self: 'MutableSeq[T]', count: int) -> 'MutableSeq[T]':
        """take the first 'count' elements (consuming)"""
        from ..sequence import MutableSeq
        return MutableSeq(take(self._take_data('take'), count))

    def where(self: 'MutableSeq[T]', predicate: Predicate[T]) -> 'MutableSeq[T]':
        """filter elements based on a predicate"""
        from ..sequence import MutableSeq
        return MutableSeq(grep(self._get_data('where'), predicate))

    grep = where

    def select(self: 'MutableSeq[T]', selector: Selector[T, U]) -> 'MutableSeq[U]':
        """project each element to a new form"""
        from ..sequence import MutableSeq
        return MutableSeq(extract(self._get_data('select'), selector))

    extract = select

    def transform(self: 'MutableSeq[T]', selector: Selector[T, U]) -> 'MutableSeq[U]':
        """project each element to a new form (consuming)"""
        from ..sequence import MutableSeq
        return MutableSeq(transform(self._take_data('transform'), selector))

    def flat_map(self: 'MutableSeq[T]', selector: Selector[T, Iterable[U]]) -> 'MutableSeq[U]':
        """project and flatten sequences (consuming)"""
        from ..sequence import MutableSeq
        return MutableSeq(flat_map(self._take_data('flat_map'), selector))

    def reverse(self: 'MutableSeq[T]') -> 'MutableSeq[T]':
        """inverts the order of the elements"""
        from ..sequence import MutableSeq
        return MutableSeq(reverse(self._get_data('reverse')))

    def clone(self: 'MutableSeq[T]') -> 'MutableSeq[T]':
        """independent copy that can be consumed separately"""
        from ..sequence import MutableSeq
        return MutableSeq(clone(self._get_data('clone')))

    def zip_with_index(self: 'MutableSeq[T]') -> 'MutableSeq[IndexedItem]':
        from ..sequence import MutableSeq
        return MutableSeq(zip_with_index(self._get_data('zip_with_index')))
