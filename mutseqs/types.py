from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Before = Callable[[T, T], bool]
Weigher = Callable[[T, T], float]


class KeyedGroup(NamedTuple):
    """a key paired with every value grouped under it"""
    key: Any
    values: List[Any]


class WeightedPair(NamedTuple):
    """one directed, weighted edge between two distinct keys"""
    item1: Any
    item2: Any
    weight: float


class IndexedItem(NamedTuple):
    """an element together with its 0-based position"""
    index: int
    value: Any


class GroupResult(list):
    """
    ordered list of keyed groups with pairwise distinct keys.
    behaves as a plain list (equality, indexing, iteration) and adds
    mapping-style lookups plus the aggregate projections. the group list
    itself is read-only; copy it with list() to rearrange groups.
    """

    def __init__(self, groups: Iterable[KeyedGroup] = ()):
        super().__init__()
        self._index: Dict[Any, int] = {}
        for key, values in groups:
            position = self._index.get(key)
            if position is None:
                self._index[key] = len(self)
                super().append(KeyedGroup(key, list(values)))
            else:
                self[position].values.extend(values)

    def _blocked(self, *args, **kwargs):
        raise TypeError("GroupResult is read-only; copy it with list() to edit the groups")

    append = extend = insert = remove = pop = clear = sort = reverse = _blocked
    __setitem__ = __delitem__ = __iadd__ = __imul__ = _blocked

    def __reduce__(self):
        return type(self), (list(self),)

    def _add(self, key: Any, value: Any) -> None:
        """append value to the group for key, opening a new group at the end if needed"""
        position = self._index.get(key)
        if position is None:
            self._index[key] = len(self)
            super().append(KeyedGroup(key, [value]))
        else:
            self[position].values.append(value)

    def get(self, key: Any, default: Optional[List[Any]] = None) -> Optional[List[Any]]:
        """values grouped under key, or default"""
        position = self._index.get(key)
        return default if position is None else self[position].values

    def __contains__(self, item: Any) -> bool:
        # a KeyedGroup tests list membership, anything else is a key lookup
        if isinstance(item, KeyedGroup):
            return super().__contains__(item)
        try:
            return item in self._index
        except TypeError:
            return super().__contains__(item)

    def keys(self) -> List[Any]:
        from .extensions.aggregate import keys
        return keys(self)

    def values(self) -> List[List[Any]]:
        from .extensions.aggregate import values
        return values(self)

    def flatten(self) -> List[Any]:
        from .extensions.aggregate import flatten
        return flatten(self)

    def to_dict(self) -> Dict[Any, List[Any]]:
        """key -> values mapping, group order kept"""
        return {group.key: group.values for group in self}

    def to_frame(self):
        """one row per grouped value, with key and value columns"""
        from .extensions.aggregate import to_frame
        return to_frame(self)

    def __repr__(self) -> str:
        return f"GroupResult(groups={len(self)}, items={sum(len(g.values) for g in self)})"
