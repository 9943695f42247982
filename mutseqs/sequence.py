from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .errors import ConsumedSequenceError

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.grouping import GroupingAccessor
from .extensions.pairs import PairAccessor
from .extensions.sorting import SortAccessor
from .extensions.sampling import SampleAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self, operation: Optional[str] = None) -> List[T]:
        """get the underlying list for reading"""
        pass

    @abstractmethod
    def _take_data(self, operation: str) -> List[T]:
        """hand the underlying list to a consuming operation"""
        pass

# --- base implementation ---

class _BaseSeq(ISequence[T]):
    def __init__(self, data: List[T]):
        """take ownership of data; the caller should not keep using the list"""
        self._data = data
        self._consumed_by: Optional[str] = None

    @property
    def consumed(self) -> bool:
        return self._consumed_by is not None

    def _get_data(self, operation: Optional[str] = None) -> List[T]:
        if self._consumed_by is not None:
            raise ConsumedSequenceError(operation, self._consumed_by)
        return self._data

    def _mark_consumed(self, operation: str) -> None:
        self._consumed_by = operation

    def _take_data(self, operation: str) -> List[T]:
        data = self._get_data(operation)
        self._mark_consumed(operation)
        return data

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data('iter'))

    def __len__(self) -> int:
        return len(self._get_data('len'))

    def __getitem__(self, index):
        return self._get_data('getitem')[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, _BaseSeq):
            return self._get_data('eq') == other._get_data('eq')
        if isinstance(other, list):
            return self._get_data('eq') == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        if self.consumed:
            return f"{type(self).__name__}(consumed_by='{self._consumed_by}')"
        return f"{type(self).__name__}({self._data!r})"

# --- main sequence class ---

class MutableSeq(
    _BaseSeq[T],
    _CoreOperations[T]
):
    """
    owns one list and exposes the transformations through accessors.
    consuming operations take the list and leave this sequence unusable;
    the rest read it in place.
    """
    def __init__(self, data: List[T]):
        super().__init__(data)
        # --- initialize accessors ---
        self.group = GroupingAccessor(self)
        self.pairs = PairAccessor(self)
        self.sort = SortAccessor(self)
        self.sample = SampleAccessor(self)
        self.to = TerminalAccessor(self)
