from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..errors import EmptyInputError
from .core import min_of

if typing.TYPE_CHECKING:
    from ..sequence import MutableSeq

class TerminalAccessor(Generic[T]):
    def __init__(self, seq_instance: 'MutableSeq[T]'):
        self._seq = seq_instance

    def list(self) -> List[T]:
        """copy of the data as a list"""
        return list(self._seq._get_data('to.list'))

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._seq._get_data('to.array'))

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._seq._get_data('to.pandas'))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._seq._get_data('to.df'))

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        data = self._seq._get_data('to.count')
        if predicate is None: return len(data)
        return sum(1 for x in data if predicate(x))

    def first(self) -> T:
        data = self._seq._get_data('to.first')
        if not data: raise EmptyInputError('first element')
        return data[0]

    def min(self) -> T:
        """smallest element by <"""
        return min_of(self._seq._get_data('to.min'))
