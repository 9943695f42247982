from __future__ import annotations
import pandas as pd
from ..types import *

# read-only projections of a grouping result; each keeps group order.


def keys(groups: Iterable[KeyedGroup]) -> List[Any]:
    """every group's key"""
    return [group.key for group in groups]


def values(groups: Iterable[KeyedGroup]) -> List[List[Any]]:
    """every group's value list"""
    return [group.values for group in groups]


def flatten(groups: Iterable[KeyedGroup]) -> List[Any]:
    """
    concatenate all groups' values into one sequence.
    this undoes a grouping only up to order: the result is a permutation
    of the grouped elements, arranged by group.
    """
    return [item for group in groups for item in group.values]


def to_frame(groups: Iterable[KeyedGroup]) -> pd.DataFrame:
    """long-form dataframe with one (key, value) row per grouped value"""
    rows = [(group.key, item) for group in groups for item in group.values]
    return pd.DataFrame(rows, columns=['key', 'value'])
