r"""
'  .-. .-. .-. .-. .-. .-. .-.
'  m u t s e q s
'  scala-style transformations over in-memory sequences
"""
import logging

# expose the main class
from .sequence import MutableSeq

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    mseq,
    M
)

# expose the list-level operations
from .extensions.core import take, clone, extract, transform, grep, zip_with_index, min_of, flat_map, reverse
from .extensions.grouping import (
    group_by,
    group_by_keeping,
    group_by_reducing,
    group_by_field,
    group_by_field_keeping
)
from .extensions.aggregate import keys, values, flatten
from .extensions.pairs import make_pairs, pair_count
from .extensions.sorting import insert_sort, get_median
from .extensions.sampling import shuffle, make_rng

# expose supporting data classes
from .types import KeyedGroup, WeightedPair, IndexedItem, GroupResult
from .fields import FieldRegistry, default_registry
from .config import SeqConfig, get_config, set_config, configure, configure_logging
from .errors import MutseqsError, EmptyInputError, TypeMismatchError, ConsumedSequenceError

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "MutableSeq",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "mseq",
    "M",
    "take",
    "clone",
    "extract",
    "transform",
    "grep",
    "zip_with_index",
    "min_of",
    "flat_map",
    "reverse",
    "group_by",
    "group_by_keeping",
    "group_by_reducing",
    "group_by_field",
    "group_by_field_keeping",
    "keys",
    "values",
    "flatten",
    "make_pairs",
    "pair_count",
    "insert_sort",
    "get_median",
    "shuffle",
    "make_rng",
    "KeyedGroup",
    "WeightedPair",
    "IndexedItem",
    "GroupResult",
    "FieldRegistry",
    "default_registry",
    "SeqConfig",
    "get_config",
    "set_config",
    "configure",
    "configure_logging",
    "MutseqsError",
    "EmptyInputError",
    "TypeMismatchError",
    "ConsumedSequenceError"
]
