from .types import *
from .sequence import MutableSeq


def from_iterable(data: Iterable[T]) -> MutableSeq[T]:
    """create a sequence owning a fresh list built from data"""
    return MutableSeq(list(data))

def from_range(start: int, count: int) -> MutableSeq[int]:
    """create sequence from range"""
    return MutableSeq(list(range(start, start + count)))

def repeat(item: T, count: int) -> MutableSeq[T]:
    """create sequence with repeated item"""
    return MutableSeq([item] * count)

def empty() -> MutableSeq[Any]:
    """create empty sequence"""
    return MutableSeq([])

def generate(generator_func: Callable[[], T], count: int) -> MutableSeq[T]:
    """generate sequence using a function"""
    return MutableSeq([generator_func() for _ in range(count)])

# --- aliases ---
mseq = from_iterable
M = from_iterable
