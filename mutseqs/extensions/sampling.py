from __future__ import annotations
import typing
import logging
import numpy as np
from ..types import *
from ..config import SeqConfig, resolve

if typing.TYPE_CHECKING:
    from ..sequence import MutableSeq

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None, config: Optional[SeqConfig] = None) -> np.random.Generator:
    """new generator from seed, the configured seed, or fresh entropy"""
    if seed is None: seed = resolve(config).seed
    return np.random.default_rng(seed)


def shuffle(data: List[T], rng: Optional[np.random.Generator] = None, seed: Optional[int] = None,
            config: Optional[SeqConfig] = None) -> List[T]:
    """
    uniform random permutation by rejection sampling (consuming).
    indices in [0, n) are drawn until each has come up once; a fresh index
    places its element in the next free output slot, a repeat is discarded.
    """
    total = len(data)
    if total == 0:
        return []
    generator = rng if rng is not None else make_rng(seed, config)

    result = [None] * total
    placed = set()
    draws = 0
    while len(placed) < total:
        idx = int(generator.integers(total))
        draws += 1
        if idx not in placed:
            placed.add(idx)
            result[len(placed) - 1] = data[idx]
    data.clear()
    logger.debug(f"shuffled {total} elements in {draws} draws ({draws - total} collisions)")
    return result


class SampleAccessor(Generic[T]):
    def __init__(self, seq_instance: 'MutableSeq[T]'):
        self._seq = seq_instance

    def shuffle(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None,
                config: Optional[SeqConfig] = None) -> 'MutableSeq[T]':
        """random permutation without replacement (consuming)"""
        from ..sequence import MutableSeq
        return MutableSeq(shuffle(self._seq._take_data('sample.shuffle'), rng, seed, config))
