from __future__ import annotations
import typing
import logging
from ..types import *
from ..config import SeqConfig, resolve
from ..errors import TypeMismatchError
from ..fields import FieldRegistry, default_registry

if typing.TYPE_CHECKING:
    from ..sequence import MutableSeq

logger = logging.getLogger(__name__)

# every grouping scans from the last element toward the first. groups open at
# the end of the result in the order their keys are first met during that
# scan, and each value lands at the end of its group.

def _group_backward(data: List[T], key_selector: KeySelector[T, K],
                    element_selector: Optional[Selector[T, U]], consume: bool) -> GroupResult:
    result = GroupResult()
    if consume:
        # pop() walks backward and releases the input as the result grows
        while data:
            item = data.pop()
            result._add(key_selector(item), element_selector(item) if element_selector else item)
    else:
        for item in reversed(data):
            result._add(key_selector(item), element_selector(item) if element_selector else item)
    logger.debug(f"grouped into {len(result)} groups")
    return result


def group_by(data: List[T], key_selector: KeySelector[T, K]) -> GroupResult:
    """group elements by key (consuming)"""
    return _group_backward(data, key_selector, None, consume=True)


def group_by_keeping(data: List[T], key_selector: KeySelector[T, K]) -> GroupResult:
    """same as group_by, but data is left untouched"""
    return _group_backward(data, key_selector, None, consume=False)


def group_by_reducing(data: List[T], key_selector: KeySelector[T, K],
                      element_selector: Selector[T, U]) -> GroupResult:
    """group by key, storing element_selector(item) instead of the item (consuming)"""
    return _group_backward(data, key_selector, element_selector, consume=True)


def _field_grouping(data: List[T], field_name: str, registry: Optional[FieldRegistry],
                    config: Optional[SeqConfig], consume: bool) -> GroupResult:
    cfg = resolve(config)
    fields = registry if registry is not None else default_registry
    reflect = cfg.reflect_fields

    # read every key before touching data so a bad field leaves it intact
    if cfg.missing_field == 'raise':
        keyed = [(item, fields.text_value(item, field_name, reflect)) for item in data]
    else:
        keyed, skipped = [], 0
        for item in data:
            try:
                keyed.append((item, fields.text_value(item, field_name, reflect)))
            except TypeMismatchError:
                skipped += 1
        if skipped:
            logger.warning(f"{skipped} elements have no field '{field_name}' and were left out of the grouping")
    if consume: data.clear()
    return _group_backward(keyed, lambda pair: pair[1], lambda pair: pair[0], consume=True)


def group_by_field(data: List[T], field_name: str, registry: Optional[FieldRegistry] = None,
                   config: Optional[SeqConfig] = None) -> GroupResult:
    """
    group records by a named field, keys rendered as text (consuming).
    an unknown field raises TypeMismatchError, or with missing_field='skip'
    the element is left out of the result.
    """
    return _field_grouping(data, field_name, registry, config, consume=True)


def group_by_field_keeping(data: List[T], field_name: str, registry: Optional[FieldRegistry] = None,
                           config: Optional[SeqConfig] = None) -> GroupResult:
    """same as group_by_field, but data is left untouched"""
    return _field_grouping(data, field_name, registry, config, consume=False)


class GroupingAccessor(Generic[T]):
    def __init__(self, seq_instance: 'MutableSeq[T]'):
        self._seq = seq_instance

    def by(self, key: Union[KeySelector[T, K], str], registry: Optional[FieldRegistry] = None,
           config: Optional[SeqConfig] = None) -> GroupResult:
        """group by a key selector, or by field name when given a string (consuming)"""
        if isinstance(key, str):
            # validate before marking the sequence consumed
            data = self._seq._get_data('group.by')
            result = group_by_field(data, key, registry, config)
            self._seq._mark_consumed('group.by')
            return result
        return group_by(self._seq._take_data('group.by'), key)

    def keeping(self, key: Union[KeySelector[T, K], str], registry: Optional[FieldRegistry] = None,
                config: Optional[SeqConfig] = None) -> GroupResult:
        """group without consuming the sequence"""
        data = self._seq._get_data('group.keeping')
        if isinstance(key, str):
            return group_by_field_keeping(data, key, registry, config)
        return group_by_keeping(data, key)

    def reducing(self, key_selector: KeySelector[T, K], element_selector: Selector[T, U]) -> GroupResult:
        """group by key, transforming each element as it is grouped (consuming)"""
        return group_by_reducing(self._seq._take_data('group.reducing'), key_selector, element_selector)
