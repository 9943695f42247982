"""
field-by-name access for record-like elements.

extractors are looked up per record type. explicit registrations win;
otherwise, when reflection is allowed, fields are discovered from
dataclasses, named tuples, mappings, __slots__ and instance attributes.
"""
from __future__ import annotations
import dataclasses
import logging
from collections.abc import Mapping
from .types import *
from .errors import TypeMismatchError

logger = logging.getLogger(__name__)

Extractor = Callable[[Any], Any]


def _slot_names(record_type: type) -> Set[str]:
    """slots declared anywhere in the class hierarchy"""
    names: Set[str] = set()
    for klass in record_type.__mro__:
        slots = vars(klass).get('__slots__', ())
        names.update((slots,) if isinstance(slots, str) else slots)
    return names


def read_field(record: Any, field_name: str, extractor: Extractor) -> Any:
    """apply extractor; a declared but unset attribute counts as a missing field"""
    try:
        return extractor(record)
    except AttributeError as e:
        raise TypeMismatchError(field_name, type(record)) from e


def _reflect(record: Any, field_name: str) -> Optional[Extractor]:
    """find an extractor for field_name on this record by introspection, or None"""
    if isinstance(record, Mapping):
        return (lambda r: r[field_name]) if field_name in record else None

    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        names = {f.name for f in dataclasses.fields(record)}
        return (lambda r: getattr(r, field_name)) if field_name in names else None

    # named tuples expose their field names on the class
    named_fields = getattr(type(record), '_fields', None)
    if isinstance(named_fields, tuple):
        return (lambda r: getattr(r, field_name)) if field_name in named_fields else None

    if field_name in _slot_names(type(record)) or field_name in getattr(record, '__dict__', {}):
        return lambda r: getattr(r, field_name)
    return None


class FieldRegistry:
    """maps (record type, field name) to an extractor function"""

    def __init__(self, reflect: Optional[bool] = None):
        self._extractors: Dict[type, Dict[str, Extractor]] = {}
        self._reflect = reflect

    def register(self, record_type: type, field_name: str, extractor: Optional[Extractor] = None) -> 'FieldRegistry':
        """register one field; without an extractor, plain attribute access is used"""
        self._extractors.setdefault(record_type, {})[field_name] = extractor or (lambda r: getattr(r, field_name))
        logger.debug(f"registered field '{field_name}' for {record_type.__name__}")
        return self

    def register_type(self, *field_names: str):
        """class decorator registering attribute access for the given field names"""
        def decorator(cls: type) -> type:
            for name in field_names:
                self.register(cls, name)
            return cls
        return decorator

    def fields_of(self, record_type: type) -> List[str]:
        """explicitly registered field names for a type, in registration order"""
        return list(self._extractors.get(record_type, {}))

    def resolve(self, record: Any, field_name: str, reflect: bool = True) -> Optional[Extractor]:
        """extractor for field_name on record's type, or None when the field does not exist"""
        for klass in type(record).__mro__:
            extractor = self._extractors.get(klass, {}).get(field_name)
            if extractor is not None:
                return extractor
        allow = self._reflect if self._reflect is not None else reflect
        return _reflect(record, field_name) if allow else None

    def extractor(self, record: Any, field_name: str, reflect: bool = True) -> Extractor:
        """like resolve, but raises TypeMismatchError for an unknown field"""
        found = self.resolve(record, field_name, reflect)
        if found is None:
            raise TypeMismatchError(field_name, type(record))
        return found

    def text_value(self, record: Any, field_name: str, reflect: bool = True) -> str:
        """the field's value rendered as text"""
        return str(read_field(record, field_name, self.extractor(record, field_name, reflect)))


default_registry = FieldRegistry()
