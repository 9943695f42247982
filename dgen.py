r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
schema-driven test records for mutseqs.

a schema maps field names to field specs:
    'word'                                   faker provider, or a literal string
    ('pyint', {'min_value': 1})              faker provider with arguments
    {'_qen_provider': 'choice', 'from': []}  numpy draw from a list
    {'_qen_provider': 'literal', 'value': v} fixed value
    {'_qen_provider': 'ref', 'key': 'id'}    an earlier field of the same record
'''

import numpy as np
from collections import namedtuple
from faker import Faker
from mutseqs import from_iterable, MutableSeq
from typing import Any, Callable, Dict, Optional


class Generator:
    """builds one record per call from a flat schema."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._providers: Dict[str, Callable[[Dict, Dict], Any]] = {
            'choice': self._choice,
            'literal': self._literal,
            'ref': self._ref,
        }

    def _faker(self, name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{name}'")
        return method(**(kwargs or {}))

    def _choice(self, spec: Dict, record: Dict) -> Any:
        picked = self._rng.choice(spec['from'])
        # numpy scalars back to plain python values
        return picked.item() if hasattr(picked, 'item') else picked

    def _literal(self, spec: Dict, record: Dict) -> Any:
        if 'value' not in spec:
            raise ValueError("literal field needs a 'value'")
        return spec['value']

    def _ref(self, spec: Dict, record: Dict) -> Any:
        key = spec['key']
        if key not in record:
            raise ValueError(f"field '{key}' must come before the field that refers to it")
        return spec['format'].format(record[key]) if 'format' in spec else record[key]

    def field(self, spec: Any, record: Dict) -> Any:
        """value for one field spec, given the fields generated so far"""
        if isinstance(spec, dict):
            provider = self._providers.get(spec.get('_qen_provider'))
            if provider is None:
                raise ValueError(f"unknown _qen_provider: '{spec.get('_qen_provider')}'")
            return provider(spec, record)
        if isinstance(spec, tuple):
            name, kwargs = spec
            return self._faker(name, kwargs)
        if isinstance(spec, str) and hasattr(self._fake, spec):
            return self._faker(spec)
        return spec

    def record(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        built: Dict[str, Any] = {}
        for name, spec in schema.items():
            built[name] = self.field(spec, built)
        return built


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> MutableSeq:
        """count generated dicts"""
        return from_iterable(self._generator.record(self._schema) for _ in range(count))

    def records(self, count: int, type_name: str = 'Record') -> MutableSeq:
        """count generated named tuples, one field per schema key"""
        record_type = namedtuple(type_name, list(self._schema))
        return from_iterable(record_type(**self._generator.record(self._schema)) for _ in range(count))


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
