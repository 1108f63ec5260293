'''
schema-driven record generator for lazyq tests.

    people = from_schema({'name': 'first_name', 'age': ('pyint', {'min_value': 18, 'max_value': 65})}, seed=7)
    people.take(20)       # Enumerable over 20 fresh records
    people.stream()       # unbounded Enumerable, limit it with .take(n)
'''

from itertools import count as _counter
from typing import Any, Dict, Optional

import numpy as np
from faker import Faker

from lazyq import Enumerable, from_iterable


class Generator:
    """schema interpreter.

    a schema is one of:
      - a dict of field -> schema, generated field by field
      - a dict with '_gen' naming a provider ('choice', 'ref', 'literal')
      - a faker method name ('word') or (method name, kwargs) tuple
      - anything else, returned as a literal
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_gen"]
        if provider == "choice":
            # numpy hands back numpy scalars; records should hold native python values
            picked = config["from"][int(self._rng.integers(len(config["from"])))]
            return picked.item() if hasattr(picked, 'item') else picked
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current record.")
            return context[key]
        if provider == "literal":
            return config["value"]
        raise ValueError(f"unknown _gen provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}
        if isinstance(schema, dict):
            if "_gen" in schema:
                return self._provider(schema, context)
            record = {}
            for key, field_schema in schema.items():
                # later fields can refer back to earlier ones
                record[key] = self.create(field_schema, {**context, **record})
            return record
        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])
        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._faker(schema)
        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        """a fixed batch of records, generated now so repeated iteration sees the same data"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])

    def stream(self) -> Enumerable:
        """an unbounded lazy sequence of records; pair it with take()"""
        return from_iterable(self._generator.create(self._schema) for _ in _counter())


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
