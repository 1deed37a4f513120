'''
seeded, schema-driven fixture data for the seqfold test suites.

a schema is interpreted recursively:
  - a string naming a faker provider ('word', 'name') calls it; other strings are literals
  - a (provider, kwargs) tuple calls the faker provider with kwargs
  - a dict with '_gen_provider' selects a built-in provider (choice, ref, literal, ints)
  - any other dict builds an object key by key; later keys may 'ref' earlier ones
  - a one-item list repeats its item schema '_gen_count' times
'''

import numpy as np
from faker import Faker
from seqfold import from_iterable, Enumerable
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_gen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "choice":
            # pick an index so the chosen value keeps its python type
            options = config["from"]
            return options[int(self._rng.integers(0, len(options)))]

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_gen_provider 'literal' requires a 'value' key.")
            return config["value"]

        if provider == "ints":
            low, high = config.get("range", (-100, 100))
            length = self._count(config.get("length", 10))
            return [int(v) for v in self._rng.integers(low, high, size=length, endpoint=True)]

        raise ValueError(f"unknown _gen_provider: '{provider}'")

    def _count(self, count_config: Any) -> int:
        if isinstance(count_config, (list, tuple)) and len(count_config) == 2:
            low, high = count_config
            return int(self._rng.integers(low, high, endpoint=True))
        return int(count_config)

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_gen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # build sequentially so refs can look up into the parent and sideways into this object
            generated_obj = {}
            for k, v in schema.items():
                generated_obj[k] = self.create(v, {**current_context, **generated_obj})
            return generated_obj

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            count = self._count(item_schema.get("_gen_count", 5)) if isinstance(item_schema, dict) else 5
            actual_item_schema = item_schema.get("_gen_items", item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual_item_schema, current_context) for _ in range(count)]

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])

    def samples(self, count: int) -> List[Enumerable]:
        """count independent sequences, for schemas that describe a whole list"""
        return [from_iterable(self._generator.create(self._schema)) for _ in range(count)]


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def int_sequences(count: int, length=(0, 25), value_range=(-50, 50), seed: Optional[int] = None) -> List[Enumerable]:
    """count random integer sequences with lengths drawn from the given range, empty ones included."""
    schema = {"_gen_provider": "ints", "length": length, "range": value_range}
    return from_schema(schema, seed).samples(count)
