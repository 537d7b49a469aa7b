r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded test-record generator for the fpy test suites.
'''

import numpy as np
from faker import Faker
from fpy import Seq, from_iterable, from_generator
from typing import Any, Dict, Iterator, Optional

PROVIDER_KEY = "_qen_provider"
COUNT_KEY = "_qen_count"
ITEMS_KEY = "_qen_items"


class Generator:
    """
    schema interpreter. a schema is built from:
      - dicts, generated key by key (later keys can reference earlier ones)
      - [item_schema] lists, repeated _qen_count times (int or (low, high))
      - faker method names as strings, or (method, kwargs) tuples
      - provider dicts: choice, ref, literal, counter
      - any other value, returned literally
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._counters: Dict[str, int] = {}

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config[PROVIDER_KEY]
        if provider == "choice":
            options = config["from"]
            # index instead of rng.choice so mixed-type options keep their python types
            return options[int(self._rng.integers(len(options)))]

        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            value = context[key]
            return config["format"].format(value) if "format" in config else value

        if provider == "literal":
            if "value" not in config:
                raise ValueError("literal provider requires a 'value' key.")
            return config["value"]

        if provider == "counter":
            name = config.get("name", "default")
            self._counters[name] = self._counters.get(name, config.get("start", 0) - 1) + 1
            return self._counters[name]

        raise ValueError(f"unknown {PROVIDER_KEY}: '{provider}'")

    def _count(self, item_schema: Any) -> int:
        amount = item_schema.get(COUNT_KEY, 5) if isinstance(item_schema, dict) else 5
        if isinstance(amount, (list, tuple)):
            low, high = amount
            return int(self._rng.integers(low, high, endpoint=True))
        return amount

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if PROVIDER_KEY in schema:
                return self._resolve_provider(schema, context)
            record: Dict[str, Any] = {}
            for k, v in schema.items():
                record[k] = self.create(v, {**context, **record})
            return record

        if isinstance(schema, list):
            if not schema:
                return []
            item_schema = schema[0]
            actual = item_schema.get(ITEMS_KEY, item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual, context) for _ in range(self._count(item_schema))]

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._call_faker(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed

    def _records(self) -> Iterator[Any]:
        generator = Generator(self._seed)
        while True:
            yield generator.create(self._schema)

    def take(self, count: int) -> Seq:
        """generate count records once and wrap them in a restartable seq"""
        generator = Generator(self._seed)
        return from_iterable([generator.create(self._schema) for _ in range(count)])

    def stream(self) -> Seq:
        """
        unbounded seq of records. with a seed, every iteration replays the
        same records from the start.
        """
        return from_generator(self._records)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
