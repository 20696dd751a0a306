'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from lazinq import as_linq, Enumerable
from typing import Any, Dict, Iterator, Optional


class Generator:
    """schema interpreter.

    a schema is a dict of field -> spec, where a spec is one of:
      - a faker provider name ('word', 'name', 'uuid4', ...)
      - a (provider, kwargs) tuple, e.g. ('pyint', {'min_value': 1, 'max_value': 9})
      - a {'_qen_provider': 'choice', 'from': [...]} dict
      - a {'_qen_provider': 'ref', 'key': 'other_field'} dict
      - a nested schema dict
      - anything else, used as a literal
    """

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
        provider = config["_qen_provider"]
        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # fields can reference siblings generated before them
            generated_obj = {}
            for k, v in schema.items():
                generated_obj[k] = self.create(v, {**current_context, **generated_obj})
            return generated_obj

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


def from_schema(schema: Any, seed: Optional[int] = None) -> Enumerable:
    """
    an endless, lazy stream of records built from the schema.
    every traversal starts a new generator, so with a seed the stream is repeatable.
    bound it with take() before materializing.
    """
    def records() -> Iterator[Dict]:
        generator = Generator(seed)
        while True:
            yield generator.create(schema)

    return as_linq(records)
