from __future__ import annotations
import typing
import logging
import numpy as np
from collections.abc import Mapping, MutableMapping
from ..types import *

logger = logging.getLogger(__name__)

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _check_key(key: str) -> None:
    if key == RESERVED_KEY:
        raise ValueError(f"cannot use '{RESERVED_KEY}' as a key in let or then_let")


class _UtilityOperations(Generic[T]):
    def let(self: 'Enumerable[T]', key: str, selector: Selector[T, U]) -> 'Enumerable[Dict[str, Any]]':
        """
        tags each element with a computed value.
        yields {'value': element, key: selector(element)}.
        """
        from ..enumerable import Enumerable
        _check_key(key)
        def let_data():
            for item in self:
                yield {RESERVED_KEY: item, key: selector(item)}
        return Enumerable(let_data)

    def then_let(self: 'Enumerable[T]', key: str, selector: Selector[T, U],
                 in_place: bool = False) -> 'Enumerable[Any]':
        """
        adds another computed value to already tagged elements.

        mapping elements (e.g. the output of let) are copied into a new dict with the
        extra key; anything else is wrapped the way let does it.

        in_place=True keeps the old behaviour: the element itself gets the new key
        (item assignment for mutable mappings, setattr otherwise) and the same
        reference is yielded. re-iterating runs the selector again on the same objects.
        """
        from ..enumerable import Enumerable
        _check_key(key)
        def then_let_data():
            for item in self:
                value = selector(item)
                if in_place:
                    if isinstance(item, MutableMapping):
                        item[key] = value
                    else:
                        setattr(item, key, value)
                    yield item
                elif isinstance(item, Mapping):
                    yield {**item, key: value}
                else:
                    yield {RESERVED_KEY: item, key: value}
        return Enumerable(then_let_data)

    def shuffle(self: 'Enumerable[T]', seed: Optional[int] = None) -> 'Enumerable[T]':
        """
        yields the elements in a uniformly random order.
        with a seed every traversal produces the same permutation.
        """
        from ..enumerable import Enumerable
        def shuffle_data():
            data = list(self)
            logger.debug(f"shuffling {len(data)} buffered elements")
            rng = np.random.default_rng(seed)
            for index in rng.permutation(len(data)):
                yield data[int(index)]
        return Enumerable(shuffle_data)

    def get_random_one(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None,
                       seed: Optional[int] = None) -> Optional[T]:
        """pick one (matching) element at random, or None"""
        source = self.where(predicate) if predicate else self
        return source.shuffle(seed).first()

    def get_random(self: 'Enumerable[T]', count: int = 1, seed: Optional[int] = None) -> List[T]:
        """pick up to 'count' elements at random, without replacement"""
        return self.shuffle(seed).take(count).to_list()
