from __future__ import annotations
import typing
import logging
from collections.abc import Hashable
from ..types import *
from ..source import to_iterable

logger = logging.getLogger(__name__)

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _Membership:
    """
    a set that also tolerates unhashable elements (dicts, lists).
    hashable values use a real set; the rest fall back to an equality scan.
    """

    def __init__(self, items: Iterable[Any] = ()):
        self._hashed: Set[Any] = set()
        self._unhashed: List[Any] = []
        for item in items:
            self.add(item)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Hashable):
            try:
                return item in self._hashed
            except TypeError:  # e.g. a tuple holding a list
                pass
        return any(item is x or item == x for x in self._unhashed)

    def add(self, item: Any) -> None:
        if isinstance(item, Hashable):
            try:
                self._hashed.add(item)
                return
            except TypeError:
                pass
        self._unhashed.append(item)

    def __len__(self) -> int:
        return len(self._hashed) + len(self._unhashed)


class _SetOperations(Generic[T]):
    def concat(self: 'Enumerable[T]', other: Producer[U]) -> 'Enumerable[Union[T, U]]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        def concat_data():
            yield from self
            yield from to_iterable(other)
        return Enumerable(concat_data)

    def distinct(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        def distinct_data():
            # fresh for every traversal
            seen = _Membership()
            for item in self:
                if item in seen:
                    continue
                seen.add(item)
                yield item
        return Enumerable(distinct_data)

    def union(self: 'Enumerable[T]', other: Producer[U]) -> 'Enumerable[Union[T, U]]':
        """return the order-preserving union of two sequences (distinct elements)."""
        return self.concat(other).distinct()

    def except_(self: 'Enumerable[T]', other: Producer[Any]) -> 'Enumerable[T]':
        """
        return elements from the first sequence not in the second (set difference).
        'other' is realized once, right here, not on every traversal.
        """
        excluded = _Membership(to_iterable(other))
        logger.debug(f"except_ built a membership set of {len(excluded)} elements")
        return self.where(lambda item: item not in excluded)
