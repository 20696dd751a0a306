from __future__ import annotations

import logging
from functools import cmp_to_key
from .types import *
from .source import to_iterable
from .comparers import make_comparer, combine_comparers

# --- operation groups ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.terminal import _TerminalOperations
from .extensions.stats import _StatsOperations
from .extensions.utility import _UtilityOperations

logger = logging.getLogger(__name__)


# --- main enumerable class ---

class Enumerable(
    _CoreOperations[T],
    _SetOperations[T],
    _TerminalOperations[T],
    _StatsOperations[T],
    _UtilityOperations[T]
):
    """
    a lazy, linq-inspired query over any producer.
    every intermediate operator returns a new enumerable wrapping a generator over this one,
    so nothing is pulled from the source until the result is iterated.
    """

    def __init__(self, source: Producer[T]):
        self._source = source

    def __iter__(self) -> Iterator[T]:
        # the source (or its factory) is only touched on the first pull
        yield from to_iterable(self._source)

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort ascending. with no prior ordering this is a primary sort."""
        return self.order_by(key_selector)

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort descending. with no prior ordering this is a primary sort."""
        return self.order_by_descending(key_selector)


# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, source: Producer[T], comparer: Comparer[T]):
        super().__init__(source)
        self._comparer = comparer

    def __iter__(self) -> Iterator[T]:
        """buffers the whole upstream, then yields a stable sorted copy"""
        buffer = list(to_iterable(self._source))
        logger.debug(f"sorting {len(buffer)} buffered elements")
        yield from sorted(buffer, key=cmp_to_key(self._comparer))

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        comparer = combine_comparers(self._comparer, make_comparer(key_selector, False))
        # same upstream, combined comparer
        return OrderedEnumerable(self._source, comparer)

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        comparer = combine_comparers(self._comparer, make_comparer(key_selector, True))
        return OrderedEnumerable(self._source, comparer)
