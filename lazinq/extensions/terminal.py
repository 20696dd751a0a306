from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _TerminalOperations(Generic[T]):
    def any(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition (or if there is any element at all)"""
        for item in self:
            if predicate is None or predicate(item):
                return True
        return False

    def all(self: 'Enumerable[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        for item in self:
            if not predicate(item):
                return False
        return True

    def contains(self: 'Enumerable[T]', item: T) -> bool:
        """
        check if the sequence holds an element identical or equal to item.
        bools only match bools, so 1 and True are not the same element here.
        """
        for element in self:
            if element is item or (isinstance(element, bool) == isinstance(item, bool) and element == item):
                return True
        return False

    def count(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        total = 0
        for item in self:
            if predicate is None or predicate(item):
                total += 1
        return total

    def first(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        """get first (matching) element, or None"""
        for item in self:
            if predicate is None or predicate(item):
                return item
        return None

    def last(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        """get last (matching) element, or None. always walks the whole sequence."""
        return self.reverse().first(predicate)

    def to_list(self: 'Enumerable[T]') -> List[T]:
        """convert to list"""
        return list(self)

    # linq's toArray materializes an ordered sequence, which in python is a list
    to_array = to_list

    def to_set(self: 'Enumerable[T]') -> Set[T]:
        """
        convert to set. elements must be hashable; record pipelines (dicts, lists)
        raise TypeError here, use distinct().to_list() for them instead.
        """
        return set(self)

    def to_dict(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self}

    def to_numpy(self: 'Enumerable[T]') -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self))

    def to_series(self: 'Enumerable[T]') -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self))

    def to_dataframe(self: 'Enumerable[T]') -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(list(self))

    def for_each(self: 'Enumerable[T]', action: Callable[[T], Any]) -> None:
        """
        performs the specified action on each element of a sequence for side-effects.
        this is an EAGER operation that executes immediately.
        """
        for item in self:
            action(item)
