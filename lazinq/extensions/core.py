from __future__ import annotations
import typing
import logging
from ..types import *
from ..comparers import make_comparer

logger = logging.getLogger(__name__)

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    def append(self: 'Enumerable[T]', element: U) -> 'Enumerable[Union[T, U]]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        def append_data():
            yield from self
            yield element
        return Enumerable(append_data)

    def prepend(self: 'Enumerable[T]', element: U) -> 'Enumerable[Union[T, U]]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        def prepend_data():
            yield element
            yield from self
        return Enumerable(prepend_data)

    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        def filter_data():
            for item in self:
                if predicate(item):
                    yield item
        return Enumerable(filter_data)

    def where_not(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter out elements matching a predicate"""
        return self.where(lambda item: not predicate(item))

    def where_type(self: 'Enumerable[T]', type_filter: Union[Type[U], Tuple[Type, ...]]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        # accepts anything isinstance accepts, including a tuple of types
        return self.where(lambda item: isinstance(item, type_filter))

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        def map_data():
            for item in self:
                yield selector(item)
        return Enumerable(map_data)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]],
                    result_selector: Optional[Callable[[T, U], V]] = None) -> 'Enumerable[Union[U, V]]':
        """
        project and flatten sequences.
        with a result_selector each (outer, inner) pair is combined into one result.
        """
        from ..enumerable import Enumerable
        def flat_map_data():
            for outer in self:
                for inner in selector(outer):
                    yield result_selector(outer, inner) if result_selector else inner
        return Enumerable(flat_map_data)

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        def reverse_data():
            data = list(self)
            logger.debug(f"reversing {len(data)} buffered elements")
            yield from reversed(data)
        return Enumerable(reverse_data)

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        def take_data():
            if count <= 0:
                return
            taken = 0
            for item in self:
                yield item
                taken += 1
                # stop before asking the source for anything past the last wanted element
                if taken >= count:
                    break
        return Enumerable(take_data)

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        def skip_data():
            seen = 0
            for item in self:
                seen += 1
                if seen <= count:
                    continue
                yield item
        return Enumerable(skip_data)

    def order_by(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key, or by the elements themselves"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, make_comparer(key_selector, False))

    def order_by_descending(self: 'Enumerable[T]',
                            key_selector: Optional[KeySelector[T, K]] = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, make_comparer(key_selector, True))
