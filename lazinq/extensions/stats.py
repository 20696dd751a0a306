from __future__ import annotations
import typing
import math
import numbers
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _numeric(value: Any) -> Number:
    """guard for aggregate inputs. bools are rejected even though they subclass int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        raise TypeError("non-numeric values require a selector")
    return value


class _StatsOperations(Generic[T]):
    def _values(self: 'Enumerable[T]', selector: Optional[Selector[T, Number]] = None) -> Iterator[Tuple[T, Number]]:
        """lazily pairs each element with its checked numeric value"""
        for item in self:
            yield item, _numeric(selector(item) if selector else item)

    def sum(self: 'Enumerable[T]', selector: Optional[Selector[T, Number]] = None) -> Number:
        """calc sum, 0 for an empty sequence"""
        total = 0
        for _, value in self._values(selector):
            total += value
        return total

    def min_element(self: 'Enumerable[T]', selector: Optional[Selector[T, Number]] = None) -> Optional[T]:
        """element with the smallest value, first one wins on ties. None when empty."""
        best, best_value = None, None
        for item, value in self._values(selector):
            if best_value is None or value < best_value:
                best, best_value = item, value
        return best

    def max_element(self: 'Enumerable[T]', selector: Optional[Selector[T, Number]] = None) -> Optional[T]:
        """element with the largest value, first one wins on ties. None when empty."""
        best, best_value = None, None
        for item, value in self._values(selector):
            if best_value is None or value > best_value:
                best, best_value = item, value
        return best

    def min(self: 'Enumerable[T]', selector: Optional[Selector[T, Number]] = None) -> Optional[Number]:
        """find minimum value, None when empty"""
        result = None
        for _, value in self._values(selector):
            if result is None or value < result:
                result = value
        return result

    def max(self: 'Enumerable[T]', selector: Optional[Selector[T, Number]] = None) -> Optional[Number]:
        """find maximum value, None when empty"""
        result = None
        for _, value in self._values(selector):
            if result is None or value > result:
                result = value
        return result

    def average(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None,
                selector: Optional[Selector[T, Number]] = None) -> float:
        """
        sum(selector) / count(predicate).

        the predicate narrows only the denominator. a zero count does not raise:
        0/0 (or a nan total) gives nan and any other total gives an infinity of the total's sign.
        """
        count = self.count(predicate)
        total = self.sum(selector)
        if count == 0:
            return math.nan if total == 0 or math.isnan(total) else math.copysign(math.inf, total)
        return total / count
