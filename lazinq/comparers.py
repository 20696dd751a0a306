from .types import *


def compare(a: Any, b: Any) -> int:
    """three-way comparison: 0 if equal, 1 if a > b, otherwise -1"""
    if a == b: return 0
    return 1 if a > b else -1


def make_comparer(key_selector: Optional[KeySelector[T, K]], descending: bool) -> Comparer[T]:
    """build a single-key comparer. no key selector compares the elements themselves."""
    if key_selector is None:
        if descending:
            return lambda a, b: compare(b, a)
        return compare
    if descending:
        return lambda a, b: compare(key_selector(b), key_selector(a))
    return lambda a, b: compare(key_selector(a), key_selector(b))


def combine_comparers(first: Comparer[T], second: Comparer[T]) -> Comparer[T]:
    """primary/secondary ordering: second only breaks ties left by first"""
    def combined(a: T, b: T) -> int:
        result = first(a, b)
        if result != 0:
            return result
        return second(a, b)
    return combined
