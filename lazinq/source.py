"""
source adapter: turns any supported producer into something a for loop can walk.

three producer shapes are accepted:
  - an iterable (list, set, generator object, another enumerable, ...)
  - a zero-argument factory returning a fresh iterator
  - a zero-argument factory returning a fresh iterable
"""
from collections.abc import Iterable as IterableABC, Iterator as IteratorABC
from .types import *


def iterate_iterator(iterator: Iterator[T]) -> Iterator[T]:
    """advance a single-step iterator until it is exhausted"""
    while True:
        try:
            item = next(iterator)
        except StopIteration:
            return
        yield item


def to_iterable(source: Producer[T]) -> Iterable[T]:
    """
    returns an iterable view of the producer.
    factories are invoked once per call, so every consumption gets its own traversal.
    restartability of a factory's output is up to the caller.
    """
    if isinstance(source, IterableABC):
        return source
    if callable(source):
        result = source()
        if isinstance(result, IteratorABC):
            return iterate_iterator(result)
        if isinstance(result, IterableABC):
            return result
        raise TypeError(f"source factory returned a non-iterable {type(result).__name__}")
    raise TypeError(f"unsupported source type: {type(source).__name__}")
