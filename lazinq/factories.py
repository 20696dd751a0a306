import typing
from itertools import count as _counter, repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def as_linq(source: Producer[T]) -> 'Enumerable[T]':
    """
    wrap a producer in a lazy enumerable. this is the only way pipelines start.

    the source may be an iterable, or a zero-argument callable returning a fresh
    iterator or iterable. callables are invoked again on every traversal.
    """
    from .enumerable import Enumerable
    return Enumerable(source)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    return as_linq(lambda: range(start, start + count))

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """create enumerable with repeated item, endless when count is None"""
    if count is None:
        return as_linq(lambda: _repeat(item))
    return as_linq(lambda: _repeat(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    return as_linq(())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """generate sequence by calling a function, endless when count is None"""
    def generate_data():
        for _ in (_counter() if count is None else range(count)):
            yield generator_func()
    return as_linq(generate_data)

# --- aliases ---
from_iterable = as_linq
P = as_linq
