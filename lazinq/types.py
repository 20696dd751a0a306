from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# anything as_linq accepts: an iterable, or a zero-arg factory of an iterator or iterable
Producer = Union[Iterable[T], Callable[[], Iterator[T]], Callable[[], Iterable[T]]]

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Number = Union[int, float]

# name of the field holding the original element in let() composites
RESERVED_KEY = 'value'
