from typing import NamedTuple
from .types import *
from .extensions.lazy import map_, filter_
from .extensions.predicates import strict_equal


class Duad(NamedTuple):
    """an ordered pair, the generic shape of a key-value entry"""
    first: Any
    second: Any

    @staticmethod
    def prefix(a: Any) -> Callable[[Any], 'Duad']:
        """pair every value with a fixed first slot"""
        return lambda b: Duad(a, b)

    @staticmethod
    def suffix(a: Any) -> Callable[[Any], 'Duad']:
        """pair every value with a fixed second slot"""
        return lambda b: Duad(b, a)

    @staticmethod
    def map_first(f: Selector[Any, Any], duads: Iterable[Tuple[Any, Any]]) -> Iterator['Duad']:
        return map_(lambda d: Duad(f(d[0]), d[1]), duads)

    @staticmethod
    def map_second(f: Selector[Any, Any], duads: Iterable[Tuple[Any, Any]]) -> Iterator['Duad']:
        return map_(lambda d: Duad(d[0], f(d[1])), duads)

    @staticmethod
    def filter_first(f: Predicate[Any], duads: Iterable[Tuple[Any, Any]]) -> Iterator[Tuple[Any, Any]]:
        return filter_(lambda d: f(d[0]), duads)

    @staticmethod
    def filter_second(f: Predicate[Any], duads: Iterable[Tuple[Any, Any]]) -> Iterator[Tuple[Any, Any]]:
        return filter_(lambda d: f(d[1]), duads)

    @staticmethod
    def combine(f: Callable[[Any, Any], Any]) -> Callable[[Tuple[Any, Any]], Any]:
        """call a binary function with both slots"""
        return lambda d: f(d[0], d[1])

    @staticmethod
    def is_(a: Tuple[Any, Any]) -> Predicate[Tuple[Any, Any]]:
        """slot-wise strict equality"""
        return lambda b: strict_equal(a[0], b[0]) and strict_equal(a[1], b[1])

    @staticmethod
    def flip(d: Tuple[Any, Any]) -> 'Duad':
        return Duad(d[1], d[0])
