"""eager reducers. each consumes its source exactly once, in source order."""
from __future__ import annotations
import typing
from functools import reduce
from ..types import *
from ..protocol import iter_, STOP, next_
from .arithmetic import add
from .predicates import gt, lt

if typing.TYPE_CHECKING:
    from ..enumerable import Seq


def foldl(f: Accumulator[U, T], seed: U, xs: Iterable[T]) -> U:
    """left fold, f(acc, x). the seed comes back untouched for an empty source."""
    return reduce(f, iter_(xs), seed)


def foldr(f: RightAccumulator[T, U], seed: U, xs: Iterable[T]) -> U:
    """fold with the element first, f(x, acc). still walks the source front to back."""
    acc = seed
    for x in iter_(xs):
        acc = f(x, acc)
    return acc


def sum_(xs: Iterable[Any]) -> Any:
    """fold with the polymorphic add, seeded with 0"""
    return foldr(add, 0, xs)


def average(xs: Iterable[Any]) -> Any:
    """
    one-pass mean. raises ValueError on an empty sequence; returns None when
    the elements cannot be added together.
    """
    total, n = 0, 0
    for x in iter_(xs):
        total = add(x, total)
        n += 1
    if n == 0:
        raise ValueError("cannot calculate average of empty sequence")
    if total is None:
        return None
    return total / n


def optimise(better: Improvement, key: KeySelector[T, Any], xs: Iterable[T]) -> Optional[T]:
    """
    single-pass selection. starts from the first element and switches to a
    candidate whenever better(current_key)(candidate_key) holds. None when empty.
    """
    iterator = iter_(xs)
    best = next_(iterator)
    if best is STOP:
        return None
    best_key = key(best)
    for x in iterator:
        candidate_key = key(x)
        if better(best_key)(candidate_key):
            best, best_key = x, candidate_key
    return best


def maximum(key: KeySelector[T, Any], xs: Iterable[T]) -> Optional[T]:
    """first element with the greatest key"""
    return optimise(gt, key, xs)


def minimum(key: KeySelector[T, Any], xs: Iterable[T]) -> Optional[T]:
    """first element with the smallest key"""
    return optimise(lt, key, xs)


def find(f: Predicate[T], xs: Iterable[T]) -> Optional[T]:
    for x in iter_(xs):
        if f(x):
            return x
    return None


def find_index(f: Predicate[T], xs: Iterable[T]) -> Optional[int]:
    for i, x in enumerate(iter_(xs)):
        if f(x):
            return i
    return None


def every(f: Predicate[T], xs: Iterable[T]) -> bool:
    return all(f(x) for x in iter_(xs))


def some(f: Predicate[T], xs: Iterable[T]) -> bool:
    return any(f(x) for x in iter_(xs))


def early(f: Predicate[T], xs: Iterable[T]) -> Optional[T]:
    """the first element matching f, or the last element seen if none does"""
    latest = None
    for x in iter_(xs):
        if f(x):
            return x
        latest = x
    return latest


def each(f: Callable[[T], Any], xs: Iterable[T]) -> Iterable[T]:
    """eagerly run f over every element for its side effects, returning xs"""
    for x in iter_(xs):
        f(x)
    return xs


def union(sets: Iterable[Iterable[T]]) -> Set[T]:
    result: Set[T] = set()
    for s in iter_(sets):
        result.update(iter_(s))
    return result


class ReduceAccessor(Generic[T]):
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def foldl(self, f: Accumulator[U, T], seed: U) -> U:
        return foldl(f, seed, self._seq)

    def foldr(self, f: RightAccumulator[T, U], seed: U) -> U:
        return foldr(f, seed, self._seq)

    def sum(self) -> Any:
        return sum_(self._seq)

    def average(self) -> Any:
        return average(self._seq)

    def optimise(self, better: Improvement, key: KeySelector[T, Any] = lambda x: x) -> Optional[T]:
        return optimise(better, key, self._seq)

    def maximum(self, key: KeySelector[T, Any] = lambda x: x) -> Optional[T]:
        return maximum(key, self._seq)

    def minimum(self, key: KeySelector[T, Any] = lambda x: x) -> Optional[T]:
        return minimum(key, self._seq)

    def find(self, f: Predicate[T]) -> Optional[T]:
        return find(f, self._seq)

    def find_index(self, f: Predicate[T]) -> Optional[int]:
        return find_index(f, self._seq)

    def every(self, f: Predicate[T]) -> bool:
        return every(f, self._seq)

    def some(self, f: Predicate[T]) -> bool:
        return some(f, self._seq)

    def early(self, f: Predicate[T]) -> Optional[T]:
        return early(f, self._seq)

    def each(self, f: Callable[[T], Any]) -> 'Seq[T]':
        """eager for-each, returns the same seq for chaining"""
        each(f, self._seq)
        return self._seq
