"""
lazy sequence combinators. every function validates its source through
`iter_` when it is called, so a bad argument fails at once, and then produces
elements on demand. the result is a single-pass iterator; wrap it in a Seq for
restartable pipelines.
"""
from __future__ import annotations
import typing
from collections.abc import Mapping
from itertools import chain, count, islice
from ..types import *
from ..protocol import iter_, is_iterable, is_restartable, kind_of
from ..errors import NotASequence

if typing.TYPE_CHECKING:
    from ..enumerable import Seq


def map_(f: Selector[T, U], xs: Iterable[T]) -> Iterator[U]:
    source = iter_(xs)
    return (f(x) for x in source)


def filter_(f: Predicate[T], xs: Iterable[T]) -> Iterator[T]:
    source = iter_(xs)
    return (x for x in source if f(x))


def limit(n: int, xs: Iterable[T]) -> Iterator[T]:
    """at most the first n elements. safe on unbounded sources."""
    return islice(iter_(xs), max(n, 0))


def _flatten(source: Iterator[Any], depth: int) -> Iterator[Any]:
    for x in source:
        if depth > 0 and is_iterable(x):
            yield from _flatten(iter_(x), depth - 1)
        else:
            yield x


def flatten(xs: Iterable[Any], depth: int = 1) -> Iterator[Any]:
    """expand nested sequences up to depth levels. mappings are never expanded."""
    return _flatten(iter_(xs), depth)


def enumerate_(xs: Iterable[T], start: int = 0) -> Iterator[Tuple[int, T]]:
    return enumerate(iter_(xs), start)


def _scanl(f: Accumulator[U, T], acc: U, source: Iterator[T]) -> Iterator[U]:
    for x in source:
        acc = f(acc, x)
        yield acc


def _scanr(f: RightAccumulator[T, U], acc: U, source: Iterator[T]) -> Iterator[U]:
    for x in source:
        acc = f(x, acc)
        yield acc


def scanl(f: Accumulator[U, T], seed: U, xs: Iterable[T]) -> Iterator[U]:
    """every intermediate foldl accumulator, the last one equals the fold"""
    return _scanl(f, seed, iter_(xs))


def scanr(f: RightAccumulator[T, U], seed: U, xs: Iterable[T]) -> Iterator[U]:
    return _scanr(f, seed, iter_(xs))


def unshift(a: Iterable[T], b: Iterable[T]) -> Iterator[T]:
    """all of a, then all of b"""
    return chain(iter_(a), iter_(b))


def append(a: Iterable[T], b: Iterable[T]) -> Iterator[T]:
    """all of b, then all of a"""
    return unshift(b, a)


def _combine(head: Tuple[Any, ...], pools: List[Iterable[Any]]) -> Iterator[Tuple[Any, ...]]:
    if not pools:
        yield head
        return
    for x in iter_(pools[0]):
        yield from _combine(head + (x,), pools[1:])


def combinations(*sequences: Iterable[Any]) -> Iterator[Tuple[Any, ...]]:
    """
    cartesian product in odometer order, the last sequence varying fastest.
    the first sequence is consumed lazily and may be unbounded; later ones are
    walked once per prefix, so single-use iterators and single-pass seqs
    among them are buffered.
    """
    if not sequences:
        return _combine((), [])
    pools: List[Iterable[Any]] = [iter_(sequences[0])]
    for s in sequences[1:]:
        if kind_of(s) is None:
            raise NotASequence(s)
        pools.append(s if is_restartable(s) else tuple(s))
    return _combine((), pools)


def _combine_fn(head: Tuple[Any, ...], fns: Tuple[Callable, ...]) -> Iterator[Tuple[Any, ...]]:
    if not fns:
        yield head
        return
    for x in iter_(fns[0](head)):
        yield from _combine_fn(head + (x,), fns[1:])


def combinations_fn(*fns: Callable[[Tuple[Any, ...]], Iterable[Any]]) -> Iterator[Tuple[Any, ...]]:
    """
    dependent cartesian product: each stage's sequence is computed from the
    partial tuple built so far, which allows pruning.
    """
    return _combine_fn((), fns)


def naturals(start: int = 0) -> Iterator[int]:
    return count(start)


def seq(start: Any, end: Any) -> Iterator[Any]:
    """start, start + 1, ... up to and including end"""
    x = start
    while x <= end:
        yield x
        x += 1


def map_match(fs: Iterable[Callable[[T], U]], xs: Iterable[T]) -> Iterator[U]:
    """apply the i-th function to the i-th element, stopping when either runs out"""
    functions, source = iter_(fs), iter_(xs)
    return (f(x) for f, x in zip(functions, source))


def _side_effect(action: Callable[[T], Any], source: Iterator[T]) -> Iterator[T]:
    for x in source:
        action(x)
        yield x


def side_effect(action: Callable[[T], Any], xs: Iterable[T]) -> Iterator[T]:
    """call action on each element as it passes through, lazily"""
    return _side_effect(action, iter_(xs))


def ungroup(grouping: Union[Mapping, Iterable[Any]]) -> Iterator[Any]:
    """walk a grouping result back into a flat sequence of its leaf elements"""
    if isinstance(grouping, Mapping):
        for bucket in grouping.values():
            yield from ungroup(bucket)
    else:
        yield from iter_(grouping)


# --- fluent lazy operations for Seq ---

class _LazyOperations(Generic[T]):
    def map(self: 'Seq[T]', f: Selector[T, U]) -> 'Seq[U]':
        """project each element"""
        from ..enumerable import Seq
        return Seq(lambda: map_(f, self), self)

    def filter(self: 'Seq[T]', f: Predicate[T]) -> 'Seq[T]':
        """keep elements matching the predicate"""
        from ..enumerable import Seq
        return Seq(lambda: filter_(f, self), self)

    def limit(self: 'Seq[T]', n: int) -> 'Seq[T]':
        """take at most n elements"""
        from ..enumerable import Seq
        return Seq(lambda: limit(n, self), self)

    def flatten(self: 'Seq[Any]', depth: int = 1) -> 'Seq[Any]':
        from ..enumerable import Seq
        return Seq(lambda: flatten(self, depth), self)

    def enumerate(self: 'Seq[T]', start: int = 0) -> 'Seq[Tuple[int, T]]':
        from ..enumerable import Seq
        return Seq(lambda: enumerate_(self, start), self)

    def scanl(self: 'Seq[T]', f: Accumulator[U, T], seed: U) -> 'Seq[U]':
        from ..enumerable import Seq
        return Seq(lambda: scanl(f, seed, self), self)

    def scanr(self: 'Seq[T]', f: RightAccumulator[T, U], seed: U) -> 'Seq[U]':
        from ..enumerable import Seq
        return Seq(lambda: scanr(f, seed, self), self)

    def unshift(self: 'Seq[T]', prefix: Iterable[T]) -> 'Seq[T]':
        """yield prefix before this sequence"""
        from ..enumerable import Seq
        return Seq(lambda: unshift(prefix, self), self, prefix)

    def append(self: 'Seq[T]', suffix: Iterable[T]) -> 'Seq[T]':
        """yield suffix after this sequence"""
        from ..enumerable import Seq
        return Seq(lambda: append(suffix, self), self, suffix)

    def side_effect(self: 'Seq[T]', action: Callable[[T], Any]) -> 'Seq[T]':
        """
        lazily runs action for each element passing through, without changing it.
        useful for debugging pipelines: .filter(...).side_effect(print).map(...)
        """
        from ..enumerable import Seq
        return Seq(lambda: side_effect(action, self), self)
