"""
polymorphic key access and mutation over mappings, arrays and plain objects,
plus the small array helpers built on them.
"""
import random
from collections.abc import Mapping, MutableMapping, Sequence as AbstractSequence
from functools import cmp_to_key
from ..types import *
from ..protocol import iter_, kind_of, SeqKind
from .combinators import tap


# --- single level access ---

def _lookup(key: Any, x: Any) -> Any:
    """
    one lookup step. absent keys and None targets give None. indexes outside
    [0, len) are absent, negative ones do not count from the end.
    """
    if x is None:
        return None
    if isinstance(x, Mapping):
        return x.get(key)
    if isinstance(x, AbstractSequence) and isinstance(key, int):
        return x[key] if 0 <= key < len(x) else None
    if isinstance(key, str):
        return getattr(x, key, None)
    return None


def get(*keys: Any) -> Callable[[Any], Any]:
    """nested lookup: get(0, 'value')(x) is x[0]['value'], short-circuiting on None"""
    if len(keys) == 1:
        key = keys[0]
        return lambda x: _lookup(key, x)

    def walk(x: Any) -> Any:
        for key in keys:
            x = _lookup(key, x)
            if x is None:
                return None
        return x
    return walk


def get_from(x: Any) -> Callable[[Any], Any]:
    """get with the target fixed first"""
    return lambda key: get(key)(x)


def get_many(*keys: Any) -> Callable[[Any], List[Any]]:
    return lambda x: [_lookup(k, x) for k in keys]


def pluck(key: Any) -> Callable[[Any], Any]:
    """single-level get"""
    return lambda x: None if x is None else _lookup(key, x)


def set_(key: Any, value: Any) -> Callable[[T], T]:
    """write value under key and return the same target. None targets are left alone."""
    def write(x: T) -> T:
        if x is None:
            return x
        if isinstance(x, MutableMapping):
            x[key] = value
        elif isinstance(x, list) and isinstance(key, int):
            if key >= len(x):
                x.extend([None] * (key - len(x) + 1))
            x[key] = value
        else:
            setattr(x, key, value)
        return x
    return write


def _keys_of(x: Any) -> List[Any]:
    if isinstance(x, Mapping):
        return list(x.keys())
    if isinstance(x, list):
        return list(range(len(x)))
    return list(vars(x).keys())


def change(f: Callable[[Any], Any], *keys: Any) -> Callable[[T], T]:
    """transform the selected properties in place, every property when none are given"""
    def transform(x: T) -> T:
        for k in keys or _keys_of(x):
            set_(k, f(_lookup(k, x)))(x)
        return x
    return transform


def update(source: Any, *keys: Any) -> Callable[[T], T]:
    """copy the selected properties of source onto the target in place"""
    def copy(x: T) -> T:
        for k in keys or _keys_of(source):
            set_(k, _lookup(k, source))(x)
        return x
    return copy


def object_map(f: Callable[[Tuple[Any, Any], Dict], Tuple[Any, Any]]) -> Callable[[Dict], Dict]:
    """rebuild a mapping from f(entry, mapping) for every (key, value) entry"""
    return lambda xs: dict(f(entry, xs) for entry in xs.items())


def object_filter(f: Callable[[Tuple[Any, Any], Dict], bool]) -> Callable[[Dict], Dict]:
    return lambda xs: dict(entry for entry in xs.items() if f(entry, xs))


# --- positional helpers ---

def first(xs: AbstractSequence) -> Any:
    return xs[0]


def second(xs: AbstractSequence) -> Any:
    return xs[1]


def last(xs: AbstractSequence) -> Any:
    return xs[-1]


def head(xs: AbstractSequence) -> AbstractSequence:
    """everything but the last element"""
    return xs[:-1]


def tail(xs: AbstractSequence) -> AbstractSequence:
    return xs[1:]


def slice_(start: int, stop: Optional[int] = None) -> Callable[[AbstractSequence], AbstractSequence]:
    return lambda xs: xs[start:stop]


def swap(xs: List[T], a: int, b: int) -> List[T]:
    xs[a], xs[b] = xs[b], xs[a]
    return xs


def pick(xs: AbstractSequence) -> Any:
    return random.choice(xs)


def construct(f: Callable[[int, int, List[T]], T], n: int) -> List[T]:
    """build a list of n items from f(index, n, items_so_far)"""
    items: List[T] = []
    for i in range(n):
        items.append(f(i, n, items))
    return items


# --- array helpers ---

def array_map(f: Selector[T, U]) -> Callable[[Iterable[T]], List[U]]:
    return lambda xs: [f(x) for x in xs]


def array_filter(f: Predicate[T]) -> Callable[[Iterable[T]], List[T]]:
    return lambda xs: [x for x in xs if f(x)]


def array_splice(start: int, count: int) -> Callable[[List[T]], List[T]]:
    """remove count items from start in place, returning the removed items"""
    def splice(xs: List[T]) -> List[T]:
        removed = xs[start:start + count]
        del xs[start:start + count]
        return removed
    return splice


def array_take(index: int) -> Callable[[List[T]], List[T]]:
    """drop the item at index in place and return the list"""
    return tap(lambda xs: xs.pop(index))


def array_get(key: Any) -> Callable[[Iterable[Any]], List[Any]]:
    return array_map(get(key))


def array_push(x: T) -> Callable[[List[T]], List[T]]:
    return tap(lambda xs: xs.append(x))


def join(separator: str, xs: Any) -> str:
    """stringify and join any sequence. None and non-sequences give ''."""
    if xs is None or kind_of(xs) is None:
        return ''
    return separator.join(str(x) for x in xs)


def sort(compare: Optional[Comparer[T]] = None) -> Callable[[Iterable[T]], List[T]]:
    """sort lists in place, other sequences into a new list"""
    key = cmp_to_key(compare) if compare else None

    def ordered(xs: Iterable[T]) -> List[T]:
        if isinstance(xs, list):
            xs.sort(key=key)
            return xs
        return sorted(iter_(xs), key=key)
    return ordered


def reverse(xs: Iterable[T]) -> List[T]:
    if kind_of(xs) is SeqKind.ARRAY:
        return list(reversed(xs))
    return list(iter_(xs))[::-1]
