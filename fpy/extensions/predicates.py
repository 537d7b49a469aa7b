"""predicate builders, strict and deep equality, membership tests"""
import numbers
from collections.abc import Mapping, Set as AbstractSet
from ..types import *
from ..protocol import kind_of, SeqKind, iter_


# --- boolean logic ---

def not_(a: Any) -> bool:
    return not a


def and_(a: Any, b: Any) -> Any:
    return a and b


def or_(a: Any, b: Any) -> Any:
    return a or b


def AND(fs: Iterable[Predicate[T]]) -> Callable[..., bool]:
    """true when every predicate holds. vacuously true for no predicates."""
    fs = list(fs)
    return lambda *x: all(f(*x) for f in fs)


def OR(fs: Iterable[Predicate[T]]) -> Callable[..., bool]:
    fs = list(fs)
    return lambda *x: any(f(*x) for f in fs)


# --- equality ---

_SCALARS = (str, bytes, numbers.Number, type(None))


def strict_equal(a: Any, b: Any) -> bool:
    """value equality for scalars, identity for everything else"""
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if isinstance(a, numbers.Number) and isinstance(b, numbers.Number):
        return a == b
    if isinstance(a, _SCALARS) and isinstance(b, _SCALARS):
        return type(a) is type(b) and a == b
    return a is b


def is_(a: Any) -> Predicate[Any]:
    return lambda b: strict_equal(a, b)


def isnt(a: Any) -> Predicate[Any]:
    return lambda b: not strict_equal(a, b)


def like(a: Any) -> Predicate[Any]:
    """loose equality, python's ==."""
    return lambda b: a == b


def is_none(x: Any) -> bool:
    return x is None


def defined(x: Any) -> bool:
    return x is not None


def instance(cls: Union[Type, Tuple[Type, ...]]) -> Predicate[Any]:
    return lambda x: isinstance(x, cls)


def equal(a: Any, b: Any, _seen: Optional[Set[Tuple[int, int]]] = None) -> bool:
    """
    deep structural equality. dispatches on the container kind of the two values,
    recursing into mappings, arrays and plain objects. sets compare by membership.
    a pair of containers met again while already being compared counts as equal,
    so self-referencing structures terminate.
    """
    if strict_equal(a, b):
        return True
    if a is None or b is None or type(a) is not type(b):
        return False

    if isinstance(a, _SCALARS):
        return a == b

    seen = set() if _seen is None else _seen
    pair = (id(a), id(b))
    if pair in seen:
        return True
    seen.add(pair)

    if isinstance(a, Mapping):
        if len(a) != len(b):
            return False
        return all(k in b and equal(v, b[k], seen) for k, v in a.items())

    if isinstance(a, AbstractSet):
        return len(a) == len(b) and all(x in b for x in a)

    kind = kind_of(a)
    if kind is SeqKind.ARRAY:
        return len(a) == len(b) and all(equal(x, y, seen) for x, y in zip(a, b))

    if hasattr(a, '__dict__') and kind is None:
        return equal(vars(a), vars(b), seen)

    return a == b


# --- ordering and arithmetic predicates ---

def between(x: Any, low: Any, high: Any) -> bool:
    return low <= x <= high


def cbetween(low: Any, high: Any) -> Predicate[Any]:
    return lambda x: between(x, low, high)


def gt(a: Any) -> Predicate[Any]:
    return lambda b: b > a


def gte(a: Any) -> Predicate[Any]:
    return lambda b: b >= a


def lt(a: Any) -> Predicate[Any]:
    return lambda b: b < a


def lte(a: Any) -> Predicate[Any]:
    return lambda b: b <= a


def divisible(a: Any) -> Predicate[Any]:
    return lambda b: b % a == 0


# --- membership ---

def inside(xs: Any) -> Predicate[Any]:
    """
    membership in a container. text checks substrings, mappings check keys,
    a Range checks its interval. anything else is treated as empty.
    """
    def check(x: Any) -> bool:
        if xs is None:
            return False
        if isinstance(xs, Range):
            return xs.includes(x)
        if isinstance(xs, str):
            return isinstance(x, str) and x in xs
        if isinstance(xs, Mapping) or kind_of(xs) in (SeqKind.ARRAY, SeqKind.SET,
                                                         SeqKind.MAP_KEYS, SeqKind.MAP_VALUES,
                                                         SeqKind.MAP_ENTRIES):
            return x in xs
        return False
    return check


def outside(xs: Any) -> Predicate[Any]:
    return lambda x: not inside(xs)(x)


def has(x: Any) -> Predicate[Any]:
    return lambda xs: inside(xs)(x)


def hasnt(x: Any) -> Predicate[Any]:
    return lambda xs: outside(xs)(x)


def has_one(candidates: Iterable[Any]) -> Predicate[Any]:
    """true when any candidate is inside the container"""
    return lambda xs: any(inside(xs)(x) for x in iter_(candidates))
