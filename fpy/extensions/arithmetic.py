"""
arithmetic helpers. `add` is polymorphic over numbers, text, arrays, mappings,
sets and generic iterables, and degrades to None instead of raising when its
operands are of different kinds.
"""
import math
import numbers
import random
from collections.abc import Mapping
from ..types import *
from ..protocol import is_iterable


def _add_kind(x: Any) -> Optional[type]:
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, numbers.Number):
        return numbers.Number
    if isinstance(x, (str, bytes, list, tuple, frozenset, set)):
        return type(x)
    if isinstance(x, Mapping):
        return Mapping
    if is_iterable(x):
        return Iterable
    return None


def _chain(a: Iterable[T], b: Iterable[T]) -> Iterator[T]:
    yield from a
    yield from b


def add(a: Any, b: Any) -> Any:
    """
    a + b by kind: numbers sum, text and arrays concatenate, mappings merge with
    b winning, sets unite, any other pair of iterables is chained lazily.
    mismatched kinds or a None operand give None.
    """
    kind = _add_kind(a)
    if kind is None or kind is not _add_kind(b):
        return None
    if kind is numbers.Number:
        # numeric types that refuse to mix, such as Decimal and float
        try:
            return a + b
        except TypeError:
            return None
    if kind in (str, bytes, list, tuple):
        return a + b
    if kind is Mapping:
        return {**a, **b}
    if kind in (set, frozenset):
        return a | b
    return _chain(a, b)


def addr(a: Any, b: Any) -> Any:
    """add with the operands swapped"""
    return add(b, a)


def pow_(a: Any) -> Callable[[Any], Any]:
    return lambda b: b ** a


def mult(a: Any) -> Callable[[Any], Any]:
    return lambda b: a * b


def div(a: Any) -> Callable[[Any], Any]:
    """divide by a"""
    return lambda b: b / a


probability = div(100)
percentage = mult(100)


def randint(a: int, b: int) -> int:
    """random integer in [a, b)"""
    return a + math.floor(random.random() * (b - a))


def clamp(x: Any, low: Any, high: Any) -> Any:
    if x < low:
        return low
    if x > high:
        return high
    return x


def relative(x: float, low: float, high: float) -> float:
    """position of x inside [low, high] scaled to [0, 1]"""
    return (x - low) / (high - low)


def ceil(x: float, n: int = 0) -> float:
    """round up to a multiple of 10**n"""
    if n < 0:
        return math.ceil(x * 10 ** -n) / 10 ** -n
    return math.ceil(x / 10 ** n) * 10 ** n


def floor(x: float, n: int = 0) -> float:
    """round down to a multiple of 10**n"""
    if n < 0:
        return math.floor(x * 10 ** -n) / 10 ** -n
    return math.floor(x / 10 ** n) * 10 ** n


def minmax(a: Any, b: Any) -> Tuple[Any, Any]:
    return (b, a) if b < a else (a, b)


def plus_mod(m: int) -> Callable[[int], int]:
    """next multiple of m strictly above x"""
    return lambda x: x + (m - x % m)


def rollover(low: Any, high: Any) -> Callable[[Any], Any]:
    """wrap values past either end of [low, high] to the opposite end"""
    def roll(x: Any) -> Any:
        if x < low:
            return high
        if x > high:
            return low
        return x
    return roll


def signum(x: float) -> int:
    if x == 0:
        return 0
    return -1 if x < 0 else 1
