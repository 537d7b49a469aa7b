import typing
from itertools import count, repeat as itertools_repeat
from .types import *
from .protocol import iter_

if typing.TYPE_CHECKING:
    from .enumerable import Seq


def from_iterable(data: Iterable[T]) -> 'Seq[T]':
    """
    wrap an iterable. containers stay restartable; a single-use iterator gives a
    single-pass seq.
    """
    from .enumerable import Seq
    iter_(data)
    return Seq(lambda: data)


def from_generator(generator_func: Callable[[], Iterable[T]]) -> 'Seq[T]':
    """restartable seq that calls generator_func for every iteration"""
    from .enumerable import Seq
    return Seq(generator_func)


def from_range(start: int, count: int) -> 'Seq[int]':
    """create seq from range"""
    from .enumerable import Seq
    return Seq(lambda: range(start, start + count))


def naturals_seq(start: int = 0) -> 'Seq[int]':
    """the unbounded sequence start, start + 1, ..."""
    from .enumerable import Seq
    return Seq(lambda: count(start))


def repeat(item: T, times: int) -> 'Seq[T]':
    """create seq with repeated item"""
    from .enumerable import Seq
    return Seq(lambda: itertools_repeat(item, times))


def empty() -> 'Seq[Any]':
    """create empty seq"""
    from .enumerable import Seq
    return Seq(lambda: ())


# --- aliases ---
P = from_iterable
p = from_iterable
