"""
the iteration protocol every sequence operation in fpy is built on.

a sequence is anything with a restartable or single-use way of producing
values one at a time. plain mappings are deliberately excluded: only their
key, value and entry views count as sequences.
"""
from collections.abc import Iterator as _Iterator, Mapping, KeysView, ValuesView, ItemsView
from enum import Enum
from .types import *
from .errors import NotASequence


class SeqKind(Enum):
    ARRAY = "array"
    TEXT = "text"
    SET = "set"
    MAP_KEYS = "map_keys"
    MAP_VALUES = "map_values"
    MAP_ENTRIES = "map_entries"
    ITERATOR = "iterator"
    ITERABLE = "iterable"


class _Stop:
    """marker returned by next_ once an iterator is exhausted"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "STOP"


STOP = _Stop()


def kind_of(x: Any) -> Optional[SeqKind]:
    """tag a value with its sequence variant, or None if it is not a sequence"""
    if x is None or isinstance(x, Mapping):
        return None
    if isinstance(x, str):
        return SeqKind.TEXT
    if isinstance(x, (list, tuple)):
        return SeqKind.ARRAY
    if isinstance(x, (set, frozenset)):
        return SeqKind.SET
    # items views are also sets in collections.abc, check them first
    if isinstance(x, ItemsView):
        return SeqKind.MAP_ENTRIES
    if isinstance(x, KeysView):
        return SeqKind.MAP_KEYS
    if isinstance(x, ValuesView):
        return SeqKind.MAP_VALUES
    if isinstance(x, _Iterator):
        return SeqKind.ITERATOR
    if hasattr(x, '__iter__'):
        return SeqKind.ITERABLE
    return None


def is_iterable(x: Any) -> bool:
    return kind_of(x) is not None


def is_restartable(x: Any) -> bool:
    """true when iterating x twice yields the same elements twice"""
    kind = kind_of(x)
    if kind is None or kind is SeqKind.ITERATOR:
        return False
    # wrappers such as Seq report on their own source
    return bool(getattr(x, 'restartable', True))


def iter_(x: Iterable[T]) -> Iterator[T]:
    """
    returns an iterator over x. iterators are returned unchanged, containers
    give a fresh independent iterator on every call.
    """
    kind = kind_of(x)
    if kind is None:
        raise NotASequence(x)
    if kind is SeqKind.ITERATOR:
        return x
    return iter(x)


def next_(iterator: Iterator[T]) -> Union[T, _Stop]:
    """pull one value, or STOP when the iterator is exhausted"""
    return next(iterator, STOP)


def len_(x: Any) -> int:
    """element count of any sized or iterable value. consumes iterators."""
    if x is None:
        return 0
    if isinstance(x, Mapping):
        return len(x)
    kind = kind_of(x)
    if kind is None:
        return 0
    if kind is SeqKind.ITERATOR or not hasattr(x, '__len__'):
        return sum(1 for _ in x)
    return len(x)


def is_empty(x: Any) -> bool:
    return len_(x) == 0
