from __future__ import annotations
import typing
from collections import Counter, defaultdict
from ..types import *
from ..protocol import iter_

if typing.TYPE_CHECKING:
    from ..enumerable import Seq


def group(xs: Iterable[T], *discriminators: KeySelector[T, Any]) -> Union[Grouping, List[T]]:
    """
    partition into nested dicts, one level per discriminator, keyed by the
    stringified discriminator result. leaf buckets keep source order. with no
    discriminators the elements come back as a list.
    """
    items = list(iter_(xs))
    if not discriminators:
        return items

    discriminator, rest = discriminators[0], discriminators[1:]
    buckets = defaultdict(list)
    for item in items:
        buckets[str(discriminator(item))].append(item)
    return {key: group(bucket, *rest) for key, bucket in buckets.items()}


def partition(xs: Iterable[T], *predicates: Predicate[T]) -> List[List[T]]:
    """
    one bucket per predicate. each element joins the bucket of the first
    predicate it satisfies; elements matching none are dropped.
    """
    buckets: List[List[T]] = [[] for _ in predicates]
    for item in iter_(xs):
        for bucket, predicate in zip(buckets, predicates):
            if predicate(item):
                bucket.append(item)
                break
    return buckets


def _count_key(item: Any) -> Any:
    try:
        hash(item)
    except TypeError:
        return str(item)
    return item


def count(xs: Iterable[T]) -> Dict[Any, int]:
    """
    occurrences of each distinct element, keys in first-seen order.
    unhashable elements such as lists and dicts are counted under str(element).
    """
    return dict(Counter(_count_key(item) for item in iter_(xs)))


def objectify(key: KeySelector[T, K], xs: Iterable[T]) -> Dict[K, T]:
    """index elements by key(element). later duplicates overwrite earlier ones."""
    return {key(item): item for item in iter_(xs)}


def find_many(xs: Iterable[T], *predicates: Predicate[T]) -> List[Optional[T]]:
    """
    the first match for each predicate, in predicate order. an element is
    claimed by the first predicate that is still unmatched and accepts it.
    """
    found: List[Optional[T]] = [None] * len(predicates)
    pending = list(range(len(predicates)))
    for item in iter_(xs):
        if not pending:
            break
        for i in pending:
            if predicates[i](item):
                found[i] = item
                pending.remove(i)
                break
    return found


class GroupingAccessor(Generic[T]):
    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def by(self, *discriminators: KeySelector[T, Any]) -> Union[Grouping, List[T]]:
        """nested grouping, one level per discriminator"""
        return group(self._seq, *discriminators)

    def partition(self, *predicates: Predicate[T]) -> List[List[T]]:
        return partition(self._seq, *predicates)

    def count(self) -> Dict[Any, int]:
        return count(self._seq)

    def objectify(self, key: KeySelector[T, K]) -> Dict[K, T]:
        return objectify(key, self._seq)

    def find_many(self, *predicates: Predicate[T]) -> List[Optional[T]]:
        return find_many(self._seq, *predicates)
