from dataclasses import dataclass
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
# right-fold accumulators take the element first
RightAccumulator = Callable[[T, U], U]
# better(current_key)(candidate_key) -> replace the current optimum?
Improvement = Callable[[Any], Callable[[Any], bool]]
# nested mapping of discriminator key -> further grouping or leaf bucket
Grouping = Dict[str, Any]


@dataclass(frozen=True)
class Range:
    """closed numeric interval [min, max]"""
    min: Any
    max: Any

    def includes(self, x: Any) -> bool:
        return self.min <= x <= self.max

    def __contains__(self, x: Any) -> bool:
        return self.includes(x)
