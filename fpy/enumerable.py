from __future__ import annotations

from .types import *
from .protocol import iter_, is_restartable

# --- lazy operations ---
from .extensions.lazy import _LazyOperations

# --- accessors ---
from .extensions.reducers import ReduceAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.terminal import TerminalAccessor


class Seq(_LazyOperations[T]):
    """
    a lazy sequence over a zero-argument source function. the source is called
    afresh for every iteration, so a Seq is restartable whenever its source
    function returns a restartable value. nothing is cached.
    """

    def __init__(self, source_func: Callable[[], Iterable[T]], *upstream: Iterable[Any]):
        self._source_func = source_func
        # sources the source function reads from, empty for a root seq
        self._upstream = upstream
        # --- initialize accessors ---
        self.reduce = ReduceAccessor(self)
        self.group = GroupingAccessor(self)
        self.to = TerminalAccessor(self)

    def __iter__(self) -> Iterator[T]:
        return iter_(self._source_func())

    @property
    def restartable(self) -> bool:
        """false when any source of the pipeline is a shared single-use iterator"""
        if self._upstream:
            return all(is_restartable(source) for source in self._upstream)
        source = self._source_func()
        return is_restartable(source) or source is not self._source_func()

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the seq into an external function, enabling custom chainable operations.
        example: .pipe(my_custom_report, title='my data')
        """
        return func(self, *args, **kwargs)

    def __repr__(self) -> str:
        return f"Seq({self._source_func!r})"
