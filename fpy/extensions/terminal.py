from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..protocol import iter_
from .accessors import join
from .grouping import objectify

if typing.TYPE_CHECKING:
    from ..enumerable import Seq


class TerminalAccessor(Generic[T]):
    """materialising conversions. every call walks the sequence once."""

    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(iter_(self._seq))

    def tuple(self) -> Tuple[T, ...]:
        return tuple(iter_(self._seq))

    def set(self) -> Set[T]:
        """convert to set"""
        return set(iter_(self._seq))

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later keys win"""
        if value_selector is None:
            return objectify(key_selector, self._seq)
        return {key_selector(item): value_selector(item) for item in iter_(self._seq)}

    def join(self, separator: str = '') -> str:
        return join(separator, self._seq)

    def size(self) -> int:
        """number of elements"""
        return sum(1 for _ in iter_(self._seq))

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def frame(self) -> pd.DataFrame:
        """convert to pandas dataframe, one row per element"""
        return pd.DataFrame(self.list())
