from __future__ import annotations
import typing
import logging
import numpy as np
import pandas as pd
from collections import deque
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

class TerminalAccessor(Generic[T]):
    """eager operations: each call walks the pipeline once and returns a concrete result"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _source(self, predicate: Optional[Predicate[T]]) -> Iterable[T]:
        return self._enumerable.where(predicate) if predicate is not None else self._enumerable

    # --- materializers ---

    def list(self) -> List[T]:
        """walk the pipeline once into a new list owned by the caller"""
        # list() asks the enumerable for a length hint, so known sizes are pre-allocated
        result = list(self._enumerable)
        logger.debug(f"materialized {len(result)} elements")
        return result

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. later keys overwrite earlier ones."""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    # --- reducers ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements, in o(1) when the size is known and there is no predicate"""
        if predicate is None:
            size = self._enumerable._known_size()
            if size is not None: return size
            return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        if predicate is None:
            for _ in self._enumerable:
                return True
            return False
        return any(predicate(x) for x in self._enumerable)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._enumerable)

    def try_first(self, predicate: Optional[Predicate[T]] = None) -> Maybe[T]:
        """first element wrapped in a Maybe, absent when there is none"""
        for item in self._source(predicate):
            return Maybe.some(item)
        return Maybe.absent()

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        found = self.try_first(predicate)
        if not found:
            raise EmptySequenceError("sequence contains no elements" if predicate is None
                                     else "no element satisfies the condition")
        return found.value

    def first_or_default(self, default: Optional[T] = None,
                         predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        """get first element or default"""
        return self.try_first(predicate).or_else(default)

    def try_last(self, predicate: Optional[Predicate[T]] = None) -> Maybe[T]:
        """last element wrapped in a Maybe. walks the whole sequence."""
        # a one-slot deque keeps only the most recent element
        tail = deque(self._source(predicate), maxlen=1)
        return Maybe.some(tail[0]) if tail else Maybe.absent()

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        found = self.try_last(predicate)
        if not found:
            raise EmptySequenceError("sequence contains no elements" if predicate is None
                                     else "no element satisfies the condition")
        return found.value

    def last_or_default(self, default: Optional[T] = None,
                        predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        """get last element or default"""
        return self.try_last(predicate).or_else(default)

    def aggregate(self, seed: U, accumulator: Accumulator[U, T]) -> U:
        """left fold from seed. an empty sequence returns seed unchanged."""
        return reduce(accumulator, self._enumerable, seed)

    def aggregate_with_selector(self, seed: U, accumulator: Accumulator[U, T],
                                result_selector: Selector[U, V]) -> V:
        """aggregate with seed and final transformation"""
        return result_selector(self.aggregate(seed, accumulator))
