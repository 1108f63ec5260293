from __future__ import annotations
import typing
import operator
import numpy as np
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_MISSING = object()

class StatsAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _get_values(self, selector: Optional[Selector[T, Any]] = None) -> Iterable[Any]:
        """the sequence itself, or its projection through selector"""
        return self._enumerable.select(selector) if selector else self._enumerable

    def _total(self, values: List[Any]) -> Any:
        """sum an already materialized list, starting from zero"""
        if (values and self._enumerable.options.numeric_backend == 'numpy'
                and all(isinstance(x, (float, np.floating)) for x in values)):
            # pairwise float summation; ints stay on python's exact arithmetic
            return np.sum(values).item()
        return reduce(operator.add, values, 0)

    def sum(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> Union[int, float]:
        """calc sum. an empty sequence sums to 0."""
        return self._total(list(self._get_values(selector)))

    def average(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> float:
        """calc average"""
        values = list(self._get_values(selector))
        if not values: raise EmptySequenceError("cannot calculate average of empty sequence")
        return self._total(values) / len(values)

    def min(self, selector: Optional[Selector[T, Any]] = None) -> T:
        """
        find minimum. with a selector, elements are compared by key but the
        element itself is returned. ties resolve to the first occurrence.
        """
        result = min(self._enumerable, key=selector, default=_MISSING)
        if result is _MISSING: raise EmptySequenceError("cannot find minimum of empty sequence")
        return result

    def max(self, selector: Optional[Selector[T, Any]] = None) -> T:
        """find maximum. ties resolve to the first occurrence."""
        result = max(self._enumerable, key=selector, default=_MISSING)
        if result is _MISSING: raise EmptySequenceError("cannot find maximum of empty sequence")
        return result
