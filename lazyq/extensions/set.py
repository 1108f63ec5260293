from __future__ import annotations
import typing
import logging
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

class SetAccessor(Generic[T]):
    """
    deduplication and set-theoretic operations. all results are deferred and
    keep the order of first appearance in this sequence.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        def distinct_iter():
            seen = set()
            for item in self._enumerable:
                key = key_selector(item) if key_selector is not None else item
                if key not in seen:
                    seen.add(key)
                    yield item
            logger.debug(f"distinct kept {len(seen)} keys")
        return self._enumerable._derive(distinct_iter)

    def distinct_by(self, key_selector: KeySelector[T, K]) -> 'Enumerable[T]':
        """keep the first element seen for each key, whole element retained"""
        return self.distinct(key_selector)

    def union(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        return self._enumerable.concat(other).set.distinct()

    def intersect(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return the distinct elements of this sequence that also occur in other."""
        def intersect_iter():
            # building a set from the second iterable provides o(1) average time complexity for lookups
            other_set = set(other)
            return (x for x in self._enumerable if x in other_set)
        return self._enumerable._derive(intersect_iter).set.distinct()

    def except_(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return the distinct elements of this sequence not in other (set difference)."""
        def except_iter():
            other_set = set(other)
            return (x for x in self._enumerable if x not in other_set)
        return self._enumerable._derive(except_iter).set.distinct()
