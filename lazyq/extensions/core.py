from __future__ import annotations
import typing
from itertools import chain, islice, takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    """deferred operators. none of these read the source until the result is iterated."""

    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        # filter() pulls one upstream element per candidate, no buffering
        return self._derive(lambda: filter(predicate, self))

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        # 1:1 projection keeps the upstream size
        return self._derive(lambda: map(selector, self), self._known_size)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        return self._derive(lambda: chain.from_iterable(map(selector, self)))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        if count < 0:
            raise ValueError("take count must be non-negative")

        def take_iter():
            if count == 0:
                return iter(())
            # islice stops before pulling element count + 1
            return islice(self, count)

        def take_size():
            size = self._known_size()
            return min(size, count) if size is not None else None

        return self._derive(take_iter, take_size)

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        if count < 0:
            raise ValueError("skip count must be non-negative")

        def skip_size():
            size = self._known_size()
            return max(size - count, 0) if size is not None else None

        return self._derive(lambda: islice(self, count, None), skip_size)

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        return self._derive(lambda: takewhile(predicate, self))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        return self._derive(lambda: dropwhile(predicate, self))

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order"""
        from ..factories import from_iterable
        tail = from_iterable(other)

        def concat_size():
            head_size, tail_size = self._known_size(), tail._known_size()
            if head_size is None or tail_size is None:
                return None
            return head_size + tail_size

        return self._derive(lambda: chain(self, tail), concat_size)

    def order_by(self: 'Enumerable[T]', key_selector: Callable[[T], K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key (stable)"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, [(key_selector, False)])

    def order_by_descending(self: 'Enumerable[T]', key_selector: Callable[[T], K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order (stable)"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, [(key_selector, True)])
