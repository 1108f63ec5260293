from __future__ import annotations
import typing
import logging
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def _is_hashable(key: Any) -> bool:
    try:
        hash(key)
    except TypeError:
        return False
    return True


class _InnerIndex(Generic[U, K]):
    """
    the inner side of a join, keyed once per evaluation.
    the hash lookup appends in inner traversal order, so every bucket keeps
    inner order; the keyed list backs the nested scan.
    """

    def __init__(self, inner: Iterable[U], inner_key_selector: KeySelector[U, K], strategy: str):
        self._keyed = [(inner_key_selector(item), item) for item in inner]
        self._lookup: Optional[Dict[K, List[Tuple[K, U]]]] = None
        if strategy == 'hash' and all(_is_hashable(key) for key, _ in self._keyed):
            lookup = defaultdict(list)
            for key, item in self._keyed:
                lookup[key].append((key, item))
            self._lookup = lookup
        logger.debug(f"join index over {len(self._keyed)} inner elements "
                     f"({'hash' if self._lookup is not None else 'nested'})")

    def matches(self, outer_key: K) -> List[U]:
        candidates = self._keyed
        if self._lookup is not None and _is_hashable(outer_key):
            candidates = self._lookup.get(outer_key, [])
        # dict lookup also matches on identity, so == decides (nan never matches)
        return [item for key, item in candidates if outer_key == key]


class JoinAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _index(self, inner: Iterable[U], inner_key_selector: KeySelector[U, K]) -> _InnerIndex[U, K]:
        return _InnerIndex(inner, inner_key_selector, self._enumerable.options.join_strategy)

    def join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V]) -> 'Enumerable[V]':
        """
        inner equi-join. results are grouped by outer element in outer order,
        and within a group follow inner order.
        """
        def join_iter():
            index = self._index(inner, inner_key_selector)
            for outer_item in self._enumerable:
                for inner_item in index.matches(outer_key_selector(outer_item)):
                    yield result_selector(outer_item, inner_item)
        return self._enumerable._derive(join_iter)

    def left_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                  inner_key_selector: KeySelector[U, K],
                  result_selector: Callable[[T, Optional[U]], V],
                  default_inner: Optional[U] = None) -> 'Enumerable[V]':
        """left outer join - includes all outer elements even without matches"""
        def left_join_iter():
            index = self._index(inner, inner_key_selector)
            for outer_item in self._enumerable:
                matched_inners = index.matches(outer_key_selector(outer_item))
                if matched_inners:
                    for inner_item in matched_inners:
                        yield result_selector(outer_item, inner_item)
                else:
                    yield result_selector(outer_item, default_inner)
        return self._enumerable._derive(left_join_iter)

    def group_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, List[U]], V]) -> 'Enumerable[V]':
        """group join - one result per outer element with its list of inner matches"""
        def group_join_iter():
            index = self._index(inner, inner_key_selector)
            for outer_item in self._enumerable:
                yield result_selector(outer_item, list(index.matches(outer_key_selector(outer_item))))
        # one result per outer element
        return self._enumerable._derive(group_join_iter, self._enumerable._known_size)
