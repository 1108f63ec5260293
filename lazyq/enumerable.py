from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from .config import QueryOptions, DEFAULT_OPTIONS

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.stats import StatsAccessor
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """produce a fresh forward-only iterator over the elements"""
        pass

    @abstractmethod
    def _known_size(self) -> Optional[int]:
        """element count if it is available in o(1), otherwise None"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, iter_func: Callable[[], Iterable[T]],
                 size_func: Optional[Callable[[], Optional[int]]] = None,
                 options: Optional[QueryOptions] = None):
        """
        init with a function that produces the elements when called.
        nothing is read here; every iteration calls iter_func again.
        """
        self._iter_func = iter_func
        self._size_func = size_func
        self._options = options if options is not None else DEFAULT_OPTIONS

    @property
    def options(self) -> QueryOptions:
        return self._options

    def _known_size(self) -> Optional[int]:
        return self._size_func() if self._size_func is not None else None

    def _derive(self, iter_func: Callable[[], Iterable[U]],
                size_func: Optional[Callable[[], Optional[int]]] = None) -> 'Enumerable[U]':
        """build a downstream stage that shares this pipeline's options"""
        return Enumerable(iter_func, size_func, self._options)

    def with_options(self, options: Optional[QueryOptions] = None, **overrides: Any) -> 'Enumerable[T]':
        """same sequence, different options for every stage built from here on"""
        base = options if options is not None else self._options
        return Enumerable(self._iter_func, self._size_func, base.with_overrides(**overrides) if overrides else base)

    def __iter__(self) -> Iterator[T]:
        return iter(self._iter_func())

    def __length_hint__(self) -> int:
        # lets list() pre-size without forcing a traversal
        size = self._known_size()
        return size if size is not None else NotImplemented

    def __repr__(self) -> str:
        size = self._known_size()
        return f"{type(self).__name__}(size={size if size is not None else 'unknown'})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired query pipeline over any python iterable."""
    def __init__(self, iter_func: Callable[[], Iterable[T]],
                 size_func: Optional[Callable[[], Optional[int]]] = None,
                 options: Optional[QueryOptions] = None):
        super().__init__(iter_func, size_func, options)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """
    a sorted view of a source. each iteration copies the source into a new
    list and sorts it, so the source itself is never reordered.
    """

    def __init__(self, source: Enumerable[T], sort_keys: List[Tuple[Callable, bool]]):
        super().__init__(self._sorted_data, source._known_size, source.options)
        self._source = source
        self._sort_keys = sort_keys

    def _sorted_data(self) -> List[T]:
        """materialize and apply all sort keys at once using stable sort."""
        data = self._source.to.list()
        # python's sort is stable, so we sort from the last key to the first
        for key_selector, is_descending in reversed(self._sort_keys):
            data.sort(key=key_selector, reverse=is_descending)
        logger.debug(f"sorted {len(data)} elements by {len(self._sort_keys)} key(s)")
        return data

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        return OrderedEnumerable(self._source, self._sort_keys + [(key_selector, False)])

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        return OrderedEnumerable(self._source, self._sort_keys + [(key_selector, True)])
