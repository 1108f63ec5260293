"""
function-style spelling of the query operators.

each function takes the source as its first argument and delegates to the
fluent implementation. deferred operators return an Enumerable, everything
else walks the source once and returns a plain value or a new list.

    from lazyq import ops
    ops.to_sequence(ops.where([1, 8, 3, 6], lambda n: n > 5))  # [8, 6]

first and last raise EmptySequenceError on an empty source. try_first and
try_last are the optional-returning forms: they give a Maybe that is absent
on empty input, so a present 0 or None is never confused with "no element".
first_or_default and last_or_default never raise.

sum, min and max shadow builtins here by name; import the module, not the names.
"""

from .types import *
from .factories import from_iterable
from .enumerable import Enumerable

__all__ = [
    "where", "select", "take",
    "to_sequence", "order_by",
    "aggregate", "count", "sum", "min", "max",
    "first", "first_or_default", "try_first",
    "last", "last_or_default", "try_last",
    "distinct", "distinct_by", "join",
]

# --- deferred ---

def where(source: Iterable[T], predicate: Predicate[T]) -> Enumerable[T]:
    return from_iterable(source).where(predicate)

def select(source: Iterable[T], projection: Selector[T, U]) -> Enumerable[U]:
    return from_iterable(source).select(projection)

def take(source: Iterable[T], n: int) -> Enumerable[T]:
    return from_iterable(source).take(n)

# --- materializers ---

def to_sequence(source: Iterable[T]) -> List[T]:
    """new list in traversal order, independent of source"""
    return from_iterable(source).to.list()

def order_by(source: Iterable[T], key_selector: KeySelector[T, K]) -> List[T]:
    """new list stable-sorted ascending by key"""
    return from_iterable(source).order_by(key_selector).to.list()

def distinct(source: Iterable[T]) -> List[T]:
    return from_iterable(source).set.distinct().to.list()

def distinct_by(source: Iterable[T], key_selector: KeySelector[T, K]) -> List[T]:
    return from_iterable(source).set.distinct_by(key_selector).to.list()

def join(outer: Iterable[T], inner: Iterable[U],
         outer_key_selector: KeySelector[T, K], inner_key_selector: KeySelector[U, K],
         result_selector: Callable[[T, U], V]) -> List[V]:
    return from_iterable(outer).join.join(inner, outer_key_selector, inner_key_selector, result_selector).to.list()

# --- reducers ---

def aggregate(source: Iterable[T], initial: U, combiner: Accumulator[U, T]) -> U:
    return from_iterable(source).to.aggregate(initial, combiner)

def count(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> int:
    return from_iterable(source).to.count(predicate)

def sum(source: Iterable[T]) -> T:
    return from_iterable(source).stats.sum()

def min(source: Iterable[T]) -> T:
    return from_iterable(source).stats.min()

def max(source: Iterable[T]) -> T:
    return from_iterable(source).stats.max()

def first(source: Iterable[T]) -> T:
    return from_iterable(source).to.first()

def try_first(source: Iterable[T]) -> Maybe[T]:
    return from_iterable(source).to.try_first()

def first_or_default(source: Iterable[T], default: Optional[T] = None) -> Optional[T]:
    return from_iterable(source).to.first_or_default(default)

def last(source: Iterable[T]) -> T:
    return from_iterable(source).to.last()

def try_last(source: Iterable[T]) -> Maybe[T]:
    return from_iterable(source).to.try_last()

def last_or_default(source: Iterable[T], default: Optional[T] = None) -> Optional[T]:
    return from_iterable(source).to.last_or_default(default)
