import typing
from collections.abc import Sized
from itertools import repeat as _repeat
from .types import *
from .config import QueryOptions

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T], options: Optional[QueryOptions] = None) -> 'Enumerable[T]':
    """
    wrap an iterable without copying it. the enumerable only references data,
    so it must stay alive for as long as the pipeline is used. a one-shot
    iterator can only be walked once.
    """
    from .enumerable import Enumerable
    if isinstance(data, Enumerable):
        return data if options is None else data.with_options(options)
    size_func = (lambda: len(data)) if isinstance(data, Sized) else None
    return Enumerable(lambda: data, size_func, options)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    return from_iterable(range(start, start + count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: _repeat(item, count), lambda: max(count, 0))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    return from_iterable(())

def generate(generator_func: Callable[[], T], count: int) -> 'Enumerable[T]':
    """generate sequence using a function, called afresh on every iteration"""
    from .enumerable import Enumerable
    return Enumerable(lambda: (generator_func() for _ in range(count)), lambda: max(count, 0))

# --- aliases ---
lazyq = from_iterable
Q = from_iterable
q = from_iterable
