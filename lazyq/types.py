from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

from .errors import EmptySequenceError

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]


class Maybe(Generic[T]):
    """
    result of a tolerant accessor such as try_first() or try_last().
    an absent maybe carries no value at all, so a present value of 0 or None
    stays distinguishable from an empty sequence.
    """

    __slots__ = ('_value', '_present')

    def __init__(self, value: Optional[T], present: bool):
        self._value = value
        self._present = present

    @classmethod
    def some(cls, value: T) -> 'Maybe[T]':
        return cls(value, True)

    @classmethod
    def absent(cls) -> 'Maybe[T]':
        return cls(None, False)

    @property
    def is_present(self) -> bool: return self._present

    @property
    def is_absent(self) -> bool: return not self._present

    @property
    def value(self) -> T:
        """the wrapped element. raises EmptySequenceError when absent."""
        if not self._present:
            raise EmptySequenceError("no value present")
        return self._value

    def or_else(self, default: U) -> Union[T, U]:
        return self._value if self._present else default

    def __bool__(self) -> bool:
        return self._present

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if not self._present or not other._present:
            return self._present == other._present
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((self._present, self._value))

    def __repr__(self) -> str:
        return f"Maybe.some({self._value!r})" if self._present else "Maybe.absent()"
