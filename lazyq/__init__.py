r"""
'   .__
'   |  | _____  ________ ___.__.  ______
'   |  | \__  \ \___   /<   |  | / ____/
'   |  |__/ __ \_/    /  \___  |< <_|  |
'   |____(____  /_____ \ / ____| \__   |
'             \/      \/ \/         |__|
"""

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable, IEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    lazyq,
    Q,
)

# expose supporting data classes and errors
from .types import Maybe
from .errors import EmptySequenceError
from .config import QueryOptions, DEFAULT_OPTIONS

# function-style operators: lazyq.ops.where(source, predicate), ...
from . import ops

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "IEnumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "lazyq",
    "Q",
    "Maybe",
    "EmptySequenceError",
    "QueryOptions",
    "DEFAULT_OPTIONS",
    "ops",
]
