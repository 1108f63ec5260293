from dataclasses import dataclass, replace, asdict
from typing import Any, Dict

NUMERIC_BACKENDS = ('numpy', 'python')
JOIN_STRATEGIES = ('hash', 'nested')


@dataclass(frozen=True)
class QueryOptions:
    """per-pipeline settings, inherited by every stage derived from a source"""
    numeric_backend: str = 'python'
    join_strategy: str = 'hash'

    def __post_init__(self):
        if self.numeric_backend not in NUMERIC_BACKENDS:
            raise ValueError(f"unknown numeric_backend '{self.numeric_backend}', expected one of {NUMERIC_BACKENDS}")
        if self.join_strategy not in JOIN_STRATEGIES:
            raise ValueError(f"unknown join_strategy '{self.join_strategy}', expected one of {JOIN_STRATEGIES}")

    def with_overrides(self, **changes: Any) -> 'QueryOptions':
        """return a copy with the given fields replaced"""
        return replace(self, **changes)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_OPTIONS = QueryOptions()
