"""Result cache policy.

One ``CacheConfig`` per parser by default.  Hand the same instance to
several parsers to have them share a single policy.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CACHE_SIZE_LIMIT = 20


@dataclass
class CacheConfig:
    """Size bound and argument policy for the query cache."""

    size_limit: int = DEFAULT_CACHE_SIZE_LIMIT
    cache_queries_with_arguments: bool = False

    def __post_init__(self) -> None:
        self.set_size_limit(self.size_limit)
        self.cache_queries_with_arguments = bool(self.cache_queries_with_arguments)

    def set_size_limit(self, size_limit: int) -> None:
        """Set the number of distinct queries kept; negatives clamp to 0."""
        self.size_limit = max(int(size_limit), 0)

    @property
    def enabled(self) -> bool:
        return self.size_limit > 0
