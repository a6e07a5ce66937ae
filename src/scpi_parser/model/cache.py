"""Bounded least-frequently-used cache of parsed queries.

Keys are raw query strings; values are the invocation tuples a parse of
that query produced.  Every hit bumps the key's counter and counters
never decay.  When the cache is full the entry with the lowest counter
is evicted before a new key goes in (ties go to the oldest insertion).
"""

from __future__ import annotations

import logging
import threading

from scpi_parser.config import CacheConfig
from scpi_parser.parser.commands import Invocation

logger = logging.getLogger(__name__)


class QueryCache:
    """Thread-safe query cache governed by a :class:`CacheConfig`."""

    def __init__(self, config: CacheConfig | None = None) -> None:
        self.config = config if config is not None else CacheConfig()
        self._entries: dict[str, tuple[Invocation, ...]] = {}
        self._frequency: dict[str, int] = {}
        self._lock = threading.Lock()
        self._generation = 0

    @property
    def generation(self) -> int:
        """Bumped by every clear; inserts from an older generation are dropped."""
        return self._generation

    def lookup(self, query: str) -> tuple[Invocation, ...] | None:
        """Return the cached invocations for *query* and count the hit."""
        if not self.config.enabled:
            return None
        with self._lock:
            invocations = self._entries.get(query)
            if invocations is not None:
                self._frequency[query] += 1
        return invocations

    def insert(
        self,
        query: str,
        invocations: tuple[Invocation, ...],
        contains_argument: bool,
        generation: int | None = None,
    ) -> bool:
        """Store *invocations* under *query* if policy allows.

        When *generation* is given and the cache has been cleared since it
        was read, nothing is stored: the invocations may bind handlers that
        have since been replaced.  Returns True if the query is resident
        afterwards.
        """
        config = self.config
        if not config.enabled:
            return False
        if contains_argument and not config.cache_queries_with_arguments:
            return False

        with self._lock:
            if generation is not None and generation != self._generation:
                logger.debug("Dropped stale parse of %r", query)
                return False
            if query in self._entries:
                self._entries[query] = invocations
                return True
            while self._entries and len(self._entries) >= config.size_limit:
                self._evict_least_frequent()
            self._entries[query] = invocations
            self._frequency[query] = 1
        return True

    def _evict_least_frequent(self) -> None:
        # Caller holds the lock.
        victim = min(self._frequency, key=self._frequency.__getitem__)
        count = self._frequency.pop(victim)
        del self._entries[victim]
        logger.debug("Evicted %r from query cache (frequency %d)", victim, count)

    def set_size_limit(self, size_limit: int) -> None:
        """Change the bound and evict down to it right away."""
        with self._lock:
            self.config.set_size_limit(size_limit)
            while len(self._entries) > self.config.size_limit:
                self._evict_least_frequent()

    def clear(self) -> None:
        with self._lock:
            self._generation += 1
            self._entries.clear()
            self._frequency.clear()
        logger.debug("Query cache cleared")

    def frequencies(self) -> dict[str, int]:
        """Snapshot of per-query hit counters."""
        with self._lock:
            return dict(self._frequency)

    def __contains__(self, query: object) -> bool:
        return query in self._entries

    def __len__(self) -> int:
        return len(self._entries)
