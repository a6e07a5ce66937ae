"""SCPI parser facade: register handlers, accept queries, return results.

Usage
-----
Register handlers with their full, unabbreviated path, either on a plain
instance or from the ``__init__`` of a subclass::

    class Meter(ScpiParser):
        def __init__(self) -> None:
            super().__init__()
            self.register("*IDN?", self.idn)
            self.register("MEASure:VOLTage:DC?", self.volts_dc)

        def idn(self, args):
            return "ACME,Meter,0,1.0"

        def volts_dc(self, args):
            return "2.23"

    Meter().accept("*IDN?;MEAS:VOLT:DC?")   # ['ACME,Meter,0,1.0', '2.23']

Only parsing is cached; handlers run on every :meth:`ScpiParser.accept`.
"""

from __future__ import annotations

import logging
from typing import Callable

from scpi_parser.config import CacheConfig
from scpi_parser.model.cache import QueryCache
from scpi_parser.model.registry import Handler, HandlerRegistry
from scpi_parser.parser.commands import Invocation, parse_commands
from scpi_parser.parser.tokenizer import contains_argument, tokenize

logger = logging.getLogger(__name__)


class ScpiParser:
    """General purpose parser and dispatcher for SCPI-style queries.

    Safe to share between threads: ``accept`` and ``register`` may be
    called concurrently.  Handlers run on the calling thread outside any
    parser lock; guarding state they share is up to them.
    """

    def __init__(self, cache_config: CacheConfig | None = None) -> None:
        self._registry = HandlerRegistry()
        self._cache = QueryCache(cache_config)

    # -- registration --------------------------------------------------------

    def register(self, path: str, handler: Handler) -> None:
        """Associate *handler* with the absolute SCPI *path*."""
        self._registry.register(path, handler)
        # New handlers or abbreviations can change how cached queries parse.
        self._cache.clear()

    def handler(self, path: str) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`register`."""

        def decorator(func: Handler) -> Handler:
            self.register(path, func)
            return func

        return decorator

    # -- queries -------------------------------------------------------------

    def accept(self, query: str) -> list[str | None]:
        """Run every command in *query* and return one result per command.

        A result is None when its handler returned nothing.

        Raises
        ------
        MissingHandlerError
            If a command resolves to an unregistered path.  No handler in
            the query runs in that case.
        """
        invocations = self._invocations_for(query)
        return [invocation.execute() for invocation in invocations]

    def _invocations_for(self, query: str) -> tuple[Invocation, ...]:
        cached = self._cache.lookup(query)
        if cached is not None:
            logger.debug("Cache hit for %r", query)
            return cached

        # Read before parsing so a register() that lands mid-parse voids the insert.
        generation = self._cache.generation
        tokens = tokenize(query)
        invocations = parse_commands(tokens, self._registry)
        self._cache.insert(
            query, invocations, contains_argument(tokens), generation=generation
        )
        return invocations

    # -- cache configuration -------------------------------------------------

    @property
    def cache_config(self) -> CacheConfig:
        return self._cache.config

    def set_cache_size_limit(self, size_limit: int) -> None:
        """Set how many distinct queries are cached; 0 disables caching."""
        self._cache.set_size_limit(size_limit)

    def get_cache_size_limit(self) -> int:
        return self._cache.config.size_limit

    def set_cache_queries_with_arguments(self, enabled: bool) -> None:
        """Allow caching of queries that carry argument values."""
        self._cache.config.cache_queries_with_arguments = bool(enabled)

    def get_cache_queries_with_arguments(self) -> bool:
        return self._cache.config.cache_queries_with_arguments

    def cache_frequency(self) -> dict[str, int]:
        """Hit counters of the cached queries, for tuning and tests."""
        return self._cache.frequencies()

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry
