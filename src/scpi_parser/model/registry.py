"""Path-keyed handler registry with abbreviation lookup.

Every segment of a registered path contributes one abbreviation: its
first run of uppercase letters (plus ``_``, ``*`` and ``?``).  For
``MEASure:VOLTage:DC?`` that is ``MEAS``, ``VOLT`` and ``DC?``.  The
table is shared by all paths in the registry and the latest
registration wins when two segments abbreviate to the same text.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Callable, Optional, Sequence

from scpi_parser.model.path import ScpiPath

logger = logging.getLogger(__name__)

Handler = Callable[[Sequence[str]], Optional[str]]

_ABBREVIATION = re.compile(r"[A-Z_*?]+")


def abbreviation_of(segment: str) -> str | None:
    """Return the short form of *segment*, or None if it has no uppercase run."""
    m = _ABBREVIATION.search(segment)
    return m.group() if m else None


class HandlerRegistry:
    """Maps :class:`ScpiPath` keys to handlers.

    Lookups never take the lock; registration swaps entries under it so
    concurrent registrations apply their abbreviations and handler as
    one unit.
    """

    def __init__(self) -> None:
        self._handlers: dict[ScpiPath, Handler] = {}
        self._abbreviations: dict[str, str] = {}
        self._lock = threading.Lock()

    # -- registration --------------------------------------------------------

    def register(self, path_text: str, handler: Handler) -> ScpiPath:
        """Register *handler* at the full, unabbreviated *path_text*.

        Re-registering an identical path replaces its handler.
        """
        path = ScpiPath.parse(path_text)
        with self._lock:
            for segment in path:
                short = abbreviation_of(segment)
                if short is not None:
                    self._abbreviations[short] = segment
            self._handlers[path] = handler
        logger.debug("Registered handler for %s", path)
        return path

    # -- lookups -------------------------------------------------------------

    def resolve(self, path: ScpiPath) -> Handler | None:
        """Exact lookup of *path*; no prefix matching."""
        return self._handlers.get(path)

    def canonical_segment(self, word: str) -> str:
        """Expand an abbreviated command word to its full segment.

        Words that are not a known abbreviation come back unchanged.
        """
        return self._abbreviations.get(word, word)

    def abbreviations(self) -> dict[str, str]:
        """Snapshot of the abbreviation table."""
        with self._lock:
            return dict(self._abbreviations)

    def __contains__(self, path: object) -> bool:
        return path in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
