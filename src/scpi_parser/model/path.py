"""Immutable SCPI command path.

A path is an ordered tuple of segments.  Equality and hashing come from
the tuple, so two paths built independently from the same segments are
interchangeable as dict keys.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_SEPARATOR = re.compile(r"\s*:\s*")


@dataclass(frozen=True)
class ScpiPath:
    """Ordered sequence of command segments; the empty path is the root."""

    segments: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> ScpiPath:
        """Build a path from colon-delimited *text*, e.g. ``"MEASure:VOLTage:DC?"``.

        Whitespace around each segment is trimmed and empty segments are
        dropped, so ``":MEAS: VOLT:"`` and ``"MEAS:VOLT"`` are the same path.
        """
        parts = (part.strip() for part in _SEPARATOR.split(text))
        return cls(tuple(part for part in parts if part))

    def append(self, segment: str) -> ScpiPath:
        return ScpiPath(self.segments + (segment,))

    def parent(self) -> ScpiPath:
        """Return this path without its last segment (root stays root)."""
        return ScpiPath(self.segments[:-1])

    def __iter__(self):
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return ":".join(self.segments)


ROOT = ScpiPath()
