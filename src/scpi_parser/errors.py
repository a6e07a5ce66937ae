"""Custom exception hierarchy for scpi-parser."""

from __future__ import annotations


class ScpiError(Exception):
    """Base exception for all scpi-parser errors."""


class MissingHandlerError(ScpiError, LookupError):
    """A command in the query resolved to a path with no registered handler.

    Subclasses both ScpiError and LookupError so callers treating an
    unknown command as a failed lookup can catch it either way.
    """

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path
