"""Chained-command parser — turn a token list into bound invocations.

Path rules
----------
- A command word extends the active path (abbreviations expanded).
- A colon that does not follow a command word in the current command
  (leading, or right after ``;``) resets the active path to the root.
- After each ``;`` the last segment is dropped from the active path, so
  ``MEAS:VOLT:DC?;AC?`` runs ``MEAS:VOLT:DC?`` then ``MEAS:VOLT:AC?``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from scpi_parser.errors import MissingHandlerError
from scpi_parser.model.path import ROOT
from scpi_parser.model.registry import Handler, HandlerRegistry
from scpi_parser.parser.tokenizer import Token, TokenType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Invocation:
    """A handler bound to the arguments of one command."""

    handler: Handler
    args: tuple[str, ...] = ()

    def execute(self) -> str | None:
        # Each call gets its own list so handlers cannot alter the binding.
        return self.handler(list(self.args))


def parse_commands(
    tokens: list[Token], registry: HandlerRegistry
) -> tuple[Invocation, ...]:
    """Resolve every command in *tokens* against *registry*.

    Parameters
    ----------
    tokens : list[Token]
        Output of :func:`~scpi_parser.parser.tokenizer.tokenize`.
    registry : HandlerRegistry
        Supplies handlers and the abbreviation table.

    Returns
    -------
    tuple[Invocation, ...]
        One invocation per ``;``-terminated command, in query order.

    Raises
    ------
    MissingHandlerError
        If any command's path has no handler.  Invocations matched
        earlier in the same query are discarded.
    """
    invocations: list[Invocation] = []
    active = ROOT
    arguments: list[str] = []
    in_command = False

    for token in tokens:
        kind = token.kind
        if kind is TokenType.COMMAND:
            active = active.append(registry.canonical_segment(token.text))
            in_command = True
        elif kind is TokenType.ARGUMENT or kind is TokenType.QUOTED_STRING:
            arguments.append(token.text)
        elif kind is TokenType.COLON:
            if not in_command:
                active = ROOT
        elif kind is TokenType.SEMICOLON:
            handler = registry.resolve(active)
            if handler is None:
                logger.debug("No handler for %r", str(active))
                raise MissingHandlerError(str(active))
            invocations.append(Invocation(handler, tuple(arguments)))
            arguments.clear()
            in_command = False
            active = active.parent()

    return tuple(invocations)
