"""Ordered-rule scanner for SCPI query strings.

At each position the rules in ``_RULES`` are tried in declaration order
and the first match wins.  Characters no rule matches are skipped.

Word tokens following another word are arguments, never commands, so
``CONCAT These strings`` yields one COMMAND and two ARGUMENT tokens.
Whitespace and newlines are consumed but not emitted, repeated ``:`` or
``;`` collapse to one token, and a trailing SEMICOLON is always present.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass


class TokenType(enum.Enum):
    COLON = "colon"
    SEMICOLON = "semicolon"
    QUOTED_STRING = "quoted_string"
    COMMAND = "command"
    ARGUMENT = "argument"
    WHITESPACE = "whitespace"
    NEWLINE = "newline"


@dataclass(frozen=True)
class Token:
    """A classified slice of a query string."""

    kind: TokenType
    text: str = ""


# Priority order matters: COMMAND is tried before ARGUMENT, so "VOLT"
# is a command word and "2.5" falls through to an argument.
_RULES: tuple[tuple[TokenType, re.Pattern[str]], ...] = (
    (TokenType.COLON, re.compile(r":")),
    (TokenType.SEMICOLON, re.compile(r";")),
    (TokenType.QUOTED_STRING, re.compile(r'"[^"]*?"')),
    (TokenType.COMMAND, re.compile(r"[A-Za-z*_?]+")),
    (TokenType.ARGUMENT, re.compile(r"[A-Za-z0-9.]+")),
    (TokenType.WHITESPACE, re.compile(r"[ \t]+")),
    (TokenType.NEWLINE, re.compile(r"[\r\n]+")),
)

_WORD_TYPES = frozenset(
    (TokenType.COMMAND, TokenType.ARGUMENT, TokenType.QUOTED_STRING)
)
_PUNCTUATION_TYPES = frozenset((TokenType.COLON, TokenType.SEMICOLON))


def _match_at(query: str, pos: int) -> tuple[TokenType, str] | None:
    for kind, pattern in _RULES:
        m = pattern.match(query, pos)
        if m:
            return kind, m.group()
    return None


def tokenize(query: str) -> list[Token]:
    """Split *query* into tokens ready for :func:`parse_commands`.

    Examples
    --------
    >>> [t.kind.name for t in tokenize("MEAS:VOLT?")]
    ['COMMAND', 'COLON', 'COMMAND', 'SEMICOLON']
    >>> [t.text for t in tokenize('CONCAT "a b" c')][:3]
    ['CONCAT', 'a b', 'c']
    """
    tokens: list[Token] = []
    # Kind of the last emitted token; whitespace means "nothing yet".
    previous = TokenType.WHITESPACE
    pos = 0
    end = len(query)

    while pos < end:
        matched = _match_at(query, pos)
        if matched is None:
            pos += 1
            continue

        kind, text = matched
        pos += len(text)

        if kind in _WORD_TYPES:
            if kind is TokenType.QUOTED_STRING:
                text = text[1:-1]
            if previous in _WORD_TYPES:
                kind = TokenType.ARGUMENT
            tokens.append(Token(kind, text))
            previous = kind
        elif kind in _PUNCTUATION_TYPES:
            if kind is not previous:
                tokens.append(Token(kind))
                previous = kind

    if previous is not TokenType.SEMICOLON:
        tokens.append(Token(TokenType.SEMICOLON))
    return tokens


def contains_argument(tokens: list[Token]) -> bool:
    """Return True if any token in *tokens* is an ARGUMENT."""
    return any(token.kind is TokenType.ARGUMENT for token in tokens)
