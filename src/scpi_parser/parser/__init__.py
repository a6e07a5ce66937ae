"""Parser package — tokenize query strings and resolve them into invocations."""

from scpi_parser.parser.commands import Invocation, parse_commands
from scpi_parser.parser.tokenizer import Token, TokenType, contains_argument, tokenize

__all__ = [
    "parse_commands",
    "tokenize",
    "contains_argument",
    "Invocation",
    "Token",
    "TokenType",
]
