"""Splitting raw input lines into a command token and argument tokens."""

import re
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from .registry import CommandRegistry

# A run of unquoted characters and double quoted spans; an unterminated quote
# runs to the end of the text.
TOKEN_PATTERN = re.compile(r'(?:"[^"]*"?|[^\s"]+)+')
WHITESPACE_PATTERN = re.compile(r"\s+")


class Tokens(NamedTuple):
    command: str
    arguments: list[str]


def split_command(line: str) -> tuple[str, str]:
    """Split a line into the command token and the untouched remainder."""
    line = str(line).strip()
    parts = WHITESPACE_PATTERN.split(line, maxsplit=1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def split_arguments(text: str, limit: Optional[int] = None) -> list[str]:
    """
    Split argument text into tokens, keeping double quoted spans together.

    With a positive ``limit`` at most that many tokens are produced and the
    last one holds all remaining text, inner whitespace included.
    """
    text = text.strip()
    tokens: list[str] = []
    position = 0

    while position < len(text):
        if limit and limit > 0 and len(tokens) == limit - 1:
            tokens.append(text[position:])
            break

        match = TOKEN_PATTERN.search(text, position)
        if not match:
            break
        tokens.append(match.group())

        position = match.end()
        gap = WHITESPACE_PATTERN.match(text, position)
        if gap:
            position = gap.end()

    return tokens


def tokenize(line: str, registry: Optional["CommandRegistry"] = None) -> Tokens:
    """Tokenize a line, sizing the split to the command's argument count when it is known."""
    command_token, remainder = split_command(line)

    limit = None
    if registry is not None:
        command = registry.lookup(command_token)
        if command is not None:
            limit = len(command.arguments)

    return Tokens(command_token, split_arguments(remainder, limit))
