"""Tokenizer for one-line chat commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

# ASCII whitespace only; interior and non-ASCII whitespace are preserved.
ASCII_WHITESPACE = " \t\n\r\x0b\x0c"
HELP_WORDS = frozenset({"help", "?"})


@dataclass(frozen=True)
class HelpRequested:
    pass


@dataclass(frozen=True)
class NoCommand:
    pass


@dataclass(frozen=True)
class ParsedCommand:
    name: str
    argument: str


TokenizeResult = Union[HelpRequested, NoCommand, ParsedCommand]


def ascii_strip(text: str) -> str:
    return text.strip(ASCII_WHITESPACE)


def tokenize(body: Optional[str], separator: str) -> TokenizeResult:
    """Split a message body into a command name and its argument.

    Supported syntax:
      - `help` or `?` (any case, surrounding whitespace ignored)
      - `<command><separator><argument>`, split on the first separator

    Bodies without the separator are not commands.
    """

    if body is None:
        return NoCommand()

    if ascii_strip(body).lower() in HELP_WORDS:
        return HelpRequested()

    head, found, tail = body.partition(separator)
    if not found:
        return NoCommand()
    return ParsedCommand(name=ascii_strip(head).lower(), argument=ascii_strip(tail))
