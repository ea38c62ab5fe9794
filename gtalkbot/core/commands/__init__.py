"""Command tokenizing, registration and handlers."""

from .builtin import BasicCommandHandler, register_builtin_commands
from .lookup import LookupCommandHandler
from .parser import HelpRequested, NoCommand, ParsedCommand, tokenize
from .registry import CommandSpec, CommandTable, Handler

__all__ = [
    "BasicCommandHandler",
    "register_builtin_commands",
    "LookupCommandHandler",
    "HelpRequested",
    "NoCommand",
    "ParsedCommand",
    "tokenize",
    "CommandSpec",
    "CommandTable",
    "Handler",
]
