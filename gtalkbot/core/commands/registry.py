"""Command table mapping command names to handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..errors import CommandRegistrationError
from ..models import Request

LOGGER = logging.getLogger(__name__)

Handler = Callable[[Request], bool]


@dataclass(frozen=True)
class CommandSpec:
    """Metadata describing a single registered command."""

    name: str
    handler: Handler
    usage: Optional[str] = None
    aliases: Tuple[str, ...] = ()

    @property
    def all_names(self) -> Tuple[str, ...]:
        return (self.name, *self.aliases)


class CommandTable:
    """Exact-match, case-sensitive lookup from command name to handler.

    Re-registering a name points it at the new handler and logs a warning,
    unless the table is strict, in which case `CommandRegistrationError` is
    raised and the table is left untouched.
    """

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict
        self._specs: List[CommandSpec] = []
        self._lookup: Dict[str, CommandSpec] = {}

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def specs(self) -> Sequence[CommandSpec]:
        """Registered commands in registration order, minus fully overridden ones."""
        return tuple(spec for spec in self._specs if self._owned_names(spec))

    def register(
        self,
        name: str,
        handler: Handler,
        *,
        usage: Optional[str] = None,
        aliases: Sequence[str] = (),
    ) -> CommandSpec:
        spec = CommandSpec(
            name=name,
            handler=handler,
            usage=usage,
            aliases=tuple(aliases),
        )
        taken = [key for key in spec.all_names if key in self._lookup]
        if taken:
            if self._strict:
                raise CommandRegistrationError(
                    f"Command name(s) already registered: {', '.join(taken)}"
                )
            LOGGER.warning("Overriding handler for command(s): %s", ", ".join(taken))

        self._specs.append(spec)
        for key in spec.all_names:
            self._lookup[key] = spec
        LOGGER.debug("Registered command %s", ", ".join(spec.all_names))
        return spec

    def lookup(self, name: str) -> Optional[Handler]:
        spec = self._lookup.get(name)
        return spec.handler if spec else None

    def __contains__(self, name: str) -> bool:
        return name in self._lookup

    def build_help_lines(self, separator: str) -> list[str]:
        """Render help text for every command that carries a usage hint."""

        entries = [
            (self._owned_names(spec), spec) for spec in self.specs if spec.usage
        ]
        listed = ", ".join(f"'{names[0]}'" for names, _ in entries)
        lines = [f"Currently {listed} are supported:"]
        for names, spec in entries:
            line = f"{names[0]}{separator}{spec.usage}"
            if len(names) > 1:
                rendered = ", ".join(f"{alias}{separator}" for alias in names[1:])
                line = f"{line} (aliases: {rendered})"
            lines.append(line)
        return lines

    def _owned_names(self, spec: CommandSpec) -> Tuple[str, ...]:
        return tuple(key for key in spec.all_names if self._lookup.get(key) is spec)
