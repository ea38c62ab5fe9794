"""Handlers for the synchronous built-in commands and default registration."""

from __future__ import annotations

import hashlib
import logging

from ..models import Request
from .base import BaseCommandHandler
from .lookup import LookupCommandHandler
from .parser import ascii_strip
from .registry import CommandTable

LOGGER = logging.getLogger(__name__)


class BasicCommandHandler(BaseCommandHandler):
    """Echo, hashing and status commands."""

    def handle_echo(self, request: Request) -> bool:
        self._reply(request, request.source_stanza.body or "")
        return True

    def handle_md5(self, request: Request) -> bool:
        text = ascii_strip(request.argument or "")
        self._reply(request, hashlib.md5(text.encode("utf-8")).hexdigest())
        return True

    def handle_status(self, request: Request) -> bool:
        LOGGER.info("Status change requested by %s", request.origin)
        self._reply_channel.set_status(request.argument or "")
        return True


def register_builtin_commands(
    table: CommandTable,
    basic: BasicCommandHandler,
    lookups: LookupCommandHandler,
) -> None:
    """Install the stock command set into `table`."""

    table.register("md5", basic.handle_md5, usage="some string to convert to md5")
    table.register("t", lookups.handle_search, usage="some search string on twitter", aliases=("twitter",))
    table.register("w", lookups.handle_weather, usage="city to verify today's weather", aliases=("weather",))
    table.register("b", basic.handle_echo)
    table.register("s", basic.handle_status)
