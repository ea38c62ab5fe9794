"""Routes inbound stanzas to command handlers."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .commands.parser import HelpRequested, ParsedCommand, tokenize
from .commands.registry import CommandTable
from .models import Request, Stanza, StanzaKind, bare_jid
from .reply_channel import ReplyChannel

LOGGER = logging.getLogger(__name__)

UNKNOWN_COMMAND_MESSAGE = 'Unknown command: "{command}". Type "help" for more information.'


class Router:
    """Turns chat messages into command invocations.

    Presence and iq stanzas are ignored here; error stanzas are logged.
    Bodies without the separator (other than `help`/`?`) get no reply.
    """

    def __init__(
        self,
        command_table: CommandTable,
        reply_channel: ReplyChannel,
        separator: str = ":",
        allowed_contacts: Optional[Iterable[str]] = None,
    ) -> None:
        self._command_table = command_table
        self._reply_channel = reply_channel
        self._separator = separator
        self._allowed_contacts = frozenset(bare_jid(jid) for jid in allowed_contacts or ())

    def dispatch(self, stanza: Stanza) -> None:
        if stanza.kind is StanzaKind.ERROR:
            LOGGER.warning("Received error stanza from %s: %s", stanza.sender, stanza.raw)
            return
        if stanza.kind is not StanzaKind.MESSAGE:
            return

        if self._allowed_contacts and bare_jid(stanza.sender) not in self._allowed_contacts:
            LOGGER.debug("Ignoring message from unauthorized contact %s", stanza.sender)
            return

        result = tokenize(stanza.body, self._separator)
        if isinstance(result, HelpRequested):
            self._send_help(stanza.sender)
            return
        if not isinstance(result, ParsedCommand):
            return

        request = Request(
            command=result.name,
            argument=result.argument,
            origin=stanza.sender,
            source_stanza=stanza,
        )
        LOGGER.info("Received command %r from %s", request.command, request.origin)

        handler = self._command_table.lookup(request.command)
        if handler is None or not handler(request):
            self._reply_channel.send_message(
                request.origin, UNKNOWN_COMMAND_MESSAGE.format(command=request.command)
            )

    def _send_help(self, to: str) -> None:
        lines = self._command_table.build_help_lines(self._separator)
        self._reply_channel.send_message(to, "\n".join(lines) + "\n")
