"""Single outbound path from the bot core to the transport."""

from __future__ import annotations

import logging
from typing import Optional

from ..chat_adapters.i_chat_adapter import IChatAdapter
from .errors import TransportError
from .models import OutboundMessage, OutboundPresence, OutboundStanza, RosterQuery

LOGGER = logging.getLogger(__name__)


class ReplyChannel:
    """Every stanza the core emits goes through here."""

    def __init__(self, adapter: Optional[IChatAdapter] = None) -> None:
        self._adapter = adapter

    def bind_adapter(self, adapter: IChatAdapter) -> None:
        """Attach the chat adapter so the channel can transmit."""

        self._adapter = adapter

    def send_message(self, to: str, body: str) -> None:
        self._send(OutboundMessage(to=to, body=body))
        LOGGER.info("Sent message to %s: %s", to, body)

    def set_status(self, text: str) -> None:
        self._send(OutboundPresence(show="chat", status=text))
        LOGGER.info("Status message set to %r", text)

    def approve_subscription(self, to: str) -> None:
        self._send(OutboundPresence(to=to, type="subscribed"))

    def request_roster(self) -> None:
        self._send(RosterQuery())
        LOGGER.debug("Requested roster")

    def _send(self, stanza: OutboundStanza) -> None:
        if not self._adapter:
            raise TransportError("Chat adapter not bound; cannot send stanza")
        self._adapter.send_stanza(stanza)
