"""XMPP adapter using slixmpp."""

from __future__ import annotations

import asyncio
import logging
import xml.etree.ElementTree as ET
from typing import Any

from slixmpp import ClientXMPP
from slixmpp.xmlstream import StanzaBase

from ..core.errors import TransportError
from ..core.models import (
    OutboundMessage,
    OutboundPresence,
    OutboundStanza,
    RosterQuery,
    Stanza,
)
from ..core.session import BotSession
from .i_chat_adapter import IChatAdapter

LOGGER = logging.getLogger(__name__)

KEEPALIVE_INTERVAL = 60


def to_stanza(xml_stanza: StanzaBase) -> Stanza:
    """Convert a slixmpp message/presence stanza into the core `Stanza`."""

    body = None
    if xml_stanza.name == "message":
        body = xml_stanza["body"] or None
    return Stanza.classify(
        xml_stanza.name,
        sender=str(xml_stanza["from"]),
        type=xml_stanza["type"] or None,
        body=body,
        raw=str(xml_stanza),
    )


class XmppAdapter(IChatAdapter):
    def __init__(self, jid: str, password: str, session: BotSession) -> None:
        self._client = ClientXMPP(jid, password)
        self._session = session
        self._stop_event = asyncio.Event()

        # Subscription approval belongs to the session's auto-acceptor.
        self._client.auto_authorize = None
        self._client.auto_subscribe = False

        self._client.register_plugin("xep_0199", {"keepalive": True, "interval": KEEPALIVE_INTERVAL})

        self._client.add_event_handler("session_start", self._on_session_start)
        self._client.add_event_handler("disconnected", self._on_disconnected)
        self._client.add_event_handler("failed_auth", self._on_failure)
        self._client.add_event_handler("connection_failed", self._on_failure)
        self._client.add_event_handler("message", self._on_stanza)
        self._client.add_event_handler("presence", self._on_stanza)
        session.bind_adapter(self)

    def send_stanza(self, stanza: OutboundStanza) -> None:
        if isinstance(stanza, OutboundMessage):
            self._client.send_message(mto=stanza.to, mbody=stanza.body, mtype=stanza.type)
        elif isinstance(stanza, OutboundPresence):
            self._client.send_presence(
                pto=stanza.to,
                ptype=stanza.type,
                pshow=stanza.show,
                pstatus=stanza.status,
            )
        elif isinstance(stanza, RosterQuery):
            self._client.send(self._build_roster_query(stanza))
        else:
            raise TransportError(f"Unsupported outbound stanza: {stanza!r}")

    async def start(self) -> None:
        LOGGER.info("Connecting to XMPP as %s", self._client.boundjid.bare)
        self._client.connect()
        await self._stop_event.wait()

    async def stop(self) -> None:
        if not self._stop_event.is_set():
            self._stop_event.set()
        self._client.disconnect()

    def _build_roster_query(self, query: RosterQuery) -> StanzaBase:
        iq = self._client.make_iq_get(ifrom=self._client.boundjid)
        iq["id"] = query.id
        iq.append(
            ET.Element(
                f"{{{query.xmlns}}}query",
                {f"{{{query.extension_ns}}}ext": query.extension_version},
            )
        )
        return iq

    def _on_session_start(self, event: Any) -> None:
        self._session.on_online(str(self._client.boundjid))

    def _on_disconnected(self, event: Any) -> None:
        self._session.on_offline()

    def _on_failure(self, event: Any) -> None:
        self._session.on_error(event)

    def _on_stanza(self, xml_stanza: StanzaBase) -> None:
        self._session.on_stanza(to_stanza(xml_stanza))
