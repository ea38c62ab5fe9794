"""Domain models for the chat bot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class StanzaKind(str, Enum):
    MESSAGE = "message"
    PRESENCE = "presence"
    IQ = "iq"
    ERROR = "error"


@dataclass(frozen=True)
class Stanza:
    """One inbound unit of protocol traffic."""

    kind: StanzaKind
    sender: str
    type: Optional[str] = None
    body: Optional[str] = None
    raw: str = ""

    @classmethod
    def classify(
        cls,
        name: str,
        sender: str,
        type: Optional[str] = None,
        body: Optional[str] = None,
        raw: str = "",
    ) -> "Stanza":
        """Build a stanza from an element name, treating `type="error"` as an error."""
        kind = StanzaKind.ERROR if type == "error" else StanzaKind(name)
        return cls(kind=kind, sender=sender, type=type, body=body, raw=raw)


@dataclass(frozen=True)
class Request:
    command: str
    argument: Optional[str]
    origin: str
    source_stanza: Stanza


@dataclass(frozen=True)
class OutboundMessage:
    to: str
    body: str
    type: str = "chat"


@dataclass(frozen=True)
class OutboundPresence:
    to: Optional[str] = None
    type: Optional[str] = None
    show: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class RosterQuery:
    """Roster request carrying the Google roster extension attributes."""

    id: str = "google-roster"
    xmlns: str = "jabber:iq:roster"
    extension_ns: str = "google:roster"
    extension_version: str = "2"


OutboundStanza = Union[OutboundMessage, OutboundPresence, RosterQuery]


@dataclass
class SessionStatus:
    connected: bool = False
    jid: Optional[str] = None


@dataclass(frozen=True)
class SearchResult:
    author: str
    text: str


@dataclass(frozen=True)
class WeatherReport:
    title: str
    temperature: str
    condition: str


def bare_jid(jid: str) -> str:
    """Strip the resource part from a JID (`user@host/res` -> `user@host`)."""
    return jid.split("/", 1)[0].lower()

