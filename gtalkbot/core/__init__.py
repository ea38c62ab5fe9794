"""Core domain logic for the chat bot."""

from .config import Config, load_config
from .errors import (
    BotError,
    CommandRegistrationError,
    ConfigError,
    LookupFailure,
    MalformedResponse,
    TransportError,
)
from .models import (
    OutboundMessage,
    OutboundPresence,
    Request,
    RosterQuery,
    SessionStatus,
    Stanza,
    StanzaKind,
)
from .reply_channel import ReplyChannel
from .router import Router
from .session import BotSession
from .subscription import SubscriptionAutoAcceptor

__all__ = [
    "Config",
    "load_config",
    "BotError",
    "CommandRegistrationError",
    "ConfigError",
    "LookupFailure",
    "MalformedResponse",
    "TransportError",
    "OutboundMessage",
    "OutboundPresence",
    "Request",
    "RosterQuery",
    "SessionStatus",
    "Stanza",
    "StanzaKind",
    "ReplyChannel",
    "Router",
    "BotSession",
    "SubscriptionAutoAcceptor",
]
