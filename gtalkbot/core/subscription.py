"""Automatic approval of contact subscription requests."""

from __future__ import annotations

import logging

from .models import Stanza, StanzaKind
from .reply_channel import ReplyChannel

LOGGER = logging.getLogger(__name__)


class SubscriptionAutoAcceptor:
    """Approves every `subscribe` presence it sees.

    Only instantiated and registered when auto-subscription is enabled.
    """

    def __init__(self, reply_channel: ReplyChannel) -> None:
        self._reply_channel = reply_channel

    def maybe_accept_subscription(self, stanza: Stanza) -> None:
        if stanza.kind is not StanzaKind.PRESENCE or stanza.type != "subscribe":
            return
        self._reply_channel.approve_subscription(stanza.sender)
        LOGGER.info("Accepted subscription from %s", stanza.sender)
