"""Session lifecycle and listener wiring."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List, Optional

from ..chat_adapters.i_chat_adapter import IChatAdapter
from .commands.builtin import BasicCommandHandler, register_builtin_commands
from .commands.lookup import LookupCommandHandler
from .commands.registry import CommandTable
from .config import Config
from .models import SessionStatus, Stanza
from .reply_channel import ReplyChannel
from .router import Router
from .subscription import SubscriptionAutoAcceptor

if TYPE_CHECKING:
    from ..lookups import SearchClient, WeatherClient

LOGGER = logging.getLogger(__name__)

StanzaListener = Callable[[Stanza], None]
OnlineListener = Callable[[], None]


class BotSession:
    """Owns the bot's components and reacts to transport lifecycle events."""

    def __init__(
        self,
        config: Config,
        search_client: SearchClient,
        weather_client: WeatherClient,
        reply_channel: Optional[ReplyChannel] = None,
    ) -> None:
        self._config = config
        self.status = SessionStatus()
        self.reply_channel = reply_channel or ReplyChannel()

        self.command_table = CommandTable(strict=config.strict_commands)
        self.lookups = LookupCommandHandler(self.reply_channel, search_client, weather_client)
        register_builtin_commands(
            self.command_table, BasicCommandHandler(self.reply_channel), self.lookups
        )
        self.router = Router(
            self.command_table,
            self.reply_channel,
            separator=config.command_argument_separator,
            allowed_contacts=config.allowed_contacts,
        )

        self._stanza_listeners: List[StanzaListener] = []
        self._online_listeners: List[OnlineListener] = []
        self.acceptor: Optional[SubscriptionAutoAcceptor] = None
        if config.allow_auto_subscribe:
            self.acceptor = SubscriptionAutoAcceptor(self.reply_channel)
            self._online_listeners.append(self.reply_channel.request_roster)
            self._stanza_listeners.append(self.acceptor.maybe_accept_subscription)
        self._stanza_listeners.append(self.router.dispatch)
        self._online_listeners.append(self._announce_status)

    def bind_adapter(self, adapter: IChatAdapter) -> None:
        self.reply_channel.bind_adapter(adapter)

    def on_online(self, jid: str) -> None:
        self.status.connected = True
        self.status.jid = jid
        LOGGER.info("Session established as %s", jid)
        for listener in self._online_listeners:
            listener()

    def on_offline(self) -> None:
        self.status.connected = False
        LOGGER.info("Session closed for %s", self.status.jid)

    def on_error(self, error: object) -> None:
        LOGGER.error("Transport error: %s", error)

    def on_stanza(self, stanza: Stanza) -> None:
        for listener in self._stanza_listeners:
            listener(stanza)

    async def wait_idle(self) -> None:
        await self.lookups.wait_idle()

    def _announce_status(self) -> None:
        self.reply_channel.set_status(self._config.status_message)
