"""Common utilities for command handlers."""

from __future__ import annotations

from ..models import Request
from ..reply_channel import ReplyChannel


class BaseCommandHandler:
    """Provides helper methods for replying to the requesting contact."""

    def __init__(self, reply_channel: ReplyChannel) -> None:
        self._reply_channel = reply_channel

    def _reply(self, request: Request, text: str) -> None:
        self._reply_channel.send_message(request.origin, text)
