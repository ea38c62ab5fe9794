"""Chat adapter abstraction."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.models import OutboundStanza


class IChatAdapter(abc.ABC):
    """Abstraction for the instant-messaging transport."""

    @abc.abstractmethod
    def send_stanza(self, stanza: OutboundStanza) -> None:
        """Hand one outbound stanza to the transport for delivery."""

    @abc.abstractmethod
    async def start(self) -> None:
        """Connect and begin listening for events."""

    @abc.abstractmethod
    async def stop(self) -> None:
        """Shutdown the adapter."""
