"""Handlers for commands backed by external lookup providers."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Set

from ..errors import LookupFailure
from ..models import Request
from ..reply_channel import ReplyChannel
from .base import BaseCommandHandler
from .parser import ascii_strip

if TYPE_CHECKING:
    from ...lookups import SearchClient, WeatherClient

LOGGER = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "There are no results for your query. Please try again."
FAILURE_MESSAGE = "{provider} was unable to provide a satisfactory response. Please try again."


class LookupCommandHandler(BaseCommandHandler):
    """Acknowledges immediately, then replies from a background task.

    Replies from concurrent lookups may interleave; there is no timeout or
    cancellation beyond what the clients impose.
    """

    def __init__(
        self,
        reply_channel: ReplyChannel,
        search_client: "SearchClient",
        weather_client: "WeatherClient",
    ) -> None:
        super().__init__(reply_channel)
        self._search_client = search_client
        self._weather_client = weather_client
        self._pending: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def wait_idle(self) -> None:
        """Wait until every in-flight lookup has replied."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def handle_search(self, request: Request) -> bool:
        query = ascii_strip(request.argument or "")
        provider = self._search_client.name
        self._reply(request, f'Searching "{query}" on {provider}...')
        self._spawn(self._run_search(request.origin, query), request.origin, provider)
        return True

    def handle_weather(self, request: Request) -> bool:
        location = ascii_strip(request.argument or "")
        provider = self._weather_client.name
        self._reply(request, f'Searching "{location}" on {provider}...')
        self._spawn(self._run_weather(request.origin, location), request.origin, provider)
        return True

    async def _run_search(self, origin: str, query: str) -> None:
        provider = self._search_client.name
        try:
            results = await self._search_client.search(query)
        except LookupFailure as exc:
            LOGGER.warning("Search for %r failed: %s", query, exc)
            self._reply_channel.send_message(origin, FAILURE_MESSAGE.format(provider=provider))
            return

        if not results:
            self._reply_channel.send_message(origin, NO_RESULTS_MESSAGE)
            return
        for result in results:
            self._reply_channel.send_message(origin, f"@{result.author}: {result.text}")

    async def _run_weather(self, origin: str, location: str) -> None:
        provider = self._weather_client.name
        try:
            report = await self._weather_client.lookup(location)
        except LookupFailure as exc:
            LOGGER.warning("Weather lookup for %r failed: %s", location, exc)
            self._reply_channel.send_message(origin, FAILURE_MESSAGE.format(provider=provider))
            return

        self._reply_channel.send_message(
            origin, f"{report.title}\n{report.temperature}ºC - {report.condition}"
        )

    def _spawn(self, job: Awaitable[None], origin: str, provider: str) -> None:
        task = asyncio.get_running_loop().create_task(self._guard(job, origin, provider))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _guard(self, job: Awaitable[None], origin: str, provider: str) -> None:
        try:
            await job
        except Exception:
            LOGGER.exception("Unexpected error during %s lookup for %s", provider, origin)
            self._reply_channel.send_message(origin, FAILURE_MESSAGE.format(provider=provider))
