"""Shared fixtures for bot tests."""

from __future__ import annotations

from typing import List, Optional

import pytest

from gtalkbot.chat_adapters.i_chat_adapter import IChatAdapter
from gtalkbot.core.config import Config
from gtalkbot.core.models import (
    OutboundMessage,
    OutboundStanza,
    SearchResult,
    Stanza,
    StanzaKind,
    WeatherReport,
)
from gtalkbot.core.reply_channel import ReplyChannel


class DummyChatAdapter(IChatAdapter):
    """Captures stanzas emitted through the reply channel."""

    def __init__(self) -> None:
        self.sent: List[OutboundStanza] = []

    def send_stanza(self, stanza: OutboundStanza) -> None:
        self.sent.append(stanza)

    async def start(self) -> None:
        return None

    async def stop(self) -> None:
        return None

    @property
    def messages(self) -> List[OutboundMessage]:
        return [stanza for stanza in self.sent if isinstance(stanza, OutboundMessage)]

    @property
    def bodies(self) -> List[str]:
        return [message.body for message in self.messages]


class FakeSearchClient:
    name = "Twitter"

    def __init__(self, results: Optional[List[SearchResult]] = None, error: Optional[Exception] = None) -> None:
        self.results = results or []
        self.error = error
        self.queries: List[str] = []

    async def search(self, query: str) -> List[SearchResult]:
        self.queries.append(query)
        if self.error:
            raise self.error
        return list(self.results)


class FakeWeatherClient:
    name = "Yahoo Weather"

    def __init__(self, report: Optional[WeatherReport] = None, error: Optional[Exception] = None) -> None:
        self.report = report
        self.error = error
        self.locations: List[str] = []

    async def lookup(self, location: str) -> WeatherReport:
        self.locations.append(location)
        if self.error:
            raise self.error
        assert self.report is not None
        return self.report


@pytest.fixture
def make_message():
    """Factory for inbound chat message stanzas."""

    def _make(body: Optional[str], sender: str = "alice@example.com/home") -> Stanza:
        return Stanza(kind=StanzaKind.MESSAGE, sender=sender, type="chat", body=body)

    return _make


@pytest.fixture
def adapter() -> DummyChatAdapter:
    return DummyChatAdapter()


@pytest.fixture
def reply_channel(adapter: DummyChatAdapter) -> ReplyChannel:
    return ReplyChannel(adapter)


@pytest.fixture
def search_client() -> FakeSearchClient:
    return FakeSearchClient()


@pytest.fixture
def weather_client() -> FakeWeatherClient:
    return FakeWeatherClient(
        report=WeatherReport(title="Conditions for Sydney, AU", temperature="21", condition="Sunny")
    )


@pytest.fixture
def test_config(tmp_path) -> Config:
    return Config(jid="bot@example.com", password="secret", config_dir=tmp_path)
