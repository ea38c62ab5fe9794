"""Tests for the search and weather HTTP clients."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from gtalkbot.core.errors import LookupFailure, MalformedResponse
from gtalkbot.core.models import SearchResult, WeatherReport
from gtalkbot.lookups.client import SearchClient, WeatherClient

WEATHER_PAYLOAD = {
    "query": {
        "results": {
            "weather": {
                "rss": {
                    "channel": {
                        "item": {
                            "title": "Conditions for Lisbon, PT",
                            "condition": {"temp": "18", "text": "Partly Cloudy"},
                        }
                    }
                }
            }
        }
    }
}


def _session(payload=None, status_code=200, json_error=None):
    response = MagicMock(status_code=status_code)
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    session = MagicMock()
    session.get.return_value = response
    return session


class TestSearchClient:
    def test_parses_results_in_order(self):
        session = _session(
            {"results": [{"from_user": "a", "text": "one"}, {"from_user": "b", "text": "two"}]}
        )
        client = SearchClient("Twitter", "http://search.example.com", results_per_page=3, timeout=2, session=session)

        results = client._search_sync("python")

        assert results == [SearchResult("a", "one"), SearchResult("b", "two")]
        session.get.assert_called_once_with(
            "http://search.example.com",
            params={"rpp": 3, "show_user": "true", "q": "python"},
            timeout=2,
        )

    def test_empty_results(self):
        client = SearchClient("Twitter", "http://x", session=_session({"results": []}))
        assert client._search_sync("nothing") == []

    def test_network_error(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("refused")
        client = SearchClient("Twitter", "http://x", session=session)

        with pytest.raises(LookupFailure) as exc_info:
            client._search_sync("python")
        assert not isinstance(exc_info.value, MalformedResponse)

    def test_non_success_status(self):
        client = SearchClient("Twitter", "http://x", session=_session({}, status_code=503))
        with pytest.raises(LookupFailure, match="HTTP 503"):
            client._search_sync("python")

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [],
            {},
            {"results": "nope"},
            {"results": ["not an object"]},
            {"results": [{"from_user": "a"}]},
            {"results": [{"from_user": 1, "text": "x"}]},
        ],
    )
    def test_malformed_payload(self, payload):
        client = SearchClient("Twitter", "http://x", session=_session(payload))
        with pytest.raises(MalformedResponse):
            client._search_sync("python")

    def test_invalid_json(self):
        client = SearchClient("Twitter", "http://x", session=_session(json_error=ValueError("bad json")))
        with pytest.raises(MalformedResponse):
            client._search_sync("python")

    @pytest.mark.asyncio
    async def test_async_search(self):
        client = SearchClient("Twitter", "http://x", session=_session({"results": [{"from_user": "a", "text": "b"}]}))
        assert await client.search("q") == [SearchResult("a", "b")]


class TestWeatherClient:
    def test_extracts_report(self):
        session = _session(WEATHER_PAYLOAD)
        client = WeatherClient("Yahoo Weather", "http://yql.example.com", timeout=5, session=session)

        report = client._lookup_sync("Lisbon")

        assert report == WeatherReport("Conditions for Lisbon, PT", "18", "Partly Cloudy")
        params = session.get.call_args.kwargs["params"]
        assert params["q"] == 'select * from weather.bylocation where location="Lisbon" and unit="c"'
        assert params["format"] == "json"

    def test_numeric_temperature(self):
        payload = {"query": {"results": {"weather": {"rss": {"channel": {"item": {
            "title": "T", "condition": {"temp": 7, "text": "Rain"}}}}}}}}
        client = WeatherClient("Yahoo Weather", "http://x", timeout=5, session=_session(payload))
        assert client._lookup_sync("x").temperature == "7"

    @pytest.mark.parametrize(
        "payload",
        [
            {"query": {"results": None}},
            {"query": {"results": {"weather": {"rss": {"channel": {}}}}}},
            {"query": {"results": {"weather": {"rss": {"channel": {"item": {"title": "T"}}}}}}},
            {"query": {"results": {"weather": {"rss": {"channel": {"item": {
                "title": "T", "condition": {"text": "Rain"}}}}}}}},
        ],
    )
    def test_malformed_payload(self, payload):
        client = WeatherClient("Yahoo Weather", "http://x", timeout=5, session=_session(payload))
        with pytest.raises(MalformedResponse):
            client._lookup_sync("Atlantis")

    def test_non_success_status(self):
        client = WeatherClient("Yahoo Weather", "http://x", timeout=5, session=_session({}, status_code=404))
        with pytest.raises(LookupFailure):
            client._lookup_sync("Atlantis")
