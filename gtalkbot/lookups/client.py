"""Search and weather provider clients."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

import requests

from ..core.config import LookupConfig
from ..core.errors import LookupFailure, MalformedResponse
from ..core.models import SearchResult, WeatherReport

LOGGER = logging.getLogger(__name__)

WEATHER_QUERY = 'select * from weather.bylocation where location="{location}" and unit="c"'
WEATHER_ITEM_PATH = ("query", "results", "weather", "rss", "channel", "item")


class _JsonClient:
    """Blocking `requests` calls pushed onto a worker thread."""

    def __init__(
        self,
        name: str,
        url: str,
        timeout: float,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.name = name
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    def _get_json(self, params: Dict[str, Any]) -> Any:
        try:
            response = self._session.get(self._url, params=params, timeout=self._timeout)
        except requests.RequestException as exc:
            raise LookupFailure(f"{self.name} request failed: {exc}") from exc

        if response.status_code != 200:
            raise LookupFailure(f"{self.name} returned HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponse(f"{self.name} returned invalid JSON: {exc}") from exc


class SearchClient(_JsonClient):
    """Social search provider returning `{results: [{from_user, text}, ...]}`."""

    def __init__(
        self,
        name: str,
        url: str,
        results_per_page: int = 5,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(name, url, timeout, session)
        self._results_per_page = results_per_page

    async def search(self, query: str) -> List[SearchResult]:
        return await asyncio.to_thread(self._search_sync, query)

    def _search_sync(self, query: str) -> List[SearchResult]:
        payload = self._get_json(
            {"rpp": self._results_per_page, "show_user": "true", "q": query}
        )
        if not isinstance(payload, dict) or not isinstance(payload.get("results"), list):
            raise MalformedResponse(f"{self.name} response has no results list")

        results = []
        for item in payload["results"]:
            if not isinstance(item, dict):
                raise MalformedResponse(f"{self.name} result is not an object")
            author = item.get("from_user")
            text = item.get("text")
            if not isinstance(author, str) or not isinstance(text, str):
                raise MalformedResponse(f"{self.name} result is missing from_user/text")
            results.append(SearchResult(author=author, text=text))
        LOGGER.debug("%s returned %s result(s) for %r", self.name, len(results), query)
        return results


class WeatherClient(_JsonClient):
    """Weather provider answering YQL `weather.bylocation` queries."""

    async def lookup(self, location: str) -> WeatherReport:
        return await asyncio.to_thread(self._lookup_sync, location)

    def _lookup_sync(self, location: str) -> WeatherReport:
        payload = self._get_json(
            {
                "q": WEATHER_QUERY.format(location=location),
                "diagnostics": "true",
                "format": "json",
                "env": "store://datatables.org/alltableswithkeys",
            }
        )
        item = _dig(payload, WEATHER_ITEM_PATH, self.name)
        condition = _dig(item, ("condition",), self.name)

        title = item.get("title")
        temperature = condition.get("temp")
        text = condition.get("text")
        if not isinstance(title, str) or not isinstance(text, str):
            raise MalformedResponse(f"{self.name} item is missing title/condition text")
        if isinstance(temperature, bool) or not isinstance(temperature, (str, int, float)):
            raise MalformedResponse(f"{self.name} condition is missing temp")
        return WeatherReport(title=title, temperature=str(temperature), condition=text)


def _dig(payload: Any, path: Sequence[str], provider: str) -> Dict[str, Any]:
    node = payload
    for key in path:
        if not isinstance(node, dict) or not isinstance(node.get(key), dict):
            raise MalformedResponse(f"{provider} response is missing {key}")
        node = node[key]
    return node


def build_clients(config: LookupConfig) -> tuple[SearchClient, WeatherClient]:
    session = requests.Session()
    search = SearchClient(
        name=config.search.name,
        url=config.search.url,
        results_per_page=config.search.results_per_page,
        timeout=config.timeout,
        session=session,
    )
    weather = WeatherClient(
        name=config.weather.name,
        url=config.weather.url,
        timeout=config.timeout,
        session=session,
    )
    return search, weather
