"""HTTP clients for the external lookup providers."""

from .client import SearchClient, WeatherClient, build_clients

__all__ = ["SearchClient", "WeatherClient", "build_clients"]
