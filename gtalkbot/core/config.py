"""Configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml
from dotenv import load_dotenv

from .errors import ConfigError

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path("~/.gtalk-bot").expanduser()
CONFIG_DIR_ENV = "GTALK_BOT_CONFIG_DIR"
ENV_FILE_NAME = ".env"
BOT_FILE = "bot.yaml"

DEFAULT_SEPARATOR = ":"
DEFAULT_STATUS_MESSAGE = "Type help for commands"
DEFAULT_LOOKUP_TIMEOUT = 10.0
DEFAULT_SEARCH_URL = "http://search.twitter.com/search.json"
DEFAULT_WEATHER_URL = "http://query.yahooapis.com/v1/public/yql"


@dataclass
class SearchProviderConfig:
    name: str = "Twitter"
    url: str = DEFAULT_SEARCH_URL
    results_per_page: int = 5


@dataclass
class WeatherProviderConfig:
    name: str = "Yahoo Weather"
    url: str = DEFAULT_WEATHER_URL


@dataclass
class LookupConfig:
    timeout: float = DEFAULT_LOOKUP_TIMEOUT
    search: SearchProviderConfig = field(default_factory=SearchProviderConfig)
    weather: WeatherProviderConfig = field(default_factory=WeatherProviderConfig)


@dataclass
class Config:
    jid: str
    password: str
    config_dir: Path
    command_argument_separator: str = DEFAULT_SEPARATOR
    allow_auto_subscribe: bool = False
    status_message: str = DEFAULT_STATUS_MESSAGE
    allowed_contacts: List[str] = field(default_factory=list)
    strict_commands: bool = False
    lookups: LookupConfig = field(default_factory=LookupConfig)


def resolve_config_dir(config_dir: Path | str | None) -> Path:
    """Resolve and validate the directory containing .env + bot.yaml."""
    raw = config_dir or os.getenv(CONFIG_DIR_ENV)
    target = (Path(raw).expanduser() if raw else DEFAULT_CONFIG_DIR).resolve()
    if not target.exists():
        raise ConfigError(
            f"Config directory {target} does not exist. "
            "Create it and add .env and bot.yaml."
        )
    if not target.is_dir():
        raise ConfigError(f"Config directory {target} is not a directory")
    return target


def load_config(config_dir: Path | str | None = None) -> Config:
    """Load bot configuration from the provided or default directory."""
    root = resolve_config_dir(config_dir)
    return _load_config_from_root(root)


def _load_config_from_root(root: Path) -> Config:
    _load_env_file(root / ENV_FILE_NAME)
    data = _load_bot_file(root / BOT_FILE)

    return Config(
        jid=_require_env("XMPP_JID"),
        password=_require_env("XMPP_PASSWORD"),
        config_dir=root,
        command_argument_separator=_parse_separator(data.get("command_argument_separator")),
        allow_auto_subscribe=_parse_bool(data, "allow_auto_subscribe", False),
        status_message=_parse_str(data, "status_message", DEFAULT_STATUS_MESSAGE),
        allowed_contacts=_parse_contacts(data.get("allowed_contacts")),
        strict_commands=_parse_bool(data, "strict_commands", False),
        lookups=_parse_lookups(data.get("lookups")),
    )


def _load_env_file(path: Path) -> None:
    if not path.exists():
        LOGGER.warning("No .env file found at %s; relying on shell environment.", path)
        return
    load_dotenv(dotenv_path=path, override=False)


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigError(f"{name} is not set")
    return value


def _load_bot_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        LOGGER.warning("No %s found at %s; using defaults.", BOT_FILE, path)
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {BOT_FILE} structure at {path}")
    return data


def _parse_separator(value: Any) -> str:
    if value is None:
        return DEFAULT_SEPARATOR
    if not isinstance(value, str) or not value:
        raise ConfigError("command_argument_separator must be a non-empty string")
    return value


def _parse_bool(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false")
    return value


def _parse_str(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string")
    return value


def _parse_contacts(value: Any) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError("allowed_contacts must be a list of JIDs")
    return [jid.strip().lower() for jid in value if jid.strip()]


def _parse_lookups(value: Any) -> LookupConfig:
    if value is None:
        return LookupConfig()
    if not isinstance(value, dict):
        raise ConfigError("lookups must be a mapping")

    timeout = value.get("timeout", DEFAULT_LOOKUP_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError("lookups.timeout must be a positive number")

    search_cfg = value.get("search") or {}
    weather_cfg = value.get("weather") or {}
    if not isinstance(search_cfg, dict):
        raise ConfigError("lookups.search must be a mapping")
    if not isinstance(weather_cfg, dict):
        raise ConfigError("lookups.weather must be a mapping")

    results_per_page = search_cfg.get("results_per_page", 5)
    if isinstance(results_per_page, bool) or not isinstance(results_per_page, int) or results_per_page < 1:
        raise ConfigError("lookups.search.results_per_page must be a positive integer")

    search = SearchProviderConfig(
        name=_parse_str(search_cfg, "name", "Twitter"),
        url=_parse_str(search_cfg, "url", DEFAULT_SEARCH_URL),
        results_per_page=results_per_page,
    )
    weather = WeatherProviderConfig(
        name=_parse_str(weather_cfg, "name", "Yahoo Weather"),
        url=_parse_str(weather_cfg, "url", DEFAULT_WEATHER_URL),
    )
    return LookupConfig(timeout=float(timeout), search=search, weather=weather)
