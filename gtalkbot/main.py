"""CLI entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import signal
from pathlib import Path
from typing import Sequence

from .chat_adapters.xmpp_adapter import XmppAdapter
from .core import BotSession, Config, ConfigError, load_config
from .lookups import build_clients

LOGGER = logging.getLogger(__name__)


def cli(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="gtalk-bot",
        description="gtalk-bot - XMPP chat bot answering one-line commands",
    )
    parser.add_argument(
        "--config-dir",
        default=None,
        help="Directory holding .env and bot.yaml (default: ~/.gtalk-bot)",
    )
    args = parser.parse_args(argv)

    try:
        asyncio.run(_run_async(args.config_dir))
    except ConfigError as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 1
    except KeyboardInterrupt:
        LOGGER.info("Interrupted by user")
        return 130
    return 0


async def _run_async(config_dir: str | Path | None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config: Config = load_config(config_dir)
    LOGGER.info("Using config directory: %s", config.config_dir)

    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    logging.getLogger().setLevel(log_level)

    LOGGER.info(
        "Auto-subscribe %s, separator %r, %s allowed contact(s)",
        "enabled" if config.allow_auto_subscribe else "disabled",
        config.command_argument_separator,
        len(config.allowed_contacts) or "all",
    )

    search_client, weather_client = build_clients(config.lookups)
    session = BotSession(config, search_client, weather_client)
    adapter = XmppAdapter(config.jid, config.password, session)

    loop = asyncio.get_running_loop()
    stop_event = asyncio.Event()

    def _request_shutdown() -> None:
        LOGGER.info("Shutdown requested")
        stop_event.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _request_shutdown)
        except NotImplementedError:
            # Windows event loops before 3.11 do not support signal handlers.
            pass

    adapter_task = asyncio.create_task(adapter.start())
    LOGGER.info("gtalk-bot daemon started")

    await stop_event.wait()
    await session.wait_idle()
    await adapter.stop()
    await adapter_task
    LOGGER.info("Shutdown complete")


if __name__ == "__main__":
    raise SystemExit(cli())
