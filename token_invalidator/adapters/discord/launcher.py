"""Launcher for the token invalidator bot."""

import asyncio
import logging
import signal
import sys

import discord

from token_invalidator.adapters.discord.adapter import DiscordReplyAdapter, TokenInvalidatorBot
from token_invalidator.adapters.gist.client import GistClient
from token_invalidator.config import GIST_TOKEN_ENV, AppConfig
from token_invalidator.domain.errors import ConfigError
from token_invalidator.domain.reporter import TokenReporter

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def build_bot(config: AppConfig) -> TokenInvalidatorBot:
    """Wire the bot, the gist client and the reporter together."""
    bot = TokenInvalidatorBot()
    reporter = TokenReporter(
        paste=GistClient(config.gist_api_token),
        replies=DiscordReplyAdapter(bot),
    )
    bot.attach(reporter)
    return bot


async def serve(bot: TokenInvalidatorBot, token: str) -> int:
    """Run the gateway session until a shutdown signal. Returns an exit code."""
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    for sig in SHUTDOWN_SIGNALS:
        loop.add_signal_handler(sig, stop.set)

    try:
        async with bot:
            try:
                await bot.login(token)
            except discord.LoginFailure as e:
                logger.critical("error while logging in: %s", e)
                return 1
            except discord.HTTPException as e:
                logger.critical("error while contacting Discord: %s", e)
                return 1

            gateway = asyncio.create_task(bot.connect())
            stopper = asyncio.create_task(stop.wait())
            done, _ = await asyncio.wait(
                {gateway, stopper}, return_when=asyncio.FIRST_COMPLETED
            )

            if gateway in done:
                stopper.cancel()
                error = gateway.exception()
                if error is not None:
                    logger.critical("error while connecting to the gateway: %r", error)
                else:
                    logger.critical("gateway session ended unexpectedly")
                return 1

            logger.info("shutdown signal received, closing the gateway session")
            await bot.close()
            gateway.cancel()
            await asyncio.wait({gateway})
            return 0
    finally:
        for sig in SHUTDOWN_SIGNALS:
            loop.remove_signal_handler(sig)


async def run(config: AppConfig) -> int:
    if not config.has_gist_token:
        logger.warning("%s is not set; every gist upload will be rejected", GIST_TOKEN_ENV)
    bot = build_bot(config)
    return await serve(bot, config.discord_token)


def main() -> None:
    discord.utils.setup_logging(level=logging.INFO)
    logger.info("starting the bot...")
    logger.info("discord.py version: %s", discord.__version__)

    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        logger.critical("invalid configuration: %s", e)
        sys.exit(1)

    sys.exit(asyncio.run(run(config)))


if __name__ == "__main__":
    main()
