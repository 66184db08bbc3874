"""Discord adapter — bridges discord.Client to TokenReporter.

TokenInvalidatorBot converts guild messages to IncomingMessage and hands
them to the reporter. DiscordReplyAdapter is the ReplyPort used to answer.
"""

import logging
from typing import Optional

import discord

from token_invalidator.domain.errors import ReplyDeliveryError
from token_invalidator.domain.reporter import TokenReporter
from token_invalidator.ports.inbound import IncomingMessage

logger = logging.getLogger(__name__)

PRESENCE_NAME = "tokens"


def to_incoming(message: discord.Message) -> Optional[IncomingMessage]:
    """Convert a Discord message; returns None for messages outside a guild."""
    if message.guild is None:
        return None
    return IncomingMessage(
        content=message.content or "",
        message_id=message.id,
        channel_id=message.channel.id,
        guild_id=message.guild.id,
        author_id=message.author.id,
    )


def build_intents() -> discord.Intents:
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


class DiscordReplyAdapter:
    """ReplyPort implementation using discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def reply(self, message: IncomingMessage, text: str) -> None:
        channel = self._client.get_channel(message.channel_id)
        if channel is None:
            channel = self._client.get_partial_messageable(
                message.channel_id, guild_id=message.guild_id
            )
        reference = discord.MessageReference(
            message_id=message.message_id,
            channel_id=message.channel_id,
            guild_id=message.guild_id,
            fail_if_not_exists=False,
        )
        try:
            await channel.send(text, reference=reference)
        except discord.HTTPException as e:
            raise ReplyDeliveryError(f"could not send reply: {e}") from e


class TokenInvalidatorBot(discord.Client):
    """Thin Discord client that delegates guild messages to TokenReporter."""

    def __init__(self, reporter: Optional[TokenReporter] = None, **discord_kwargs):
        discord_kwargs.setdefault("intents", build_intents())
        discord_kwargs.setdefault(
            "activity",
            discord.Activity(type=discord.ActivityType.watching, name=PRESENCE_NAME),
        )
        discord_kwargs.setdefault("member_cache_flags", discord.MemberCacheFlags.none())
        discord_kwargs.setdefault("max_messages", None)
        discord_kwargs.setdefault("chunk_guilds_at_startup", False)
        super().__init__(**discord_kwargs)
        self.reporter = reporter

    def attach(self, reporter: TokenReporter) -> None:
        """Attach the reporter once its ports (which need this client) exist."""
        self.reporter = reporter

    async def on_ready(self):
        logger.info("Logged in as %s (id=%s)", self.user, self.user.id if self.user else None)
        logger.info("token invalidator bot is now running.")

    async def on_message(self, message: discord.Message):
        if self.reporter is None:
            return
        if self.user is not None and message.author.id == self.user.id:
            return

        incoming = to_incoming(message)
        if incoming is None:
            return

        try:
            await self.reporter.handle(incoming)
        except Exception:
            logger.exception("Unhandled error while scanning message=%s", message.id)
