"""Discord-facing adapters."""

from token_invalidator.adapters.discord.adapter import (
    DiscordReplyAdapter,
    TokenInvalidatorBot,
    build_intents,
    to_incoming,
)

__all__ = [
    "DiscordReplyAdapter",
    "TokenInvalidatorBot",
    "build_intents",
    "to_incoming",
]
