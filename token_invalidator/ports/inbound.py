"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IncomingMessage:
    """A guild message as seen by the detector and reporter."""

    content: str
    message_id: int
    channel_id: int
    guild_id: int
    author_id: int = 0
