"""Outbound ports — interfaces for the paste service and chat replies."""

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, runtime_checkable

from token_invalidator.ports.inbound import IncomingMessage


@dataclass
class ReportResult:
    """Outcome of one detect-and-report run."""

    success: bool
    url: Optional[str] = None
    stage: Optional[str] = None  # stage that failed: serialize/transport/response/reply
    error: Optional[str] = None


@runtime_checkable
class PastePort(Protocol):
    """Publishes matched tokens and returns the public URL."""

    async def create(self, tokens: Sequence[str]) -> str: ...


@runtime_checkable
class ReplyPort(Protocol):
    """Sends a reply referencing the original message."""

    async def reply(self, message: IncomingMessage, text: str) -> None: ...
