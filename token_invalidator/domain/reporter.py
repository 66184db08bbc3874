"""TokenReporter — publishes detected tokens and replies with the gist URL.

No discord or aiohttp import here: the paste service and the chat reply are
reached through ``PastePort`` and ``ReplyPort`` so the flow is testable with
mock ports.
"""

import logging
from typing import Optional, Sequence

from token_invalidator.domain.detector import find_tokens
from token_invalidator.domain.errors import ReportError
from token_invalidator.ports.inbound import IncomingMessage
from token_invalidator.ports.outbound import PastePort, ReplyPort, ReportResult

logger = logging.getLogger(__name__)

REPLY_TEMPLATE = "Tokens have been detected and sent to <{url}> to be invalidated."


def format_reply(url: str) -> str:
    return REPLY_TEMPLATE.format(url=url)


class TokenReporter:
    """Detect-and-report for a single message.

    Every stage fails independently: the error is logged, the run stops,
    and nothing is retried. Failures never propagate to the caller.
    """

    def __init__(self, paste: PastePort, replies: ReplyPort):
        self._paste = paste
        self._replies = replies

    async def handle(self, message: IncomingMessage) -> Optional[ReportResult]:
        """Scan ``message`` and report any tokens found.

        Returns None when the message holds no tokens.
        """
        tokens = find_tokens(message.content)
        if not tokens:
            return None
        logger.info(
            "Detected %d token(s) in message=%s channel=%s guild=%s",
            len(tokens), message.message_id, message.channel_id, message.guild_id,
        )
        return await self.report(message, tokens)

    async def report(self, message: IncomingMessage, tokens: Sequence[str]) -> ReportResult:
        if not tokens:
            raise ValueError("report() requires at least one token")

        try:
            url = await self._paste.create(tokens)
        except ReportError as e:
            return self._failed(message, e)

        try:
            await self._replies.reply(message, format_reply(url))
        except ReportError as e:
            result = self._failed(message, e)
            result.url = url
            return result

        logger.info("Reported message=%s to %s", message.message_id, url)
        return ReportResult(success=True, url=url)

    @staticmethod
    def _failed(message: IncomingMessage, error: ReportError) -> ReportResult:
        logger.error(
            "Token report failed at %s stage for message=%s channel=%s: %s",
            error.stage, message.message_id, message.channel_id, error,
        )
        return ReportResult(success=False, stage=error.stage, error=str(error))
