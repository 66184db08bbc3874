"""GitHub Gists client using aiohttp."""

import asyncio
import logging
from typing import Sequence

import aiohttp
from pydantic import ValidationError

from token_invalidator.adapters.gist.models import GistFile, GistPayload, GistResponse
from token_invalidator.domain.errors import (
    PasteResponseError,
    PasteTransportError,
    PayloadSerializationError,
)

logger = logging.getLogger(__name__)

GIST_API_URL = "https://api.github.com/gists"
GIST_CONTENT_TYPE = "application/vnd.github.v3+json"
GIST_DESCRIPTION = "Token Invalidator bot by cane#8081."
GIST_FILENAME = "tokens.txt"
USER_AGENT = "Token Invalidator bot"


class GistClient:
    """Async Gists API client (one POST per report, no retry)."""

    def __init__(
        self,
        api_token: str,
        api_url: str = GIST_API_URL,
        user_agent: str = USER_AGENT,
    ):
        self._api_token = api_token
        self._api_url = api_url
        self._user_agent = user_agent

    @property
    def is_configured(self) -> bool:
        return bool(self._api_token)

    @property
    def headers(self) -> dict:
        return {
            "Authorization": self._api_token,
            "Content-Type": GIST_CONTENT_TYPE,
            "User-Agent": self._user_agent,
        }

    @staticmethod
    def build_payload(tokens: Sequence[str]) -> GistPayload:
        return GistPayload(
            description=GIST_DESCRIPTION,
            public=True,
            files={GIST_FILENAME: GistFile(content="\n".join(tokens))},
        )

    @staticmethod
    def serialize(payload: GistPayload) -> str:
        try:
            return payload.model_dump_json()
        except (TypeError, ValueError) as e:
            raise PayloadSerializationError(f"could not serialize gist payload: {e}") from e

    async def create(self, tokens: Sequence[str]) -> str:
        """Publish ``tokens`` as a public gist and return its html_url."""
        body = self.serialize(self.build_payload(tokens))

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(self._api_url, data=body, headers=self.headers) as resp:
                    status = resp.status
                    try:
                        data = await resp.json(content_type=None)
                    except ValueError as e:
                        raise PasteResponseError(f"undecodable response body: {e}", status=status) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise PasteTransportError(f"gist request failed: {e!r}") from e

        if not 200 <= status < 300:
            message = data.get("message") if isinstance(data, dict) else None
            raise PasteResponseError(f"gist API error: {message or data!r}", status=status)

        try:
            gist = GistResponse.model_validate(data)
        except ValidationError as e:
            raise PasteResponseError(
                f"unexpected response shape: {e.error_count()} error(s)", status=status
            ) from e

        logger.debug("Created gist %s (status=%s)", gist.html_url, status)
        return gist.html_url
