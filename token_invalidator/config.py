"""Configuration loaded once from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from token_invalidator.domain.errors import ConfigError

load_dotenv()

DISCORD_TOKEN_ENV = "TOKEN_INVALIDATOR_TOKEN"
GIST_TOKEN_ENV = "GIST_API_TOKEN"


@dataclass(frozen=True)
class AppConfig:
    """Process-wide secrets. Built at startup and passed to components."""

    discord_token: str
    gist_api_token: str = ""

    @property
    def has_gist_token(self) -> bool:
        return bool(self.gist_api_token)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        discord_token = os.getenv(DISCORD_TOKEN_ENV, "").strip()
        if not discord_token:
            raise ConfigError(f"{DISCORD_TOKEN_ENV} is not set")
        return cls(
            discord_token=discord_token,
            gist_api_token=os.getenv(GIST_TOKEN_ENV, "").strip(),
        )
