"""GitHub Gists implementation of the paste port."""

from token_invalidator.adapters.gist.client import GIST_API_URL, GistClient
from token_invalidator.adapters.gist.models import GistFile, GistPayload, GistResponse

__all__ = [
    "GIST_API_URL",
    "GistClient",
    "GistFile",
    "GistPayload",
    "GistResponse",
]
