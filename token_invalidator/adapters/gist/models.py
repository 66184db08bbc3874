"""Wire models for the Gists API."""

from typing import Dict

from pydantic import BaseModel, Field


class GistFile(BaseModel):
    content: str


class GistPayload(BaseModel):
    description: str
    public: bool = True
    files: Dict[str, GistFile]


class GistResponse(BaseModel):
    """Only the field we consume; the rest of the response is ignored."""

    html_url: str = Field(min_length=1)
