"""Request/response schemas"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class GitHubEvent(BaseModel):
    """
    Events API record, as returned by ``GET /repos/{owner}/{repo}/events``.
    Only the top-level fields are declared; nested data stays as plain dicts.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    type: Optional[str] = None
    actor: Optional[dict] = None
    repo: Optional[dict] = None
    payload: Optional[dict] = None
    created_at: Optional[str] = None


class RenderedMessage(BaseModel):
    """Formatted message returned by POST /render."""

    event: str
    action: str
    text: str
    urls: Optional[list[str]] = None
    preview: str
