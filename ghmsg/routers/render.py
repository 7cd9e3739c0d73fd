"""Ruter render"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ghmsg.schemas import GitHubEvent, RenderedMessage
from ghmsg.services.events import UnsupportedEvent, event_key, get_formatter
from ghmsg.services.messages import MissingField
from ghmsg.utils import fill_placeholders

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/render", tags=["render"])


@router.post("", response_model=RenderedMessage)
def render_event(event: GitHubEvent) -> RenderedMessage:
    """
    Format one GitHub Events API record.

    ``preview`` is the text with each ``#{i}`` replaced by the raw ``urls[i]``;
    a caller that shortens links builds its own from ``text`` and ``urls``.
    """
    data = event.model_dump()
    try:
        event_type, action = event_key(data)
        result = get_formatter(event_type, action)(data)
    except MissingField as exc:
        logger.warning("event %s rejected: %s", event.id or "-", exc)
        raise HTTPException(422, str(exc)) from exc
    except UnsupportedEvent as exc:
        logger.warning("event %s rejected: %s", event.id or "-", exc)
        raise HTTPException(404, str(exc)) from exc

    logger.info(
        "rendered %s/%s for %s",
        event_type,
        action,
        (event.repo or {}).get("name", "-"),
    )
    return RenderedMessage(
        event=event_type,
        action=action,
        text=result.text,
        urls=list(result.urls) if result.urls is not None else None,
        preview=fill_placeholders(result.text, result.urls or ()),
    )
