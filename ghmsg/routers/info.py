"""Ruter Ingfo?"""

from __future__ import annotations

from textwrap import dedent

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ghmsg.services.events import supported_events

router = APIRouter(tags=["info"])


def render_help_text() -> str:
    """
    Plain-text help: endpoints plus every (event type, action) pair that has
    a message template.
    """
    events = "\n".join(f"- {etype} / {action}" for etype, action in supported_events())
    return dedent(
        """
GitHub event → chat message formatter (HTTP Help)

Endpoints
---------
- GET  /        : Health check
- GET  /help    : This text
- POST /render  : Format one Events API record (JSON body)

Supported events
----------------
{events}

Placeholders
------------
`#{{i}}` in the text refers to urls[i]; shorten the urls and substitute them.
"""
    ).strip().format(events=events)


@router.get("/", response_class=PlainTextResponse)
def health() -> str:
    return "OK"


@router.get("/help", response_class=PlainTextResponse)
def http_help() -> str:
    return render_help_text()
