"""Lookup of message templates by GitHub event type and action."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from ghmsg.services.messages import (
    FormatResult,
    MissingField,
    branch_created,
    branch_deleted,
    pull_request_opened,
    push_multiple,
    push_single,
    tag_created,
    tag_deleted,
)

Formatter = Callable[[Mapping[str, Any]], FormatResult]
EventKey = tuple[str, str]

PUSH_SINGLE = "single"
PUSH_MULTIPLE = "multiple"

FORMATTERS: dict[EventKey, Formatter] = {
    ("PushEvent", PUSH_SINGLE): push_single,
    ("PushEvent", PUSH_MULTIPLE): push_multiple,
    ("CreateEvent", "branch"): branch_created,
    ("CreateEvent", "tag"): tag_created,
    ("DeleteEvent", "branch"): branch_deleted,
    ("DeleteEvent", "tag"): tag_deleted,
    ("PullRequestEvent", "opened"): pull_request_opened,
}


class UnsupportedEvent(LookupError):
    """Raised when no template exists for an (event type, action) pair."""

    def __init__(self, event_type: str, action: str):
        super().__init__(f"Unsupported event: {event_type}/{action}")
        self.event_type = event_type
        self.action = action


def _field(event: Mapping[str, Any], *path: str) -> Any:
    current: Any = event
    for key in path:
        current = current.get(key) if isinstance(current, Mapping) else None
        if current is None:
            raise MissingField(".".join(path))
    return current


def _push_action(event: Mapping[str, Any]) -> str:
    commits = _field(event, "payload", "commits")
    if not isinstance(commits, (list, tuple)):
        raise MissingField("payload.commits")
    return PUSH_SINGLE if len(commits) == 1 else PUSH_MULTIPLE


def event_key(event: Mapping[str, Any]) -> EventKey:
    """
    Resolve the lookup key of an Events API record.

    Push events are keyed by commit count and create/delete events by
    ``payload.ref_type``. Everything else uses ``payload.action``, empty
    when the record has none.
    """
    event_type = str(_field(event, "type"))
    if event_type == "PushEvent":
        return event_type, _push_action(event)
    if event_type in ("CreateEvent", "DeleteEvent"):
        return event_type, str(_field(event, "payload", "ref_type"))
    payload = event.get("payload")
    action = payload.get("action") if isinstance(payload, Mapping) else None
    return event_type, str(action or "")


def get_formatter(event_type: str, action: str) -> Formatter:
    formatter = FORMATTERS.get((event_type, action))
    if formatter is None:
        raise UnsupportedEvent(event_type, action)
    return formatter


def format_event(event: Mapping[str, Any]) -> FormatResult:
    """Render an Events API record with the template registered for it."""
    return get_formatter(*event_key(event))(event)


def supported_events() -> list[EventKey]:
    return sorted(FORMATTERS)
