"""Helpers shared by the routers."""

from __future__ import annotations

import re
from typing import Sequence

# Templates put placeholders at the start of a line, followed by ':' or the
# end of the line. Tokens anywhere else come from commit messages.
PLACEHOLDER_RE = re.compile(r"^#\{(\d+)\}(?=:|$)", re.MULTILINE)


def placeholder_indexes(text: str) -> list[int]:
    """Indexes of the ``#{i}`` placeholders in ``text``, in order of appearance."""
    return [int(m.group(1)) for m in PLACEHOLDER_RE.finditer(text or "")]


def fill_placeholders(text: str, links: Sequence[str]) -> str:
    """
    Replace each line-leading ``#{i}`` placeholder with ``links[i]``.

    Links are inserted as-is, so callers pass shortened URLs when they have
    them and the original URLs otherwise. ``#{i}`` tokens inside message
    text, and placeholders with no matching link, are kept literally.

    Example
    -------
    '#{0}: fix bug', ['https://git.io/x'] → 'https://git.io/x: fix bug'
    '#{0}: see #{0}', ['https://git.io/x'] → 'https://git.io/x: see #{0}'
    """

    def _sub(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index >= len(links):
            return match.group(0)
        return links[index]

    return PLACEHOLDER_RE.sub(_sub, text or "")
