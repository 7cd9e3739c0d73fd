"""Chat message templates for GitHub events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

GITHUB_WEB_BASE = "https://github.com"

PathPart = Union[str, int]

PULL_REQUEST = ("payload", "pull_request")


class MissingField(ValueError):
    """Raised when a required path is absent from an event record."""

    def __init__(self, path: str):
        super().__init__(f"Missing field: {path}")
        self.path = path


@dataclass(frozen=True)
class FormatResult:
    """
    Rendered message.

    ``text`` may contain ``#{i}`` placeholders, each referring to ``urls[i]``.
    ``urls`` is ``None`` when the message carries no links to shorten.
    """

    text: str
    urls: Optional[tuple[str, ...]] = None

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"text": self.text}
        if self.urls is not None:
            data["urls"] = list(self.urls)
        return data


def _path_label(path: Sequence[PathPart]) -> str:
    label = ""
    for key in path:
        if isinstance(key, int):
            label += f"[{key}]"
        else:
            label += f".{key}" if label else key
    return label


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _require(data: Any, path: Sequence[PathPart]) -> Any:
    current = data
    for key in path:
        if isinstance(key, int):
            if not _is_list(current) or key >= len(current):
                raise MissingField(_path_label(path))
            current = current[key]
        else:
            if not isinstance(current, Mapping):
                raise MissingField(_path_label(path))
            current = current.get(key)
        if current is None:
            raise MissingField(_path_label(path))
    return current


def _repo(event: Mapping[str, Any]) -> str:
    return _require(event, ("repo", "name"))


def _actor(event: Mapping[str, Any]) -> str:
    return _require(event, ("actor", "login"))


def _commits(event: Mapping[str, Any]) -> Sequence[Mapping[str, Any]]:
    commits = _require(event, ("payload", "commits"))
    if not _is_list(commits):
        raise MissingField("payload.commits")
    return commits


def commit_url(repo: str, sha: str) -> str:
    return f"{GITHUB_WEB_BASE}/{repo}/commit/{sha}"


def branch_from_ref(ref: str) -> str:
    """
    Branch name of a push ref.

    Example
    -------
    'refs/heads/main' → 'main'
    'refs/heads/feature/login' → 'feature'
    """
    parts = ref.split("/") if isinstance(ref, str) else []
    if len(parts) < 3 or not parts[2]:
        raise MissingField("payload.ref")
    return parts[2]


def _push_header(event: Mapping[str, Any]) -> tuple[str, str]:
    repo = _repo(event)
    branch = branch_from_ref(_require(event, ("payload", "ref")))
    return repo, branch


def _commit_line(event: Mapping[str, Any], repo: str, index: int) -> tuple[str, str, str]:
    commit = ("payload", "commits", index)
    message = _require(event, (*commit, "message"))
    author = _require(event, (*commit, "author", "name"))
    sha = _require(event, (*commit, "sha"))
    return f"#{{{index}}}: {message} - {author}", commit_url(repo, sha), author


def push_single(event: Mapping[str, Any]) -> FormatResult:
    """Push event carrying exactly one commit."""
    repo, branch = _push_header(event)
    if not _commits(event):
        raise MissingField("payload.commits[0]")
    line, url, author = _commit_line(event, repo, 0)

    text = f"[{repo}:{branch}] 1 new commit by {author}:\n{line}"
    return FormatResult(text=text, urls=(url,))


def push_multiple(event: Mapping[str, Any]) -> FormatResult:
    """Push event carrying any number of commits, listed in push order."""
    repo, branch = _push_header(event)
    size = _require(event, ("payload", "size"))

    lines = [f"[{repo}:{branch}] {size} new commits."]
    urls: list[str] = []
    for index in range(len(_commits(event))):
        line, url, _author = _commit_line(event, repo, index)
        lines.append(line)
        urls.append(url)
    return FormatResult(text="\n".join(lines), urls=tuple(urls))


def _ref_changed(event: Mapping[str, Any], ref_type: str, verb: str) -> str:
    repo = _repo(event)
    ref = _require(event, ("payload", "ref"))
    user = _actor(event)
    return f"[{repo}] The {ref_type} **{ref}** was {verb} by {user}"


def branch_created(event: Mapping[str, Any]) -> FormatResult:
    # tree link stays inline, it is not shortened
    text = _ref_changed(event, "branch", "created")
    repo = _repo(event)
    branch = _require(event, ("payload", "ref"))
    return FormatResult(text=f"{text}\n{GITHUB_WEB_BASE}/{repo}/tree/{branch}")


def tag_created(event: Mapping[str, Any]) -> FormatResult:
    return FormatResult(text=_ref_changed(event, "tag", "created"))


def branch_deleted(event: Mapping[str, Any]) -> FormatResult:
    return FormatResult(text=_ref_changed(event, "branch", "deleted"))


def tag_deleted(event: Mapping[str, Any]) -> FormatResult:
    return FormatResult(text=_ref_changed(event, "tag", "deleted"))


def pull_request_opened(event: Mapping[str, Any]) -> FormatResult:
    """
    A pull request was opened.

    Renders the title line, the ``base ← head`` comparison, the diff stats and
    a ``#{0}`` placeholder for the pull request link.
    """
    repo = _repo(event)
    user = _require(event, (*PULL_REQUEST, "user", "login"))
    head = _require(event, (*PULL_REQUEST, "head", "repo", "full_name"))
    head_branch = _require(event, (*PULL_REQUEST, "head", "ref"))
    base_branch = _require(event, (*PULL_REQUEST, "base", "ref"))
    commits = _require(event, (*PULL_REQUEST, "commits"))
    additions = _require(event, (*PULL_REQUEST, "additions"))
    deletions = _require(event, (*PULL_REQUEST, "deletions"))
    changed_files = _require(event, (*PULL_REQUEST, "changed_files"))
    number = _require(event, ("payload", "number"))

    lines = [
        f"[**{repo}**] New pull request from {user}",
        f"[{repo}:{base_branch} ← {head}:{head_branch}]",
        f"{commits} commits • {changed_files} changed files"
        f" • {additions} additions • {deletions} deletions",
        "#{0}",
    ]
    return FormatResult(
        text="\n".join(lines),
        urls=(f"{GITHUB_WEB_BASE}/{repo}/pull/{number}",),
    )
