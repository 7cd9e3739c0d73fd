"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from ghmsg.app import app


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


def make_commit(sha: str, message: str, author: str) -> dict:
    """Build one commit entry of a PushEvent payload."""
    return {"sha": sha, "message": message, "author": {"name": author, "email": f"{author}@example.com"}}


@pytest.fixture
def push_event() -> dict:
    """PushEvent carrying a single commit."""
    return {
        "id": "1001",
        "type": "PushEvent",
        "actor": {"login": "alice"},
        "repo": {"name": "a/b"},
        "payload": {
            "ref": "refs/heads/main",
            "size": 1,
            "commits": [make_commit("abc123", "fix bug", "alice")],
        },
    }


@pytest.fixture
def multi_push_event() -> dict:
    """PushEvent carrying three commits by two authors."""
    return {
        "id": "1002",
        "type": "PushEvent",
        "actor": {"login": "alice"},
        "repo": {"name": "octo/repo"},
        "payload": {
            "ref": "refs/heads/develop",
            "size": 3,
            "commits": [
                make_commit("111aaa", "add parser", "alice"),
                make_commit("222bbb", "fix parser", "bob"),
                make_commit("333ccc", "docs", "alice"),
            ],
        },
    }


@pytest.fixture
def create_tag_event() -> dict:
    """CreateEvent for a tag."""
    return {
        "id": "1003",
        "type": "CreateEvent",
        "actor": {"login": "bob"},
        "repo": {"name": "a/b"},
        "payload": {"ref": "v1.0", "ref_type": "tag", "master_branch": "main"},
    }


@pytest.fixture
def pull_request_event() -> dict:
    """PullRequestEvent for an opened pull request from a fork."""
    return {
        "id": "1004",
        "type": "PullRequestEvent",
        "actor": {"login": "carol"},
        "repo": {"name": "octo/repo"},
        "payload": {
            "action": "opened",
            "number": 42,
            "pull_request": {
                "user": {"login": "carol"},
                "head": {"ref": "feature", "repo": {"full_name": "carol/repo"}},
                "base": {"ref": "main", "repo": {"full_name": "octo/repo"}},
                "commits": 3,
                "additions": 10,
                "deletions": 2,
                "changed_files": 4,
            },
        },
    }


def _ref_event(event_type: str, ref: str, ref_type: str) -> dict:
    return {
        "type": event_type,
        "actor": {"login": "bob"},
        "repo": {"name": "a/b"},
        "payload": {"ref": ref, "ref_type": ref_type},
    }


@pytest.fixture
def create_branch_event() -> dict:
    """CreateEvent for a branch."""
    return _ref_event("CreateEvent", "feature", "branch")


@pytest.fixture
def delete_branch_event() -> dict:
    """DeleteEvent for a branch."""
    return _ref_event("DeleteEvent", "old", "branch")


@pytest.fixture
def delete_tag_event() -> dict:
    """DeleteEvent for a tag."""
    return _ref_event("DeleteEvent", "v0.9", "tag")
