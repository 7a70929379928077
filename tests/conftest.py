"""Shared fixtures: an in-process stand-in for the GitHub client."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from productive_readme.config import Config
from productive_readme.models import DocumentRevision
from productive_readme.readme import END_MARKER, START_MARKER


def history_response(*dates: str) -> Dict[str, Any]:
    edges = [{"node": {"committedDate": date}} for date in dates]
    return {"data": {"repository": {"defaultBranchRef": {"target": {"history": {"edges": edges}}}}}}


class FakeGitHubClient:
    """Answers query documents from canned data and records writes."""

    def __init__(
        self,
        repos: Optional[List[Dict[str, Any]]] = None,
        histories: Optional[Dict[Tuple[str, str], Any]] = None,
        readme: str = f"# Hi\n\n{START_MARKER}\nold\n{END_MARKER}\n\nbye\n",
        failures: Optional[Dict[str, Exception]] = None,
    ) -> None:
        self.repos = repos if repos is not None else []
        self.histories = histories or {}
        self.readme = readme
        self.failures = failures or {}
        self.queries: List[Any] = []
        self.writes: List[Dict[str, Any]] = []

    def _maybe_fail(self, stage: str) -> None:
        if stage in self.failures:
            raise self.failures[stage]

    def execute(self, document):
        self.queries.append(document)
        variables = document.variables
        if "authorId" in variables:
            key = (variables["owner"], variables["name"])
            self._maybe_fail(f"history:{key[0]}/{key[1]}")
            return self.histories.get(key, {"data": {"repository": None}})
        if "login" in variables:
            self._maybe_fail("repositories")
            return {"data": {"user": {"repositoriesContributedTo": {"nodes": self.repos}}}}
        self._maybe_fail("identity")
        return {"data": {"viewer": {"login": "octocat", "id": "MDQ6VXNlcjE="}}}

    def get_file(self, owner, repo, path):
        self._maybe_fail("read")
        return DocumentRevision(self.readme, "abc123")

    def update_file(self, owner, repo, path, content, sha, message):
        self._maybe_fail("write")
        self.writes.append(
            {"owner": owner, "repo": repo, "path": path, "content": content, "sha": sha, "message": message}
        )
        return {"content": {"sha": "def456"}}


@pytest.fixture
def config() -> Config:
    return Config(github_token="t0ken", target_owner="octocat", target_repo="octocat", time_zone="UTC")
