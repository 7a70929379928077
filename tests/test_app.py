"""Tests for the end-to-end pipeline with a fake GitHub client."""

from __future__ import annotations

import logging

import pytest
import requests

from productive_readme.app import ExitCode, ProductiveBox, run
from productive_readme.chart import DAY_TITLE, NIGHT_TITLE
from productive_readme.errors import GitHubQueryError, StaleRevisionError
from productive_readme.readme import END_MARKER, START_MARKER

from conftest import FakeGitHubClient, history_response

REPOS = [
    {"name": "alpha", "isFork": False, "owner": {"login": "octocat"}},
    {"name": "forked", "isFork": True, "owner": {"login": "someone"}},
    {"name": "beta", "isFork": False, "owner": {"login": "github"}},
]

HISTORIES = {
    ("octocat", "alpha"): history_response("2024-01-01T07:00:00Z", "2024-01-01T12:00:00Z"),
    ("github", "beta"): history_response("2024-01-01T13:00:00Z", "2024-01-02T01:00:00Z"),
    ("someone", "forked"): history_response(*["2024-01-01T02:00:00Z"] * 10),
}


def test_full_run_writes_chart_between_markers(config) -> None:
    client = FakeGitHubClient(repos=REPOS, histories=HISTORIES)

    assert run(config, client) is ExitCode.OK

    assert len(client.writes) == 1
    write = client.writes[0]
    assert write["sha"] == "abc123"
    assert write["path"] == "README.md"
    assert write["message"] == config.commit_message
    content = write["content"]
    assert content.startswith(f"# Hi\n\n{START_MARKER}\n```text\n{DAY_TITLE}\n")
    assert content.endswith(f"```\n{END_MARKER}\n\nbye\n")
    assert "old" not in content
    # fork histories are never requested
    authors = [q.variables.get("name") for q in client.queries if "authorId" in q.variables]
    assert sorted(authors) == ["alpha", "beta"]
    assert all(q.variables.get("authorId") == "MDQ6VXNlcjE=" for q in client.queries if "authorId" in q.variables)


def test_repository_lookup_uses_login(config) -> None:
    client = FakeGitHubClient(repos=REPOS, histories=HISTORIES)
    run(config, client)
    assert client.queries[1].variables == {"login": "octocat"}


def test_night_owl_title(config) -> None:
    histories = {("octocat", "alpha"): history_response("2024-01-01T23:30:00Z", "2024-01-01T20:00:00Z")}
    client = FakeGitHubClient(repos=REPOS[:1], histories=histories)
    run(config, client)
    assert f"\n{NIGHT_TITLE}\n" in client.writes[0]["content"]


def test_time_zone_shifts_buckets(config) -> None:
    histories = {("octocat", "alpha"): history_response("2024-01-01T23:30:00Z")}
    tokyo = type(config)(**{**config.__dict__, "time_zone": "Asia/Tokyo"})
    client = FakeGitHubClient(repos=REPOS[:1], histories=histories)
    run(tokyo, client)
    morning_row = client.writes[0]["content"].split("\n")[6]
    assert "Morning" in morning_row and morning_row.endswith("100.0%")


def test_no_activity_never_touches_readme(config) -> None:
    client = FakeGitHubClient(repos=REPOS, histories={})
    assert run(config, client) is ExitCode.OK
    assert client.writes == []


def test_no_repositories_never_touches_readme(config) -> None:
    client = FakeGitHubClient(repos=[])
    assert run(config, client) is ExitCode.OK
    assert client.writes == []


def test_unchanged_readme_is_not_rewritten(config) -> None:
    client = FakeGitHubClient(repos=REPOS, histories=HISTORIES)
    run(config, client)
    client.readme = client.writes[0]["content"]
    assert run(config, client) is ExitCode.OK
    assert len(client.writes) == 1


@pytest.mark.parametrize(
    "stage,error,code",
    [
        ("identity", requests.ConnectionError("down"), ExitCode.IDENTITY),
        ("repositories", GitHubQueryError([{"message": "nope"}]), ExitCode.REPOSITORIES),
        ("history:github/beta", requests.HTTPError("502"), ExitCode.COMMIT_HISTORY),
        ("read", requests.HTTPError("404"), ExitCode.README_READ),
        ("write", StaleRevisionError("sha mismatch"), ExitCode.README_WRITE),
    ],
)
def test_failures_stop_the_run(config, caplog, stage, error, code) -> None:
    client = FakeGitHubClient(repos=REPOS, histories=HISTORIES, failures={stage: error})

    with caplog.at_level(logging.ERROR):
        assert run(config, client) is code

    assert client.writes == []
    assert str(error) in caplog.text


def test_history_failure_names_the_repository(config, caplog) -> None:
    client = FakeGitHubClient(
        repos=REPOS, histories=HISTORIES, failures={"history:github/beta": requests.HTTPError("502")}
    )
    with caplog.at_level(logging.ERROR):
        run(config, client)
    assert "github/beta" in caplog.text
    assert "Unable to get the commit info" in caplog.text


def test_histories_keep_repository_order(config) -> None:
    client = FakeGitHubClient(repos=REPOS, histories=HISTORIES)
    box = ProductiveBox(config, client)
    identity = box.fetch_identity()
    repos = box.fetch_repositories(identity)
    histories = box.fetch_commit_histories(identity, repos)
    assert histories == [HISTORIES[("octocat", "alpha")], HISTORIES[("github", "beta")]]


def test_malformed_identity_response_is_an_identity_failure(config) -> None:
    class NoViewer(FakeGitHubClient):
        def execute(self, document):
            return {"data": None}

    assert run(config, NoViewer()) is ExitCode.IDENTITY
