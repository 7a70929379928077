#!/usr/bin/env python3
"""
GraphQL query documents for the GitHub v4 API.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class QueryDocument:
    """A GraphQL query together with its variables."""
    query: str
    variables: Dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        return {"query": self.query, "variables": self.variables}


USER_INFO_QUERY = """
query {
  viewer {
    login
    id
  }
}
"""

CONTRIBUTED_REPOSITORIES_QUERY = """
query($login: String!) {
  user(login: $login) {
    repositoriesContributedTo(last: 100, includeUserRepositories: true) {
      nodes {
        name
        isFork
        owner {
          login
        }
      }
    }
  }
}
"""

COMMITTED_DATE_QUERY = """
query($owner: String!, $name: String!, $authorId: ID!) {
  repository(owner: $owner, name: $name) {
    defaultBranchRef {
      target {
        ... on Commit {
          history(first: 100, author: { id: $authorId }) {
            edges {
              node {
                committedDate
              }
            }
          }
        }
      }
    }
  }
}
"""


def identity_query() -> QueryDocument:
    """Query for the authenticated user's login and node id."""
    return QueryDocument(USER_INFO_QUERY)


def contributed_repositories_query(username: str) -> QueryDocument:
    """
    Query for the repositories `username` contributed to.

    Forks are included in the result; callers filter them on `isFork`.
    """
    return QueryDocument(CONTRIBUTED_REPOSITORIES_QUERY, {"login": username})


def commit_history_query(user_id: str, repo_name: str, repo_owner: str) -> QueryDocument:
    """Query for the committed dates of `user_id`'s commits on a repository's default branch."""
    return QueryDocument(
        COMMITTED_DATE_QUERY,
        {"owner": repo_owner, "name": repo_name, "authorId": user_id},
    )
