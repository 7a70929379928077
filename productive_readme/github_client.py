#!/usr/bin/env python3
"""
Thin GitHub API client.

Executes GraphQL query documents and reads/writes repository files through
the REST contents API.
"""

import base64
import logging
from typing import Any, Dict, Optional

import requests

from .errors import GitHubQueryError, StaleRevisionError
from .models import DocumentRevision
from .queries import QueryDocument

GITHUB_API = "https://api.github.com"
GRAPHQL_URL = f"{GITHUB_API}/graphql"


class GitHubClient:
    """Authenticated session against the GitHub v3 and v4 APIs."""

    def __init__(self, github_token: str, timeout: int = 30,
                 session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            github_token: GitHub Personal Access Token
            timeout: Per-request timeout in seconds
            session: Optional pre-built session (used by tests)
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"token {github_token}",
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "productive-readme/1.0",
        })
        self.logger = logging.getLogger(__name__)

    def execute(self, document: QueryDocument) -> Dict[str, Any]:
        """
        Send a query document to the GraphQL endpoint.

        Returns:
            The decoded response body, with its `data` member.

        Raises:
            requests.RequestException: On transport or HTTP errors.
            GitHubQueryError: When the response carries GraphQL errors.
        """
        response = self.session.post(GRAPHQL_URL, json=document.to_payload(), timeout=self.timeout)
        response.raise_for_status()
        body = response.json()
        if body.get("errors"):
            raise GitHubQueryError(body["errors"])
        return body

    def _contents_url(self, owner: str, repo: str, path: str) -> str:
        return f"{GITHUB_API}/repos/{owner}/{repo}/contents/{path.lstrip('/')}"

    def get_file(self, owner: str, repo: str, path: str) -> DocumentRevision:
        """Fetch a file's decoded text and blob sha."""
        response = self.session.get(self._contents_url(owner, repo, path), timeout=self.timeout)
        response.raise_for_status()
        data = response.json()
        content = base64.b64decode(data["content"]).decode("utf-8")
        return DocumentRevision(content, data["sha"])

    def update_file(self, owner: str, repo: str, path: str, content: str, sha: str, message: str) -> Dict[str, Any]:
        """
        Replace a file's content, guarded by the sha it was read at.

        Raises:
            StaleRevisionError: When the file changed since `sha` was read.
            requests.RequestException: On any other HTTP error.
        """
        payload = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
            "sha": sha,
        }
        response = self.session.put(self._contents_url(owner, repo, path), json=payload, timeout=self.timeout)
        if response.status_code in (409, 422):
            raise StaleRevisionError(f"{owner}/{repo}/{path} was modified since sha {sha}: {response.text}")
        response.raise_for_status()
        self.logger.debug(f"Updated {owner}/{repo}/{path}")
        return response.json()
