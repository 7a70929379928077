#!/usr/bin/env python3
"""
Commit activity README updater.

Fetches the authenticated user's commits across the repositories they
contributed to, buckets them by time of day and writes a text bar chart
into a marker-delimited section of a README.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from enum import IntEnum
from typing import Any, Dict, List, Optional

from .activity import aggregate
from .chart import render_chart
from .config import Config
from .github_client import GitHubClient
from .models import DocumentRevision, Identity, RepositoryRef
from .queries import commit_history_query, contributed_repositories_query, identity_query
from .readme import replace_section


class ExitCode(IntEnum):
    """Process exit status, one per failing stage."""
    OK = 0
    CONFIG = 1
    IDENTITY = 2
    REPOSITORIES = 3
    COMMIT_HISTORY = 4
    README_READ = 5
    README_WRITE = 6


class ProductiveBox:
    """Runs the fetch, count, render and write stages for one user."""

    def __init__(self, config: Config, client: Optional[GitHubClient] = None):
        """
        Initialize the pipeline.

        Args:
            config: Run configuration
            client: GitHub client; built from the configured token if None
        """
        self.config = config
        self.client = client or GitHubClient(config.github_token)
        self.logger = logging.getLogger(__name__)

    def fetch_identity(self) -> Identity:
        response = self.client.execute(identity_query())
        return Identity.from_github_viewer(response["data"]["viewer"])

    def fetch_repositories(self, identity: Identity) -> List[RepositoryRef]:
        """Non-fork repositories the user contributed to, in API order."""
        response = self.client.execute(contributed_repositories_query(identity.login))
        nodes = response["data"]["user"]["repositoriesContributedTo"]["nodes"] or []
        return [RepositoryRef.from_github_node(node) for node in nodes if node and not node.get("isFork")]

    def _fetch_history(self, identity: Identity, repo: RepositoryRef) -> Dict[str, Any]:
        try:
            response = self.client.execute(commit_history_query(identity.id, repo.name, repo.owner))
        except Exception as e:
            self.logger.error(f"Error fetching commit history for {repo}: {e}")
            raise
        self.logger.debug(f"Fetched commit history for {repo}")
        return response

    def fetch_commit_histories(self, identity: Identity, repos: List[RepositoryRef]) -> List[Dict[str, Any]]:
        """
        Fetch every repository's history concurrently.

        Results keep the order of `repos`. The first failure is re-raised and
        the whole batch is discarded.
        """
        if not repos:
            return []
        # workers share the client's requests.Session; each call is a single
        # stateless POST and the session holds no cookies to race on
        workers = min(self.config.max_workers, len(repos))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(lambda repo: self._fetch_history(identity, repo), repos))

    def read_readme(self) -> DocumentRevision:
        return self.client.get_file(self.config.target_owner, self.config.target_repo, self.config.target_path)

    def write_readme(self, revision: DocumentRevision, content: str) -> None:
        self.client.update_file(
            self.config.target_owner,
            self.config.target_repo,
            self.config.target_path,
            content,
            revision.sha,
            self.config.commit_message,
        )

    def run(self) -> ExitCode:
        """Run every stage, stopping at the first failure."""
        try:
            identity = self.fetch_identity()
        except Exception as e:
            self.logger.error(f"Unable to get username and id: {e}")
            return ExitCode.IDENTITY
        self.logger.info(f"Authenticated as {identity.login}")

        try:
            repos = self.fetch_repositories(identity)
        except Exception as e:
            self.logger.error(f"Unable to get the contributed repos: {e}")
            return ExitCode.REPOSITORIES
        self.logger.info(f"Found {len(repos)} contributed repositories")

        try:
            histories = self.fetch_commit_histories(identity, repos)
            counts = aggregate(histories, self.config.tzinfo)
        except Exception as e:
            self.logger.error(f"Unable to get the commit info: {e}")
            return ExitCode.COMMIT_HISTORY

        if not counts.total:
            self.logger.info("No commits found, leaving README untouched")
            return ExitCode.OK
        self.logger.info(
            f"Counted {counts.total} commits: {counts.morning} morning, {counts.daytime} daytime, "
            f"{counts.evening} evening, {counts.night} night"
        )

        chart = render_chart(counts, self.config.bar_width)

        try:
            revision = self.read_readme()
        except Exception as e:
            self.logger.error(f"Unable to get README: {e}")
            return ExitCode.README_READ

        new_content = replace_section(revision.content, chart)
        if new_content == revision.content:
            self.logger.info(f"{self.config.target_path} is already up to date")
            return ExitCode.OK

        try:
            self.write_readme(revision, new_content)
        except Exception as e:
            self.logger.error(f"Unable to update README: {e}")
            return ExitCode.README_WRITE

        self.logger.info(
            f"Updated {self.config.target_owner}/{self.config.target_repo}/{self.config.target_path}"
        )
        return ExitCode.OK


def run(config: Config, client: Optional[GitHubClient] = None) -> ExitCode:
    """Run the README update once."""
    return ProductiveBox(config, client).run()
