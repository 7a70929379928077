#!/usr/bin/env python3
"""
Exceptions raised by productive-readme.
"""


class ConfigError(ValueError):
    """Raised when required configuration is missing or malformed."""
    pass


class GitHubError(Exception):
    """Base class for failures reported by the GitHub API."""
    pass


class GitHubQueryError(GitHubError):
    """Raised when a GraphQL response carries an `errors` array."""

    def __init__(self, errors):
        self.errors = errors
        messages = "; ".join(str(error.get("message", error)) for error in errors)
        super().__init__(f"GraphQL errors: {messages}")


class StaleRevisionError(GitHubError):
    """Raised when a file update is rejected because its sha is out of date."""
    pass
