"""GitHub Provider Implementation

This package contains GitHub-specific implementations for autobuild.

Key Components:
- GitHubIssueClient: GitHub implementation of the IssueTracker interface
"""

from .github_issue_client import GitHubIssueClient

__all__ = [
    "GitHubIssueClient",
]
