"""
Base class for issue tracker operations.

Defines the contract FailureReporter needs from an issue tracker.
"""

from abc import ABC, abstractmethod


class IssueTracker(ABC):

    @abstractmethod
    def create_issue(self, token: str, repository: str, title: str, body: str) -> bool:
        """
        Creates an issue in the given repository.

        Args:
            token (str): Authentication token, used for this request only
            repository (str): Repository in format owner/repo
            title (str): Issue title
            body (str): Issue body

        Returns:
            bool: True if the issue was created, False otherwise
        """
        pass
