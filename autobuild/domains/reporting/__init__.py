"""Failure Reporting Domain

Key Components:
- FailureReporter: issue creation for failed builds and uploads
- IssueTracker: abstract interface for issue tracker implementations (such as GitHubIssueClient in `autobuild/github`)
"""

from .failure_reporter import (
    FailureReporter,
    PACKAGE_SET_DOM0,
    PACKAGE_SET_UPLOAD,
    PACKAGE_SET_VM,
)
from .issue_tracker import IssueTracker

__all__ = [
    "FailureReporter",
    "IssueTracker",
    "PACKAGE_SET_DOM0",
    "PACKAGE_SET_VM",
    "PACKAGE_SET_UPLOAD",
]
