"""Shared Types and Errors

This package contains the data types, failure categories and exceptions
used across all autobuild domains.
"""

from .failure_categories import FailureCategory
from .errors import (
    AutobuildError,
    UsageError,
    SourceSyncError,
    ReleaseStatusError,
    NothingToPublishError,
    PublishError,
    ReportingConfigurationError,
)
from .models import (
    TargetKind,
    BuildTarget,
    ReleaseStatus,
    TargetState,
    BuildResult,
    BuildOutcome,
    AggregateResult,
)

__all__ = [
    "FailureCategory",
    "AutobuildError",
    "UsageError",
    "SourceSyncError",
    "ReleaseStatusError",
    "NothingToPublishError",
    "PublishError",
    "ReportingConfigurationError",
    "TargetKind",
    "BuildTarget",
    "ReleaseStatus",
    "TargetState",
    "BuildResult",
    "BuildOutcome",
    "AggregateResult",
]
