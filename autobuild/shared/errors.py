# -
# #%L
# Component Autobuild
# %%
# Copyright (C) 2026 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

"""
Exceptions raised by the autobuild phases.

Each exception carries the FailureCategory the orchestrator logs when the
run ends in the FAILED state.
"""

from autobuild.shared.failure_categories import FailureCategory


class AutobuildError(Exception):
    """Base class for fatal run conditions."""
    category = FailureCategory.GENERAL_FAILURE

    def __init__(self, message: str, category: FailureCategory = None):
        super().__init__(message)
        if category is not None:
            self.category = category


class UsageError(AutobuildError):
    """Bad or missing command line argument, or an unknown component."""
    category = FailureCategory.USAGE


class SourceSyncError(AutobuildError):
    """Merge conflict, non fast-forward update or bad tag signature."""
    category = FailureCategory.SOURCE_SYNC_FAILURE


class ReleaseStatusError(AutobuildError):
    """No version could be determined for the component."""
    category = FailureCategory.RELEASE_STATUS_INDETERMINATE


class NothingToPublishError(AutobuildError):
    """Every attempted build failed."""
    category = FailureCategory.NOTHING_TO_PUBLISH


class PublishError(AutobuildError):
    """Signing or uploading the built packages failed."""
    category = FailureCategory.PUBLISH_FAILURE


class ReportingConfigurationError(AutobuildError):
    """The issue-reporting token or repository is not configured."""
    category = FailureCategory.REPORTING_UNAVAILABLE
