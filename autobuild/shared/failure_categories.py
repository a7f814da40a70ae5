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

from enum import Enum


class FailureCategory(Enum):
    """Define failure categories as an enum to ensure consistency."""
    USAGE = "USAGE"
    SOURCE_SYNC_FAILURE = "SOURCE_SYNC_FAILURE"
    RELEASE_STATUS_INDETERMINATE = "RELEASE_STATUS_INDETERMINATE"
    NOTHING_TO_PUBLISH = "NOTHING_TO_PUBLISH"
    PUBLISH_FAILURE = "PUBLISH_FAILURE"
    REPORTING_UNAVAILABLE = "REPORTING_UNAVAILABLE"
    GENERAL_FAILURE = "GENERAL_FAILURE"
