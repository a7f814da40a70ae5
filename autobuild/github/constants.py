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
GitHub-specific constants for the autobuild failure reports.
"""

# GitHub API Limits
# GitHub rejects issue bodies over 65536 chars; stay well below that
GITHUB_MAX_ISSUE_BODY_SIZE = 32000

# Seconds to wait for the issues endpoint
GITHUB_REQUEST_TIMEOUT = 30
