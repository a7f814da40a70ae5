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

from autobuild.domains.builder.builder_operations import ReleaseStatusDriver
from autobuild.shared.models import ReleaseStatus, TargetKind
from autobuild.utils import CommandExecutionError, debug_log, log

_STATUS_BY_OUTPUT = {
    "released": ReleaseStatus.RELEASED,
    "not released": ReleaseStatus.NOT_RELEASED,
}


class ReleaseStatusOracle:
    """Answers whether the current component version is already published for a target."""

    def __init__(self, driver: ReleaseStatusDriver):
        self.driver = driver

    def query(self, component: str, kind: TargetKind, distribution: str) -> ReleaseStatus:
        """
        Queries the release status for one (component, kind, distribution).

        Returns:
            ReleaseStatus: RELEASED, NOT_RELEASED, or INDETERMINATE when no
            version could be determined or the driver answered with nothing
            usable
        """
        try:
            output = self.driver.check(component, kind, distribution)
        except (CommandExecutionError, OSError) as e:
            log(f"Error: Could not determine release status of {component} for {kind.value} {distribution}: {e}",
                is_error=True)
            return ReleaseStatus.INDETERMINATE

        answer = (output or "").strip().lower()
        status = _STATUS_BY_OUTPUT.get(answer)
        if status is None:
            log(f"Error: Unexpected release status {answer!r} for {component} ({kind.value} {distribution})",
                is_error=True)
            return ReleaseStatus.INDETERMINATE

        debug_log(f"Release status of {component} for {kind.value} {distribution}: {status.value}")
        return status
