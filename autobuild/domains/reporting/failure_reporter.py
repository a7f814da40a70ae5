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

from autobuild.domains.reporting.issue_tracker import IssueTracker
from autobuild.shared.errors import ReportingConfigurationError
from autobuild.utils import debug_log, log

TOKEN_VAR = "GITHUB_API_KEY"
REPOSITORY_VAR = "GITHUB_BUILD_REPORT_REPO"

PACKAGE_SET_DOM0 = "dom0"
PACKAGE_SET_VM = "vm"
PACKAGE_SET_UPLOAD = "upload"


def generate_issue_title(component: str, package_set: str, dist: str) -> str:
    return f"Build failed: {component} for {package_set} ({dist})"


def generate_issue_body(component: str, package_set: str, dist: str, log_url: str) -> str:
    return (
        f"Build of `{component}` for {package_set} ({dist}) failed.\n\n"
        f"See the [build log]({log_url}) for details.\n\n"
        f"{log_url}\n"
    )


class FailureReporter:
    """
    Files an issue for a failed build or a failed upload.

    The reporting token and target repository are fetched from the config
    lookup on every call and never leave this method's scope.
    """

    def __init__(self, config, issue_tracker: IssueTracker):
        self.config = config
        self.issue_tracker = issue_tracker

    def report(self, component: str, package_set: str, dist: str, log_url: str) -> bool:
        """
        Reports a failure to the issue tracker.

        Args:
            component: Component name
            package_set: "dom0", "vm" or "upload"
            dist: Distribution(s) concerned
            log_url: URL of the relevant build log(s)

        Returns:
            bool: True if the issue was created, False if the tracker rejected it

        Raises:
            ReportingConfigurationError: If the token or the repository is not
                configured. No request is made in that case.
        """
        token = self.config.secret(TOKEN_VAR)
        repository = self.config.secret(REPOSITORY_VAR)
        if not token or not repository:
            missing = [name for name, value in ((TOKEN_VAR, token), (REPOSITORY_VAR, repository)) if not value]
            raise ReportingConfigurationError(
                f"Error: Cannot report failure of {component} for {package_set} ({dist}): "
                f"{', '.join(missing)} not set."
            )

        title = generate_issue_title(component, package_set, dist)
        log(f"Reporting failure: {title}")
        created = self.issue_tracker.create_issue(
            token, repository, title, generate_issue_body(component, package_set, dist, log_url)
        )
        if created:
            debug_log(f"Failure report filed for {component} ({package_set} {dist})")
        else:
            log(f"Failed to file failure report: {title}", is_warning=True)
        return created
