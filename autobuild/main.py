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

import signal
import sys
from typing import List, Optional

from autobuild.config.autobuild_config import AutobuildConfig
from autobuild.domains.build.build_executor import BuildExecutor
from autobuild.domains.build.log_locator import LogLocator
from autobuild.domains.builder.qubes_builder_driver import QubesBuilderDriver
from autobuild.domains.publish.publish_gate import PublishGate
from autobuild.domains.release.release_status import ReleaseStatusOracle
from autobuild.domains.reporting.failure_reporter import FailureReporter
from autobuild.domains.scm.source_sync import SourceSynchronizer
from autobuild.github.github_issue_client import GitHubIssueClient
from autobuild.orchestrator.build_orchestrator import BuildOrchestrator
from autobuild.shared.errors import UsageError
from autobuild.utils import log

USAGE = "Usage: autobuild <component>"


def parse_component_argument(argv: List[str]) -> str:
    """Returns the single positional component argument."""
    if len(argv) != 1 or not argv[0]:
        raise UsageError("Error: Expected exactly one component name.")
    return argv[0]


def create_orchestrator(config: AutobuildConfig) -> BuildOrchestrator:
    """Wires the default qubes-builder and GitHub collaborators for a run."""
    driver = QubesBuilderDriver(config.builder_dir, merge_opts=config.merge_opts)
    failure_reporter = FailureReporter(
        config,
        GitHubIssueClient(api_url=config.github_api_url, user_agent=config.USER_AGENT),
    )
    return BuildOrchestrator(
        config=config,
        source_synchronizer=SourceSynchronizer(driver),
        release_oracle=ReleaseStatusOracle(driver),
        build_executor=BuildExecutor(driver),
        log_locator=LogLocator(config.build_logs_base_url),
        failure_reporter=failure_reporter,
        publish_gate=PublishGate(driver, failure_reporter),
    )


def _handle_sigterm(signum, frame):
    # Raising SystemExit unwinds the run so the build workspace is removed.
    log("Received SIGTERM, terminating.", is_error=True)
    sys.exit(128 + signum)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs autobuild for the component named on the command line.

    Args:
        argv: Command line arguments without the program name

    Returns:
        int: 0 on success, 1 on any fatal condition
    """
    argv = sys.argv[1:] if argv is None else argv
    try:
        component = parse_component_argument(argv)
        config = AutobuildConfig.from_environment(component)
    except UsageError as e:
        log(str(e), is_error=True)
        log(USAGE, is_error=True)
        return 1

    return create_orchestrator(config).run()


def cli():
    signal.signal(signal.SIGTERM, _handle_sigterm)
    sys.exit(main())


if __name__ == "__main__":
    cli()
