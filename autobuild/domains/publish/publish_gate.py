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

from typing import Sequence

from autobuild.domains.builder.builder_operations import PublishDriver
from autobuild.domains.reporting.failure_reporter import FailureReporter, PACKAGE_SET_UPLOAD
from autobuild.shared.errors import NothingToPublishError
from autobuild.shared.models import AggregateResult
from autobuild.utils import CommandExecutionError, log


def join_log_urls(log_urls: Sequence[str]) -> str:
    """Concatenates build log URLs into the aggregated string handed to the publish step."""
    return " ".join(url for url in log_urls if url)


class PublishGate:
    """
    Signs and publishes whatever built successfully.

    Only distributions recorded in the AggregateResult are published; failed
    targets are never included. A failed publish is reported, never rolled back.
    """

    def __init__(self, driver: PublishDriver, failure_reporter: FailureReporter):
        self.driver = driver
        self.failure_reporter = failure_reporter

    def publish(self, config, aggregate: AggregateResult, log_urls: Sequence[str]) -> bool:
        """
        Publishes the successful builds to the current-testing repository.

        Args:
            config: AutobuildConfig for the run
            aggregate: Successful distributions from the target loop
            log_urls: Resolved log URLs of every attempted build

        Returns:
            bool: True if publishing succeeded, False if it failed and was reported

        Raises:
            NothingToPublishError: If no build succeeded
            ReportingConfigurationError: If the publish failure cannot be reported
        """
        if aggregate.is_empty():
            raise NothingToPublishError(f"Error: No successful build of {config.component}; nothing to publish.")

        build_log_urls = join_log_urls(log_urls)
        log(f"Publishing {config.component} for dom0: {aggregate.dom0_built or '(none)'}, "
            f"vm: {' '.join(aggregate.vm_built) or '(none)'}")
        try:
            self.driver.sign_and_publish(
                config.component,
                aggregate.dom0_built,
                list(aggregate.vm_built),
                build_log_urls,
                config.source_url,
            )
        except (CommandExecutionError, OSError) as e:
            log(f"Error: Publishing {config.component} failed: {e}", is_error=True)
            self.failure_reporter.report(
                config.component,
                PACKAGE_SET_UPLOAD,
                " ".join(aggregate.distributions()),
                build_log_urls,
            )
            return False

        log(f"Published {config.component} to current-testing.")
        return True
