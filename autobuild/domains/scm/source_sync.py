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

from autobuild.domains.builder.builder_operations import SyncDriver
from autobuild.shared.errors import SourceSyncError
from autobuild.utils import CommandExecutionError, log


class SourceSynchronizer:
    """
    Brings the builder and the component sources up to date.

    Both steps are fast-forward only. Any error aborts the run.
    """

    def __init__(self, driver: SyncDriver):
        self.driver = driver

    def synchronize(self, config) -> None:
        """
        Updates the builder tooling, then the component sources.

        Args:
            config: AutobuildConfig for the run

        Raises:
            SourceSyncError: On merge conflict, non fast-forward update or
                signature verification failure
        """
        log("\n--- Updating builder ---")
        self._run_step("builder update", self.driver.update_builder, config.builder_plugins)
        log("\n--- Updating component sources ---")
        self._run_step(f"{config.component} source update", self.driver.update_component,
                       config.component, config.source_url)

    def _run_step(self, description, step, *args) -> None:
        try:
            step(*args)
        except CommandExecutionError as e:
            raise SourceSyncError(f"Error: {description} failed: {e}") from e
        except OSError as e:
            raise SourceSyncError(f"Error: {description} could not be started: {e}") from e
