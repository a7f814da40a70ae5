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
Build Executor Module

Runs one build attempt per target and collects the build log identifier
written by the logging channel.
"""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from autobuild.domains.builder.builder_operations import BuildDriver
from autobuild.shared.models import BuildResult, BuildTarget
from autobuild.utils import CommandExecutionError, debug_log, log

LOG_HANDLE_NAME = "build-log-id"


class BuildExecutor:
    """
    Executes builds through a BuildDriver.

    Builds must run inside session(), which owns the temporary workspace
    holding the log handle and removes it on exit, whatever the exit path.
    """

    def __init__(self, driver: BuildDriver):
        self.driver = driver
        self._workspace: Optional[Path] = None

    @contextmanager
    def session(self) -> Iterator[Path]:
        """Creates the temporary workspace for the run and removes it afterwards."""
        with tempfile.TemporaryDirectory(prefix="autobuild-") as workspace:
            self._workspace = Path(workspace)
            debug_log(f"Build workspace: {self._workspace}")
            try:
                yield self._workspace
            finally:
                self._workspace = None

    @property
    def log_handle(self) -> Path:
        if self._workspace is None:
            raise RuntimeError("BuildExecutor.build() called outside of session()")
        return self._workspace / LOG_HANDLE_NAME

    def _discard_log_handle(self) -> bool:
        """Removes the log handle. Returns False when it could not be removed."""
        handle = self.log_handle
        try:
            if handle.is_dir() and not handle.is_symlink():
                shutil.rmtree(handle)
            else:
                handle.unlink(missing_ok=True)
        except OSError as e:
            log(f"Could not remove build log handle {handle}: {e}", is_warning=True)
            return False
        return True

    def _read_log_handle(self) -> Optional[str]:
        try:
            log_id = self.log_handle.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            log(f"Unreadable build log handle {self.log_handle}: {e}", is_warning=True)
            return None
        return log_id or None

    def build(self, component: str, target: BuildTarget) -> BuildResult:
        """
        Makes exactly one build attempt for target.

        A failing or crashing driver yields an unsuccessful result rather than
        an exception, so one target's failure never stops the others.

        Args:
            component: Component name
            target: Target to build for

        Returns:
            BuildResult: Success flag and the log identifier, if one was assigned
        """
        # A handle that survived the previous attempt would carry its id.
        handle_cleared = self._discard_log_handle()
        try:
            try:
                succeeded = bool(self.driver.build(component, target, self.log_handle))
            except (CommandExecutionError, OSError) as e:
                log(f"Error: Build of {component} for {target} could not run: {e}", is_error=True)
                succeeded = False
            log_id = self._read_log_handle() if handle_cleared else None
        finally:
            self._discard_log_handle()

        debug_log(f"Build of {component} for {target}: succeeded={succeeded}, log id={log_id}")
        return BuildResult(succeeded=succeeded, log_id=log_id)
