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

import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from autobuild.domains.builder.builder_operations import (
    BuildDriver,
    PublishDriver,
    ReleaseStatusDriver,
    SyncDriver,
)
from autobuild.shared.models import BuildTarget, TargetKind
from autobuild.utils import debug_log, log, run_command, scrubbed_environment

RELEASE_STATUS_SCRIPT = "scripts/check-release-status-for-component"


def source_url_variable(component: str) -> str:
    """Name of the builder variable overriding the component's git URL."""
    return f"GIT_URL_{component.replace('-', '_')}"


class QubesBuilderDriver(SyncDriver, ReleaseStatusDriver, BuildDriver, PublishDriver):
    """
    Drives a qubes-builder checkout through its make targets and scripts.

    Every command runs with BUILDER_DIR as the working directory. Reporting
    credentials are stripped from the environment of every child process.
    """

    def __init__(self, builder_dir: Path, merge_opts: str = "--ff-only"):
        self.builder_dir = Path(builder_dir)
        self.merge_opts = merge_opts

    def _make(self, *args: str) -> List[str]:
        return ["make", "-C", str(self.builder_dir), *args]

    def update_builder(self, plugins: Sequence[str]) -> None:
        components = " ".join(["builder", *plugins])
        log(f"Updating builder and plugins: {components}")
        run_command(self._make(
            f"COMPONENTS={components}",
            f"GIT_MERGE_OPTS={self.merge_opts}",
            "CHECK_SIGNATURES=1",
            "get-sources",
        ), cwd=self.builder_dir)

    def update_component(self, component: str, source_url: str) -> None:
        log(f"Updating sources of {component} from {source_url}")
        run_command(self._make(
            f"COMPONENTS={component}",
            f"{source_url_variable(component)}={source_url}",
            f"GIT_MERGE_OPTS={self.merge_opts}",
            "CHECK_SIGNATURES=1",
            "get-sources",
        ), cwd=self.builder_dir)
        run_command(self._make(
            f"COMPONENTS={component}",
            "get-sources-extra",
        ), cwd=self.builder_dir)

    def check(self, component: str, kind: TargetKind, distribution: str) -> str:
        return run_command([
            RELEASE_STATUS_SCRIPT,
            "--abort-no-version",
            "--abort-on-empty",
            component,
            kind.value,
            distribution,
        ], cwd=self.builder_dir)

    def build(self, component: str, target: BuildTarget, log_id_file: Path) -> bool:
        if target.kind is TargetKind.DOM0:
            dist_vars = [f"DIST_DOM0={target.distribution}", "DISTS_VM="]
        else:
            dist_vars = ["DIST_DOM0=", f"DISTS_VM={target.distribution}"]
        command = self._make(f"COMPONENTS={component}", *dist_vars, f"{component}-{target.kind.value}")

        log(f"\n--- Running Build Command: {' '.join(command)} ---")
        result = subprocess.run(
            command,
            cwd=self.builder_dir,
            check=False,  # Don't raise exception on non-zero exit
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
            env=scrubbed_environment({"BUILD_LOG_ID_FILE": str(log_id_file)}),
        )
        output = (result.stdout or "") + (result.stderr or "")
        if result.returncode == 0:
            log(f"Build for {target} succeeded.")
            debug_log(output[-2000:])
            return True

        log(f"Build for {target} failed with exit code {result.returncode}.", is_error=True)
        debug_log(output[-2000:])
        return False

    def sign_and_publish(self, component: str, dist_dom0: Optional[str], dists_vm: Sequence[str],
                         build_log_urls: str, source_url: str) -> None:
        run_command(self._make(
            f"COMPONENTS={component}",
            f"DIST_DOM0={dist_dom0 or ''}",
            f"DISTS_VM={' '.join(dists_vm)}",
            f"{source_url_variable(component)}={source_url}",
            "sign-all",
            "update-repo-current-testing",
        ), env={"BUILD_LOG_URLS": build_log_urls}, cwd=self.builder_dir)
