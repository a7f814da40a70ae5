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

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from autobuild.domains.reporting.failure_reporter import PACKAGE_SET_DOM0, PACKAGE_SET_VM
from autobuild.shared.errors import AutobuildError, PublishError, ReleaseStatusError
from autobuild.shared.models import (
    AggregateResult,
    BuildOutcome,
    BuildTarget,
    ReleaseStatus,
    TargetKind,
    TargetState,
)
from autobuild.utils import debug_log, log

PACKAGE_SETS = {
    TargetKind.DOM0: PACKAGE_SET_DOM0,
    TargetKind.VM: PACKAGE_SET_VM,
}


class RunState(Enum):
    """
    States of one autobuild run.

    INIT, SYNCED, GATE and PUBLISHING fail fast; LOOPING records build
    failures and moves on to the next target. DONE and FAILED are terminal.
    """
    INIT = "INIT"
    SYNCED = "SYNCED"
    LOOPING = "LOOPING"
    GATE = "GATE"
    PUBLISHING = "PUBLISHING"
    DONE = "DONE"
    FAILED = "FAILED"


class BuildOrchestrator:
    """
    Main orchestrator for an autobuild run.
    Sequences source sync, the per-target build loop and the publish gate.
    """

    def __init__(
        self,
        config,
        source_synchronizer,
        release_oracle,
        build_executor,
        log_locator,
        failure_reporter,
        publish_gate
    ):
        """
        Initialize the orchestrator with all dependencies.

        Args:
            config: AutobuildConfig for the run
            source_synchronizer: SourceSynchronizer
            release_oracle: ReleaseStatusOracle
            build_executor: BuildExecutor
            log_locator: LogLocator
            failure_reporter: FailureReporter
            publish_gate: PublishGate
        """
        self.config = config
        self.source_synchronizer = source_synchronizer
        self.release_oracle = release_oracle
        self.build_executor = build_executor
        self.log_locator = log_locator
        self.failure_reporter = failure_reporter
        self.publish_gate = publish_gate

        # Runtime state
        self.state = RunState.INIT
        self.start_time: Optional[datetime] = None
        self.target_states: Dict[BuildTarget, TargetState] = {}
        self.outcomes: List[BuildOutcome] = []
        self.aggregate = AggregateResult()
        self.failure: Optional[AutobuildError] = None

    def _transition(self, state: RunState) -> None:
        debug_log(f"Run state: {self.state.value} -> {state.value}")
        self.state = state

    def run(self) -> int:
        """
        Runs the whole workflow for the configured component.

        Returns:
            int: Process exit status, 0 when the run ends in DONE and 1 when it
            ends in FAILED
        """
        self.start_time = datetime.now()
        log(f"--- Starting autobuild of {self.config.component} ---")

        try:
            # The build workspace (and any log handle in it) is gone before
            # the FAILED transition below happens.
            with self.build_executor.session():
                self._synchronize()
                self._build_targets()
                self._publish()
        except AutobuildError as e:
            self._fail(e)

        self._log_summary()
        return 0 if self.state is RunState.DONE else 1

    def _synchronize(self) -> None:
        self.source_synchronizer.synchronize(self.config)
        self._transition(RunState.SYNCED)

    def _build_targets(self) -> None:
        self._transition(RunState.LOOPING)
        targets = self.config.targets()
        if not targets:
            log("No dom0 or vm distributions configured; nothing to build.", is_warning=True)

        for target in targets:
            self._build_target(target)

    def _build_target(self, target: BuildTarget) -> None:
        component = self.config.component
        log(f"\n--- Target {target} ---")

        status = self.release_oracle.query(component, target.kind, target.distribution)
        if status is ReleaseStatus.INDETERMINATE:
            raise ReleaseStatusError(
                f"Error: Release status of {component} for {target.kind.value} {target.distribution} is indeterminate."
            )
        if status is ReleaseStatus.RELEASED:
            log(f"{component} is already released for {target}, skipping.")
            self.target_states[target] = TargetState.SKIPPED
            return

        self.target_states[target] = TargetState.BUILDING
        result = self.build_executor.build(component, target)
        log_url = self.log_locator.resolve(result.log_id)

        outcome = BuildOutcome(target=target, succeeded=result.succeeded, log_url=log_url)
        self.outcomes.append(outcome)
        self.aggregate.record(outcome)

        if outcome.succeeded:
            self.target_states[target] = TargetState.BUILT
            log(f"Built {component} for {target}: {log_url}")
            return

        self.target_states[target] = TargetState.FAILED
        log(f"Build of {component} for {target} failed: {log_url}", is_error=True)
        self.failure_reporter.report(component, PACKAGE_SETS[target.kind], target.distribution, log_url)

    def _publish(self) -> None:
        self._transition(RunState.GATE)
        if not self.outcomes:
            log(f"All targets of {self.config.component} are already released; nothing to publish.")
            self._transition(RunState.DONE)
            return

        if not self.aggregate.is_empty():
            self._transition(RunState.PUBLISHING)
        published = self.publish_gate.publish(
            self.config, self.aggregate, [outcome.log_url for outcome in self.outcomes]
        )
        if not published:
            raise PublishError(f"Error: Publishing {self.config.component} failed.")
        self._transition(RunState.DONE)

    def _fail(self, error: AutobuildError) -> None:
        self.failure = error
        self._transition(RunState.FAILED)
        log(str(error), is_error=True)
        log(f"Run failed: {error.category.value}", is_error=True)

    def _log_summary(self) -> None:
        counts = {state: 0 for state in TargetState}
        for state in self.target_states.values():
            counts[state] += 1
        total_runtime = datetime.now() - self.start_time
        log(f"\n--- Autobuild of {self.config.component} finished in state {self.state.value} "
            f"(built: {counts[TargetState.BUILT]}, failed: {counts[TargetState.FAILED]}, "
            f"skipped: {counts[TargetState.SKIPPED]}, total runtime: {total_runtime}) ---")
