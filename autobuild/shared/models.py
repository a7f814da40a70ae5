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
Data types shared by the autobuild phases.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class TargetKind(Enum):
    DOM0 = "dom0"
    VM = "vm"


@dataclass(frozen=True)
class BuildTarget:
    """One distribution to build the component for."""
    kind: TargetKind
    distribution: str

    def __str__(self) -> str:
        return f"{self.kind.value}-{self.distribution}"


class ReleaseStatus(Enum):
    RELEASED = "released"
    NOT_RELEASED = "not released"
    # Missing version metadata; aborts the run.
    INDETERMINATE = "indeterminate"


class TargetState(Enum):
    SKIPPED = "SKIPPED"
    BUILDING = "BUILDING"
    BUILT = "BUILT"
    FAILED = "FAILED"


@dataclass(frozen=True)
class BuildResult:
    """
    Result of a single build attempt.

    Attributes:
        succeeded: Whether the build driver reported success
        log_id: Identifier assigned by the build log service, or None when
            the logging channel never started
    """
    succeeded: bool
    log_id: Optional[str] = None


@dataclass(frozen=True)
class BuildOutcome:
    target: BuildTarget
    succeeded: bool
    log_url: str


@dataclass
class AggregateResult:
    """Distributions that built successfully during the target loop."""
    dom0_built: Optional[str] = None
    vm_built: List[str] = field(default_factory=list)

    def record(self, outcome: BuildOutcome) -> None:
        if not outcome.succeeded:
            return
        if outcome.target.kind is TargetKind.DOM0:
            self.dom0_built = outcome.target.distribution
        elif outcome.target.distribution not in self.vm_built:
            self.vm_built.append(outcome.target.distribution)

    def is_empty(self) -> bool:
        return self.dom0_built is None and not self.vm_built

    def distributions(self) -> List[str]:
        """Returns every successful distribution as kind:dist, dom0 first."""
        dists = [f"{TargetKind.DOM0.value}:{self.dom0_built}"] if self.dom0_built else []
        return dists + [f"{TargetKind.VM.value}:{dist}" for dist in self.vm_built]
