"""Run Orchestration"""

from .build_orchestrator import BuildOrchestrator, RunState

__all__ = [
    "BuildOrchestrator",
    "RunState",
]
