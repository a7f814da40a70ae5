"""Builder Domain

Contracts for the underlying build toolchain and their qubes-builder
implementation.

Key Components:
- SyncDriver, ReleaseStatusDriver, BuildDriver, PublishDriver: collaborator contracts
- QubesBuilderDriver: make/script based implementation of all four
"""

from .builder_operations import BuildDriver, PublishDriver, ReleaseStatusDriver, SyncDriver
from .qubes_builder_driver import QubesBuilderDriver

__all__ = [
    "SyncDriver",
    "ReleaseStatusDriver",
    "BuildDriver",
    "PublishDriver",
    "QubesBuilderDriver",
]
