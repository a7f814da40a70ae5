"""Build Domain

Key Components:
- BuildExecutor: single build attempt per target with log handle management
- LogLocator: build log URL resolution with host based fallback
"""

from .build_executor import BuildExecutor
from .log_locator import LogLocator

__all__ = [
    "BuildExecutor",
    "LogLocator",
]
