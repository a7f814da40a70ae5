"""Source Control Management Domain

Key Components:
- SourceSynchronizer: fail-fast, fast-forward-only source update
"""

from .source_sync import SourceSynchronizer

__all__ = [
    "SourceSynchronizer",
]
