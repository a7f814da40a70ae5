"""Release Status Domain"""

from .release_status import ReleaseStatusOracle

__all__ = [
    "ReleaseStatusOracle",
]
