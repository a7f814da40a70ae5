"""Publish Domain"""

from .publish_gate import PublishGate, join_log_urls

__all__ = [
    "PublishGate",
    "join_log_urls",
]
