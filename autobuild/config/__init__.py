"""Configuration Management

Key Components:
- AutobuildConfig: Immutable run configuration resolved once at startup
- EnvironmentLookup: Name based lookup of configuration values
"""

from .autobuild_config import AutobuildConfig, EnvironmentLookup, validate_component

__all__ = [
    "AutobuildConfig",
    "EnvironmentLookup",
    "validate_component",
]
