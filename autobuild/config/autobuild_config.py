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

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple

from autobuild.shared.errors import UsageError
from autobuild.shared.models import BuildTarget, TargetKind
from autobuild.utils import debug_log

DEFAULT_BUILD_LOGS_BASE_URL = "https://github.com/QubesOS/build-logs/tree/master"
DEFAULT_GITHUB_API_URL = "https://api.github.com"


class EnvironmentLookup:
    """
    Resolves configuration values by name from the process environment
    (or from a supplied mapping, for testing).
    """

    def __init__(self, env_vars: Optional[Mapping[str, str]] = None):
        self.env_vars = env_vars if env_vars is not None else os.environ

    def get(self, var_name: str, default: Optional[Any] = None) -> Optional[str]:
        """Returns the value of var_name, or default when unset or empty."""
        value = self.env_vars.get(var_name)
        return value if value else default


def _split_list(value: Optional[str]) -> Tuple[str, ...]:
    """Splits a space separated setting, dropping duplicates but keeping order."""
    items: List[str] = []
    for item in (value or "").split():
        if item not in items:
            items.append(item)
    return tuple(items)


def validate_component(component: Optional[str], builder_dir: Path) -> str:
    """
    Checks the component name before anything touches git, the network or the builder.

    Raises:
        UsageError: If the name is missing, contains a path separator or has
            no source directory under the builder
    """
    if not component:
        raise UsageError("Error: Missing component name.")
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    if any(sep in component for sep in separators) or component in (".", ".."):
        raise UsageError(f"Error: Invalid component name '{component}'.")
    src_dir = builder_dir / "qubes-src" / component
    if not src_dir.is_dir():
        raise UsageError(f"Error: Unknown component '{component}' (no source directory at {src_dir}).")
    return component


@dataclass(frozen=True)
class AutobuildConfig:
    """
    Immutable run configuration for one component.

    Built once at startup by from_environment() and handed to every phase.
    The issue-reporting secrets are not fields; secret() reads
    them from the lookup on each call.
    """

    VERSION = "v1.2.0"
    USER_AGENT = f"component-autobuild {VERSION}"

    component: str
    builder_dir: Path
    source_url: str
    dist_dom0: Optional[str] = None
    dists_vm: Tuple[str, ...] = ()
    builder_plugins: Tuple[str, ...] = ()
    merge_opts: str = "--ff-only"
    build_logs_base_url: str = DEFAULT_BUILD_LOGS_BASE_URL
    github_api_url: str = DEFAULT_GITHUB_API_URL
    lookup: EnvironmentLookup = field(default_factory=EnvironmentLookup, repr=False, compare=False)

    @classmethod
    def from_environment(cls, component: Optional[str], env_vars: Optional[Mapping[str, str]] = None) -> "AutobuildConfig":
        """
        Resolves and validates the whole run configuration.

        Args:
            component: Component name from the command line
            env_vars: Optional mapping used instead of os.environ

        Returns:
            AutobuildConfig: The validated configuration

        Raises:
            UsageError: If the component name is invalid or unknown
        """
        lookup = EnvironmentLookup(env_vars)

        builder_dir = Path(lookup.get("BUILDER_DIR", default="~/qubes-builder")).expanduser()
        component = validate_component(component, builder_dir)

        config = cls(
            component=component,
            builder_dir=builder_dir,
            source_url=cls._resolve_source_url(lookup, component),
            dist_dom0=lookup.get("DIST_DOM0"),
            dists_vm=_split_list(lookup.get("DISTS_VM")),
            builder_plugins=_split_list(lookup.get("BUILDER_PLUGINS")),
            merge_opts=lookup.get("GIT_MERGE_OPTS", default="--ff-only"),
            build_logs_base_url=lookup.get("BUILD_LOGS_BASE_URL", default=DEFAULT_BUILD_LOGS_BASE_URL).rstrip("/"),
            github_api_url=lookup.get("GITHUB_API_URL", default=DEFAULT_GITHUB_API_URL).rstrip("/"),
            lookup=lookup,
        )

        debug_log(f"Component: {config.component}")
        debug_log(f"Builder Directory: {config.builder_dir}")
        debug_log(f"Builder Plugins: {' '.join(config.builder_plugins) or '(none)'}")
        debug_log(f"Source URL: {config.source_url}")
        debug_log(f"Dom0 Distribution: {config.dist_dom0 or '(none)'}")
        debug_log(f"VM Distributions: {' '.join(config.dists_vm) or '(none)'}")
        debug_log(f"Merge Options: {config.merge_opts}")
        return config

    @staticmethod
    def _resolve_source_url(lookup: EnvironmentLookup, component: str) -> str:
        """Explicit GIT_URL_<component> override, else GIT_BASEURL/GIT_PREFIX<component>."""
        override = lookup.get(f"GIT_URL_{component.replace('-', '_')}")
        if override:
            return override
        base_url = lookup.get("GIT_BASEURL", default="https://github.com").rstrip("/")
        prefix = lookup.get("GIT_PREFIX", default="QubesOS/qubes-")
        return f"{base_url}/{prefix}{component}"

    @property
    def src_dir(self) -> Path:
        return self.builder_dir / "qubes-src" / self.component

    def targets(self) -> List[BuildTarget]:
        """Returns the dom0 target (if configured) followed by every vm target."""
        targets = []
        if self.dist_dom0:
            targets.append(BuildTarget(TargetKind.DOM0, self.dist_dom0))
        targets.extend(BuildTarget(TargetKind.VM, dist) for dist in self.dists_vm)
        return targets

    def secret(self, var_name: str) -> Optional[str]:
        """Fetches a secret value at call time. The result must not be logged or stored."""
        return self.lookup.get(var_name)
