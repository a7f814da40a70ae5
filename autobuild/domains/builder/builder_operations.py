"""
Base classes for the builder collaborators.

This module defines the contracts the autobuild phases need from the
underlying build toolchain: source synchronization, release status checks,
builds with log capture, and signing/publishing. The default implementation
lives in qubes_builder_driver.py; tests substitute mocks.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence

from autobuild.shared.models import BuildTarget, TargetKind


class SyncDriver(ABC):
    """Fast-forward-only update of the builder and the component sources."""

    @abstractmethod
    def update_builder(self, plugins: Sequence[str]) -> None:
        """
        Updates the builder itself and its plugins.

        Args:
            plugins (Sequence[str]): Builder plugin names

        Raises:
            CommandExecutionError: On merge conflict, non fast-forward update
                or signature failure
        """
        pass

    @abstractmethod
    def update_component(self, component: str, source_url: str) -> None:
        """
        Merges component and dependency sources after verifying signed version
        tags, then fetches auxiliary sources.

        Args:
            component (str): Component name
            source_url (str): Resolved git URL of the component

        Raises:
            CommandExecutionError: On merge conflict, non fast-forward update
                or signature failure
        """
        pass


class ReleaseStatusDriver(ABC):

    @abstractmethod
    def check(self, component: str, kind: TargetKind, distribution: str) -> str:
        """
        Checks whether the current component version is published.

        Args:
            component (str): Component name
            kind (TargetKind): dom0 or vm
            distribution (str): Distribution name

        Returns:
            str: "released" or "not released"

        Raises:
            CommandExecutionError: If no version could be determined
        """
        pass


class BuildDriver(ABC):

    @abstractmethod
    def build(self, component: str, target: BuildTarget, log_id_file: Path) -> bool:
        """
        Runs one build for one target with log capture enabled.

        The logging channel writes the identifier assigned by the remote log
        service into log_id_file once it is known.

        Args:
            component (str): Component name
            target (BuildTarget): Target to build for
            log_id_file (Path): File that receives the build log identifier

        Returns:
            bool: True if the build succeeded
        """
        pass


class PublishDriver(ABC):

    @abstractmethod
    def sign_and_publish(self, component: str, dist_dom0: Optional[str], dists_vm: Sequence[str],
                         build_log_urls: str, source_url: str) -> None:
        """
        Signs the built packages and publishes them to the current-testing repository.

        Args:
            component (str): Component name
            dist_dom0 (Optional[str]): Successfully built dom0 distribution
            dists_vm (Sequence[str]): Successfully built vm distributions
            build_log_urls (str): Space separated build log URLs
            source_url (str): Resolved git URL of the component

        Raises:
            CommandExecutionError: If signing or uploading fails
        """
        pass
