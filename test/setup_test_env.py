"""Standard test environment setup helper.

This module provides consistent test environment setup across all test files
so that no test depends on the developer's real builder checkout or secrets.
"""

import os
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

TEST_COMPONENT = "core-admin"


def create_builder_dir(*components):
    """
    Create a temporary builder checkout with a qubes-src directory per component.

    Returns:
        pathlib.Path: Path to the temporary builder directory
    """
    builder_dir = Path(tempfile.mkdtemp(prefix="test-builder-"))
    for component in components or (TEST_COMPONENT,):
        (builder_dir / "qubes-src" / component).mkdir(parents=True)
    return builder_dir


def get_standard_test_env_vars(builder_dir):
    """
    Get standard environment variables for testing.

    Returns:
        dict: Dictionary of environment variables needed for testing
    """
    return {
        # Builder configuration
        'BUILDER_DIR': str(builder_dir),
        'DIST_DOM0': 'fc37',
        'DISTS_VM': 'fc37 bookworm',

        # Reporting configuration
        'GITHUB_API_KEY': 'mock-github-token',
        'GITHUB_BUILD_REPORT_REPO': 'mock/build-issues',

        # Debug flags
        'DEBUG_MODE': 'false',
    }


class TestEnvironmentMixin:
    """
    Mixin class to provide standard test environment setup.

    Usage:
        class TestMyClass(unittest.TestCase, TestEnvironmentMixin):
            def setUp(self):
                self.setup_standard_test_env()

            def tearDown(self):
                self.cleanup_standard_test_env()
    """

    def setup_standard_test_env(self, **overrides):
        """Set up a builder directory and the standard environment."""
        self.builder_dir = create_builder_dir()
        env_vars = get_standard_test_env_vars(self.builder_dir)
        env_vars.update(overrides)
        self._env_patcher = patch.dict(os.environ, env_vars, clear=True)
        self._env_patcher.start()

    def cleanup_standard_test_env(self):
        """Clean up the standard environment and the builder directory."""
        if hasattr(self, '_env_patcher'):
            self._env_patcher.stop()
        if hasattr(self, 'builder_dir'):
            shutil.rmtree(self.builder_dir, ignore_errors=True)
