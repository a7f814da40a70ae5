"""
Tests for build_executor.py and log_locator.py.

Tests single build attempts, log handle lifecycle and log URL resolution.
"""

import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from autobuild.domains.build.build_executor import BuildExecutor
from autobuild.domains.build.log_locator import LogLocator
from autobuild.domains.builder.builder_operations import BuildDriver
from autobuild.shared.models import BuildResult, BuildTarget, TargetKind
from autobuild.utils import CommandExecutionError

DOM0 = BuildTarget(TargetKind.DOM0, "fc37")
VM_FC37 = BuildTarget(TargetKind.VM, "fc37")
VM_BOOKWORM = BuildTarget(TargetKind.VM, "bookworm")


def writing_build(log_id, succeeded=True):
    """Returns a driver side effect that writes log_id to the log handle."""
    def build(component, target, log_id_file):
        Path(log_id_file).write_text(f"{log_id}\n", encoding="utf-8")
        return succeeded
    return build


class TestBuildExecutor(unittest.TestCase):
    """Tests for build execution."""

    def setUp(self):
        self.driver = MagicMock(spec=BuildDriver)
        self.executor = BuildExecutor(self.driver)

    def test_successful_build_returns_log_id(self):
        self.driver.build.side_effect = writing_build("core-admin/vm-fc37/2026-10-19-1")

        with self.executor.session():
            result = self.executor.build("core-admin", VM_FC37)

        self.assertEqual(result, BuildResult(succeeded=True, log_id="core-admin/vm-fc37/2026-10-19-1"))
        self.driver.build.assert_called_once()
        component, target, log_id_file = self.driver.build.call_args[0]
        self.assertEqual((component, target), ("core-admin", VM_FC37))
        self.assertEqual(log_id_file.name, "build-log-id")

    def test_failed_build_keeps_log_id(self):
        self.driver.build.side_effect = writing_build("core-admin/dom0-fc37/1", succeeded=False)

        with self.executor.session():
            result = self.executor.build("core-admin", DOM0)

        self.assertFalse(result.succeeded)
        self.assertEqual(result.log_id, "core-admin/dom0-fc37/1")

    def test_no_log_channel_yields_no_log_id(self):
        self.driver.build.return_value = True

        with self.executor.session():
            result = self.executor.build("core-admin", VM_FC37)

        self.assertTrue(result.succeeded)
        self.assertIsNone(result.log_id)

    def test_empty_log_handle_yields_no_log_id(self):
        self.driver.build.side_effect = writing_build("   ")

        with self.executor.session():
            result = self.executor.build("core-admin", VM_FC37)

        self.assertIsNone(result.log_id)

    def test_log_handle_deleted_after_each_attempt(self):
        self.driver.build.side_effect = writing_build("some-id")

        with self.executor.session():
            self.executor.build("core-admin", VM_FC37)
            self.assertFalse(self.executor.log_handle.exists())

    def test_previous_log_id_never_reused(self):
        results = []
        with self.executor.session():
            self.driver.build.side_effect = writing_build("first-id")
            results.append(self.executor.build("core-admin", VM_FC37))

            # Second target's logging channel never starts
            self.driver.build.side_effect = None
            self.driver.build.return_value = False
            results.append(self.executor.build("core-admin", VM_BOOKWORM))

        self.assertEqual(results[0].log_id, "first-id")
        self.assertIsNone(results[1].log_id)

    def test_stale_log_handle_removed_before_build(self):
        seen = []

        def build(component, target, log_id_file):
            seen.append(log_id_file.exists())
            return True

        self.driver.build.side_effect = build
        with self.executor.session():
            self.executor.log_handle.write_text("stale-id")
            result = self.executor.build("core-admin", VM_FC37)

        self.assertEqual(seen, [False])
        self.assertIsNone(result.log_id)

    def test_undecodable_log_handle_yields_no_log_id(self):
        def build(component, target, log_id_file):
            Path(log_id_file).write_bytes(b"\xff\xfe garbage")
            return True

        self.driver.build.side_effect = build
        with self.executor.session():
            result = self.executor.build("core-admin", DOM0)
            self.assertFalse(self.executor.log_handle.exists())

        self.assertEqual(result, BuildResult(succeeded=True, log_id=None))

    def test_unreadable_log_handle_yields_no_log_id(self):
        self.driver.build.side_effect = writing_build("some-id")

        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            with self.executor.session():
                result = self.executor.build("core-admin", DOM0)

        self.assertTrue(result.succeeded)
        self.assertIsNone(result.log_id)

    def test_log_handle_directory_is_removed(self):
        def build(component, target, log_id_file):
            Path(log_id_file).mkdir()
            return False

        self.driver.build.side_effect = build
        with self.executor.session():
            result = self.executor.build("core-admin", DOM0)
            self.assertFalse(self.executor.log_handle.exists())

        self.assertEqual(result, BuildResult(succeeded=False, log_id=None))

    def test_undeletable_stale_log_handle_is_ignored(self):
        self.driver.build.return_value = True

        with self.executor.session():
            self.executor.log_handle.write_text("stale-id")
            with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
                result = self.executor.build("core-admin", VM_FC37)

        self.assertTrue(result.succeeded)
        self.assertIsNone(result.log_id)

    def test_driver_error_is_a_failed_build(self):
        for error in (CommandExecutionError("boom", 2, "make"), FileNotFoundError("make")):
            with self.subTest(error=error):
                self.driver.build.side_effect = error
                with self.executor.session():
                    result = self.executor.build("core-admin", VM_FC37)
                self.assertFalse(result.succeeded)

    def test_exactly_one_attempt_per_build(self):
        self.driver.build.return_value = False
        with self.executor.session():
            self.executor.build("core-admin", VM_FC37)
        self.assertEqual(self.driver.build.call_count, 1)

    def test_workspace_removed_when_session_ends(self):
        with self.executor.session() as workspace:
            self.assertTrue(workspace.is_dir())
        self.assertFalse(workspace.exists())

    def test_workspace_removed_on_exit_exception(self):
        with self.assertRaises(SystemExit):
            with self.executor.session() as workspace:
                self.executor.log_handle.write_text("in-flight")
                raise SystemExit(143)
        self.assertFalse(workspace.exists())

    def test_build_outside_session_raises(self):
        with self.assertRaises(RuntimeError):
            self.executor.build("core-admin", VM_FC37)
        self.driver.build.assert_not_called()


class TestLogLocator(unittest.TestCase):
    """Tests for build log URL resolution."""

    def setUp(self):
        self.locator = LogLocator()

    def test_resolves_identifier(self):
        self.assertEqual(
            self.locator.resolve("core-admin/vm-fc37/log1"),
            "https://github.com/QubesOS/build-logs/tree/master/core-admin/vm-fc37/log1",
        )

    @patch('autobuild.domains.build.log_locator.socket.gethostname', return_value="build-host-01")
    def test_falls_back_to_host(self, mock_hostname):
        for log_id in (None, "", "  "):
            with self.subTest(log_id=log_id):
                self.assertEqual(
                    self.locator.resolve(log_id),
                    "https://github.com/QubesOS/build-logs/tree/master/build-host-01",
                )

    @patch('autobuild.domains.build.log_locator.socket.gethostname', side_effect=OSError("no hostname"))
    def test_never_raises(self, mock_hostname):
        self.assertEqual(self.locator.resolve(None),
                         "https://github.com/QubesOS/build-logs/tree/master/localhost")

    def test_custom_base_url(self):
        locator = LogLocator("https://logs.example.org/tree/main/")
        self.assertEqual(locator.resolve("abc"), "https://logs.example.org/tree/main/abc")


if __name__ == '__main__':
    unittest.main()
