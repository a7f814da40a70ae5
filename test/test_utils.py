#!/usr/bin/env python3

import io
import os
import unittest
from unittest.mock import MagicMock, patch

from autobuild.utils import (
    CommandExecutionError,
    debug_log,
    log,
    run_command,
    scrubbed_environment,
)


def _completed(returncode=0, stdout="", stderr=""):
    process = MagicMock()
    process.returncode = returncode
    process.stdout = stdout
    process.stderr = stderr
    return process


class TestRunCommand(unittest.TestCase):
    """Test cases for run_command."""

    def setUp(self):
        self.env_patcher = patch.dict(os.environ, {
            'PATH': '/usr/bin',
            'GITHUB_API_KEY': 'secret-token',
            'GITHUB_BUILD_REPORT_REPO': 'QubesOS/build-issues',
            'DEBUG_MODE': 'false',
        }, clear=True)
        self.env_patcher.start()

    def tearDown(self):
        self.env_patcher.stop()

    @patch('autobuild.utils.subprocess.run')
    def test_returns_stripped_stdout(self, mock_run):
        mock_run.return_value = _completed(stdout="released\n")

        self.assertEqual(run_command(["echo", "released"], cwd="/tmp"), "released")
        self.assertEqual(mock_run.call_args.kwargs["cwd"], "/tmp")
        self.assertFalse(mock_run.call_args.kwargs["check"])

    @patch('autobuild.utils.subprocess.run')
    def test_failure_raises(self, mock_run):
        mock_run.return_value = _completed(returncode=2, stdout="partial", stderr="merge conflict")

        with patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(CommandExecutionError) as context:
                run_command(["make", "get-sources"])

        error = context.exception
        self.assertEqual(error.return_code, 2)
        self.assertEqual(error.command, "make get-sources")
        self.assertEqual(error.stdout, "partial")
        self.assertEqual(error.stderr, "merge conflict")

    @patch('autobuild.utils.subprocess.run')
    def test_failure_without_check(self, mock_run):
        mock_run.return_value = _completed(returncode=1, stdout="out")

        self.assertEqual(run_command(["false"], check=False), "out")

    @patch('autobuild.utils.subprocess.run')
    def test_secrets_not_passed_to_child(self, mock_run):
        mock_run.return_value = _completed()

        run_command(["make"], env={"BUILD_LOG_URLS": "https://example.org/log"})

        child_env = mock_run.call_args.kwargs["env"]
        self.assertNotIn("GITHUB_API_KEY", child_env)
        self.assertNotIn("GITHUB_BUILD_REPORT_REPO", child_env)
        self.assertEqual(child_env["BUILD_LOG_URLS"], "https://example.org/log")
        self.assertEqual(child_env["PATH"], "/usr/bin")

    @patch('autobuild.utils.subprocess.run')
    def test_secret_values_masked_in_debug_output(self, mock_run):
        mock_run.return_value = _completed()
        os.environ['DEBUG_MODE'] = 'true'

        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            run_command(["make"], env={"GITHUB_API_KEY": "secret-token", "OTHER": "visible"})

        output = stdout.getvalue()
        self.assertNotIn("secret-token", output)
        self.assertIn("visible", output)
        self.assertIn("***", output)


class TestScrubbedEnvironment(unittest.TestCase):

    @patch.dict(os.environ, {'HOME': '/home/user', 'GITHUB_API_KEY': 'secret-token'}, clear=True)
    def test_removes_secrets_and_applies_overrides(self):
        env = scrubbed_environment({"BUILD_LOG_ID_FILE": "/tmp/id"})
        self.assertEqual(env, {"HOME": "/home/user", "BUILD_LOG_ID_FILE": "/tmp/id"})

    @patch.dict(os.environ, {'HOME': '/home/user'}, clear=True)
    def test_does_not_modify_process_environment(self):
        scrubbed_environment({"EXTRA": "1"})
        self.assertNotIn("EXTRA", os.environ)


class TestLogging(unittest.TestCase):

    def test_errors_go_to_stderr(self):
        with patch('sys.stderr', new_callable=io.StringIO) as stderr, \
                patch('sys.stdout', new_callable=io.StringIO) as stdout:
            log("boom", is_error=True)
        self.assertEqual(stderr.getvalue(), "boom\n")
        self.assertEqual(stdout.getvalue(), "")

    def test_warning_prefix(self):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            log("careful", is_warning=True)
        self.assertEqual(stdout.getvalue(), "WARNING: careful\n")

    @patch.dict(os.environ, {'DEBUG_MODE': 'false'})
    def test_debug_log_silent_by_default(self):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            debug_log("hidden")
        self.assertEqual(stdout.getvalue(), "")

    @patch.dict(os.environ, {'DEBUG_MODE': 'TRUE'})
    def test_debug_log_enabled(self):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            debug_log("shown", 42)
        self.assertEqual(stdout.getvalue(), "shown 42\n")


if __name__ == '__main__':
    unittest.main()
