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
import subprocess
import sys
import platform
from typing import Optional

# Environment variables holding credentials. They are masked in debug output
# and stripped from the environment handed to builder subprocesses.
SECRET_ENV_VARS = ("GITHUB_API_KEY", "GITHUB_BUILD_REPORT_REPO")

# Unicode to ASCII fallback mappings for Windows
UNICODE_FALLBACKS = {
    '❌': 'X',  # ❌ -> X
    '✅': '',  # ✅ -> ''
    '✨': '*',  # ✨ -> *
    '⚠️': '!',  # ⚠️ -> !
}


def is_debug_mode() -> bool:
    """Returns True when DEBUG_MODE is set to true in the environment."""
    return os.environ.get("DEBUG_MODE", "false").lower() == "true"


def safe_print(message, file=None, flush=True):
    """Safely print message, handling encoding issues on Windows."""
    try:
        print(message, file=file, flush=flush)
    except UnicodeEncodeError:
        for unicode_char, ascii_fallback in UNICODE_FALLBACKS.items():
            message = message.replace(unicode_char, ascii_fallback)

        if platform.system() == 'Windows':
            message = ''.join([c if ord(c) < 128 else '?' for c in message])

        print(message, file=file, flush=flush)


def log(message: str, is_error: bool = False, is_warning: bool = False):
    """Prints a message to stdout, or to stderr for errors."""
    if is_error:
        safe_print(message, file=sys.stderr, flush=True)
    elif is_warning:
        safe_print(f"WARNING: {message}", flush=True)
    else:
        safe_print(message, flush=True)


def debug_log(*args, **kwargs):
    """Prints only if DEBUG_MODE is True."""
    if is_debug_mode():
        message = " ".join(map(str, args))
        safe_print(message, flush=True)


def scrubbed_environment(extra: Optional[dict] = None) -> dict:
    """
    Returns a copy of the process environment without reporting credentials,
    merged with the given overrides.
    """
    env = {key: value for key, value in os.environ.items() if key not in SECRET_ENV_VARS}
    if extra:
        env.update(extra)
    return env


def _truncate(text: str, limit: int = 1000) -> str:
    if len(text) > limit:
        half = limit // 2
        return f"{text[:half]}...\n...{text[-half:]}"
    return text


class CommandExecutionError(Exception):
    """Custom exception for errors during command execution."""
    def __init__(self, message, return_code, command, stdout=None, stderr=None):
        super().__init__(message)
        self.return_code = return_code
        self.command = command
        self.stdout = stdout
        self.stderr = stderr


def run_command(command, env=None, check=True, cwd=None):
    """
    Runs a command and returns its stdout.
    Prints command, stdout/stderr based on DEBUG_MODE.

    Args:
        command: List of command and arguments to run
        env: Optional environment variable overrides
        check: Whether to raise on command failure
        cwd: Optional working directory

    Returns:
        str: Command stdout output

    Raises:
        CommandExecutionError: If check=True and the command fails
    """
    options_text = f"Options: check={check}"
    if cwd:
        options_text += f", cwd={cwd}"
    if env:
        shown = {key: ("***" if key in SECRET_ENV_VARS else value) for key, value in env.items()}
        options_text += f", env={shown}"

    debug_log(f"--- Running command: {' '.join(command)} ---")
    debug_log(f"  {options_text}")

    process = subprocess.run(
        command,
        capture_output=True,
        text=True,
        encoding='utf-8',
        errors='replace',
        check=False,  # We'll handle errors ourselves
        cwd=cwd,
        env=scrubbed_environment(env)
    )

    debug_log(f"  Return Code: {process.returncode}")
    if process.stdout:
        debug_log(f"  Command stdout:\n---\n{_truncate(process.stdout.strip())}\n---")

    if process.stderr:
        stderr_text = process.stderr.strip()
        if process.returncode != 0:
            log(f"  Command stderr:\n---\n{_truncate(stderr_text)}\n---", is_error=True)
        elif stderr_text:
            debug_log(f"  Command stderr:\n---\n{_truncate(stderr_text)}\n---")

    if check and process.returncode != 0:
        log(f"Error: Command failed with return code {process.returncode}: {' '.join(command)}", is_error=True)
        error_details = process.stderr.strip() if process.stderr else "No error output available"
        raise CommandExecutionError(
            message=f"Command '{' '.join(command)}' failed with return code {process.returncode}.",
            return_code=process.returncode,
            command=' '.join(command),
            stdout=process.stdout.strip() if process.stdout else None,
            stderr=error_details
        )

    return process.stdout.strip() if process.stdout else ""

