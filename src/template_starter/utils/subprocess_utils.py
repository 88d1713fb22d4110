"""Subprocess utilities for running git."""

from __future__ import annotations

import subprocess
from typing import List

from ..errors import ExternalToolError
from .console import verbose


def run_command(cmd: List[str]) -> str:
    """Run a command once and return its stdout.

    Raises ExternalToolError on a non-zero exit, a signal, or a launch failure.
    """
    verbose(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise ExternalToolError(cmd, launch_error=e) from e
    if result.returncode != 0:
        raise ExternalToolError(cmd, returncode=result.returncode, stderr=result.stderr)
    if result.stdout.strip():
        verbose(result.stdout.rstrip())
    return result.stdout


def git_output(args: List[str], git: str = "git") -> str:
    """Run a git command and return its stripped output."""
    return run_command([git, *args]).strip()
