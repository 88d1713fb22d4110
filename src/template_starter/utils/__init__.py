"""Utility modules for template-starter."""

from .console import console, error, info, set_verbose, verbose, warn
from .subprocess_utils import git_output, run_command

__all__ = [
    "console",
    "error",
    "git_output",
    "info",
    "run_command",
    "set_verbose",
    "verbose",
    "warn",
]
