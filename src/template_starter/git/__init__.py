"""Git operations for template-starter."""

from .branches import discover_branches, normalize_branch_refs, temporary_bare_clone
from .operations import (
    current_branch,
    fetch_all,
    has_history,
    init_repository,
    merge_branch,
    merge_message,
    pull_branch,
    temporary_remote,
)

__all__ = [
    "discover_branches",
    "normalize_branch_refs",
    "temporary_bare_clone",
    "current_branch",
    "fetch_all",
    "has_history",
    "init_repository",
    "merge_branch",
    "merge_message",
    "pull_branch",
    "temporary_remote",
]
