"""Basic git operations used while importing a template."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from ..errors import ExternalToolError
from ..utils import git_output
from ..utils.cleanup import released_on_exit


def init_repository(git: str = "git") -> None:
    """Initialize a repository in the cwd (no-op when one already exists)."""
    git_output(["init"], git)


@contextmanager
def temporary_remote(
    alias: str, repo: str, branch: str, git: str = "git"
) -> Iterator[str]:
    """Register ``repo`` as remote ``alias`` tracking only ``branch``.

    The remote is removed again on every exit path.
    """
    git_output(["remote", "add", "-t", branch, alias, repo], git)
    with released_on_exit(
        f"temporary remote '{alias}'",
        lambda: remove_remote(alias, git),
    ):
        yield alias


def remove_remote(alias: str, git: str = "git") -> None:
    git_output(["remote", "remove", alias], git)


def fetch_all(git: str = "git") -> None:
    git_output(["fetch", "--all"], git)


def has_history(git: str = "git") -> bool:
    """Probe whether the current branch has any commits.

    Any failure to read the log counts as empty history, including failures
    unrelated to an unborn branch.
    """
    try:
        git_output(["--no-pager", "log", "-1"], git)
    except ExternalToolError:
        return False
    return True


def current_branch(git: str = "git") -> str:
    return git_output(["branch", "--show-current"], git)


def pull_branch(remote: str, branch: str, target: str, git: str = "git") -> None:
    """Pull ``branch`` of ``remote`` straight into ``target`` without a merge commit."""
    git_output(
        ["pull", "--no-commit", "--depth", "1", remote, f"{branch}:{target}"], git
    )


def merge_message(repo: str, branch: str) -> str:
    return f"Merge template branch '{branch}' from {repo}"


def merge_branch(remote: str, branch: str, message: str, git: str = "git") -> None:
    """Merge ``remote/branch`` into the current branch, keeping local history."""
    git_output(
        [
            "merge",
            f"{remote}/{branch}",
            "--allow-unrelated-histories",
            "--autostash",
            "-m",
            message,
            "--no-stat",
        ],
        git,
    )
