"""Template branch discovery."""

from __future__ import annotations

import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from ..config import StarterSettings
from ..errors import ExternalToolError, StaleTemporaryDirectoryError
from ..utils import git_output, verbose
from ..utils.cleanup import released_on_exit

HEADS_PREFIX = "refs/heads/"


def normalize_branch_refs(raw: str) -> List[str]:
    """Turn raw ``%(refname)`` listing output into bare branch names.

    Quoting artifacts such as ``'refs/heads/dev'`` are stripped, empty lines
    dropped, and every name is returned once in listing order.
    """
    branches: List[str] = []
    for line in raw.splitlines():
        ref = line.replace("'", "").strip()
        if not ref:
            continue
        if ref.startswith(HEADS_PREFIX):
            ref = ref[len(HEADS_PREFIX) :]
        if ref not in branches:
            branches.append(ref)
    return branches


@contextmanager
def temporary_bare_clone(repo: str, path: Path, git: str = "git") -> Iterator[Path]:
    """Bare-clone ``repo`` into ``path`` and remove it again on exit.

    Refuses to touch ``path`` when it already exists, and fails with
    ExternalToolError when it cannot be created.
    """
    try:
        path.mkdir()
    except FileExistsError as e:
        raise StaleTemporaryDirectoryError(str(path), e) from e
    except OSError as e:
        raise ExternalToolError(["mkdir", str(path)], launch_error=e) from e
    with released_on_exit(
        f"temporary directory '{path}'",
        lambda: shutil.rmtree(path),
    ):
        verbose(f"Cloning {repo} into {path}")
        git_output(["clone", "--bare", repo, str(path)], git)
        yield path


def list_branch_refs(git_dir: Path, git: str = "git") -> str:
    return git_output(
        [f"--git-dir={git_dir}", "branch", "-l", "--format=%(refname)"], git
    )


def discover_branches(repo: str, settings: StarterSettings) -> List[str]:
    """List the template branches of ``repo``.

    The reserved branch is dropped only when ``repo`` is the configured
    default repository, where it holds the tool's own code.
    """
    git = settings.git_executable
    with temporary_bare_clone(repo, settings.temp_dir, git) as git_dir:
        branches = normalize_branch_refs(list_branch_refs(git_dir, git))

    if repo == settings.default_repository:
        branches = [b for b in branches if b != settings.reserved_branch]
    verbose(
        f"Found {len(branches)} template branches in {repo}: {', '.join(branches)}"
    )
    return branches
