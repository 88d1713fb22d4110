"""Import a template branch into the current working directory."""

from __future__ import annotations

from ..config import StarterSettings
from ..git import (
    current_branch,
    fetch_all,
    has_history,
    init_repository,
    merge_branch,
    merge_message,
    pull_branch,
    temporary_remote,
)
from ..utils import info, verbose
from .selection import TemplateSelection


def import_template(selection: TemplateSelection, settings: StarterSettings) -> None:
    """Bring ``selection.branch`` of ``selection.repo`` into the working tree.

    With no prior history the branch is pulled straight into the current
    branch. Otherwise it is merged, keeping existing commits as ancestors.
    The temporary remote is removed whether or not the import succeeds.
    """
    git = settings.git_executable
    repo, branch = selection.repo, selection.branch
    info(f"Using branch {branch} from repository {repo} as a template")

    init_repository(git)
    with temporary_remote(settings.remote_alias, repo, branch, git) as remote:
        fetch_all(git)
        if has_history(git):
            verbose("Existing history found, merging the template")
            merge_branch(remote, branch, merge_message(repo, branch), git)
        else:
            target = current_branch(git)
            verbose(f"No history yet, pulling the template into {target}")
            pull_branch(remote, branch, target, git)

    info(
        "Git has been initialized (if it was not already) and the template has "
        "been imported. Please refer to the template's README.md for next steps."
    )
