"""Interactive template selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence

import click

from ..config import StarterSettings
from ..git import discover_branches
from ..utils import info

CUSTOM_CHOICE = "custom"

DiscoverFunc = Callable[..., List[str]]
ChooseFunc = Callable[[str, Sequence[str]], str]
AskFunc = Callable[[str], str]


@dataclass(frozen=True)
class TemplateSelection:
    """A resolved repository and branch to import."""

    repo: str
    branch: str


def prompt_choice(message: str, choices: Sequence[str]) -> str:
    """Single-select prompt over ``choices``."""
    return click.prompt(
        message,
        type=click.Choice(list(choices)),
        show_choices=True,
    )


def prompt_text(message: str) -> str:
    return click.prompt(message, type=str).strip()


def ask_setup_args(
    settings: StarterSettings,
    *,
    discover: DiscoverFunc = discover_branches,
    choose: ChooseFunc = prompt_choice,
    ask: AskFunc = prompt_text,
) -> TemplateSelection:
    """Walk the user through picking a template.

    Offers the default repository's branches plus a ``custom`` escape that
    asks for another repository and offers its branches instead.
    """
    info("Welcome to the guided setup of your new project.")
    default_branches = discover(settings.default_repository, settings)
    template = choose(
        "Which template do you want to use?",
        [*default_branches, CUSTOM_CHOICE],
    )
    if template != CUSTOM_CHOICE:
        return TemplateSelection(repo=settings.default_repository, branch=template)

    repo = ask("Which repository should be used?")
    custom_branches = discover(repo, settings)
    if not custom_branches:
        raise click.UsageError(f"Repository {repo} has no branches to use as a template.")
    branch = choose(
        "Which template do you want to use of your custom repository?",
        custom_branches,
    )
    return TemplateSelection(repo=repo, branch=branch)
