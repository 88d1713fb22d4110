"""CLI interface for template-starter - bootstrap a project from a template branch."""

from __future__ import annotations

import sys

import click

from . import __version__
from .config import get_settings
from .errors import CleanupError, ExternalToolError
from .templates import ask_setup_args, import_template
from .utils import error, info, set_verbose


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--guided/--no-guided",
    "-g/-G",
    default=True,
    show_default=True,
    help="Whether to use the guided setup. Bypasses all other supplied arguments.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Show the git commands being run and their output.",
)
@click.version_option(__version__, "--version", prog_name="template-starter")
def cli(guided: bool, verbose: bool) -> None:
    """
    Import a branch of a template repository into the current project.

    Lists the template branches of the default repository (or of a custom
    one), then merges the chosen branch into the git repository in the
    current directory, initializing it first if needed.
    """
    set_verbose(verbose)
    if not guided:
        info("Coming soon...")
        return

    settings = get_settings()
    try:
        selection = ask_setup_args(settings)
        import_template(selection, settings)
    except CleanupError as e:
        error(f"The operation succeeded, but cleanup did not: {e}")
        sys.exit(1)
    except ExternalToolError as e:
        error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        error("\nInterrupted")
        sys.exit(130)
