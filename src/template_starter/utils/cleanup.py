"""Scoped release of temporary resources."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator

from ..errors import CleanupError, ExternalToolError
from .console import warn


@contextmanager
def released_on_exit(resource: str, release: Callable[[], None]) -> Iterator[None]:
    """Run ``release`` when the block exits, however it exits.

    If the block raised, a failing release is reported as a warning and the
    original error propagates. If the block succeeded, a failing release
    raises CleanupError so callers can tell it apart from a failed block.
    """
    try:
        yield
    except BaseException:
        try:
            release()
        except (ExternalToolError, OSError) as cleanup_error:
            warn(f"Failed to clean up {resource}: {cleanup_error}")
        raise
    try:
        release()
    except (ExternalToolError, OSError) as e:
        raise CleanupError(resource, e) from e
