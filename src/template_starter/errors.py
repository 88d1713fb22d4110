"""Errors raised by template-starter."""

from __future__ import annotations

from typing import List, Optional


class ExternalToolError(Exception):
    """Raise when an external tool (git) exits non-zero, is killed, or cannot be launched"""

    def __init__(
        self,
        command: List[str],
        returncode: Optional[int] = None,
        stderr: str = "",
        launch_error: Optional[OSError] = None,
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        # subprocess reports death-by-signal as a negative return code
        self.signal = -returncode if returncode is not None and returncode < 0 else None
        self.stderr = stderr
        self.launch_error = launch_error
        super().__init__(self._describe())

    def _describe(self) -> str:
        cmd = " ".join(self.command)
        if self.launch_error is not None:
            return f"Could not run `{cmd}`: {self.launch_error}"
        if self.signal is not None:
            head = f"`{cmd}` was terminated by signal {self.signal}"
        else:
            head = f"`{cmd}` failed with exit code {self.returncode}"
        stderr = self.stderr.strip()
        return f"{head}\n{stderr}" if stderr else head


class CleanupError(ExternalToolError):
    """Raise when releasing a temporary resource fails after the guarded work succeeded"""

    def __init__(self, resource: str, cause: Exception) -> None:
        self.resource = resource
        self.cause = cause
        if isinstance(cause, ExternalToolError):
            super().__init__(
                cause.command,
                returncode=cause.returncode,
                stderr=cause.stderr,
                launch_error=cause.launch_error,
            )
        else:
            super().__init__(
                [],
                launch_error=cause if isinstance(cause, OSError) else None,
            )

    def _describe(self) -> str:
        return f"Failed to clean up {self.resource}: {self.cause}"


class StaleTemporaryDirectoryError(ExternalToolError):
    """Raise when the temporary clone directory is left over from an earlier run"""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        super().__init__(["mkdir", path], launch_error=cause)

    def _describe(self) -> str:
        return (
            f"Temporary directory '{self.path}' already exists, probably from an "
            "interrupted run. Remove it and try again."
        )
