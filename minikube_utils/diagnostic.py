from __future__ import annotations

from typing import NamedTuple, Optional

from .errors import MinikubeError, NotRunnableError
from .shell import ShellResult


class Diagnostic(NamedTuple):
    """Answer to "is this tool usable?"."""

    succeeded: bool


class Errorable(NamedTuple):
    """Either a successful result or the error that prevented it.

    Attributes:
        succeeded: True if the check passed.
        result: The diagnostic (only set if succeeded).
        error: The error (only set if not succeeded).
    """

    succeeded: bool
    result: Optional[Diagnostic] = None
    error: Optional[MinikubeError] = None

    @classmethod
    def success(cls, result: Diagnostic) -> Errorable:
        return cls(succeeded=True, result=result)

    @classmethod
    def failure(cls, error: MinikubeError) -> Errorable:
        return cls(succeeded=False, error=error)


def from_shell_exit_code_only(result: ShellResult) -> Errorable:
    """Map the exit code of a command to an Errorable, ignoring its output."""
    if result.code == 0:
        return Errorable.success(Diagnostic(succeeded=True))

    return Errorable.failure(
        NotRunnableError(
            f"Command failed with exit code {result.code}", stderr=result.stderr
        )
    )
