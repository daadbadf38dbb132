from __future__ import annotations


class MinikubeError(Exception):
    """Base class for all errors raised when interacting with minikube."""

    pass


class NotInstalledError(MinikubeError):
    """The minikube binary could not be found."""

    pass


class NotRunnableError(MinikubeError):
    """The minikube binary was found but ``minikube help`` failed."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


class CommandFailedError(MinikubeError):
    """A minikube command exited with an error or reported error output.

    Attributes:
        stderr: Error output of the command (may be empty if the command could not be
            executed at all).
    """

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


class MalformedStatusError(MinikubeError, ValueError):
    """Output of ``minikube status`` could not be parsed."""

    def __init__(self, message: str, output: str) -> None:
        super().__init__(message)
        self.output = output
