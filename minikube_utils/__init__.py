import contextlib
import importlib.metadata

from .errors import (
    CommandFailedError,
    MalformedStatusError,
    MinikubeError,
    NotInstalledError,
    NotRunnableError,
)
from .host import ConsoleHost, Host, StatusIndicator
from .minikube import ClusterStatus, Minikube, OperationResult, StartOptions, create

# The version is taken from the metadata of the installed package.  If this file is
# imported without the package being installed, this will fail.  In that case, catch
# the error and do not set __version__ at all.
with contextlib.suppress(importlib.metadata.PackageNotFoundError):
    __version__ = importlib.metadata.version(__package__)

__all__ = [
    "create",
    "Minikube",
    "ClusterStatus",
    "StartOptions",
    "OperationResult",
    "Host",
    "ConsoleHost",
    "StatusIndicator",
    "MinikubeError",
    "NotInstalledError",
    "NotRunnableError",
    "CommandFailedError",
    "MalformedStatusError",
]
