"""Locate executables, either at a configured path or via PATH."""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from typing import Callable, NamedTuple, Optional

from .host import Host


class PresenceState(NamedTuple):
    #: True if the binary exists.
    found: bool
    #: Path to the binary (or the configured/plain name if it was not found).
    path: str


class BinaryLocator:
    """Check whether a binary is available and tell the user if it is not.

    Args:
        host: Used to show alerts and ask whether missing dependencies should be
            installed.
        install_dependencies_callback: Called when the user agrees to install missing
            dependencies.  If not set, the user is not asked.
    """

    def __init__(
        self,
        host: Host,
        install_dependencies_callback: Optional[Callable[[], None]] = None,
    ) -> None:
        self.host = host
        self.install_dependencies_callback = install_dependencies_callback

    async def check_for_binary(
        self,
        configured_path: Optional[str],
        bin_name: str,
        infer_failed_message: str,
        configured_file_missing_message: str,
        alert_on_failure: bool,
    ) -> PresenceState:
        """Check if the binary exists.

        Args:
            configured_path: Path set by the user.  If empty, ``bin_name`` is looked up
                in PATH.
            bin_name: Name of the executable.
            infer_failed_message: Shown if ``bin_name`` is not found in PATH.
            configured_file_missing_message: Shown if ``configured_path`` does not
                exist.
            alert_on_failure: If false, nothing is shown to the user.

        Returns:
            The presence state.  On success, ``path`` is the path that should be used
            to execute the binary.
        """
        logger = logging.getLogger("minikube_utils")

        if configured_path:
            path = os.path.expanduser(configured_path)
            found = await asyncio.to_thread(os.path.isfile, path)
            if not found:
                logger.debug("Configured %s binary %s does not exist", bin_name, path)
                if alert_on_failure:
                    self.host.show_error(configured_file_missing_message)
                return PresenceState(found=False, path=path)

            return PresenceState(found=True, path=path)

        which = await asyncio.to_thread(shutil.which, bin_name)
        if which is None:
            logger.debug("%s not found in PATH", bin_name)
            if alert_on_failure:
                self._alert_no_bin(infer_failed_message)
            return PresenceState(found=False, path=bin_name)

        logger.debug("Found %s at %s", bin_name, which)
        return PresenceState(found=True, path=which)

    def _alert_no_bin(self, message: str) -> None:
        self.host.show_error(message)
        if self.install_dependencies_callback is not None and self.host.confirm(
            "Install dependencies?"
        ):
            self.install_dependencies_callback()
