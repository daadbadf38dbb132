"""Execution of external commands."""

from __future__ import annotations

import asyncio
import logging
from typing import NamedTuple, Sequence, cast


class ShellResult(NamedTuple):
    """Outcome of a finished command.

    Attributes:
        code: Exit code of the process.
        stdout: Complete stdout output (decoded as UTF-8).
        stderr: Complete stderr output (decoded as UTF-8).
    """

    code: int
    stdout: str
    stderr: str


class Shell:
    """Run commands as subprocesses of the current event loop.

    Commands are given as argument lists and passed to the operating system as they
    are, i.e. without interpretation by a shell.
    """

    async def exec(self, cmd: Sequence[str]) -> ShellResult:
        """Run the command and wait for it to finish.

        Raises:
            OSError: if the process could not be started (e.g. executable not found).
        """
        logger = logging.getLogger("minikube_utils")
        logger.debug("Execute command %s", list(cmd))

        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate()

        result = ShellResult(
            code=cast(int, proc.returncode),
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )
        logger.debug("Command %s exited with code %d", cmd[0], result.code)

        return result

