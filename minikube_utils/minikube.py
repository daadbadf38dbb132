"""Start, stop and query a local minikube cluster."""

from __future__ import annotations

import asyncio
import json
import logging
import shlex
from typing import Any, Awaitable, Callable, Mapping, NamedTuple, Optional

from .base import constants
from .binutil import BinaryLocator
from .diagnostic import Errorable, from_shell_exit_code_only
from .errors import CommandFailedError, MalformedStatusError, NotInstalledError
from .host import Host, StatusIndicator
from .shell import Shell


class ClusterStatus(NamedTuple):
    """Status of the cluster as reported by ``minikube status``.

    Attributes:
        running: False if minikube reports the cluster as "Stopped", True otherwise.
        cluster: Status of the cluster components (e.g. "Running").
        kubeconfig: Status of the kubeconfig (e.g. "Configured").
    """

    running: bool
    cluster: str
    kubeconfig: str


class StartOptions(NamedTuple):
    #: VM driver passed as ``--vm-driver`` (not passed if empty).
    vm_driver: Optional[str] = None
    #: Additional command line flags for minikube, given as a single string.
    additional_flags: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> StartOptions:
        """Create options from the minikube_utils settings section."""
        return cls(
            vm_driver=settings.get(constants.VM_DRIVER_KEY),
            additional_flags=settings.get(constants.ADDITIONAL_FLAGS_KEY),
        )


class OperationResult(NamedTuple):
    """Outcome of a start/stop operation."""

    succeeded: bool
    message: str


def build_start_args(options: StartOptions) -> list[str]:
    """Construct the minikube arguments for starting the cluster.

    The additional flags come first, followed by ``--vm-driver`` if a driver is set,
    followed by the ``start`` command.
    """
    args = shlex.split(options.additional_flags) if options.additional_flags else []
    if options.vm_driver:
        args.append(f"--vm-driver={options.vm_driver}")
    args.append("start")
    return args


def parse_status_output(output: str) -> ClusterStatus:
    """Parse the output of ``minikube status`` run with :data:`STATUS_FORMAT`.

    Raises:
        MalformedStatusError: if the output is not a JSON array of three strings.
    """
    try:
        obj = json.loads(output)
    except json.JSONDecodeError as e:
        raise MalformedStatusError(
            f"Could not parse minikube status output: {e}", output
        ) from e

    if (
        not isinstance(obj, list)
        or len(obj) != 3
        or not all(isinstance(x, str) for x in obj)
    ):
        raise MalformedStatusError(
            f"Expected a list of three strings as minikube status, got {obj!r}", output
        )

    overall, cluster, kubeconfig = obj
    return ClusterStatus(
        running=overall != constants.STOPPED_STATUS,
        cluster=cluster,
        kubeconfig=kubeconfig,
    )


class Minikube:
    """Interface to a local minikube installation.

    Binary presence is checked lazily and cached once it is confirmed.  The status
    indicator is created on first use and shared by all operations of this instance.

    ``start`` and ``stop`` return as soon as their pre-checks are done.  The actual
    minikube invocation continues in a background task, reporting its outcome to the
    host.  The task is returned, so callers that are interested in the outcome can
    await it.
    """

    def __init__(self, host: Host, shell: Shell, locator: BinaryLocator) -> None:
        self.host = host
        self.shell = shell
        self.locator = locator

        self.bin_found = False
        self.bin_path = constants.MINIKUBE_BINARY

        self._status_indicator: Optional[StatusIndicator] = None
        self._pending_tasks: set[asyncio.Task] = set()

    @property
    def status_indicator(self) -> StatusIndicator:
        if self._status_indicator is None:
            self._status_indicator = self.host.create_status_indicator()
        return self._status_indicator

    async def check_present(self, alert_on_failure: bool) -> bool:
        """Check if the minikube binary is available.

        Args:
            alert_on_failure: If true, tell the user if the binary is not found.
        """
        if self.bin_found:
            return True

        config = self.host.get_configuration(constants.SETTINGS_SECTION)
        configured_path = config.get(constants.MINIKUBE_PATH_KEY)

        bin_name = constants.MINIKUBE_BINARY
        presence = await self.locator.check_for_binary(
            configured_path,
            bin_name,
            infer_failed_message=f'Could not find "{bin_name}" binary.',
            configured_file_missing_message=f"{configured_path} does not exist!",
            alert_on_failure=alert_on_failure,
        )
        if presence.found:
            self.bin_found = True
            self.bin_path = presence.path

        return presence.found

    async def check_runnable(self) -> Errorable:
        """Check if minikube is installed and can be executed."""
        if not await self.check_present(alert_on_failure=True):
            return Errorable.failure(NotInstalledError("Minikube is not installed"))

        result = await self.shell.exec([self.bin_path, "help"])
        return from_shell_exit_code_only(result)

    async def start(self, options: StartOptions) -> Optional[asyncio.Task]:
        """Start the cluster.

        Does nothing if minikube is not installed or the cluster is already running.

        Returns:
            The task running ``minikube start`` (resolving to an
            :class:`OperationResult`) or None if it was not started.
        """
        logger = logging.getLogger("minikube_utils")

        if not await self.check_present(alert_on_failure=True):
            return None

        item = self.status_indicator
        item.text = constants.INDICATOR_STARTING
        item.show()

        status = await self.status()
        if status.running:
            self.host.show_warning("Minikube cluster is already started.")
            return None

        cmd = [self.bin_path, *build_start_args(options)]
        logger.info("Starting minikube cluster")

        async def run_start() -> OperationResult:
            try:
                result = await self.shell.exec(cmd)
            except Exception as e:
                item.hide()
                return self._report_failure(f"Failed to start cluster: {e}")

            if result.code == 0:
                item.text = constants.INDICATOR_RUNNING
                return self._report_success("Cluster started.")
            else:
                item.hide()
                return self._report_failure(f"Failed to start cluster {result.stderr}")

        return self._run_detached(run_start)

    async def stop(self) -> Optional[asyncio.Task]:
        """Stop the cluster.

        Does nothing if minikube is not installed or the cluster is already stopped.

        Returns:
            The task running ``minikube stop`` (resolving to an
            :class:`OperationResult`) or None if it was not started.
        """
        logger = logging.getLogger("minikube_utils")

        if not await self.check_present(alert_on_failure=True):
            return None

        item = self.status_indicator
        item.text = constants.INDICATOR_STOPPING
        item.show()

        status = await self.status()
        if not status.running:
            self.host.show_warning("Minikube cluster is already stopped.")
            return None

        cmd = [self.bin_path, "stop"]
        logger.info("Stopping minikube cluster")

        async def run_stop() -> OperationResult:
            try:
                result = await self.shell.exec(cmd)
            except Exception as e:
                return self._report_failure(f"Error stopping cluster: {e}")
            finally:
                item.hide()

            if result.code == 0:
                return self._report_success("Cluster stopped.")
            else:
                return self._report_failure(f"Error stopping cluster {result.stderr}")

        return self._run_detached(run_stop)

    async def status(self) -> ClusterStatus:
        """Query the status of the cluster.

        Raises:
            NotInstalledError: if minikube is not found.
            CommandFailedError: if minikube reported an error or could not be executed.
            MalformedStatusError: if the output of minikube could not be parsed.
        """
        if not await self.check_present(alert_on_failure=False):
            raise NotInstalledError("minikube executable could not be found!")

        cmd = [self.bin_path, "status", "--format", constants.STATUS_FORMAT]
        try:
            result = await self.shell.exec(cmd)
        except OSError as e:
            raise CommandFailedError(f"failed to get status: {e}") from e

        if result.stderr:
            raise CommandFailedError(
                f"failed to get status: {result.stderr}", stderr=result.stderr
            )

        return parse_status_output(result.stdout)

    async def wait_for_pending(self) -> list[OperationResult]:
        """Wait until all running start/stop operations are finished."""
        return list(await asyncio.gather(*self._pending_tasks))

    def _run_detached(
        self, fn: Callable[[], Awaitable[OperationResult]]
    ) -> asyncio.Task:
        task = asyncio.ensure_future(fn())
        # keep a reference, otherwise the task may be garbage collected before it is
        # done
        self._pending_tasks.add(task)
        task.add_done_callback(self._pending_tasks.discard)
        return task

    def _report_success(self, message: str) -> OperationResult:
        self.host.show_info(message)
        return OperationResult(succeeded=True, message=message)

    def _report_failure(self, message: str) -> OperationResult:
        self.host.show_error(message)
        return OperationResult(succeeded=False, message=message)


def create(
    host: Host,
    shell: Optional[Shell] = None,
    install_dependencies_callback: Optional[Callable[[], None]] = None,
) -> Minikube:
    """Create a :class:`Minikube` instance with the default collaborators."""
    return Minikube(
        host,
        shell or Shell(),
        BinaryLocator(host, install_dependencies_callback),
    )
