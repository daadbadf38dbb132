#!/usr/bin/env python3
"""Start, stop and check a local minikube cluster.

The minikube binary is looked up in PATH unless a path is configured via the setting
``minikube_utils.minikube_path``.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import typing

from minikube_utils.base import constants
from minikube_utils.base.settings import SettingsError
from minikube_utils.errors import MinikubeError
from minikube_utils.host import ConsoleHost
from minikube_utils.logging_utils import init_logging
from minikube_utils.minikube import Minikube, StartOptions, create
from minikube_utils.settings import add_settings_arguments, read_settings_from_args


async def cmd_check(minikube: Minikube, args: argparse.Namespace) -> int:
    result = await minikube.check_runnable()
    if result.succeeded:
        minikube.host.show_info(f"minikube is usable ({minikube.bin_path}).")
        return 0

    minikube.host.show_error(f"minikube is not usable: {result.error}")
    return 1


async def cmd_status(minikube: Minikube, args: argparse.Namespace) -> int:
    status = await minikube.status()
    print(f"running: {status.running}")
    print(f"cluster: {status.cluster}")
    print(f"kubeconfig: {status.kubeconfig}")
    return 0


async def cmd_start(minikube: Minikube, args: argparse.Namespace) -> int:
    config = minikube.host.get_configuration(constants.SETTINGS_SECTION)
    options = StartOptions.from_settings(config)
    if args.vm_driver is not None:
        options = options._replace(vm_driver=args.vm_driver)
    if args.flags is not None:
        options = options._replace(additional_flags=args.flags)

    task = await minikube.start(options)
    return await _wait_for_operation(minikube, task)


async def cmd_stop(minikube: Minikube, args: argparse.Namespace) -> int:
    task = await minikube.stop()
    return await _wait_for_operation(minikube, task)


async def _wait_for_operation(
    minikube: Minikube, task: typing.Optional[asyncio.Task]
) -> int:
    if task is None:
        # nothing was done, the reason has already been reported to the user
        minikube.status_indicator.hide()
        return 0 if minikube.bin_found else 1

    result = await task
    # a started cluster keeps its indicator visible, but the tool exits now and
    # must not leave the bar on the terminal
    minikube.status_indicator.hide()
    return 0 if result.succeeded else 1


COMMANDS = {
    "check": cmd_check,
    "status": cmd_status,
    "start": cmd_start,
    "stop": cmd_stop,
}


def main() -> int:
    parser = argparse.ArgumentParser(
        description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug output."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("check", help="Check if minikube is installed and usable.")
    subparsers.add_parser("status", help="Show the status of the cluster.")
    start_parser = subparsers.add_parser("start", help="Start the cluster.")
    start_parser.add_argument(
        "--vm-driver", type=str, help="VM driver to use (overwrites the settings)."
    )
    start_parser.add_argument(
        "--flags",
        type=str,
        metavar="FLAGS",
        help="""Additional flags for minikube, e.g. '--cpus=4 --memory=8g'
            (overwrites the settings).
        """,
    )
    subparsers.add_parser("stop", help="Stop the cluster.")

    for subparser in subparsers.choices.values():
        add_settings_arguments(subparser)

    args = parser.parse_args()

    init_logging(verbose=args.verbose)

    try:
        settings = read_settings_from_args(args)
    except (SettingsError, FileNotFoundError) as e:
        logging.fatal(e)
        return 1

    host = ConsoleHost(settings)

    def install_dependencies() -> None:
        host.show_info(
            "See https://minikube.sigs.k8s.io/docs/start/ for installation"
            " instructions."
        )

    minikube = create(host, install_dependencies_callback=install_dependencies)

    try:
        return asyncio.run(COMMANDS[args.command](minikube, args))
    except MinikubeError as e:
        logging.fatal(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
