from __future__ import annotations

import argparse
import os
import pathlib
from typing import Any, Optional

import smart_settings

from minikube_utils.base import constants
from minikube_utils.base.settings import (
    SettingsError,
    add_cmd_line_params,
    check_settings_section,
)


def is_settings_file(cmd_line):
    if (
        cmd_line.endswith(".json")
        or cmd_line.endswith(".yml")
        or cmd_line.endswith(".yaml")
        or cmd_line.endswith(".toml")
    ):
        if not os.path.isfile(cmd_line):
            raise FileNotFoundError(f"{cmd_line}: No such settings file found")
        return True
    else:
        return False


def add_settings_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the arguments for reading settings to the given parser.

    This adds an optional ``--settings`` argument for the settings file and a list of
    positional ``KEY=VALUE`` arguments to overwrite individual settings.
    """
    parser.add_argument(
        "--settings",
        dest="settings_file",
        type=pathlib.Path,
        metavar="FILE",
        help="Path to the settings file (JSON, YAML or TOML).",
    )
    parser.add_argument(
        "settings",
        nargs="*",
        type=str,
        metavar="KEY_VALUE",
        help="""Additional settings in the format '<key>=<value>'.  This will overwrite
            settings in the settings file.  Key has to match a configuration option,
            value has to be valid Python.  Example:
            'minikube_utils.minikube_path="/opt/bin/minikube"'
        """,
    )


def read_settings_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Read settings from command line args.

    Args:
        args: Arguments parsed by an ArgumentParser which was set up using
            :func:`add_settings_arguments`.

    Returns:
        Settings dictionary.  It always contains the minikube_utils section.
    """
    if args.settings_file is None:
        settings: dict[str, Any] = {constants.SETTINGS_SECTION: {}}
        add_cmd_line_params(settings, args.settings)
        check_settings_section(settings)
        return settings

    return read_settings_with_smart_settings(
        settings_file=args.settings_file,
        cmdline_settings=args.settings,
    )


def read_settings_with_smart_settings(
    settings_file: pathlib.Path,
    cmdline_settings: Optional[list[str]] = None,
    make_immutable: bool = True,
    dynamic: bool = True,
) -> smart_settings.AttributeDict:
    """Read settings using smart_settings.

    Args:
        settings_file:  Path to the settings file.
        cmdline_settings:  List of additional parameters provided via command line.
        make_immutable:  See ``smart_settings.load()``
        dynamic:  See ``smart_settings.load()``

    Returns:
        Parameters as loaded by smart_settings.
    """
    cmdline_settings = cmdline_settings or []

    if not is_settings_file(os.fspath(settings_file)):
        raise SettingsError(f"{settings_file} is not a supported settings file.")

    def ensure_section(orig_dict):
        orig_dict.setdefault(constants.SETTINGS_SECTION, {})

    def add_cmd_params(orig_dict):
        add_cmd_line_params(orig_dict, cmdline_settings)

    return smart_settings.load(
        os.fspath(settings_file),
        make_immutable=make_immutable,
        dynamic=dynamic,
        post_unpack_hooks=[ensure_section, add_cmd_params, check_settings_section],
    )
