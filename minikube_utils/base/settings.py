import ast
import logging
from typing import Any, Mapping, MutableMapping

from minikube_utils.base import constants


class SettingsError(Exception):
    """Custom error for anything related to the settings."""

    ...


def check_settings_section(orig_dict: Mapping[str, Any]) -> None:
    """Check the minikube_utils section of the given settings dict.

    Raise SettingsError if the section is not a dict or one of the known options does
    not have a string value.  Unknown options are reported but otherwise ignored.
    """
    logger = logging.getLogger("minikube_utils")

    section = orig_dict.get(constants.SETTINGS_SECTION, {})
    if not isinstance(section, Mapping):
        raise SettingsError(
            f"'{constants.SETTINGS_SECTION}' settings must be a dictionary, not"
            f" {type(section).__name__}"
        )

    for key, value in section.items():
        if key not in constants.SETTINGS_KEYS:
            logger.error(
                "Settings: %s contained entry '%s' which is not supported.  It will be"
                " ignored.",
                constants.SETTINGS_SECTION,
                key,
            )
        elif value is not None and not isinstance(value, str):
            raise SettingsError(
                f"'{constants.SETTINGS_SECTION}.{key}' must be a string, got {value!r}"
            )


def add_cmd_line_params(
    base_dict: MutableMapping[str, Any], extra_flags: list[str]
) -> None:
    for extra_flag in extra_flags:
        name_path, eq, value = extra_flag.partition("=")
        name_path = name_path.strip()
        value = value.strip()

        # fail if extra_flag doesn't have the format "<xxx>=<yyy>"
        if any([not name_path, not eq, not value]):
            raise SettingsError(f"Invalid format for {extra_flag}")

        # parse value
        try:
            literal_value = ast.literal_eval(value)
        except Exception as e:
            raise SettingsError(
                f"Failed to parse value '{value}' in '{extra_flag}'"
            ) from e

        # walk through base_dict, based on name_path
        try:
            name_segments = name_path.split(".")
            _dict = base_dict
            for seg in name_segments[:-1]:
                _dict = _dict[seg]
        except (KeyError, TypeError) as e:
            raise SettingsError(
                f"Invalid settings path '{name_path}' in '{extra_flag}'"
            ) from e

        if not isinstance(_dict, MutableMapping):
            raise SettingsError(
                f"Invalid settings path '{name_path}' in '{extra_flag}'"
            )

        _dict[name_segments[-1]] = literal_value
