"""User facing surface: messages, questions, configuration and the status indicator.

The adapter only talks to the abstract :class:`Host`, so it can be embedded in
different front ends.  :class:`ConsoleHost` is the implementation used by the
command line tool.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

import colorama
import tqdm


def styled(text: str, *args) -> str:
    """Little helper to apply color/style using colorama on a string.

    It simply prepends all given args to text and appends ``colorama.Style.RESET_ALL``.
    """
    return "".join([*args, text, colorama.Style.RESET_ALL])


class StatusIndicator(ABC):
    """A persistent element showing the phase of a long running operation."""

    @property
    @abstractmethod
    def text(self) -> str:
        raise NotImplementedError

    @text.setter
    @abstractmethod
    def text(self, value: str) -> None:
        raise NotImplementedError

    @property
    @abstractmethod
    def visible(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def show(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def hide(self) -> None:
        raise NotImplementedError


class Host(ABC):
    @abstractmethod
    def show_info(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def show_warning(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def show_error(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def confirm(self, question: str) -> bool:
        """Ask the user a yes/no question."""
        raise NotImplementedError

    @abstractmethod
    def get_configuration(self, section: str) -> Mapping[str, Any]:
        """Return the settings of the given section (empty if it does not exist)."""
        raise NotImplementedError

    @abstractmethod
    def create_status_indicator(self) -> StatusIndicator:
        raise NotImplementedError


class TqdmStatusIndicator(StatusIndicator):
    """Status indicator rendered as a tqdm bar that only shows its text."""

    def __init__(self) -> None:
        self._text = ""
        self._bar: Optional[tqdm.tqdm] = None

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        if self._bar is not None:
            self._bar.set_description_str(value)

    @property
    def visible(self) -> bool:
        return self._bar is not None

    def show(self) -> None:
        if self._bar is None:
            self._bar = tqdm.tqdm(total=None, bar_format="{desc}", desc=self._text)
        else:
            self._bar.refresh()

    def hide(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


class ConsoleHost(Host):
    """Host for terminal use.

    Messages are written with ``tqdm.write`` so they do not interfere with a visible
    status indicator.  All messages are also logged at debug level.
    """

    def __init__(self, settings: Optional[Mapping[str, Any]] = None) -> None:
        self.settings = settings or {}

    def _write(self, message: str, *style) -> None:
        tqdm.tqdm.write(styled(message, *style))

    def _log(self, kind: str, message: str) -> None:
        # DEBUG only, the message itself is already shown to the user
        logging.getLogger("minikube_utils").debug("%s: %s", kind, message)

    def show_info(self, message: str) -> None:
        self._log("info", message)
        self._write(message, colorama.Fore.BLUE)

    def show_warning(self, message: str) -> None:
        self._log("warning", message)
        self._write(message, colorama.Fore.YELLOW)

    def show_error(self, message: str) -> None:
        self._log("error", message)
        self._write(message, colorama.Fore.RED, colorama.Style.BRIGHT)

    def confirm(self, question: str) -> bool:
        self._write(f"{question} [y/N]", colorama.Fore.RED, colorama.Style.BRIGHT)
        answer = input()
        return answer.strip().lower() in ["y", "yes"]

    def get_configuration(self, section: str) -> Mapping[str, Any]:
        return self.settings.get(section) or {}

    def create_status_indicator(self) -> StatusIndicator:
        return TqdmStatusIndicator()
