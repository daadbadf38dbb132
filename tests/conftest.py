from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import pytest

from minikube_utils.binutil import PresenceState
from minikube_utils.host import Host, StatusIndicator
from minikube_utils.minikube import Minikube
from minikube_utils.shell import ShellResult

MINIKUBE_COMMANDS = ("help", "start", "stop", "status")


class FakeStatusIndicator(StatusIndicator):
    def __init__(self) -> None:
        self._text = ""
        self._visible = False

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value

    @property
    def visible(self) -> bool:
        return self._visible

    def show(self) -> None:
        self._visible = True

    def hide(self) -> None:
        self._visible = False


class FakeHost(Host):
    """Host that records all messages instead of showing them."""

    def __init__(
        self, configuration: Optional[Mapping[str, Any]] = None, answer: bool = False
    ) -> None:
        self.configuration = configuration or {}
        self.answer = answer
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.questions: list[str] = []
        self.indicators: list[FakeStatusIndicator] = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        return self.answer

    def get_configuration(self, section: str) -> Mapping[str, Any]:
        return self.configuration.get(section, {})

    def create_status_indicator(self) -> StatusIndicator:
        indicator = FakeStatusIndicator()
        self.indicators.append(indicator)
        return indicator


class FakeShell:
    """Shell returning canned results, selected by the minikube command."""

    def __init__(
        self, responses: Optional[dict[str, Union[ShellResult, Exception]]] = None
    ) -> None:
        self.responses = dict(responses or {})
        self.calls: list[list[str]] = []

    async def exec(self, cmd):
        self.calls.append(list(cmd))
        command = next(arg for arg in cmd[1:] if arg in MINIKUBE_COMMANDS)
        response = self.responses[command]
        if isinstance(response, Exception):
            raise response
        return response

    def calls_of(self, command: str) -> list[list[str]]:
        return [call for call in self.calls if command in call[1:]]


class FakeLocator:
    def __init__(self, found: bool = True, path: str = "/usr/bin/minikube") -> None:
        self.found = found
        self.path = path
        self.calls: list[dict[str, Any]] = []

    async def check_for_binary(
        self,
        configured_path,
        bin_name,
        infer_failed_message,
        configured_file_missing_message,
        alert_on_failure,
    ) -> PresenceState:
        self.calls.append(
            {
                "configured_path": configured_path,
                "bin_name": bin_name,
                "infer_failed_message": infer_failed_message,
                "configured_file_missing_message": configured_file_missing_message,
                "alert_on_failure": alert_on_failure,
            }
        )
        return PresenceState(found=self.found, path=self.path)


@pytest.fixture()
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture()
def shell() -> FakeShell:
    return FakeShell()


@pytest.fixture()
def locator() -> FakeLocator:
    return FakeLocator()


@pytest.fixture()
def minikube(host, shell, locator) -> Minikube:
    return Minikube(host, shell, locator)
