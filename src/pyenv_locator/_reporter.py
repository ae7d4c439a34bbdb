"""Sinks that receive what locators discover."""

from __future__ import annotations

import json
import logging
import sys
from typing import IO, TYPE_CHECKING, Any, Final, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ._models import EnvManager, PythonEnvironment

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)


@runtime_checkable
class Reporter(Protocol):
    """Receives managers and environments, in any order."""

    def report_environment_manager(self, manager: EnvManager) -> None: ...

    def report_environment(self, env: PythonEnvironment) -> None: ...


class ListReporter:
    """Collect reports in memory."""

    def __init__(self) -> None:
        self.managers: list[EnvManager] = []
        self.environments: list[PythonEnvironment] = []

    def report_environment_manager(self, manager: EnvManager) -> None:
        self.managers.append(manager)

    def report_environment(self, env: PythonEnvironment) -> None:
        self.environments.append(env)


class JsonRpcReporter:
    """Write reports as JSON-RPC 2.0 notifications with ``Content-Length`` framing."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self.stream = sys.stdout if stream is None else stream

    def report_environment_manager(self, manager: EnvManager) -> None:
        self.send("envManager", manager.to_dict())

    def report_environment(self, env: PythonEnvironment) -> None:
        self.send("pythonEnvironment", env.to_dict())

    def exit(self) -> None:
        self.send("exit", None)

    def send(self, method: str, params: Any) -> None:  # noqa: ANN401
        message = {"jsonrpc": "2.0", "method": method, "params": params}
        body = json.dumps(message)
        _LOGGER.debug("send %s", method)
        self.stream.write(
            f"Content-Length: {len(body.encode('utf-8'))}\r\n"
            f"Content-Type: application/vscode-jsonrpc; charset=utf-8\r\n\r\n"
            f"{body}"
        )
        self.stream.flush()


__all__ = [
    "JsonRpcReporter",
    "ListReporter",
    "Reporter",
]
