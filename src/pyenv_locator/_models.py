"""Records produced by the locator and handed to reporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class EnvManagerType(Enum):
    """Tools able to manage Python environments."""

    PYENV = "pyenv"


class PythonEnvironmentCategory(Enum):
    """How a discovered interpreter was installed."""

    PYENV_PURE = "PyenvPure"
    PYENV_VIRTUAL_ENV = "PyenvVirtualEnv"


@dataclass(frozen=True)
class EnvManager:
    """The executable of a tool managing environments, shared by every record of one discovery run."""

    executable_path: Path
    version: str | None
    tool: EnvManagerType

    def to_dict(self) -> dict[str, Any]:
        return {
            "executablePath": str(self.executable_path),
            "version": self.version,
            "tool": self.tool.value,
        }


@dataclass(frozen=True)
class PythonEnvironment:
    """A discovered interpreter, identified by its executable path."""

    name: str | None
    python_executable_path: Path
    category: PythonEnvironmentCategory
    version: str | None
    env_path: Path | None
    sys_prefix_path: Path | None
    env_manager: EnvManager | None
    python_run_command: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "pythonExecutablePath": str(self.python_executable_path),
            "category": self.category.value,
            "version": self.version,
            "envPath": None if self.env_path is None else str(self.env_path),
            "sysPrefixPath": None if self.sys_prefix_path is None else str(self.sys_prefix_path),
            "envManager": None if self.env_manager is None else self.env_manager.to_dict(),
            "pythonRunCommand": list(self.python_run_command),
        }


@dataclass(frozen=True)
class PythonEnv:
    """A candidate interpreter offered to a locator by the host service."""

    executable: Path
    path: Path | None = None
    version: str | None = None


__all__ = [
    "EnvManager",
    "EnvManagerType",
    "PythonEnv",
    "PythonEnvironment",
    "PythonEnvironmentCategory",
]
