"""Discover Python interpreters and virtual environments managed by pyenv."""

from __future__ import annotations

from importlib.metadata import version

from ._host import Host, SystemHost
from ._locator import Locator
from ._models import EnvManager, EnvManagerType, PythonEnv, PythonEnvironment, PythonEnvironmentCategory
from ._pyenv import PyEnv, get_pyenv_binary, get_pyenv_dir, list_pyenv_environments
from ._reporter import JsonRpcReporter, ListReporter, Reporter
from ._utils import PyVenvCfg, find_and_parse_pyvenv_cfg, find_python_binary_path
from ._version import get_pyenv_version

__version__ = version("pyenv-locator")

__all__ = [
    "EnvManager",
    "EnvManagerType",
    "Host",
    "JsonRpcReporter",
    "ListReporter",
    "Locator",
    "PyEnv",
    "PyVenvCfg",
    "PythonEnv",
    "PythonEnvironment",
    "PythonEnvironmentCategory",
    "Reporter",
    "SystemHost",
    "__version__",
    "find_and_parse_pyvenv_cfg",
    "find_python_binary_path",
    "get_pyenv_binary",
    "get_pyenv_dir",
    "get_pyenv_version",
    "list_pyenv_environments",
]
