"""Locate interpreters and virtual environments installed by pyenv (and pyenv-win)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Final

from ._host import IS_WIN
from ._models import EnvManager, EnvManagerType, PythonEnvironment, PythonEnvironmentCategory
from ._utils import find_and_parse_pyvenv_cfg, find_python_binary_path
from ._version import get_pyenv_version

if TYPE_CHECKING:
    from ._host import Host
    from ._models import PythonEnv
    from ._reporter import Reporter

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)


def get_home_pyenv_dir(host: Host) -> Path | None:
    if (home := host.get_user_home()) is None:
        return None
    pyenv_dir = Path(home) / ".pyenv"
    return pyenv_dir / "pyenv-win" if IS_WIN else pyenv_dir


def get_pyenv_dir(host: Host) -> Path | None:
    """
    Return the candidate pyenv installation root; it is not checked for existence.

    ``PYENV_ROOT`` wins, then ``PYENV`` (pyenv-win), then ``~/.pyenv`` (``~/.pyenv/pyenv-win`` on Windows).
    """
    for env_var in ("PYENV_ROOT", "PYENV"):
        if value := host.get_env_var(env_var):
            _LOGGER.debug("pyenv root from %s=%s", env_var, value)
            return Path(value)
    return get_home_pyenv_dir(host)


def get_binary_from_known_paths(host: Host) -> Path | None:
    for known_path in host.get_known_global_search_locations():
        binary = Path(known_path) / "pyenv"
        try:
            if binary.exists():
                return binary
        except OSError:
            continue
    return None


def get_pyenv_binary(host: Host) -> Path | None:
    if (pyenv_dir := get_pyenv_dir(host)) is None:
        return None
    exe = pyenv_dir / "bin" / "pyenv"
    try:
        if exe.exists():
            return exe
    except OSError:
        _LOGGER.debug("cannot stat %s", exe, exc_info=True)
    return get_binary_from_known_paths(host)


def _new_environment(  # noqa: PLR0913
    name: str | None,
    executable: Path,
    category: PythonEnvironmentCategory,
    version: str,
    path: Path,
    manager: EnvManager | None,
) -> PythonEnvironment:
    return PythonEnvironment(
        name=name,
        python_executable_path=executable,
        category=category,
        version=version,
        env_path=path,
        sys_prefix_path=path,
        env_manager=manager,
        python_run_command=[str(executable)],
    )


def get_pure_python_environment(
    executable: Path,
    path: Path,
    manager: EnvManager | None,
) -> PythonEnvironment | None:
    if (version := get_pyenv_version(path.name)) is None:
        return None
    return _new_environment(None, executable, PythonEnvironmentCategory.PYENV_PURE, version, path, manager)


def get_virtual_env_environment(
    executable: Path,
    path: Path,
    manager: EnvManager | None,
) -> PythonEnvironment | None:
    if (cfg := find_and_parse_pyvenv_cfg(executable)) is None:
        return None
    category = PythonEnvironmentCategory.PYENV_VIRTUAL_ENV
    return _new_environment(path.name, executable, category, cfg.version, path, manager)


def build_environment(
    executable: Path,
    path: Path,
    manager: EnvManager | None,
) -> PythonEnvironment | None:
    """Classify a version folder as a plain install first, then as a pyenv-virtualenv environment."""
    if (env := get_pure_python_environment(executable, path, manager)) is not None:
        return env
    return get_virtual_env_environment(executable, path, manager)


def list_pyenv_environments(manager: EnvManager | None, host: Host) -> list[PythonEnvironment] | None:
    """
    Build a record for every interpreter under ``<root>/versions``.

    :return: the records, or ``None`` when the root cannot be determined or its ``versions`` folder cannot be listed
    """
    if (pyenv_dir := get_pyenv_dir(host)) is None:
        _LOGGER.debug("no pyenv root could be determined")
        return None
    versions_dir = pyenv_dir / "versions"
    try:
        entries = list(versions_dir.iterdir())
    except OSError:
        _LOGGER.debug("cannot list pyenv versions at %s", versions_dir, exc_info=True)
        return None

    envs: list[PythonEnvironment] = []
    for path in entries:
        try:
            if not path.is_dir():
                continue
        except OSError:
            continue
        if (executable := find_python_binary_path(path)) is None:
            _LOGGER.debug("no interpreter in %s", path)
            continue
        if (env := build_environment(executable, path, manager)) is None:
            _LOGGER.debug("skip unrecognized pyenv version folder %s", path)
            continue
        envs.append(env)
    return envs


class PyEnv:
    """Locator for pyenv: all discovery happens in one scan of the versions folder during :meth:`gather`."""

    def __init__(self, host: Host) -> None:
        self.host = host
        self.environments: dict[str, PythonEnvironment] = {}
        self.manager: EnvManager | None = None

    def is_known(self, python_executable: Path) -> bool:
        return str(python_executable) in self.environments

    def track_if_compatible(self, env: PythonEnv) -> bool:  # noqa: ARG002, PLR6301
        return False

    def gather(self) -> bool:
        if (pyenv_binary := get_pyenv_binary(self.host)) is not None:
            self.manager = EnvManager(pyenv_binary, None, EnvManagerType.PYENV)
        else:
            self.manager = None
        _LOGGER.debug("pyenv manager %s", self.manager)

        envs = list_pyenv_environments(self.manager, self.host)
        if envs is None:
            return False
        for env in envs:
            self.environments[str(env.python_executable_path)] = env
        _LOGGER.info("found %d pyenv environment(s)", len(envs))
        return True

    def report(self, reporter: Reporter) -> None:
        if self.manager is not None:
            reporter.report_environment_manager(self.manager)
        for env in self.environments.values():
            reporter.report_environment(env)


__all__ = [
    "PyEnv",
    "build_environment",
    "get_binary_from_known_paths",
    "get_home_pyenv_dir",
    "get_pure_python_environment",
    "get_pyenv_binary",
    "get_pyenv_dir",
    "get_virtual_env_environment",
    "list_pyenv_environments",
]
