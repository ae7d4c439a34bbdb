"""Filesystem helpers shared by locators: interpreter lookup and ``pyvenv.cfg`` parsing."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ._host import IS_WIN

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
PYVENV_CONFIG_FILE: Final[str] = "pyvenv.cfg"
_VERSION_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    version \s* = \s*
    (?P<version>\d+\.\d+\.\d+)   # major.minor.micro
    $
    """,
    re.VERBOSE,
)
_VERSION_INFO_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    version_info \s* = \s*
    (?P<version>\d+\.\d+\.\d+.*?)   # major.minor.micro with optional release suffix
    \s*
    $
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class PyVenvCfg:
    """The parts of a virtual environment's ``pyvenv.cfg`` we care about."""

    path: Path
    version: str


def find_python_binary_path(env_path: Path) -> Path | None:
    """Return the interpreter inside *env_path*, looking at ``bin``, ``Scripts`` and the folder itself."""
    name = "python.exe" if IS_WIN else "python"
    for candidate in (env_path / "bin" / name, env_path / "Scripts" / name, env_path / name):
        try:
            if candidate.exists():
                return candidate
        except OSError:
            continue
    return None


def parse_pyvenv_cfg(env_path: Path) -> PyVenvCfg | None:
    cfg = env_path / PYVENV_CONFIG_FILE
    try:
        content = cfg.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    version_info = None
    for line in content.splitlines():
        line = line.strip()  # noqa: PLW2901
        if "version" not in line:
            continue
        if match := _VERSION_RE.match(line):
            return PyVenvCfg(cfg, match["version"])
        if version_info is None and (match := _VERSION_INFO_RE.match(line)):
            version_info = match["version"]
    if version_info is not None:
        return PyVenvCfg(cfg, version_info)
    _LOGGER.debug("no version declared in %s", cfg)
    return None


def find_and_parse_pyvenv_cfg(python_executable: Path) -> PyVenvCfg | None:
    """Find the ``pyvenv.cfg`` next to *python_executable* or one level above it (PEP 405 layouts)."""
    bin_dir = python_executable.parent
    for env_path in (bin_dir, bin_dir.parent):
        if (result := parse_pyvenv_cfg(env_path)) is not None:
            return result
    return None


__all__ = [
    "PYVENV_CONFIG_FILE",
    "PyVenvCfg",
    "find_and_parse_pyvenv_cfg",
    "find_python_binary_path",
    "parse_pyvenv_cfg",
]
