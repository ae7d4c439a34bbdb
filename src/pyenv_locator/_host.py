"""Access to the host environment: variables, home directory and well known binary folders."""

from __future__ import annotations

import logging
import os
import sys
from collections import OrderedDict
from pathlib import Path
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
IS_WIN: Final[bool] = sys.platform == "win32"
_UNIX_SEARCH_LOCATIONS: Final[tuple[str, ...]] = (
    "/usr/bin",
    "/usr/local/bin",
    "/bin",
    "/home/bin",
    "/sbin",
    "/usr/sbin",
    "/usr/local/sbin",
    "/home/sbin",
    "/opt",
    "/opt/bin",
    "/opt/sbin",
    "/opt/homebrew/bin",
)


@runtime_checkable
class Host(Protocol):
    """Read-only view of the machine a locator runs on."""

    def get_env_var(self, name: str) -> str | None: ...

    def get_user_home(self) -> Path | None: ...

    def get_known_global_search_locations(self) -> list[Path]: ...


class SystemHost:
    """Host backed by the process environment (or an explicit mapping standing in for it)."""

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self.env = os.environ if env is None else env

    def get_env_var(self, name: str) -> str | None:
        return self.env.get(name) or None

    def get_user_home(self) -> Path | None:
        for key in ("USERPROFILE", "HOME") if IS_WIN else ("HOME",):
            if value := self.env.get(key):
                return Path(value)
        try:
            return Path.home()
        except RuntimeError:
            _LOGGER.debug("could not determine the user home directory")
            return None

    def get_known_global_search_locations(self) -> list[Path]:
        candidates = [] if IS_WIN else list(_UNIX_SEARCH_LOCATIONS)
        if path := self.env.get("PATH"):
            candidates.extend(entry for entry in path.split(os.pathsep) if entry)
        return [Path(entry) for entry in OrderedDict.fromkeys(candidates)]


__all__ = [
    "IS_WIN",
    "Host",
    "SystemHost",
]
