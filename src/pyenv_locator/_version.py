"""Recognize the pyenv version folder names that hold a bare interpreter install."""

from __future__ import annotations

import re
from typing import Final

_RELEASE_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?P<version>\d+\.\d+\.\d+)   # stable release, e.g. 3.10.10
    \Z
    """,
    re.VERBOSE,
)
_DEV_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?P<version>\d+\.\d+-dev)    # development build, e.g. 3.10-dev
    \Z
    """,
    re.VERBOSE,
)
_PRE_RELEASE_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?P<version>
        \d+\.\d+.\d+             # major.minor.micro
        \w\d+                    # release level and serial, e.g. a3 or b1
    )
    """,
    re.VERBOSE,
)
VERSION_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (_RELEASE_RE, _DEV_RE, _PRE_RELEASE_RE)


def get_pyenv_version(folder_name: str) -> str | None:
    """
    Extract the Python version a pyenv ``versions/<folder_name>`` directory was installed as.

    :param folder_name: the name of the folder under ``versions``
    :return: the version string, or ``None`` when the folder is not a plain interpreter install (e.g. a virtualenv)
    """
    for pattern in VERSION_PATTERNS:
        if match := pattern.match(folder_name):
            return match["version"]
    return None


__all__ = [
    "VERSION_PATTERNS",
    "get_pyenv_version",
]
