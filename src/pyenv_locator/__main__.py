"""Report pyenv environments of this machine as JSON-RPC notifications on stdout."""

from __future__ import annotations

import logging
import os
from logging import basicConfig, getLogger
from typing import TYPE_CHECKING, Final

from ._host import SystemHost
from ._pyenv import PyEnv
from ._reporter import JsonRpcReporter

if TYPE_CHECKING:
    from collections.abc import Mapping

_LOGGER: Final[logging.Logger] = getLogger(__name__)


def _log_level(env: Mapping[str, str]) -> int:
    """Map ``PYENV_LOCATOR_LOG_LEVEL`` to a logging level, ``WARNING`` when unset or unknown."""
    level = logging.getLevelName(env.get("PYENV_LOCATOR_LOG_LEVEL", "WARNING").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def _run(env: Mapping[str, str] | None = None) -> int:
    env = os.environ if env is None else env
    basicConfig(level=_log_level(env))
    locator = PyEnv(SystemHost(env))
    if not locator.gather():
        _LOGGER.info("no pyenv installation found")
    reporter = JsonRpcReporter()
    locator.report(reporter)
    reporter.exit()
    return 0


if __name__ == "__main__":
    raise SystemExit(_run())
