from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from pyenv_locator import _host, _pyenv, _utils

if TYPE_CHECKING:
    from collections.abc import Callable


class FakeHost:
    def __init__(
        self,
        env: dict[str, str] | None = None,
        home: Path | None = None,
        known: list[Path] | None = None,
    ) -> None:
        self.env = env or {}
        self.home = home
        self.known = known or []

    def get_env_var(self, name: str) -> str | None:
        return self.env.get(name)

    def get_user_home(self) -> Path | None:
        return self.home

    def get_known_global_search_locations(self) -> list[Path]:
        return self.known


@pytest.fixture(autouse=True)
def _posix_layout(monkeypatch: pytest.MonkeyPatch) -> None:
    for module in (_host, _pyenv, _utils):
        monkeypatch.setattr(module, "IS_WIN", False)


@pytest.fixture
def pyenv_root(tmp_path: Path) -> Path:
    root = tmp_path / "pyenv"
    (root / "versions").mkdir(parents=True)
    return root


@pytest.fixture
def make_version(pyenv_root: Path) -> Callable[..., Path]:
    def _make(name: str, *, cfg: str | None = None) -> Path:
        folder = pyenv_root / "versions" / name
        (folder / "bin").mkdir(parents=True)
        (folder / "bin" / "python").touch()
        if cfg is not None:
            (folder / "pyvenv.cfg").write_text(cfg, encoding="utf-8")
        return folder

    return _make


@pytest.fixture
def fake_host() -> Callable[..., FakeHost]:
    return FakeHost

