"""The contract every environment locator implements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ._models import PythonEnv
    from ._reporter import Reporter


@runtime_checkable
class Locator(Protocol):
    """A discovery strategy for one kind of Python installation."""

    def is_known(self, python_executable: Path) -> bool:
        """Whether *python_executable* was already found by this locator."""
        ...

    def track_if_compatible(self, env: PythonEnv) -> bool:
        """Claim *env* if this locator owns it, returning ``True`` when it did."""
        ...

    def gather(self) -> bool:
        """Run the bulk discovery; ``False`` when nothing could be searched."""
        ...

    def report(self, reporter: Reporter) -> None:
        """Send everything found so far to *reporter*."""
        ...


__all__ = [
    "Locator",
]
