"""Sphinx configuration for pyenv-locator documentation."""

from __future__ import annotations

from datetime import datetime, timezone

from pyenv_locator import __version__

name = "pyenv-locator"
version = ".".join(__version__.split(".")[:2])
release = __version__
copyright = f"2026-{datetime.now(tz=timezone.utc).year}, {name} contributors"  # noqa: A001

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_autodoc_typehints",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

source_suffix = ".rst"
exclude_patterns = ["_build"]

main_doc = "index"
always_document_param_types = True
project = name

html_theme = "furo"
html_title = project
html_show_sourcelink = False
