"""Static documentation site generator with tree-derived navigation.

This package renders a documentation compiler's page tree snapshot into a
static multi-page site, deriving breadcrumbs, previous/next links, the sidebar
tree, and translation status banners from the tree. The CLI entry points are
used by ``docsite build`` in CI and locally.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docsite import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
