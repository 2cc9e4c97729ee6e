"""Cyclopts CLI entrypoint for building the documentation site.

The ``docsite`` console script defined here renders the page tree snapshot
into static HTML, validates a snapshot without rendering, and reports the
site's translation progress. Typical usage involves running
``docsite build`` locally or in CI after the documentation compiler has
produced a fresh snapshot.

Examples
--------
Build every page using ``docsite.yaml``:

>>> from docsite.cli import main
>>> main()  # doctest: +SKIP

Rebuild two pages into a custom directory under a sub-path deployment:

>>> from docsite.cli import app
>>> app(
...     ["build", "--route", "/docs/", "--route", "/docs/tutorial/",
...      "--output-dir", "dist", "--base-path", "/preview/"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import SiteBuilder, load_tree_for
from .config import load_site_config
from .navigation import Sequencer
from .paths import normalize_base_path
from .translation import TranslationProgress

DEFAULT_CONFIG = Path("docsite.yaml")

app = App(name="docsite", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Render every page of the documentation tree to static HTML.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    base_path: typ.Annotated[
        str | None,
        Parameter(help="Override the deployment base path", env_var="INPUT_BASE_PATH"),
    ] = None,
    route: typ.Annotated[
        list[str] | None,
        Parameter(help="Render only these routes (repeatable)"),
    ] = None,
    workers: typ.Annotated[
        int | None, Parameter(help="Number of render threads", env_var="INPUT_WORKERS")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Build the static site described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``docsite.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override the configured output directory.
    base_path : str or None, optional
        Override the configured deployment base path (for example
        ``/docs/``).
    route : list[str] or None, optional
        Routes to render; all pages are rendered when omitted.
    workers : int or None, optional
        Render thread count; defaults to the configured value.
    verbose : bool, optional
        Log debug output from the loader and builder.

    Raises
    ------
    SystemExit
        With status 1 when any page failed to render.
    """
    _configure_logging(verbose)
    site_config = load_site_config(config)
    if base_path is not None:
        site_config = dc.replace(site_config, base_path=normalize_base_path(base_path))
    tree = load_tree_for(site_config)

    builder = SiteBuilder(site_config, tree, output_dir=output_dir)
    report = builder.run(route, workers=workers)
    for path in report.written:
        print(f"wrote {_format_path(path)}")
    for failure in report.failures:
        print(f"failed {failure.route}: {failure.reason}")
    if not report.ok:
        raise SystemExit(1)


@app.command(help="Validate the page tree snapshot without rendering.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Load the tree named by ``config`` and report its size.

    Structural errors (duplicate routes, unknown body kinds, unclassified
    translation statuses) propagate and end the command with a traceback.
    """
    site_config = load_site_config(config)
    tree = load_tree_for(site_config)
    sequencer = Sequencer(tree)
    print(f"pages: {len(tree)}")
    print(f"sequenced: {len(sequencer)}")
    print(f"root: {tree.root.route}")


@app.command(help="Report translation progress for the page tree.")
def status(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print page counts per translation status and the overall rate."""
    site_config = load_site_config(config)
    progress = TranslationProgress.from_tree(load_tree_for(site_config))
    for translation_status, count in progress.counts.items():
        print(f"{translation_status.value}: {count}")
    print(f"rate: {progress.percent}%")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docsite`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
