"""Render every page of a documentation tree to static HTML files.

:class:`SiteBuilder` is the orchestration layer behind ``docsite build``. It
takes a resolved :class:`~docsite.config.SiteConfig` and an immutable
:class:`~docsite.tree.models.PageTree`, fans the page renders out over a
thread pool, and writes one ``index.html`` per route under the output
directory.

Page renders share no mutable state, so they run concurrently without locks.
A :class:`~docsite.tree.models.PageNotFoundError` only aborts the page that
raised it: the failure is logged with its route and collected in the
returned :class:`BuildReport`. Any other exception aborts the build.

Example
-------
>>> from pathlib import Path
>>> from docsite.config import load_site_config
>>> from docsite.builder import SiteBuilder, load_tree_for
>>> config = load_site_config(Path("docsite.yaml"))  # doctest: +SKIP
>>> report = SiteBuilder(config, load_tree_for(config)).run()  # doctest: +SKIP
>>> report.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ._constants import OUTPUT_FILENAME
from .renderer import PageRenderer
from .tree import load_page_tree, load_translation_statuses
from .tree.models import PageNotFoundError, route_key

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .tree.models import PageTree

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class PageFailure:
    """A page whose render was aborted."""

    route: str
    reason: str


@dc.dataclass(slots=True)
class BuildReport:
    """Outcome of a build: written files in tree order plus failed routes."""

    written: list[Path] = dc.field(default_factory=list)
    failures: list[PageFailure] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when every requested page was written."""
        return not self.failures


def load_tree_for(config: SiteConfig) -> PageTree:
    """Load the page tree and translation statuses named by ``config``."""
    overrides = (
        load_translation_statuses(config.translation_status_path)
        if config.translation_status_path
        else None
    )
    return load_page_tree(
        config.tree_source,
        status_overrides=overrides,
        default_status=config.default_translation_status,
    )


def output_path_for(output_dir: Path, route: str) -> Path:
    """Return the file that holds the rendered page for ``route``.

    The path always lies inside ``output_dir``; routes with ``.`` or ``..``
    segments raise :class:`~docsite.tree.models.TreeStructureError`.

    >>> output_path_for(Path("public"), "/docs/tutorial/").as_posix()
    'public/docs/tutorial/index.html'
    >>> output_path_for(Path("public"), "/").as_posix()
    'public/index.html'
    """
    return output_dir.joinpath(*route_key(route), OUTPUT_FILENAME)


class SiteBuilder:
    """Render pages of a tree concurrently and write them to disk."""

    def __init__(
        self,
        config: SiteConfig,
        tree: PageTree,
        *,
        renderer: PageRenderer | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : SiteConfig
            Resolved site configuration.
        tree : PageTree
            Immutable page tree to render.
        renderer : PageRenderer, optional
            Pre-built renderer; one is created from ``config`` when omitted.
        output_dir : Path, optional
            Override for the configured output directory.
        """
        self.config = config
        self.tree = tree
        self.renderer = renderer or PageRenderer(config, tree)
        self.output_dir = output_dir or config.output_dir

    def run(
        self,
        routes: cabc.Iterable[str] | None = None,
        *,
        workers: int | None = None,
    ) -> BuildReport:
        """Render ``routes`` (default: every page) and write the HTML files.

        Parameters
        ----------
        routes : Iterable[str], optional
            Subset of routes to render. Unknown routes are reported as
            failures rather than silently skipped.
        workers : int, optional
            Thread pool size; defaults to ``config.workers`` and then to the
            executor's own default.

        Returns
        -------
        BuildReport
            Written paths in tree order and the routes that failed.
        """
        targets = list(routes) if routes is not None else [p.route for p in self.tree]
        max_workers = workers or self.config.workers
        self.output_dir.mkdir(parents=True, exist_ok=True)

        report = BuildReport()
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(executor.map(self._build_page, targets))
        for route, outcome in zip(targets, outcomes, strict=True):
            match outcome:
                case Path() as path:
                    report.written.append(path)
                case PageFailure() as failure:
                    report.failures.append(failure)
                case _:  # pragma: no cover - _build_page returns one of the above
                    msg = f"Unexpected build outcome for '{route}': {outcome!r}"
                    raise TypeError(msg)
        logger.info(
            "Rendered %d pages (%d failed) into %s",
            len(report.written),
            len(report.failures),
            self.output_dir,
        )
        return report

    def _build_page(self, route: str) -> Path | PageFailure:
        """Render and write one page, converting lookup failures to reports."""
        try:
            html = self.renderer.render(route)
        except PageNotFoundError as exc:
            logger.warning("Skipping page '%s': %s", exc.route, exc)
            return PageFailure(route=route, reason=str(exc))
        output_path = output_path_for(self.output_dir, route)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        logger.debug("Wrote %s for %s", output_path, route)
        return output_path


__all__ = [
    "BuildReport",
    "PageFailure",
    "SiteBuilder",
    "load_tree_for",
    "output_path_for",
]
