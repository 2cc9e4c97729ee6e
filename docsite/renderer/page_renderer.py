"""Compose full HTML documents from the page tree and its navigation state.

:class:`PageRenderer` owns the Jinja environment and the navigation helpers
derived from a :class:`~docsite.tree.models.PageTree`. For each route it
builds a :class:`~docsite.renderer.models.PageContext` (breadcrumbs,
previous/next links, translation banner, sidebar, table of contents) and
renders it with the template matching the page's body variant. All three body
templates extend ``base.jinja`` and receive the same context.

Every URL leaves the renderer through the ``url`` filter (base path applied to
absolute routes) or, for HTML fragments from the snapshot, through the
``fragment`` filter which rewrites embedded absolute links.

Example
-------
>>> from pathlib import Path
>>> from docsite.config import load_site_config
>>> from docsite.tree import load_page_tree
>>> config = load_site_config(Path("docsite.yaml"))  # doctest: +SKIP
>>> renderer = PageRenderer(config, load_page_tree(config.tree_source))  # doctest: +SKIP
>>> html = renderer.render("/docs/tutorial/")  # doctest: +SKIP
"""

from __future__ import annotations

import functools
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from docsite._constants import DEFAULT_MESSAGES
from docsite.navigation import BreadcrumbResolver, Sequencer
from docsite.paths import apply_base_path
from docsite.translation import TranslationProgress, TranslationStatusClassifier
from docsite.tree.models import FuncBody, HtmlBody, TranslationStatus, TypeBody

from .content import ContentRenderer
from .link_rewriter import BasePathLinkExtension, rewrite_fragment_links
from .models import CategoryCard, NavEntry, PageContext, PageLink

if typ.TYPE_CHECKING:
    from docsite.config import SiteConfig
    from docsite.tree.models import Func, Page, PageTree

HTML_TEMPLATE = "html_page.jinja"
TYPE_TEMPLATE = "type_page.jinja"
FUNC_TEMPLATE = "func_page.jinja"


class PageRenderer:
    """Render pages of a tree into themed HTML documents."""

    def __init__(
        self,
        config: SiteConfig,
        tree: PageTree,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer with configuration and template context.

        Parameters
        ----------
        config : SiteConfig
            Site configuration providing the base path, theme, and messages.
        tree : PageTree
            Immutable page tree; shared read-only by every render.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.config = config
        self.tree = tree
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.sequencer = Sequencer(tree)
        self.breadcrumbs = BreadcrumbResolver(tree)
        self.messages = {**DEFAULT_MESSAGES, **config.messages}
        self.classifier = TranslationStatusClassifier(self.messages)
        self.progress = TranslationProgress.from_tree(tree)
        self.content = ContentRenderer(
            config.theme.pygments_style,
            link_extension=BasePathLinkExtension(config.base_path),
        )
        self.notice_html = self.content.markdown(config.notice)
        self.sidebar = self._build_nav_entry(tree.root, None)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["url"] = functools.partial(apply_base_path, config.base_path)
        self.env.filters["fragment"] = self._fragment
        self.env.filters["signature"] = self._signature

    def url(self, path: str) -> str:
        """Return ``path`` with the configured base path applied."""
        return apply_base_path(self.config.base_path, path)

    def build_context(self, route: str) -> PageContext:
        """Derive the navigation state for the page at ``route``.

        Raises
        ------
        PageNotFoundError
            If ``route`` is not in the tree.
        """
        crumbs = self.breadcrumbs.crumbs(route, self.config.base_path)
        page = self.tree.require(route)
        is_root = route == self.tree.root.route
        neighbours = self.sequencer.neighbours(route)
        return PageContext(
            page=page,
            html_title=f"{page.title} – {self.config.name}",
            canonical_url=self._canonical_url(route),
            breadcrumbs=crumbs,
            previous=None if is_root else self._page_link(neighbours.previous),
            next=None if is_root else self._page_link(neighbours.next),
            banner=self.classifier.classify(page),
            sidebar=self.sidebar,
            active_routes=frozenset(crumb.route for crumb in crumbs),
            toc=page.outline,
            is_root=is_root,
            categories=self._categories() if is_root else [],
            progress=self.progress if is_root else None,
            upstream_url=self._upstream_url(page),
        )

    def render(self, route: str) -> str:
        """Render the page at ``route`` into a complete HTML document.

        Raises
        ------
        PageNotFoundError
            If ``route`` is not in the tree.
        """
        context = self.build_context(route)
        template = self.env.get_template(self.template_name(context.page))
        html = template.render(
            ctx=context,
            page=context.page,
            body=context.page.body,
            site=self.config,
            theme=self.config.theme,
            messages=self.messages,
            notice_html=Markup(self.notice_html),  # noqa: S704 - rendered from config
            pygments_css=Markup(self.content.stylesheet),  # noqa: S704 - pygments output
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    @staticmethod
    def template_name(page: Page) -> str:
        """Return the body template for the page's content variant."""
        body = page.body
        match body:
            case HtmlBody():
                return HTML_TEMPLATE
            case TypeBody():
                return TYPE_TEMPLATE
            case FuncBody():
                return FUNC_TEMPLATE
            case _:  # pragma: no cover - closed union
                typ.assert_never(body)

    def _fragment(self, html: str | None) -> Markup:
        """Mark a snapshot HTML fragment safe after rewriting its links."""
        return Markup(rewrite_fragment_links(html or "", self.config.base_path))  # noqa: S704

    def _signature(self, func: Func) -> Markup:
        return Markup(self.content.signature(func))  # noqa: S704

    def _page_link(self, page: Page | None) -> PageLink | None:
        if page is None:
            return None
        return PageLink(title=page.title, href=self.url(page.route))

    def _canonical_url(self, route: str) -> str | None:
        if not self.config.site_url:
            return None
        return f"{self.config.site_url.rstrip('/')}{self.url(route)}"

    def _upstream_url(self, page: Page) -> str | None:
        """Return the original article URL for pages that exist upstream."""
        upstream = self.config.upstream_docs_url
        if not upstream or page.translation_status is TranslationStatus.COMMUNITY:
            return None
        return f"{upstream.rstrip('/')}{page.route}"

    def _categories(self) -> list[CategoryCard]:
        """Return category cards from config, or from the root's children."""
        if self.config.categories:
            return [
                CategoryCard(
                    title=card.title,
                    description=card.description,
                    href=self.url(card.route),
                    icon=self.url(card.icon) if card.icon else None,
                )
                for card in self.config.categories
            ]
        return [
            CategoryCard(
                title=child.title,
                description=child.description,
                href=self.url(child.route),
            )
            for child in self.tree.children(self.tree.root)
        ]

    def _build_nav_entry(self, page: Page, part_heading: str | None) -> NavEntry:
        """Build the sidebar subtree rooted at ``page``."""
        children: list[NavEntry] = []
        previous_part: str | None = None
        for child in self.tree.children(page):
            heading = child.part if child.part and child.part != previous_part else None
            previous_part = child.part
            children.append(self._build_nav_entry(child, heading))
        return NavEntry(
            title=page.title,
            route=page.route,
            href=self.url(page.route),
            part_heading=part_heading,
            children=tuple(children),
        )


__all__ = ["FUNC_TEMPLATE", "HTML_TEMPLATE", "TYPE_TEMPLATE", "PageRenderer"]
