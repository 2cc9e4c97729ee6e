"""Shared dataclasses passed from the page renderer to the templates."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from docsite.navigation.breadcrumbs import Breadcrumb
    from docsite.translation import StatusBanner, TranslationProgress
    from docsite.tree.models import OutlineItem, Page


@dc.dataclass(frozen=True, slots=True)
class PageLink:
    """Resolved link to another page (previous/next buttons)."""

    title: str
    href: str


@dc.dataclass(frozen=True, slots=True)
class NavEntry:
    """Sidebar node mirroring a page of the tree.

    Attributes
    ----------
    title : str
        Label shown in the sidebar.
    route : str
        Page route, compared against the current route and its ancestors.
    href : str
        Route with the base path applied.
    part_heading : str or None
        Part label to print before this entry; set on the first of a run of
        siblings sharing a ``part``.
    children : tuple[NavEntry, ...]
        Child entries in tree order.
    """

    title: str
    route: str
    href: str
    part_heading: str | None
    children: tuple[NavEntry, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class CategoryCard:
    """Card shown on the root listing page."""

    title: str
    description: str
    href: str
    icon: str | None = None


@dc.dataclass(slots=True)
class PageContext:
    """Navigation state and chrome shared by every body template.

    Attributes
    ----------
    page : Page
        Page being rendered.
    html_title : str
        Document ``<title>`` text.
    canonical_url : str or None
        Absolute URL of the page when ``site_url`` is configured.
    breadcrumbs : list[Breadcrumb]
        Root-to-page chain; the last entry is the current page.
    previous, next : PageLink or None
        Reading-order neighbours; always ``None`` on the root listing page.
    banner : StatusBanner
        Translation status banner.
    sidebar : NavEntry
        Sidebar tree rooted at the tree root.
    active_routes : frozenset[str]
        Routes of the current page and its ancestors, expanded in the sidebar.
    toc : tuple[OutlineItem, ...]
        Table of contents entries.
    is_root : bool
        Whether the page is the root listing page.
    categories : list[CategoryCard]
        Cards for the root listing page.
    progress : TranslationProgress or None
        Site translation progress, shown on the root listing page.
    upstream_url : str or None
        Link to the original article for pages that exist upstream.
    """

    page: Page
    html_title: str
    canonical_url: str | None
    breadcrumbs: list[Breadcrumb]
    previous: PageLink | None
    next: PageLink | None
    banner: StatusBanner
    sidebar: NavEntry
    active_routes: frozenset[str]
    toc: tuple[OutlineItem, ...]
    is_root: bool
    categories: list[CategoryCard] = dc.field(default_factory=list)
    progress: TranslationProgress | None = None
    upstream_url: str | None = None


__all__ = ["CategoryCard", "NavEntry", "PageContext", "PageLink"]
