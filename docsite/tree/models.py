"""Immutable page-tree model shared by the navigation and rendering layers.

The tree is stored as an arena: :class:`PageTree` keeps every :class:`Page`
in a flat tuple (in pre-order) together with parent and child indices and a
route index. Pages themselves never reference each other, which keeps them
hashable, frozen, and safe to share across render threads.

Trees are only created through :class:`PageTreeBuilder`, which enforces the
structural invariants (single root, existing parents, unique absolute
routes) as pages are added.

Examples
--------
>>> builder = PageTreeBuilder()
>>> root = builder.add(Page(route="/docs/", title="Overview"))
>>> _ = builder.add(Page(route="/docs/tutorial/", title="Tutorial"), parent=root)
>>> tree = builder.build()
>>> [page.route for page in tree]
['/docs/', '/docs/tutorial/']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import typing as typ


class DocsiteError(Exception):
    """Base class for all docsite failures."""


class TreeStructureError(DocsiteError, ValueError):
    """Raised when the page tree violates a structural invariant."""


class DuplicateRouteError(TreeStructureError):
    """Raised when two pages in the tree share a route or its output location."""

    def __init__(self, route: str) -> None:
        self.route = route
        super().__init__(f"Duplicate route '{route}' in page tree.")


class PageNotFoundError(DocsiteError, LookupError):
    """Raised when a route is looked up that is not part of the tree."""

    def __init__(self, route: str) -> None:
        self.route = route
        super().__init__(f"No page with route '{route}' in page tree.")


class UnclassifiedTranslationStatusError(DocsiteError, ValueError):
    """Raised when page metadata carries no recognizable translation status."""

    def __init__(self, value: object, route: str | None = None) -> None:
        self.value = value
        self.route = route
        where = f" for page '{route}'" if route else ""
        super().__init__(f"Unrecognized translation status {value!r}{where}.")


class TranslationStatus(enum.StrEnum):
    """Translation completeness of a page relative to the upstream docs.

    ``COMMUNITY`` marks content that does not exist upstream at all and is
    never a degree of translation.
    """

    TRANSLATED = "translated"
    PARTIALLY_TRANSLATED = "partially_translated"
    UNTRANSLATED = "untranslated"
    COMMUNITY = "community"

    @classmethod
    def parse(cls, value: object, *, route: str | None = None) -> TranslationStatus:
        """Return the status named by ``value``.

        Matching ignores case and treats ``-`` and ``_`` alike, so
        ``"Partially-Translated"`` is accepted.

        Raises
        ------
        UnclassifiedTranslationStatusError
            If ``value`` is not one of the four known statuses.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        raise UnclassifiedTranslationStatusError(value, route)


@dc.dataclass(frozen=True, slots=True)
class OutlineItem:
    """Heading anchor listed in a page's table of contents."""

    id: str
    name: str
    level: int = 1


@dc.dataclass(frozen=True, slots=True)
class StrParam:
    """Accepted string value for a parameter, with its description."""

    string: str
    details: str = ""


@dc.dataclass(frozen=True, slots=True)
class Param:
    """Documentation for a single function parameter."""

    name: str
    details: str = ""
    example: str | None = None
    types: tuple[str, ...] = ()
    strings: tuple[StrParam, ...] = ()
    default: str | None = None
    positional: bool = False
    named: bool = False
    required: bool = False
    variadic: bool = False
    settable: bool = False


@dc.dataclass(frozen=True, slots=True)
class Func:
    """Documentation for a function or method definition."""

    name: str
    title: str = ""
    oneliner: str = ""
    details: str = ""
    example: str | None = None
    element: bool = False
    contextual: bool = False
    params: tuple[Param, ...] = ()
    returns: tuple[str, ...] = ()
    scope: tuple[Func, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class HtmlBody:
    """Pre-rendered HTML content page."""

    content: str


@dc.dataclass(frozen=True, slots=True)
class TypeBody:
    """Type documentation page with optional constructor and definitions."""

    name: str
    title: str = ""
    oneliner: str = ""
    details: str = ""
    constructor: Func | None = None
    scope: tuple[Func, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class FuncBody:
    """Function documentation page."""

    func: Func


PageBody: typ.TypeAlias = HtmlBody | TypeBody | FuncBody


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A node of the documentation tree.

    Attributes
    ----------
    route : str
        Absolute URL path, unique across the tree.
    title : str
        Display title used in navigation and the document head.
    description : str
        Short description used for metadata and category cards.
    part : str or None
        Optional label grouping a run of sibling pages in the sidebar.
    outline : tuple[OutlineItem, ...]
        Headings listed in the table of contents, in document order.
    body : PageBody
        Exactly one content variant.
    translation_status : TranslationStatus
        Translation completeness relative to upstream.
    navigable : bool
        ``False`` removes the page from previous/next sequencing only.
    """

    route: str
    title: str
    description: str = ""
    part: str | None = None
    outline: tuple[OutlineItem, ...] = ()
    body: PageBody = dc.field(default_factory=lambda: HtmlBody(""))
    translation_status: TranslationStatus = TranslationStatus.TRANSLATED
    navigable: bool = True


def route_key(route: str) -> tuple[str, ...]:
    """Return the path segments that identify ``route``'s output location.

    Repeated and trailing slashes do not change the key, so ``/docs/a`` and
    ``/docs/a/`` collide.

    >>> route_key("/docs//a/")
    ('docs', 'a')
    >>> route_key("/")
    ()

    Raises
    ------
    TreeStructureError
        If ``route`` is not absolute or has ``.`` or ``..`` segments.
    """
    if not route.startswith("/"):
        msg = f"Page route {route!r} must be a non-empty absolute path."
        raise TreeStructureError(msg)
    segments = tuple(segment for segment in route.split("/") if segment)
    if any(segment in {".", ".."} for segment in segments):
        msg = f"Page route {route!r} must not contain '.' or '..' segments."
        raise TreeStructureError(msg)
    return segments


class PageTree:
    """Read-only arena of pages with parent/child indices.

    Pages are stored in pre-order, so iterating the tree (or reading
    :attr:`pages`) yields the deterministic traversal order: each node, then
    each of its children in listed order.
    """

    __slots__ = ("_children", "_index", "_pages", "_parents")

    def __init__(
        self,
        pages: tuple[Page, ...],
        children: tuple[tuple[int, ...], ...],
        parents: tuple[int | None, ...],
    ) -> None:
        self._pages = pages
        self._children = children
        self._parents = parents
        self._index = {page.route: idx for idx, page in enumerate(pages)}

    @property
    def root(self) -> Page:
        """Return the single root page."""
        return self._pages[0]

    @property
    def pages(self) -> tuple[Page, ...]:
        """Return all pages in pre-order."""
        return self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> cabc.Iterator[Page]:
        return iter(self._pages)

    def __contains__(self, route: object) -> bool:
        return route in self._index

    def index_of(self, route: str) -> int:
        """Return the arena index for ``route``.

        Raises
        ------
        PageNotFoundError
            If no page has the given route.
        """
        try:
            return self._index[route]
        except KeyError as exc:
            raise PageNotFoundError(route) from exc

    def get(self, route: str) -> Page | None:
        """Return the page for ``route`` or ``None``."""
        idx = self._index.get(route)
        return None if idx is None else self._pages[idx]

    def require(self, route: str) -> Page:
        """Return the page for ``route`` or raise :class:`PageNotFoundError`."""
        return self._pages[self.index_of(route)]

    def children(self, page: Page) -> tuple[Page, ...]:
        """Return the ordered children of ``page``."""
        idx = self.index_of(page.route)
        return tuple(self._pages[child] for child in self._children[idx])

    def parent(self, page: Page) -> Page | None:
        """Return the parent of ``page``, or ``None`` for the root."""
        parent_idx = self._parents[self.index_of(page.route)]
        return None if parent_idx is None else self._pages[parent_idx]


class PageTreeBuilder:
    """Accumulate pages and produce a validated :class:`PageTree`.

    Pages must be added parent-first. The builder returns an opaque integer
    handle for each page which is passed as ``parent`` for its children.
    """

    def __init__(self) -> None:
        self._pages: list[Page] = []
        self._children: list[list[int]] = []
        self._parents: list[int | None] = []
        self._route_keys: set[tuple[str, ...]] = set()

    def add(self, page: Page, *, parent: int | None = None) -> int:
        """Register ``page`` under ``parent`` and return its handle.

        Raises
        ------
        TreeStructureError
            If the route is not absolute or contains ``.`` or ``..`` segments, a
            second root is added, or ``parent`` is not a handle returned
            earlier.
        DuplicateRouteError
            If another page already uses the route, or a route that only
            differs from it by repeated or trailing slashes.
        """
        key = route_key(page.route)
        if key in self._route_keys:
            raise DuplicateRouteError(page.route)
        if parent is None and self._pages:
            msg = f"Page '{page.route}' would be a second root; the tree has one root."
            raise TreeStructureError(msg)
        if parent is not None and not 0 <= parent < len(self._pages):
            msg = f"Page '{page.route}' references unknown parent handle {parent}."
            raise TreeStructureError(msg)

        idx = len(self._pages)
        self._pages.append(page)
        self._children.append([])
        self._parents.append(parent)
        self._route_keys.add(key)
        if parent is not None:
            self._children[parent].append(idx)
        return idx

    def build(self) -> PageTree:
        """Return the tree, re-indexed into pre-order.

        Raises
        ------
        TreeStructureError
            If no pages were added.
        """
        if not self._pages:
            msg = "Page tree is empty; a root page is required."
            raise TreeStructureError(msg)

        order: list[int] = []
        stack = [0]
        while stack:
            idx = stack.pop()
            order.append(idx)
            stack.extend(reversed(self._children[idx]))

        remap = {old: new for new, old in enumerate(order)}
        pages = tuple(self._pages[old] for old in order)
        children = tuple(
            tuple(remap[child] for child in self._children[old]) for old in order
        )
        parents = tuple(
            None if self._parents[old] is None else remap[self._parents[old]]
            for old in order
        )
        return PageTree(pages, children, parents)


__all__ = [
    "DocsiteError",
    "DuplicateRouteError",
    "Func",
    "FuncBody",
    "HtmlBody",
    "OutlineItem",
    "Page",
    "PageBody",
    "PageNotFoundError",
    "PageTree",
    "PageTreeBuilder",
    "Param",
    "StrParam",
    "TranslationStatus",
    "TreeStructureError",
    "TypeBody",
    "UnclassifiedTranslationStatusError",
    "route_key",
]
