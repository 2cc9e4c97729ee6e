"""Ancestor chains for breadcrumb navigation.

:class:`BreadcrumbResolver` walks the tree depth-first from the root keeping
the current path on a stack; when the requested route is reached the stack is
the breadcrumb chain. Routes are unique, so at most one chain exists, and an
unknown route raises :class:`~docsite.tree.models.PageNotFoundError` rather
than producing a partial chain.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from docsite.paths import apply_base_path
from docsite.tree.models import PageNotFoundError

if typ.TYPE_CHECKING:
    from docsite.tree.models import Page, PageTree


@dc.dataclass(frozen=True, slots=True)
class Breadcrumb:
    """A rendered breadcrumb entry.

    ``href`` is ``None`` for the current page, which renders as plain text.
    ``is_home`` marks the root page, shown as the home icon.
    """

    title: str
    route: str
    href: str | None
    is_current: bool
    is_home: bool = False


class BreadcrumbResolver:
    """Resolve root-to-page chains over a :class:`PageTree`."""

    __slots__ = ("_tree",)

    def __init__(self, tree: PageTree) -> None:
        self._tree = tree

    def resolve(self, route: str) -> tuple[Page, ...]:
        """Return the chain from the root to ``route``, both inclusive.

        Raises
        ------
        PageNotFoundError
            If ``route`` is not in the tree.
        """
        tree = self._tree
        path: list[Page] = []
        # Each frame is (page, depth); depth trims the path when backtracking.
        stack: list[tuple[Page, int]] = [(tree.root, 0)]
        while stack:
            page, depth = stack.pop()
            del path[depth:]
            path.append(page)
            if page.route == route:
                return tuple(path)
            stack.extend((child, depth + 1) for child in reversed(tree.children(page)))
        raise PageNotFoundError(route)

    def crumbs(self, route: str, base_path: str = "/") -> list[Breadcrumb]:
        """Return display-ready breadcrumbs for ``route``.

        Every entry except the last links to its page through the configured
        ``base_path``; the last entry is the current page and has no link.
        """
        chain = self.resolve(route)
        last = len(chain) - 1
        return [
            Breadcrumb(
                title=page.title,
                route=page.route,
                href=None if idx == last else apply_base_path(base_path, page.route),
                is_current=idx == last,
                is_home=idx == 0,
            )
            for idx, page in enumerate(chain)
        ]


__all__ = ["Breadcrumb", "BreadcrumbResolver"]
