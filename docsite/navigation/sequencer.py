"""Linear previous/next ordering over the page tree."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from docsite.tree.models import Page, PageTree


@dc.dataclass(frozen=True, slots=True)
class PageNeighbours:
    """Pages linked from the "previous" and "next" buttons of a page."""

    previous: Page | None = None
    next: Page | None = None


class Sequencer:
    """Flatten a :class:`~docsite.tree.models.PageTree` into reading order.

    The sequence is a pre-order walk (each page, then its children in listed
    order) restricted to pages whose ``navigable`` attribute is set. It is
    computed once from the arena, so it never depends on render order.
    """

    __slots__ = ("_positions", "_sequence")

    def __init__(self, tree: PageTree) -> None:
        self._sequence = tuple(page for page in tree if page.navigable)
        self._positions = {page.route: idx for idx, page in enumerate(self._sequence)}

    @property
    def sequence(self) -> tuple[Page, ...]:
        """Return the navigable pages in reading order."""
        return self._sequence

    def __len__(self) -> int:
        return len(self._sequence)

    def position(self, route: str) -> int | None:
        """Return the sequence index of ``route``, or ``None`` when absent."""
        return self._positions.get(route)

    def previous(self, route: str) -> Page | None:
        """Return the page before ``route`` in reading order, if any."""
        idx = self._positions.get(route)
        if idx is None or idx == 0:
            return None
        return self._sequence[idx - 1]

    def next(self, route: str) -> Page | None:
        """Return the page after ``route`` in reading order, if any."""
        idx = self._positions.get(route)
        if idx is None or idx + 1 >= len(self._sequence):
            return None
        return self._sequence[idx + 1]

    def neighbours(self, route: str) -> PageNeighbours:
        """Return both neighbours of ``route``; unknown routes have none."""
        return PageNeighbours(previous=self.previous(route), next=self.next(route))


__all__ = ["PageNeighbours", "Sequencer"]
