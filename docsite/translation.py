"""Translation status banners and site-wide translation progress.

:class:`TranslationStatusClassifier` maps a page's stored status onto the
banner shown above its content (label, message, and colour tone). The mapping
is exhaustive over :class:`~docsite.tree.models.TranslationStatus`; there is
no fallback status.

:class:`TranslationProgress` summarizes the tree for the root listing page
and the ``docsite status`` command.

Examples
--------
>>> from docsite.tree.models import Page, TranslationStatus
>>> classifier = TranslationStatusClassifier()
>>> page = Page(route="/docs/", title="Docs",
...             translation_status=TranslationStatus.COMMUNITY)
>>> classifier.classify(page).tone
'cyan'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from ._constants import DEFAULT_MESSAGES
from .tree.models import TranslationStatus

if typ.TYPE_CHECKING:
    from .tree.models import Page, PageTree


@dc.dataclass(frozen=True, slots=True)
class StatusBanner:
    """Display configuration for a page's translation status."""

    status: TranslationStatus
    label: str
    message: str
    tone: str


class TranslationStatusClassifier:
    """Derive :class:`StatusBanner` values from page metadata."""

    def __init__(self, messages: cabc.Mapping[str, str] | None = None) -> None:
        self._messages = {**DEFAULT_MESSAGES, **(messages or {})}

    def classify(self, page: Page) -> StatusBanner:
        """Return the banner for ``page``.

        Raises
        ------
        UnclassifiedTranslationStatusError
            If the page carries a value outside the four known statuses.
        """
        status = TranslationStatus.parse(page.translation_status, route=page.route)
        return self.banner(status)

    def banner(self, status: TranslationStatus) -> StatusBanner:
        """Return the banner configuration for ``status``."""
        match status:
            case TranslationStatus.TRANSLATED:
                key, tone = "translated", "green"
            case TranslationStatus.PARTIALLY_TRANSLATED:
                key, tone = "partially_translated", "yellow"
            case TranslationStatus.UNTRANSLATED:
                key, tone = "untranslated", "red"
            case TranslationStatus.COMMUNITY:
                key, tone = "community", "cyan"
            case _:  # pragma: no cover - exhaustive over the enum
                typ.assert_never(status)
        return StatusBanner(
            status=status,
            label=self._messages[key],
            message=self._messages[f"{key}_message"],
            tone=tone,
        )


@dc.dataclass(frozen=True, slots=True)
class TranslationProgress:
    """Per-status page counts for a tree.

    Attributes
    ----------
    counts : dict[TranslationStatus, int]
        Number of pages for every status, including zero counts.
    """

    counts: dict[TranslationStatus, int]

    @classmethod
    def from_tree(cls, tree: PageTree) -> TranslationProgress:
        """Count the pages of ``tree`` by translation status."""
        counts = dict.fromkeys(TranslationStatus, 0)
        for page in tree:
            counts[page.translation_status] += 1
        return cls(counts=counts)

    @property
    def total(self) -> int:
        """Return the number of pages counted."""
        return sum(self.counts.values())

    @property
    def upstream_total(self) -> int:
        """Return the number of pages that exist in the upstream docs."""
        return self.total - self.counts[TranslationStatus.COMMUNITY]

    @property
    def rate(self) -> float:
        """Return the fraction of upstream pages that are fully translated."""
        if not self.upstream_total:
            return 0.0
        return self.counts[TranslationStatus.TRANSLATED] / self.upstream_total

    @property
    def percent(self) -> int:
        """Return :attr:`rate` as a whole percentage, rounded down."""
        return int(self.rate * 100)


__all__ = ["StatusBanner", "TranslationProgress", "TranslationStatusClassifier"]
