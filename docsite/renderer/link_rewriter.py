"""Apply the deployment base path to links embedded in content.

Two kinds of content carry links the templates do not build themselves:

* HTML fragments from the page tree snapshot (page bodies, function details
  and examples), rewritten by :func:`rewrite_fragment_links`;
* Markdown snippets from the site configuration (the notice banner), which
  pass through :class:`BasePathLinkExtension` while being converted.

Only absolute in-site links (``/reference/...``) are rewritten. Relative
links, fragments, protocol-relative and external URLs are left untouched.
"""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from docsite.paths import apply_base_path

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

URL_ATTRIBUTES = ("href", "src", "poster", "action")
LINKED_TAG_ATTRIBUTES = {"a": "href", "img": "src", "source": "src", "script": "src"}
FRAGMENT_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
    empty_attributes_are_booleans=True,
)


def rewrite_url(url: str | None, base_path: str) -> str | None:
    """Return ``url`` with ``base_path`` applied, or None when it must stay."""
    if not url or not url.startswith("/") or url.startswith("//"):
        return None
    return apply_base_path(base_path, url)


def rewrite_srcset(srcset: str, base_path: str) -> str | None:
    """Rewrite each candidate URL of a ``srcset`` value, keeping descriptors.

    >>> rewrite_srcset("/a.png 1x, /b.png 2x", "/site/")
    '/site/a.png 1x, /site/b.png 2x'
    >>> rewrite_srcset("https://cdn/a.png 2x", "/site/") is None
    True
    """
    changed = False
    candidates: list[str] = []
    for candidate in srcset.split(","):
        url, _, descriptor = candidate.strip().partition(" ")
        rewritten = rewrite_url(url, base_path)
        if rewritten is not None:
            changed = True
            url = rewritten
        candidates.append(f"{url} {descriptor.strip()}".rstrip())
    return ", ".join(candidates) if changed else None


def rewrite_fragment_links(html: str, base_path: str) -> str:
    """Apply ``base_path`` to absolute URLs in the attributes of ``html``.

    ``html`` is parsed with BeautifulSoup, so unquoted attribute values are
    handled and text that merely looks like markup (inside ``<pre>`` or
    ``<code>``) is never touched. Fragments without any rewritable URL are
    returned unchanged.

    >>> rewrite_fragment_links('<a href="/docs/x">x</a>', "/site/")
    '<a href="/site/docs/x">x</a>'
    >>> rewrite_fragment_links('<img src="./a.png">', "/site/")
    '<img src="./a.png">'
    """
    if base_path in ("", "/") or not html:
        return html

    soup = BeautifulSoup(html, "html.parser")
    changed = False
    for tag in soup.find_all(True):
        for attribute in URL_ATTRIBUTES:
            rewritten = rewrite_url(tag.get(attribute), base_path)
            if rewritten is not None:
                tag[attribute] = rewritten
                changed = True
        srcset = tag.get("srcset")
        if srcset:
            rewritten = rewrite_srcset(srcset, base_path)
            if rewritten is not None:
                tag["srcset"] = rewritten
                changed = True

    if not changed:
        return html
    return soup.decode(formatter=FRAGMENT_FORMATTER)


class BasePathLinkExtension(Extension):
    """Rewrite absolute links in converted Markdown to include the base path."""

    def __init__(self, base_path: str) -> None:
        self.base_path = base_path
        super().__init__()

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the base-path treeprocessor on the Markdown instance."""
        processor = BasePathTreeprocessor(md, self.base_path)
        md.treeprocessors.register(processor, "docsite_base_path_links", 15)


class BasePathTreeprocessor(Treeprocessor):
    """Prefix absolute ``href``/``src`` attributes with the base path."""

    def __init__(self, md: Markdown, base_path: str) -> None:
        super().__init__(md)
        self.base_path = base_path

    def run(self, root: Element) -> Element:
        """Rewrite absolute links in the parsed Markdown tree."""
        for element in root.iter():
            attribute = LINKED_TAG_ATTRIBUTES.get(element.tag)
            if attribute is None:
                continue
            rewritten = rewrite_url(element.get(attribute), self.base_path)
            if rewritten:
                element.set(attribute, rewritten)
        return root


__all__ = [
    "BasePathLinkExtension",
    "BasePathTreeprocessor",
    "rewrite_fragment_links",
    "rewrite_srcset",
    "rewrite_url",
]
