"""Utilities for composing and rendering documentation pages."""

from .content import ContentRenderer, format_signature
from .link_rewriter import BasePathLinkExtension, rewrite_fragment_links
from .models import CategoryCard, NavEntry, PageContext, PageLink
from .page_renderer import PageRenderer

__all__ = [
    "BasePathLinkExtension",
    "CategoryCard",
    "ContentRenderer",
    "NavEntry",
    "PageContext",
    "PageLink",
    "PageRenderer",
    "format_signature",
    "rewrite_fragment_links",
]
