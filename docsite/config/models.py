"""Typed dataclasses describing docsite configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from docsite.tree.models import TranslationStatus  # noqa: TC001 - runtime field type


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ThemeConfig:
    """Visual theming applied to generated pages."""

    pygments_style: str = "friendly"
    theme_color: str = "#239dad"
    stylesheets: list[str] = dc.field(default_factory=lambda: ["/styles/docs.css"])
    scripts: list[str] = dc.field(default_factory=list)
    favicon: str | None = "/assets/favicon.ico"


@dc.dataclass(slots=True)
class LinkConfig:
    """Header or footer hyperlink."""

    label: str
    href: str
    icon: str | None = None


@dc.dataclass(slots=True)
class CategoryConfig:
    """Card shown on the root listing page."""

    route: str
    title: str
    description: str = ""
    icon: str | None = None


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved site definition sourced from YAML config.

    Attributes
    ----------
    name : str
        Site name appended to page titles.
    tree_source : str
        Path or URL of the page tree snapshot.
    base_path : str
        Deployment prefix applied to every absolute in-site URL, normalized
        to a leading and trailing slash.
    output_dir : Path
        Directory receiving one ``index.html`` per page.
    """

    name: str
    tree_source: str
    lang: str = "en"
    site_url: str | None = None
    base_path: str = "/"
    upstream_docs_url: str | None = None
    notice: str | None = None
    translation_status_path: Path | None = None
    default_translation_status: TranslationStatus | None = None
    output_dir: Path = Path("public")
    workers: int | None = None
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    header_links: list[LinkConfig] = dc.field(default_factory=list)
    footer_links: list[LinkConfig] = dc.field(default_factory=list)
    categories: list[CategoryConfig] = dc.field(default_factory=list)
    messages: dict[str, str] = dc.field(default_factory=dict)


__all__ = [
    "CategoryConfig",
    "LinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
]
