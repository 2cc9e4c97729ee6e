"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from docsite.paths import normalize_base_path

from .helpers import (
    _build_categories,
    _build_links,
    _build_messages,
    _build_theme_config,
    _optional_str,
    _parse_status,
    _parse_workers,
    _resolve_path,
    _resolve_source,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the documentation site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``docsite.yaml``). Relative paths inside the file are resolved
        against its directory.

    Returns
    -------
    SiteConfig
        Parsed site configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid (for example,
        no ``build.tree`` snapshot is configured).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docsite.config import load_site_config
    >>> config = load_site_config(Path("docsite.yaml"))  # doctest: +SKIP
    >>> config.output_dir  # doctest: +SKIP
    PosixPath('public')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent

    site = _section(raw, "site")
    build = _section(raw, "build")

    name = _optional_str(site.get("name"))
    if not name:
        msg = "Site configuration requires 'site.name'."
        raise SiteConfigError(msg)
    tree = build.get("tree")
    if not tree:
        msg = "Site configuration requires 'build.tree' (snapshot path or URL)."
        raise SiteConfigError(msg)

    status_path = build.get("translation_status")

    return SiteConfig(
        name=name,
        tree_source=_resolve_source(tree, base_dir),
        lang=str(site.get("lang", "en")),
        site_url=_optional_str(site.get("site_url")),
        base_path=normalize_base_path(site.get("base_path")),
        upstream_docs_url=_optional_str(site.get("upstream_docs_url")),
        notice=_optional_str(site.get("notice")),
        translation_status_path=(
            _resolve_path(status_path, base_dir) if status_path else None
        ),
        default_translation_status=_parse_status(
            build.get("default_translation_status")
        ),
        output_dir=_resolve_path(build.get("output_dir", "public"), base_dir),
        workers=_parse_workers(build.get("workers")),
        theme=_build_theme_config(_section(raw, "theme")),
        header_links=_build_links(raw.get("header_links"), section="header_links"),
        footer_links=_build_links(raw.get("footer_links"), section="footer_links"),
        categories=_build_categories(raw.get("categories")),
        messages=_build_messages(raw.get("messages")),
    )


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> dict[str, typ.Any]:
    """Return the mapping stored under ``key`` (empty when absent)."""
    match raw.get(key):
        case None:
            return {}
        case dict() as data:
            return data
        case _:
            msg = f"'{key}' must be a mapping."
            raise SiteConfigError(msg)


__all__ = ["load_site_config"]
