"""Utility helpers shared by the docsite configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from docsite.tree.models import TranslationStatus, UnclassifiedTranslationStatusError

from .models import CategoryConfig, LinkConfig, SiteConfigError, ThemeConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_list(value: object | None, *, field: str) -> list[str]:
    """Normalize a scalar or list of strings, rejecting other shapes."""
    match value:
        case None:
            return []
        case str() as text:
            return [text] if text.strip() else []
        case list() as items:
            return [str(item).strip() for item in items if str(item).strip()]
        case _:
            msg = f"'{field}' must be a string or a list of strings."
            raise SiteConfigError(msg)


def _resolve_path(value: object, base_dir: Path) -> Path:
    """Return ``value`` as a path, anchored at ``base_dir`` when relative."""
    path = Path(str(value))
    return path if path.is_absolute() else base_dir / path


def _resolve_source(value: object, base_dir: Path) -> str:
    """Return a URL unchanged or a local snapshot path anchored at ``base_dir``."""
    text = str(value).strip()
    if text.startswith(("http://", "https://")):
        return text
    return str(_resolve_path(text, base_dir))


def _parse_status(value: object | None) -> TranslationStatus | None:
    """Parse an optional translation status, surfacing config errors."""
    if value is None:
        return None
    try:
        return TranslationStatus.parse(value)
    except UnclassifiedTranslationStatusError as exc:
        msg = f"Invalid 'default_translation_status': {exc}"
        raise SiteConfigError(msg) from exc


def _parse_workers(value: object | None) -> int | None:
    """Return a positive worker count or None for the executor default."""
    if value is None:
        return None
    match value:
        case bool():
            pass
        case int() as count if count > 0:
            return count
        case _:
            pass
    msg = f"'workers' must be a positive integer, got {value!r}."
    raise SiteConfigError(msg)


def _build_theme_config(payload: typ.Mapping[str, typ.Any] | None) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    if not payload:
        return base
    return ThemeConfig(
        pygments_style=payload.get("pygments_style", base.pygments_style),
        theme_color=payload.get("theme_color", base.theme_color),
        stylesheets=(
            _string_list(payload["stylesheets"], field="theme.stylesheets")
            if "stylesheets" in payload
            else base.stylesheets
        ),
        scripts=_string_list(payload.get("scripts"), field="theme.scripts"),
        favicon=_optional_str(payload.get("favicon", base.favicon)),
    )


def _build_links(
    entries: list[typ.Mapping[str, object]] | None, *, section: str
) -> list[LinkConfig]:
    """Build header or footer link configurations."""
    links: list[LinkConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case None:
            return links
        case _:
            msg = f"'{section}' must be a list of links."
            raise SiteConfigError(msg)
    for entry in iterable:
        match entry:
            case {"label": label, "href": href, **rest} if label and href:
                links.append(
                    LinkConfig(
                        label=str(label),
                        href=str(href),
                        icon=_optional_str(rest.get("icon")),
                    )
                )
            case _:
                msg = f"Entries in '{section}' require 'label' and 'href'."
                raise SiteConfigError(msg)
    return links


def _build_categories(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[CategoryConfig]:
    """Build root listing page category cards."""
    cards: list[CategoryConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case None:
            return cards
        case _:
            msg = "'categories' must be a list of cards."
            raise SiteConfigError(msg)
    for entry in iterable:
        match entry:
            case {"route": str() as route, "title": title, **rest} if title:
                pass
            case _:
                msg = "Category cards require a 'route' and a 'title'."
                raise SiteConfigError(msg)
        cards.append(
            CategoryConfig(
                route=route,
                title=str(title),
                description=str(rest.get("description", "") or ""),
                icon=_optional_str(rest.get("icon")),
            )
        )
    return cards


def _build_messages(payload: object | None) -> dict[str, str]:
    """Return interface string overrides as a flat ``str -> str`` mapping."""
    match payload:
        case None:
            return {}
        case dict() as data:
            return {str(key): str(value) for key, value in data.items()}
        case _:
            msg = "'messages' must be a mapping of message keys to text."
            raise SiteConfigError(msg)


__all__ = [
    "_build_categories",
    "_build_links",
    "_build_messages",
    "_build_theme_config",
    "_optional_str",
    "_parse_status",
    "_parse_workers",
    "_resolve_path",
    "_resolve_source",
    "_string_list",
]
