"""Load the external documentation compiler's JSON snapshot into a page tree.

The snapshot is produced by an upstream tool and is treated as immutable
input. This module only checks structure: required keys, the closed set of
body kinds, and the invariants enforced by
:class:`~docsite.tree.models.PageTreeBuilder`. Content correctness (HTML,
prose, examples) is not validated.

A snapshot may live on disk or behind an ``http(s)`` URL; remote snapshots
are downloaded with a retrying ``requests`` session.

Example
-------
>>> from docsite.tree.loader import load_page_tree
>>> tree = load_page_tree("build/docs.json")  # doctest: +SKIP
>>> tree.root.route  # doctest: +SKIP
'/docs/'
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import msgspec
import requests
from requests.adapters import HTTPAdapter
from ruamel.yaml import YAML
from urllib3.util.retry import Retry

from .models import (
    Func,
    FuncBody,
    HtmlBody,
    OutlineItem,
    Page,
    PageBody,
    PageTree,
    PageTreeBuilder,
    Param,
    StrParam,
    TranslationStatus,
    TreeStructureError,
    TypeBody,
    UnclassifiedTranslationStatusError,
)

logger = logging.getLogger(__name__)

Payload: typ.TypeAlias = typ.Mapping[str, typ.Any]


def load_page_tree(
    source: str | Path,
    *,
    status_overrides: typ.Mapping[str, TranslationStatus] | None = None,
    default_status: TranslationStatus | None = None,
) -> PageTree:
    """Read a snapshot from ``source`` and build the page tree.

    Parameters
    ----------
    source : str or Path
        Filesystem path or ``http(s)`` URL of the JSON snapshot.
    status_overrides : Mapping[str, TranslationStatus], optional
        Route to status mapping that takes precedence over statuses stored in
        the snapshot.
    default_status : TranslationStatus, optional
        Status assigned to pages that carry none. Without it, a missing
        status is an error.

    Returns
    -------
    PageTree
        The validated, immutable tree.

    Raises
    ------
    FileNotFoundError
        If a local snapshot does not exist.
    TreeStructureError
        If the snapshot cannot be decoded or violates a structural invariant.
    UnclassifiedTranslationStatusError
        If a page has an unknown status, or none and no default applies.
    """
    raw = fetch_snapshot(source)
    try:
        payload = msgspec.json.decode(raw)
    except msgspec.DecodeError as exc:
        msg = f"Page tree snapshot '{source}' is not valid JSON: {exc}"
        raise TreeStructureError(msg) from exc
    tree = parse_page_tree(
        payload, status_overrides=status_overrides, default_status=default_status
    )
    logger.debug("Loaded %d pages from %s", len(tree), source)
    return tree


def fetch_snapshot(source: str | Path) -> bytes:
    """Return the raw snapshot bytes from a local path or remote URL."""
    if isinstance(source, str) and source.startswith(("http://", "https://")):
        return _download(source)
    path = Path(source)
    if not path.exists():
        msg = f"Page tree snapshot '{path}' not found."
        raise FileNotFoundError(msg)
    return path.read_bytes()


def _download(url: str) -> bytes:
    """Download ``url`` with retries on transient server errors."""
    session = requests.Session()
    retry = Retry(
        total=5,
        read=5,
        connect=3,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    try:
        resp = session.get(url, timeout=30)
        resp.raise_for_status()
        return resp.content
    finally:
        session.close()


def load_translation_statuses(path: Path) -> dict[str, TranslationStatus]:
    """Load a ``route -> status`` mapping from a JSON or YAML file.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    TreeStructureError
        If the document is not a mapping.
    UnclassifiedTranslationStatusError
        If a value is not a known status.
    """
    if not path.exists():
        msg = f"Translation status file '{path}' not found."
        raise FileNotFoundError(msg)
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Translation status file '{path}' must contain a mapping."
        raise TreeStructureError(msg)
    return {
        str(route): TranslationStatus.parse(value, route=str(route))
        for route, value in loaded.items()
    }


def parse_page_tree(
    payload: object,
    *,
    status_overrides: typ.Mapping[str, TranslationStatus] | None = None,
    default_status: TranslationStatus | None = None,
) -> PageTree:
    """Build a :class:`PageTree` from decoded snapshot data.

    ``payload`` is either the root page mapping or a list holding exactly one
    root page mapping.
    """
    match payload:
        case dict():
            root = payload
        case [dict() as only]:
            root = only
        case list():
            msg = (
                "Page tree snapshot must have exactly one root page, "
                f"found {len(payload)}."
            )
            raise TreeStructureError(msg)
        case _:
            msg = "Page tree snapshot must be a page mapping or a one-item list."
            raise TreeStructureError(msg)

    overrides = dict(status_overrides or {})
    builder = PageTreeBuilder()
    stack: list[tuple[Payload, int | None]] = [(root, None)]
    while stack:
        node, parent = stack.pop()
        page = _build_page(node, overrides, default_status)
        handle = builder.add(page, parent=parent)
        children = node.get("children") or []
        if not isinstance(children, list):
            msg = f"Page '{page.route}' has a non-list 'children' value."
            raise TreeStructureError(msg)
        for child in reversed(children):
            if not isinstance(child, dict):
                msg = f"Page '{page.route}' has a child that is not a mapping."
                raise TreeStructureError(msg)
            stack.append((child, handle))

    tree = builder.build()
    unknown = sorted(route for route in overrides if route not in tree)
    if unknown:
        msg = f"Translation statuses reference unknown routes: {', '.join(unknown)}"
        raise TreeStructureError(msg)
    return tree


def _build_page(
    node: Payload,
    overrides: typ.Mapping[str, TranslationStatus],
    default_status: TranslationStatus | None,
) -> Page:
    route = node.get("route")
    if not isinstance(route, str) or not route:
        msg = f"Page is missing a 'route' string (title: {node.get('title')!r})."
        raise TreeStructureError(msg)
    title = node.get("title")
    if not isinstance(title, str):
        msg = f"Page '{route}' is missing a 'title' string."
        raise TreeStructureError(msg)

    return Page(
        route=route,
        title=title,
        description=node.get("description") or "",
        part=node.get("part") or None,
        outline=tuple(_flatten_outline(route, node.get("outline"))),
        body=_build_body(route, node.get("body")),
        translation_status=_resolve_status(node, route, overrides, default_status),
        navigable=bool(node.get("navigable", True)),
    )


def _resolve_status(
    node: Payload,
    route: str,
    overrides: typ.Mapping[str, TranslationStatus],
    default_status: TranslationStatus | None,
) -> TranslationStatus:
    if route in overrides:
        return overrides[route]
    value = node.get("translationStatus", node.get("translation_status"))
    if value is None:
        if default_status is None:
            raise UnclassifiedTranslationStatusError(None, route)
        return default_status
    return TranslationStatus.parse(value, route=route)


def _mappings(route: str, field: str, value: object) -> list[Payload]:
    """Return ``value`` as a list of mappings or raise for the page ``route``."""
    match value:
        case None:
            return []
        case list() as items if all(isinstance(item, dict) for item in items):
            return items
        case _:
            msg = f"Page '{route}' has a '{field}' value that is not a list of objects."
            raise TreeStructureError(msg)


def _strings(route: str, field: str, value: object) -> tuple[str, ...]:
    match value:
        case None:
            return ()
        case list() as items if all(isinstance(item, str) for item in items):
            return tuple(items)
        case _:
            msg = f"Page '{route}' has a '{field}' value that is not a list of strings."
            raise TreeStructureError(msg)


def _flatten_outline(
    route: str, items: object, level: int = 1
) -> typ.Iterator[OutlineItem]:
    """Yield outline entries depth-first, recording their nesting level."""
    for item in _mappings(route, "outline", items):
        raw_level = item.get("level", level)
        if isinstance(raw_level, bool) or not isinstance(raw_level, int):
            msg = f"Page '{route}' has outline level {raw_level!r}; expected an int."
            raise TreeStructureError(msg)
        yield OutlineItem(
            id=str(item.get("id", "")),
            name=str(item.get("name", "")),
            level=raw_level,
        )
        yield from _flatten_outline(route, item.get("children"), level + 1)


def _build_body(route: str, payload: object) -> PageBody:
    if not isinstance(payload, dict):
        msg = f"Page '{route}' is missing a 'body' mapping."
        raise TreeStructureError(msg)
    content = payload.get("content")
    match payload.get("kind"):
        case "html":
            return HtmlBody(content=content if isinstance(content, str) else "")
        case "type" if isinstance(content, dict):
            constructor = content.get("constructor")
            if constructor is not None and not isinstance(constructor, dict):
                msg = f"Page '{route}' has a 'constructor' that is not a mapping."
                raise TreeStructureError(msg)
            return TypeBody(
                name=content.get("name", ""),
                title=content.get("title", ""),
                oneliner=content.get("oneliner", ""),
                details=content.get("details", ""),
                constructor=_build_func(route, constructor) if constructor else None,
                scope=tuple(
                    _build_func(route, item)
                    for item in _mappings(route, "scope", content.get("scope"))
                ),
            )
        case "func" if isinstance(content, dict):
            return FuncBody(func=_build_func(route, content))
        case kind:
            msg = f"Page '{route}' has unsupported body kind {kind!r}."
            raise TreeStructureError(msg)


def _build_func(route: str, payload: Payload) -> Func:
    return Func(
        name=payload.get("name", ""),
        title=payload.get("title", ""),
        oneliner=payload.get("oneliner", ""),
        details=payload.get("details", ""),
        example=payload.get("example") or None,
        element=bool(payload.get("element", False)),
        contextual=bool(payload.get("contextual", False)),
        params=tuple(
            _build_param(route, item)
            for item in _mappings(route, "params", payload.get("params"))
        ),
        returns=_strings(route, "returns", payload.get("returns")),
        scope=tuple(
            _build_func(route, item)
            for item in _mappings(route, "scope", payload.get("scope"))
        ),
    )


def _build_param(route: str, payload: Payload) -> Param:
    return Param(
        name=payload.get("name", ""),
        details=payload.get("details", ""),
        example=payload.get("example") or None,
        types=_strings(route, "types", payload.get("types")),
        strings=tuple(
            StrParam(string=item.get("string", ""), details=item.get("details", ""))
            for item in _mappings(route, "strings", payload.get("strings"))
        ),
        default=payload.get("default") or None,
        positional=bool(payload.get("positional", False)),
        named=bool(payload.get("named", False)),
        required=bool(payload.get("required", False)),
        variadic=bool(payload.get("variadic", False)),
        settable=bool(payload.get("settable", False)),
    )


__all__ = [
    "fetch_snapshot",
    "load_page_tree",
    "load_translation_statuses",
    "parse_page_tree",
]
