"""Join, apply, and strip the deployment base path on site routes.

Every URL emitted by the renderer passes through :func:`apply_base_path` so
the generated site can be served from a sub-directory (for example
``https://example.org/docs/``) without rewriting the page tree. The helpers
are pure and total: malformed input is normalized rather than rejected.

Examples
--------
>>> join_path("/base/", "/foo")
'/base/foo'
>>> join_path("/", "/foo")
'/foo'
>>> apply_base_path("/docs", "./image.png")
'./image.png'
>>> remove_base_path("/docs/", "/docs/foo/bar")
'/foo/bar'
"""

from __future__ import annotations


def join_path(base: str, path: str) -> str:
    """Join ``base`` and ``path`` with exactly one separating slash.

    Parameters
    ----------
    base : str
        Leading path segment; trailing slashes are collapsed. ``"/"`` is
        treated as the site root and never produces a doubled slash.
    path : str
        Trailing path segment; leading slashes are collapsed.

    Returns
    -------
    str
        The joined path. An empty ``path`` yields ``base`` with one trailing
        slash, and an empty ``base`` yields ``path`` with one leading slash.
    """
    base_clean = base if base == "/" else base.rstrip("/")
    path_clean = path.lstrip("/")
    if base_clean == "/":
        return f"/{path_clean}"
    return f"{base_clean}/{path_clean}"


def apply_base_path(base: str, path: str) -> str:
    """Prefix absolute in-site ``path`` values with ``base``.

    Relative paths (anything not starting with ``/``) point at co-located
    assets and are returned unchanged.
    """
    if not path.startswith("/"):
        return path
    return join_path(base, path)


def remove_base_path(base: str, route: str) -> str:
    """Strip a leading ``base`` from ``route``.

    The match is made on whole path segments, so ``/docs`` is removed from
    ``/docs/foo`` but not from ``/docsearch``. A ``base`` of ``"/"`` or
    ``""`` leaves ``route`` untouched, as does a route outside ``base``.
    """
    trimmed = base.rstrip("/")
    if not trimmed:
        return route
    if route in (trimmed, f"{trimmed}/"):
        return "/"
    if route.startswith(f"{trimmed}/"):
        return route[len(trimmed) :]
    return route


def normalize_base_path(value: str | None) -> str:
    """Return ``value`` with one leading and one trailing slash.

    >>> normalize_base_path("docs")
    '/docs/'
    >>> normalize_base_path("")
    '/'
    """
    stripped = (value or "").strip().strip("/")
    if not stripped:
        return "/"
    return f"/{stripped}/"


__all__ = [
    "apply_base_path",
    "join_path",
    "normalize_base_path",
    "remove_base_path",
]
