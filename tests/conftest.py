"""Shared fixtures for docsite tests.

The fixtures describe one small documentation tree used throughout the suite::

    /docs/                      Overview (html, translated)
    ├── /docs/tutorial/         Tutorial (html, partially translated)
    └── /docs/reference/        Reference (html, untranslated)
        ├── /docs/reference/text/   text (func, translated, part "Foundations")
        └── /docs/reference/str/    str  (type, community, part "Foundations")

``snapshot_payload`` is the JSON-shaped snapshot, ``snapshot_path`` writes it
to disk, and ``site_config_path`` writes a matching ``docsite.yaml``.
"""

from __future__ import annotations

import json
import typing as typ

import pytest

from docsite.tree import PageTree, parse_page_tree

if typ.TYPE_CHECKING:
    from pathlib import Path


def _html_page(
    route: str,
    title: str,
    status: str,
    *,
    content: str = "",
    children: list[dict[str, typ.Any]] | None = None,
    **extra: typ.Any,
) -> dict[str, typ.Any]:
    return {
        "route": route,
        "title": title,
        "description": f"{title} description",
        "part": extra.pop("part", None),
        "outline": extra.pop("outline", []),
        "body": {"kind": "html", "content": content or f"<p>{title} body</p>"},
        "children": children or [],
        "translationStatus": status,
        **extra,
    }


@pytest.fixture
def snapshot_payload() -> dict[str, typ.Any]:
    """Return a JSON-compatible snapshot of the sample documentation tree."""
    text_func = {
        "name": "text",
        "title": "Text",
        "oneliner": "Customizes text.",
        "details": '<p>See <a href="/docs/reference/str/">str</a>.</p>',
        "example": "<pre>#text(fill: red)[Hi]</pre>",
        "element": True,
        "contextual": False,
        "params": [
            {
                "name": "font",
                "details": "<p>Font family.</p>",
                "types": ["str", "array"],
                "strings": [],
                "default": "<code>\"libertinus serif\"</code>",
                "positional": False,
                "named": True,
                "required": False,
                "variadic": False,
                "settable": True,
            },
            {
                "name": "body",
                "details": "<p>Content.</p>",
                "types": ["content"],
                "strings": [],
                "positional": True,
                "named": False,
                "required": True,
                "variadic": False,
                "settable": False,
            },
        ],
        "returns": ["content"],
        "scope": [],
    }
    str_type = {
        "name": "str",
        "title": "String",
        "oneliner": "A sequence of characters.",
        "details": "<p>Strings are immutable.</p>",
        "constructor": {
            "name": "str",
            "details": "<p>Converts a value.</p>",
            "params": [
                {
                    "name": "value",
                    "details": "<p>The value.</p>",
                    "types": ["int", "float"],
                    "positional": True,
                    "required": True,
                }
            ],
            "returns": ["str"],
        },
        "scope": [
            {
                "name": "len",
                "details": "<p>Length in bytes.</p>",
                "params": [],
                "returns": ["int"],
            }
        ],
    }
    reference = _html_page(
        "/docs/reference/",
        "Reference",
        "untranslated",
        children=[
            {
                "route": "/docs/reference/text/",
                "title": "Text",
                "description": "Text function",
                "part": "Foundations",
                "outline": [
                    {
                        "id": "parameters",
                        "name": "Parameters",
                        "children": [{"id": "font", "name": "font", "children": []}],
                    }
                ],
                "body": {"kind": "func", "content": text_func},
                "children": [],
                "translationStatus": "translated",
            },
            {
                "route": "/docs/reference/str/",
                "title": "String",
                "description": "String type",
                "part": "Foundations",
                "outline": [],
                "body": {"kind": "type", "content": str_type},
                "children": [],
                "translationStatus": "community",
            },
        ],
    )
    return _html_page(
        "/docs/",
        "Overview",
        "translated",
        content='<p>Welcome. <img src="/assets/logo.png"> <a href="./local.html">local</a></p>',
        outline=[{"id": "welcome", "name": "Welcome", "children": []}],
        children=[
            _html_page("/docs/tutorial/", "Tutorial", "partially_translated"),
            reference,
        ],
    )


@pytest.fixture
def sample_tree(snapshot_payload: dict[str, typ.Any]) -> PageTree:
    """Return the sample tree parsed from ``snapshot_payload``."""
    return parse_page_tree(snapshot_payload)


@pytest.fixture
def snapshot_path(tmp_path: Path, snapshot_payload: dict[str, typ.Any]) -> Path:
    """Write the sample snapshot to ``tmp_path`` and return its path."""
    path = tmp_path / "docs.json"
    path.write_text(json.dumps(snapshot_payload), encoding="utf-8")
    return path


@pytest.fixture
def site_config_path(tmp_path: Path, snapshot_path: Path) -> Path:
    """Write a ``docsite.yaml`` pointing at the sample snapshot."""
    path = tmp_path / "docsite.yaml"
    path.write_text(
        f"""
site:
  name: Fixture Docs
  lang: en
  site_url: https://docs.example.org
  base_path: /
  upstream_docs_url: https://upstream.example.org
build:
  tree: {snapshot_path.name}
  output_dir: public
  workers: 2
header_links:
  - label: Upstream
    href: https://upstream.example.org
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    return path
