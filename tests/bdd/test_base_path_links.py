"""Behaviour tests for serving the generated site from a sub-directory."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup, Tag
from pytest_bdd import given, parsers, scenarios, then, when

from docsite.builder import SiteBuilder, load_tree_for, output_path_for
from docsite.config import SiteConfig, load_site_config
from docsite.paths import normalize_base_path

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "base_path_links.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    return {}


def _page_soup(scenario_state: dict[str, object], route: str) -> BeautifulSoup:
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    html = output_path_for(output_dir, route).read_text(encoding="utf-8")
    return BeautifulSoup(html, "html.parser")


def _root_body(scenario_state: dict[str, object]) -> Tag:
    body = _page_soup(scenario_state, "/docs/").select_one("[data-test=page-body]")
    assert body is not None, "expected the page body article"
    return body


@given(parsers.parse('a site config deployed under "{base_path}"'))
def given_config(
    base_path: str, site_config_path: Path, scenario_state: dict[str, object]
) -> None:
    config = load_site_config(site_config_path)
    scenario_state["config"] = dc.replace(
        config, base_path=normalize_base_path(base_path)
    )


@when("I build the site")
def when_build(scenario_state: dict[str, object]) -> None:
    config = typ.cast("SiteConfig", scenario_state["config"])
    report = SiteBuilder(config, load_tree_for(config)).run()
    assert report.ok, f"build failed: {report.failures!r}"
    scenario_state["output_dir"] = config.output_dir


@then(parsers.parse('the root page image source is "{src}"'))
def then_image_source(src: str, scenario_state: dict[str, object]) -> None:
    image = _root_body(scenario_state).find("img")
    assert image is not None, "expected an image in the root page body"
    assert image["src"] == src


@then(parsers.parse('the root page stylesheet is "{href}"'))
def then_stylesheet(href: str, scenario_state: dict[str, object]) -> None:
    links = _page_soup(scenario_state, "/docs/").find_all("link", rel="stylesheet")
    assert [link["href"] for link in links] == [href]


@then("relative links in the root page are unchanged")
def then_relative_links(scenario_state: dict[str, object]) -> None:
    hrefs = [a["href"] for a in _root_body(scenario_state).find_all("a")]
    assert hrefs == ["./local.html"]


@then(parsers.parse('the page "{route}" shows the "{status}" banner'))
def then_banner(route: str, status: str, scenario_state: dict[str, object]) -> None:
    banner = _page_soup(scenario_state, route).select_one(
        "[data-test=translation-status]"
    )
    assert banner is not None, f"expected a status banner on {route}"
    assert banner["data-status"] == status


@then(parsers.parse('the page "{route}" has no original article link'))
def then_no_original(route: str, scenario_state: dict[str, object]) -> None:
    soup = _page_soup(scenario_state, route)
    assert soup.select_one("[data-test=original-article]") is None
