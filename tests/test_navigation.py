"""Tests for previous/next sequencing and breadcrumb resolution."""

from __future__ import annotations

import itertools
import typing as typ

import pytest

from docsite.navigation import BreadcrumbResolver, Sequencer
from docsite.tree import Page, PageNotFoundError, PageTreeBuilder

if typ.TYPE_CHECKING:
    from docsite.tree import PageTree


def _tree(*, hidden: frozenset[str] = frozenset()) -> PageTree:
    """Build ``root -> [A, B -> [B1, B2]]``."""
    builder = PageTreeBuilder()

    def add(route: str, parent: int | None = None) -> int:
        page = Page(route=route, title=route, navigable=route not in hidden)
        return builder.add(page, parent=parent)

    root = add("/")
    add("/a/", root)
    b = add("/b/", root)
    add("/b/1/", b)
    add("/b/2/", b)
    return builder.build()


@pytest.fixture
def tree() -> PageTree:
    return _tree()


class TestSequencer:
    """Pre-order reading sequence."""

    def test_pre_order_sequence(self, tree: PageTree) -> None:
        sequencer = Sequencer(tree)
        assert [page.route for page in sequencer.sequence] == [
            "/",
            "/a/",
            "/b/",
            "/b/1/",
            "/b/2/",
        ]

    def test_neighbours_of_nested_page(self, tree: PageTree) -> None:
        neighbours = Sequencer(tree).neighbours("/b/1/")
        assert neighbours.previous is not None
        assert neighbours.previous.route == "/b/"
        assert neighbours.next is not None
        assert neighbours.next.route == "/b/2/"

    def test_first_page_has_no_previous(self, tree: PageTree) -> None:
        sequencer = Sequencer(tree)
        assert sequencer.previous("/") is None
        next_page = sequencer.next("/")
        assert next_page is not None
        assert next_page.route == "/a/"

    def test_last_page_has_no_next(self, tree: PageTree) -> None:
        sequencer = Sequencer(tree)
        assert sequencer.next("/b/2/") is None
        previous = sequencer.previous("/b/2/")
        assert previous is not None
        assert previous.route == "/b/1/"

    def test_sequence_is_a_permutation_of_the_tree(self, tree: PageTree) -> None:
        sequence = Sequencer(tree).sequence
        assert len(sequence) == len(tree)
        assert {page.route for page in sequence} == {page.route for page in tree}

    def test_neighbours_are_inverse(self, tree: PageTree) -> None:
        sequencer = Sequencer(tree)
        for before, after in itertools.pairwise(sequencer.sequence):
            assert sequencer.next(before.route) == after
            assert sequencer.previous(after.route) == before

    def test_unknown_route_has_no_neighbours(self, tree: PageTree) -> None:
        sequencer = Sequencer(tree)
        neighbours = sequencer.neighbours("/missing/")
        assert neighbours.previous is None
        assert neighbours.next is None
        assert sequencer.position("/missing/") is None

    def test_non_navigable_pages_are_skipped(self) -> None:
        sequencer = Sequencer(_tree(hidden=frozenset({"/b/"})))
        assert [page.route for page in sequencer.sequence] == [
            "/",
            "/a/",
            "/b/1/",
            "/b/2/",
        ]
        previous = sequencer.previous("/b/1/")
        assert previous is not None
        assert previous.route == "/a/"
        neighbours = sequencer.neighbours("/b/")
        assert neighbours.previous is None
        assert neighbours.next is None

    def test_sequence_is_stable_across_instances(self, tree: PageTree) -> None:
        first = Sequencer(tree).sequence
        second = Sequencer(tree).sequence
        assert first == second


class TestBreadcrumbResolver:
    """Root-to-page chains."""

    def test_chain_for_nested_page(self, tree: PageTree) -> None:
        chain = BreadcrumbResolver(tree).resolve("/b/2/")
        assert [page.route for page in chain] == ["/", "/b/", "/b/2/"]

    def test_chain_for_root(self, tree: PageTree) -> None:
        chain = BreadcrumbResolver(tree).resolve("/")
        assert [page.route for page in chain] == ["/"]

    def test_every_page_chain_matches_parents(self, tree: PageTree) -> None:
        resolver = BreadcrumbResolver(tree)
        for page in tree:
            chain = resolver.resolve(page.route)
            assert chain[0] == tree.root
            assert chain[-1] == page
            for parent, child in itertools.pairwise(chain):
                assert tree.parent(child) == parent

    def test_unknown_route_raises(self, tree: PageTree) -> None:
        with pytest.raises(PageNotFoundError) as excinfo:
            BreadcrumbResolver(tree).resolve("/nowhere/")
        assert excinfo.value.route == "/nowhere/"

    def test_crumbs_link_ancestors_through_base_path(self, tree: PageTree) -> None:
        crumbs = BreadcrumbResolver(tree).crumbs("/b/1/", base_path="/site/")
        assert [crumb.href for crumb in crumbs] == ["/site/", "/site/b/", None]
        assert [crumb.is_current for crumb in crumbs] == [False, False, True]
        assert [crumb.is_home for crumb in crumbs] == [True, False, False]

    def test_crumbs_for_root_page(self, tree: PageTree) -> None:
        crumbs = BreadcrumbResolver(tree).crumbs("/")
        assert len(crumbs) == 1
        assert crumbs[0].is_current
        assert crumbs[0].is_home
        assert crumbs[0].href is None

    def test_crumbs_for_sample_tree(self, sample_tree: PageTree) -> None:
        crumbs = BreadcrumbResolver(sample_tree).crumbs("/docs/reference/str/")
        assert [crumb.title for crumb in crumbs] == ["Overview", "Reference", "String"]
        assert crumbs[1].href == "/docs/reference/"
