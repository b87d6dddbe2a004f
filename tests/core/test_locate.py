"""
Property-based and unit tests for the tag locator.

The core claims:
    - Order:       matches come out in document (preorder) order
    - Uniqueness:  every match is produced exactly once
    - Shadowing:   a match's own subtree is never searched
    - Coverage:    every matching node is produced or sits under one that was
    - Stickiness:  once a locator says "no match" it keeps saying it
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from protab.core.tree import Node
from protab.core.locate import locate, find_tag, TagLocator


# ── Helpers ──────────────────────────────────────────────────────────────────

def leaf(tag, contents=""):
    return Node(tag, contents)


def contents_of(nodes):
    return [n.contents for n in nodes]


def preorder(node):
    yield node
    for child in node.children:
        yield from preorder(child)


def likes_tree():
    """The tree the grammar builds for: likes(tom,wine). ?- likes(X,wine)."""
    return Node(">", "", [
        Node("fact|>", "", [
            Node("union|predicate|>", "", [
                leaf("ident|constant|regex", "likes"),
                leaf("char", "("),
                Node("params|>", "", [
                    leaf("ident|constant|regex", "tom"),
                    leaf("char", ","),
                    leaf("ident|constant|regex", "wine"),
                ]),
                leaf("char", ")"),
            ]),
            leaf("char", "."),
        ]),
        Node("query|>", "", [
            leaf("string", "?-"),
            Node("union|predicate|>", "", [
                leaf("ident|constant|regex", "likes"),
                leaf("char", "("),
                Node("params|>", "", [
                    leaf("ident|variable|regex", "X"),
                    leaf("char", ","),
                    leaf("ident|constant|regex", "wine"),
                ]),
                leaf("char", ")"),
            ]),
            leaf("char", "."),
        ]),
    ])


# ── Generators ───────────────────────────────────────────────────────────────

tags = st.sampled_from(["a", "b", "ab", "c|a", "b|c", "x"])

@st.composite
def trees(draw, max_depth=4):
    tag = draw(tags)
    if max_depth == 0:
        return Node(tag, draw(st.text(alphabet="pqr", max_size=2)))
    n = draw(st.integers(min_value=0, max_value=3))
    return Node(tag, "", [draw(trees(max_depth=max_depth - 1)) for _ in range(n)])


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestLocate:
    def test_direct_children_in_order(self):
        root = Node("r", "", [leaf("a", "1"), leaf("b", "2"), leaf("a", "3")])
        assert contents_of(locate(root, "a")) == ["1", "3"]

    def test_root_itself_is_not_tested(self):
        root = Node("a", "root", [leaf("b")])
        assert list(locate(root, "a")) == []

    def test_substring_match(self):
        root = Node("r", "", [leaf("ident|constant|regex", "tom")])
        assert contents_of(locate(root, "ident")) == ["tom"]
        assert contents_of(locate(root, "constant")) == ["tom"]
        assert contents_of(locate(root, "stant|re")) == ["tom"]

    def test_nested_match_found(self):
        root = Node("r", "", [Node("x", "", [Node("y", "", [leaf("a", "deep")])])])
        assert contents_of(locate(root, "a")) == ["deep"]

    def test_matched_subtree_not_explored(self):
        inner = leaf("a", "inner")
        root = Node("r", "", [Node("a", "outer", [inner])])
        found = list(locate(root, "a"))
        assert [n.contents for n in found] == ["outer"]

    def test_search_resumes_after_nested_match(self):
        # r -> [x -> [a1], a2, y -> [z -> [a3]], a4]
        root = Node("r", "", [
            Node("x", "", [leaf("a", "1")]),
            leaf("a", "2"),
            Node("y", "", [Node("z", "", [leaf("a", "3")])]),
            leaf("a", "4"),
        ])
        assert contents_of(locate(root, "a")) == ["1", "2", "3", "4"]

    def test_siblings_of_nested_match_are_searched(self):
        root = Node("r", "", [
            Node("x", "", [leaf("a", "1"), leaf("q"), leaf("a", "2")]),
        ])
        assert contents_of(locate(root, "a")) == ["1", "2"]

    def test_no_match(self):
        assert list(locate(likes_tree(), "nothing")) == []

    def test_none_root(self):
        assert list(locate(None, "a")) == []

    def test_leaf_root(self):
        assert list(locate(leaf("a", "x"), "a")) == []

    def test_is_lazy(self):
        root = Node("r", "", [leaf("a", "1"), leaf("a", "2")])
        matches = locate(root, "a")
        assert next(matches).contents == "1"
        assert next(matches).contents == "2"
        with pytest.raises(StopIteration):
            next(matches)

    def test_facts_skip_queries(self):
        facts = list(locate(likes_tree(), "fact"))
        assert len(facts) == 1
        assert facts[0].tag == "fact|>"

    def test_idents_in_application(self):
        fact = find_tag(likes_tree(), "fact")
        application = find_tag(fact, "predicate")
        assert contents_of(locate(application, "ident")) == ["likes", "tom", "wine"]

    def test_union_of_applications(self):
        fact = Node("fact|>", "", [
            Node("union|>", "", [
                Node("predicate|>", "", [leaf("ident|constant|regex", "p")]),
                leaf("char", ","),
                Node("predicate|>", "", [leaf("ident|constant|regex", "q")]),
            ]),
            leaf("char", "."),
        ])
        apps = list(locate(fact, "predicate"))
        assert [find_tag(a, "ident").contents for a in apps] == ["p", "q"]


class TestHasTag:
    def test_substring(self):
        node = leaf("ident|variable|regex", "X")
        assert node.has_tag("variable")
        assert node.has_tag("ident|var")
        assert not node.has_tag("constant")

    def test_locate_agrees_with_has_tag(self):
        tree = likes_tree()
        assert all(n.has_tag("predicate") for n in locate(tree, "predicate"))


class TestFindTag:
    def test_first_match(self):
        root = Node("r", "", [leaf("b"), leaf("a", "1"), leaf("a", "2")])
        assert find_tag(root, "a").contents == "1"

    def test_missing(self):
        assert find_tag(Node("r", "", [leaf("b")]), "a") is None


class TestTagLocator:
    def test_next_match_walks_all(self):
        loc = TagLocator(likes_tree(), "ident")
        seen = []
        node = loc.next_match()
        while node is not None:
            seen.append(node.contents)
            node = loc.next_match()
        assert seen == ["likes", "tom", "wine", "likes", "X", "wine"]

    def test_end_is_sticky(self):
        loc = TagLocator(Node("r", "", [leaf("a")]), "a")
        assert loc.next_match() is not None
        assert loc.next_match() is None
        assert loc.exhausted
        for _ in range(5):
            assert loc.next_match() is None

    def test_empty_scope_is_exhausted_at_once(self):
        loc = TagLocator(None, "a")
        assert loc.next_match() is None
        assert loc.next_match() is None

    def test_iterator_protocol(self):
        loc = TagLocator(likes_tree(), "fact")
        assert len(list(loc)) == 1
        assert list(loc) == []

    def test_nested_locators_are_independent(self):
        tree = Node(">", "", [
            Node("fact|>", "", [leaf("ident", "a"), leaf("ident", "b")]),
            Node("fact|>", "", [leaf("ident", "c")]),
        ])
        facts = TagLocator(tree, "fact")
        seen = []
        fact = facts.next_match()
        while fact is not None:
            idents = TagLocator(fact, "ident")
            ident = idents.next_match()
            while ident is not None:
                seen.append(ident.contents)
                ident = idents.next_match()
            fact = facts.next_match()
        assert seen == ["a", "b", "c"]

    def test_two_locators_same_scope(self):
        tree = likes_tree()
        first = TagLocator(tree, "ident")
        second = TagLocator(tree, "ident")
        first.next_match()
        first.next_match()
        assert second.next_match().contents == "likes"
        assert first.next_match().contents == "wine"


# ── Property-based tests ─────────────────────────────────────────────────────

class TestLocateProperties:
    @given(trees(), st.sampled_from(["a", "b", "c", "|"]))
    @settings(max_examples=300)
    def test_every_result_matches(self, root, tag):
        assert all(tag in n.tag for n in locate(root, tag))

    @given(trees(), st.sampled_from(["a", "b", "c"]))
    @settings(max_examples=300)
    def test_preorder_and_unique(self, root, tag):
        order = {id(n): i for i, n in enumerate(preorder(root))}
        found = [order[id(n)] for n in locate(root, tag)]
        assert found == sorted(found)
        assert len(found) == len(set(found))

    @given(trees(), st.sampled_from(["a", "b", "c"]))
    @settings(max_examples=300)
    def test_no_result_nested_in_another(self, root, tag):
        found = list(locate(root, tag))
        for outer in found:
            below = {id(n) for n in preorder(outer)} - {id(outer)}
            assert not any(id(inner) in below for inner in found)

    @given(trees(), st.sampled_from(["a", "b", "c"]))
    @settings(max_examples=300)
    def test_every_match_covered(self, root, tag):
        found = list(locate(root, tag))
        covered = set()
        for n in found:
            covered |= {id(x) for x in preorder(n)}
        for child in root.children:
            for n in preorder(child):
                if tag in n.tag:
                    assert id(n) in covered

    @given(trees(), st.sampled_from(["a", "b"]), st.integers(min_value=1, max_value=5))
    @settings(max_examples=100)
    def test_exhaustion_sticky(self, root, tag, extra):
        loc = TagLocator(root, tag)
        while loc.next_match() is not None:
            pass
        assert all(loc.next_match() is None for _ in range(extra))
