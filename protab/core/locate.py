"""
Tag search over a tagged tree.

The loader never looks at the shape of the parse tree. It only asks
"give me the next node below here whose tag mentions X", three levels
deep: facts in the program, predicate applications in a fact,
identifiers in an application.

Search rules:
    - The scope root itself is never tested, only its descendants.
    - A node matches when the wanted tag is a substring of its tag.
    - Children are visited left to right. A matching child is produced
      and its own subtree is skipped. A non-matching child is searched
      the same way before moving on to its next sibling.

So matches come out in document (preorder) order, each exactly once,
and no match is ever nested inside another.
"""

from typing import Iterator, Optional

from .tree import Node


def locate(root: Optional[Node], tag: str) -> Iterator[Node]:
    """Lazily yield every node below root whose tag contains tag."""
    if root is None:
        return
    for child in root.children:
        if child.has_tag(tag):
            yield child
        else:
            yield from locate(child, tag)


def find_tag(root: Optional[Node], tag: str) -> Optional[Node]:
    """First node below root whose tag contains tag, or None."""
    return next(locate(root, tag), None)


class TagLocator:
    """
    Resumable cursor over the matches of one (scope, tag) search.

    next_match() hands out one node per call and None once the scope is
    used up. The end is sticky: after the first None every later call
    returns None too. Each locator owns its own position, so a locator
    over a fact can run while the locator over the whole program is
    paused mid-way.
    """

    def __init__(self, root: Optional[Node], tag: str):
        self.root = root
        self.tag = tag
        self._matches = locate(root, tag)
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def next_match(self) -> Optional[Node]:
        if self._exhausted:
            return None
        node = next(self._matches, None)
        if node is None:
            self._exhausted = True
        return node

    def __iter__(self):
        return self

    def __next__(self) -> Node:
        node = self.next_match()
        if node is None:
            raise StopIteration
        return node

    def __repr__(self):
        state = "exhausted" if self._exhausted else "live"
        return f"TagLocator({self.tag!r}, {state})"
