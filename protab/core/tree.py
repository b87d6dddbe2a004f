"""
The tagged tree: the only thing protab needs from a grammar engine.

A node has a tag, the literal text it matched, and its children in
source order. Tags are composite: a grammar rule with a single child is
folded into it, so an identifier leaf carries a tag like
"ident|constant|regex" and callers match tags by substring.
"""

from dataclasses import dataclass, field


@dataclass
class Node:
    tag: str
    contents: str = ""
    children: list = field(default_factory=list)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tag

    def __repr__(self):
        if self.contents:
            return f"Node({self.tag!r}, {self.contents!r})"
        return f"Node({self.tag!r}, {len(self.children)} children)"
