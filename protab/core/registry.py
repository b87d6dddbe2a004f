"""
Append-only registry of named entries.

Entries keep their insertion order and are looked up by their .name.
The registry holds references, never copies, so a Symbol or Predicate
handed out by add() or find() stays the same object however large the
registry grows.
"""

from typing import Optional


class Registry:
    """
    Ordered, growable sequence of entries with a name index.

    capacity mirrors a doubling array: it starts at 1 and doubles
    whenever the next add() would not fit. There is no delete and no
    update; add() never checks for an existing entry with the same name.
    """

    GROWTH_FACTOR = 2

    def __init__(self):
        self._entries = []
        self._by_name = {}
        self.capacity = 1

    def add(self, entry) -> int:
        """Append entry and return its index."""
        if len(self._entries) >= self.capacity:
            self.capacity *= self.GROWTH_FACTOR
        self._entries.append(entry)
        # first registration under a name is the one find() returns
        self._by_name.setdefault(entry.name, entry)
        return len(self._entries) - 1

    def find(self, name: str) -> Optional[object]:
        """The first entry added under name, or None."""
        return self._by_name.get(name)

    def names(self) -> list:
        return [entry.name for entry in self._entries]

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __contains__(self, name):
        return name in self._by_name

    def __repr__(self):
        return f"{type(self).__name__}({self.names()!r})"
