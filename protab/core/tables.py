"""
Core data structures: Symbol, Usage, Predicate, Application and the two
tables that hold them.

These are the atoms of the whole system. Nothing in here knows about
grammars, trees or the loader.

Names follow the fact language:
    Constants:  lowercase / digit / underscore  -- "tom", "wine", "0"
    Variables:  leading uppercase               -- "X", "Who"

    likes(tom, wine).
        Predicate "likes" gets Application (tom, wine), arity 2.
        Symbol "tom"  gets Usage (position 0, likes, that application).
        Symbol "wine" gets Usage (position 1, likes, that application).

Every link exists in both directions: an Application lists its argument
Symbols, and each of those Symbols has exactly one Usage pointing back
at the (Predicate, Application, position) it fills. A Predicate may hold
Applications of different arities.

Entries compare by identity. Two applications likes(tom, wine) are two
separate records, and the tables never merge them.
"""

from dataclasses import dataclass, field
from typing import Optional

from .registry import Registry


@dataclass(eq=False)
class Usage:
    """Back-reference from a Symbol to one slot it fills."""
    position: int
    predicate: "Predicate"
    application: "Application"

    @property
    def predicate_name(self):
        return self.predicate.name

    def __repr__(self):
        return f"Usage({self.predicate.name!r}, {self.position})"


@dataclass(eq=False)
class Symbol:
    """A constant or variable name used as an argument."""
    name: str
    usages: list = field(default_factory=list)

    def add_usage(self, position: int, predicate: "Predicate",
                  application: "Application") -> Usage:
        usage = Usage(position, predicate, application)
        self.usages.append(usage)
        return usage

    def usage_pairs(self) -> list:
        """[(predicate_name, position), ...] in registration order."""
        return [(u.predicate.name, u.position) for u in self.usages]

    def __repr__(self):
        return f"Symbol({self.name!r}, {len(self.usages)} usages)"


@dataclass(eq=False)
class Application:
    """One occurrence of a predicate in a fact: its argument symbols in order."""
    arity: int
    arguments: tuple = ()

    def argument_names(self) -> tuple:
        return tuple(symbol.name for symbol in self.arguments)

    def __repr__(self):
        return f"Application({', '.join(self.argument_names())})"


@dataclass(eq=False)
class Predicate:
    """A named relation and every application of it, in load order."""
    name: str
    applications: list = field(default_factory=list)

    def add_application(self, symbols) -> Application:
        arguments = tuple(symbols)
        application = Application(len(arguments), arguments)
        self.applications.append(application)
        return application

    def argument_lists(self) -> list:
        return [app.argument_names() for app in self.applications]

    def __repr__(self):
        return f"Predicate({self.name!r}, {len(self.applications)} applications)"


class SymbolTable(Registry):
    """Every distinct Symbol, in first-seen order."""

    def add(self, symbol: Symbol) -> int:
        return super().add(symbol)

    def find(self, name: str) -> Optional[Symbol]:
        return super().find(name)


class PredicateTable(Registry):
    """Every distinct Predicate, in first-seen order."""

    def add(self, predicate: Predicate) -> int:
        return super().add(predicate)

    def find(self, name: str) -> Optional[Predicate]:
        return super().find(name)


def applications_from_usages(symbols: SymbolTable, predicates: PredicateTable) -> dict:
    """
    Rebuild each predicate's argument lists using only Symbol usages.

    predicates decides the order of predicates and of applications
    within each; which symbol sits at which position comes purely from
    the usages. A slot no usage fills shows up as None, so a table whose
    links disagree will not compare equal to Predicate.argument_lists().

    Returns {predicate_name: [(arg0, arg1, ...), ...]}.
    """
    slots = {}
    for symbol in symbols:
        for usage in symbol.usages:
            slots.setdefault(id(usage.application), {})[usage.position] = symbol.name

    rebuilt = {}
    for predicate in predicates:
        rows = []
        for application in predicate.applications:
            filled = slots.get(id(application), {})
            width = max(filled, default=-1) + 1
            rows.append(tuple(filled.get(i) for i in range(width)))
        rebuilt[predicate.name] = rows
    return rebuilt
