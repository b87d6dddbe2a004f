"""
protab: symbol and predicate tables for a small Prolog-like fact language.

Facts such as

    likes(tom, wine).
    likes(mary, wine).

are parsed into a tagged tree and loaded into two cross-linked tables:
the predicate table (likes -> (tom, wine), (mary, wine)) and the symbol
table (wine -> used by likes at position 1, twice). Queries ("?- ...")
are parsed but not loaded. There is no inference.

Usage:
    python -m protab facts.pl
    python -m protab < facts.pl
"""

from .core.tree import Node
from .core.errors import ProtabError, ParseError, ArgumentCountExceeded
from .core.locate import locate, find_tag, TagLocator
from .core.registry import Registry
from .core.tables import (
    Symbol, Usage, Predicate, Application,
    SymbolTable, PredicateTable, applications_from_usages,
)
from .core.loader import DEFAULT_MAX_ARGUMENTS, define_fact, load, load_text
from .grammar import parse, parse_file, parse_stream
from .report import (
    format_symbols, format_predicates, format_tags,
    print_symbols, print_predicates, print_tags, print_tables,
)

__all__ = [
    "Node",
    "ProtabError", "ParseError", "ArgumentCountExceeded",
    "locate", "find_tag", "TagLocator",
    "Registry",
    "Symbol", "Usage", "Predicate", "Application",
    "SymbolTable", "PredicateTable", "applications_from_usages",
    "DEFAULT_MAX_ARGUMENTS", "define_fact", "load", "load_text",
    "parse", "parse_file", "parse_stream",
    "format_symbols", "format_predicates", "format_tags",
    "print_symbols", "print_predicates", "print_tags", "print_tables",
]
