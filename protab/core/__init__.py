from .tree import Node
from .errors import ProtabError, ParseError, ArgumentCountExceeded
from .locate import locate, find_tag, TagLocator
from .registry import Registry
from .tables import (
    Symbol, Usage, Predicate, Application,
    SymbolTable, PredicateTable, applications_from_usages,
)
from .loader import DEFAULT_MAX_ARGUMENTS, define_fact, load, load_text

__all__ = [
    "Node",
    "ProtabError", "ParseError", "ArgumentCountExceeded",
    "locate", "find_tag", "TagLocator",
    "Registry",
    "Symbol", "Usage", "Predicate", "Application",
    "SymbolTable", "PredicateTable", "applications_from_usages",
    "DEFAULT_MAX_ARGUMENTS", "define_fact", "load", "load_text",
]
