"""
Reporting utilities: render the tables and the tag tree as text.
"""

from .core.tables import PredicateTable, SymbolTable
from .core.tree import Node


def format_symbols(table: SymbolTable) -> str:
    """
    One block per symbol, its usages indented below it:

        'wine':
            'likes': 1
    """
    lines = ["Symbol Table:"]
    for symbol in table:
        lines.append(f"'{symbol.name}':")
        for predicate_name, position in symbol.usage_pairs():
            lines.append(f"\t'{predicate_name}': {position}")
    return "\n".join(lines)


def format_predicates(table: PredicateTable) -> str:
    """Every application written back as a fact: likes(tom,wine)."""
    lines = ["Predicate Table:"]
    for predicate in table:
        for arguments in predicate.argument_lists():
            lines.append(f"{predicate.name}({','.join(arguments)}).")
    return "\n".join(lines)


def format_tags(root: Node, depth: int = 0) -> str:
    """Indented dump of a tagged tree, one "tag: 'contents'" line per node."""
    lines = []

    def walk(node, level):
        lines.append(f"{'  ' * level}{node.tag}: '{node.contents}'")
        for child in node.children:
            walk(child, level + 1)

    walk(root, depth)
    return "\n".join(lines)


def print_symbols(table: SymbolTable):
    print(format_symbols(table))


def print_predicates(table: PredicateTable):
    print(format_predicates(table))


def print_tags(root: Node):
    print(format_tags(root))


def print_tables(symbols: SymbolTable, predicates: PredicateTable):
    """Symbol table first, then the predicate table."""
    print_symbols(symbols)
    print_predicates(predicates)
