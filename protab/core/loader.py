"""
The fact loader: tagged tree in, SymbolTable + PredicateTable out.

Three nested tag searches drive it:

    for each "fact" in the program
        for each "predicate" application in that fact
            the "ident" nodes, left to right: name, arg0, arg1, ...

Queries are parsed but never loaded; their tags do not mention "fact".

The find-or-create policy lives here, not in the tables: every add() is
preceded by a find() that missed, which is what keeps names unique.
"""

import logging
from typing import Iterable, Optional

from .errors import ArgumentCountExceeded
from .locate import locate
from .tables import Predicate, PredicateTable, Symbol, SymbolTable
from .tree import Node

logger = logging.getLogger(__name__)

# Nine arguments plus the predicate name: ten identifiers per application.
DEFAULT_MAX_ARGUMENTS = 9


def define_fact(
    symbols: SymbolTable,
    predicates: PredicateTable,
    name: str,
    arguments: Iterable[str],
    max_arguments: Optional[int] = DEFAULT_MAX_ARGUMENTS,
):
    """
    Record one application name(arguments...) in both tables.

    Finds or creates the Predicate, finds or creates each argument
    Symbol in order, adds the Application to the Predicate, then adds
    one Usage per argument position.

    Args:
        symbols:        table receiving argument symbols
        predicates:     table receiving the predicate
        name:           predicate name
        arguments:      argument names, in order (may be empty)
        max_arguments:  largest allowed argument count; None for no limit

    Raises ArgumentCountExceeded before touching either table when the
    application is too wide.
    """
    arguments = [str(a) for a in arguments]
    if max_arguments is not None and len(arguments) > max_arguments:
        raise ArgumentCountExceeded(name, len(arguments), max_arguments)

    predicate = predicates.find(name)
    if predicate is None:
        predicate = Predicate(str(name))
        predicates.add(predicate)

    found = []
    for arg in arguments:
        symbol = symbols.find(arg)
        if symbol is None:
            symbol = Symbol(arg)
            symbols.add(symbol)
        found.append(symbol)

    application = predicate.add_application(found)
    for position, symbol in enumerate(found):
        symbol.add_usage(position, predicate, application)

    logger.debug("defined %s(%s)", name, ", ".join(arguments))
    return application


def load(tree: Node, max_arguments: Optional[int] = DEFAULT_MAX_ARGUMENTS):
    """
    Walk every fact in tree and build both tables.

    Returns (SymbolTable, PredicateTable). An application wider than
    max_arguments aborts the whole load: ArgumentCountExceeded
    propagates and no tables are returned.
    """
    symbols = SymbolTable()
    predicates = PredicateTable()
    facts = 0
    applications = 0

    for fact in locate(tree, "fact"):
        facts += 1
        for application in locate(fact, "predicate"):
            idents = [node.contents for node in locate(application, "ident")]
            if not idents:
                logger.warning("skipping predicate node with no identifiers: %r",
                               application)
                continue
            define_fact(symbols, predicates, idents[0], idents[1:],
                        max_arguments=max_arguments)
            applications += 1

    logger.info("loaded %d facts, %d applications: %d predicates, %d symbols",
                facts, applications, len(predicates), len(symbols))
    return symbols, predicates


def load_text(text: str, source: str = "<string>",
              max_arguments: Optional[int] = DEFAULT_MAX_ARGUMENTS):
    """Parse text with the fact grammar, then load it."""
    from ..grammar import parse

    return load(parse(text, source=source), max_arguments=max_arguments)
