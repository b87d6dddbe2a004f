"""
The fact language and its parser.

    constant  : /[a-z0-9_]+/
    variable  : /[A-Z][a-z0-9_]*/
    ident     : constant | variable
    params    : ident (',' ident)*
    predicate : ident '(' params ')'
    union     : predicate (',' predicate)*
    fact      : union '.'
    query     : "?-" union '.'
    program   : (fact | query)+

Lark does the parsing. Its tree is then rewritten into protab Nodes with
composite tags: a rule with exactly one child is folded into that child
and their tags are joined with "|", a rule with several children is
tagged "<rule>|>", and the root is tagged ">". Tokens become leaves
tagged "regex" (identifiers), "char" (single-character punctuation) or
"string" ("?-"). For example:

    >
      fact|>
        union|predicate|>
          ident|constant|regex 'likes'
          char '('
          params|>
            ident|constant|regex 'tom'
            char ','
            ident|constant|regex 'wine'
          char ')'
        char '.'
"""

import logging
from typing import Optional, TextIO

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from .core.errors import ParseError
from .core.tree import Node

logger = logging.getLogger(__name__)


GRAMMAR = r"""
    program   : (fact | query)+

    fact      : union "."
    query     : "?-" union "."
    union     : predicate ("," predicate)*
    predicate : ident "(" params ")"
    params    : ident ("," ident)*
    ident     : constant | variable
    constant  : CONSTANT
    variable  : VARIABLE

    CONSTANT  : /[a-z0-9_]+/
    VARIABLE  : /[A-Z][a-z0-9_]*/

    %import common.WS
    %ignore WS
"""

IDENT_TOKENS = ("CONSTANT", "VARIABLE")

parser = Lark(GRAMMAR, start="program", parser="lalr", keep_all_tokens=True)


def _leaf_tag(token: Token) -> str:
    if token.type in IDENT_TOKENS:
        return "regex"
    if len(token) == 1:
        return "char"
    return "string"


def to_node(tree, root: bool = True) -> Node:
    """Rewrite a Lark parse tree (or token) into a protab Node tree."""
    if isinstance(tree, Token):
        return Node(_leaf_tag(tree), str(tree))

    children = [to_node(child, root=False) for child in tree.children]
    if root:
        return Node(">", "", children)

    rule = str(tree.data)
    if len(children) == 1:
        only = children[0]
        return Node(f"{rule}|{only.tag}", only.contents, only.children)
    return Node(f"{rule}|>", "", children)


def parse(text: str, source: str = "<string>") -> Node:
    """
    Parse a whole program into a tagged tree.

    Raises ParseError (with source, line and column when Lark knows
    them) if the text is not a program.
    """
    try:
        tree: Tree = parser.parse(text)
    except UnexpectedInput as e:
        lines = str(e).strip().splitlines()
        message = lines[0] if lines else type(e).__name__
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        logger.debug("parse of %s failed at %s:%s: %s", source, line, column, e)
        raise ParseError(message, source, line, column) from e
    return to_node(tree)


def _read(stream: TextIO, source: str) -> str:
    try:
        return stream.read()
    except UnicodeDecodeError as e:
        logger.debug("could not decode %s: %s", source, e)
        raise ParseError(f"input is not valid {e.encoding}: {e.reason} "
                         f"at byte {e.start}", source) from e


def parse_stream(stream: TextIO, source: str = "<stdin>") -> Node:
    return parse(_read(stream, source), source=source)


def parse_file(path: str, encoding: Optional[str] = "utf-8") -> Node:
    with open(path, encoding=encoding) as f:
        return parse(_read(f, str(path)), source=str(path))
