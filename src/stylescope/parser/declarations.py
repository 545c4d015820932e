"""Declaration extraction on top of the tree-sitter CSS grammar.

Every ``declaration`` node of the syntax tree becomes a
:class:`~stylescope.model.Declaration`, in tree-traversal order:

    a { color: red; }
    @media print { .x { display: none } }

yields ``a / color: red`` and ``.x / display: none``.
"""

from __future__ import annotations

from typing import Iterator

import tree_sitter_css
from tree_sitter import Language, Node, Parser

from stylescope.model.stylesheet import CSSProperty, Declaration, SourceRange

__all__ = ["parse_declarations", "CSS_LANGUAGE"]

CSS_LANGUAGE = Language(tree_sitter_css.language())


class _Locator:
    """Converts tree-sitter byte columns into character columns."""

    def __init__(self, source: bytes) -> None:
        self._source = source
        self._line_starts = [0]
        for index, byte in enumerate(source):
            if byte == 0x0A:
                self._line_starts.append(index + 1)

    def column(self, row: int, byte_column: int) -> int:
        start = self._line_starts[row]
        prefix = self._source[start:start + byte_column]
        return len(prefix.decode("utf-8", errors="replace"))


def _walk(node: Node) -> Iterator[Node]:
    yield node
    for child in node.children:
        yield from _walk(child)


def _declaration_end(node: Node) -> Node:
    """Return the last child that is part of the declaration text.

    The terminating ``;`` belongs to the node in the grammar but not to the
    declaration's text.
    """
    for child in reversed(node.children):
        if child.type != ";":
            return child
    return node


def _owner_selector(node: Node, source: bytes) -> str:
    """Return the prelude of the rule owning *node* (``a, b`` or ``@font-face``)."""
    block = node.parent
    if block is None or block.type != "block" or block.parent is None:
        return ""
    owner = block.parent
    prelude = source[owner.start_byte:block.start_byte].decode("utf-8", errors="replace")
    return " ".join(prelude.split())


def parse_declarations(content: str) -> tuple[Declaration, ...]:
    """Parse CSS *content* and return its declarations in source order."""
    source = content.encode("utf-8")
    tree = Parser(CSS_LANGUAGE).parse(source)
    locator = _Locator(source)

    declarations: list[Declaration] = []
    for node in _walk(tree.root_node):
        if node.type != "declaration":
            continue
        end = _declaration_end(node)
        text = source[node.start_byte:end.end_byte].decode("utf-8", errors="replace")
        start_row, start_col = node.start_point
        end_row, end_col = end.end_point
        declarations.append(
            Declaration(
                selector=_owner_selector(node, source),
                property=CSSProperty.from_text(text),
                range=SourceRange(
                    start_line=start_row,
                    start_column=locator.column(start_row, start_col),
                    end_line=end_row,
                    end_column=locator.column(end_row, end_col),
                ),
            )
        )
    return tuple(declarations)
