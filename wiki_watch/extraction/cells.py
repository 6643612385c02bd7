# File: wiki_watch/extraction/cells.py
"""wiki_watch.extraction.cells: reduce a table cell to the text a reader sees."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from wiki_watch.parser.nodes import Link, Node, Text

_EXHAUSTED = object()


def flatten_cell(cell: Iterable[Node]) -> str:
    """Concatenate the visible text of *cell* in document order.

    ``Text`` contributes its value, ``Link`` its display content (the target is
    dropped), every other node nothing. An explicit stack keeps this total for
    any nesting depth.
    """
    parts: List[str] = []
    stack: List[Iterator[Node]] = [iter(cell)]
    while stack:
        node = next(stack[-1], _EXHAUSTED)
        if node is _EXHAUSTED:
            stack.pop()
        elif isinstance(node, Text):
            parts.append(node.value)
        elif isinstance(node, Link):
            stack.append(iter(node.display))
    return "".join(parts)


__all__ = ["flatten_cell"]
