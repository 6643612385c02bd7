# === FILE: wiki_watch/parser/wikitext_parser.py ===
"""Wikitext parsing for WikiWatch.

Raw wikitext is tokenized by :mod:`mwparserfromhell`; this module reduces the
resulting :class:`~mwparserfromhell.wikicode.Wikicode` to the small node model
of :mod:`wiki_watch.parser.nodes`:

* headings        → ``Text`` holding their raw markup (``"== Available =="``);
* wikilinks       → ``Link`` whose display is the label, or the title if blank;
* file/category   → ``Opaque`` (``[[:Category:X]]`` stays an ordinary ``Link``);
* external links  → ``Link`` when titled, plain ``Text`` of the URL otherwise;
* inline styling  → contents spliced into the surrounding sequence;
* tables          → ``Table`` with rows grouped on ``|-`` separators;
* HTML entities   → ``Text`` of the decoded character;
* anything else   → ``Opaque``.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

import mwparserfromhell
from mwparserfromhell.nodes import (
    Comment,
    ExternalLink,
    Heading,
    HTMLEntity,
    Tag,
    Template,
    Wikilink,
)
from mwparserfromhell.nodes import Text as WikiText
from mwparserfromhell.parser import ParserError
from mwparserfromhell.wikicode import Wikicode

from wiki_watch.errors import WikiError
from wiki_watch.logger import logger
from wiki_watch.parser.nodes import Cell, Link, Node, Opaque, Row, Table, Text

__all__: Sequence[str] = ("parse_wikitext", "convert")

# Tags whose contents a reader sees inline, without the surrounding markup.
_INLINE_TAGS = frozenset(
    {
        "b", "i", "u", "s", "em", "strong", "small", "big", "span", "font",
        "sup", "sub", "code", "del", "ins", "abbr", "mark", "nowiki",
    }
)
_CELL_TAGS = frozenset({"td", "th"})
_FILE_NAMESPACES = frozenset({"file", "image"})
_CATEGORY_NAMESPACES = frozenset({"category"})


def parse_wikitext(text: str) -> list[Node]:
    """Parse raw wikitext and return its top-level node sequence.

    Raises :class:`~wiki_watch.errors.WikiError` if the tokenizer gives up.
    """
    try:
        code = mwparserfromhell.parse(text)
    except ParserError as exc:
        raise WikiError(f"Unable to parse wikitext: {exc}") from exc
    nodes = convert(code)
    logger.debug("Parsed wikitext into %d top-level nodes", len(nodes))
    return nodes


def convert(code: Optional[Wikicode]) -> list[Node]:
    """Convert a :class:`Wikicode` (or ``None``) into a list of nodes."""
    if code is None:
        return []
    out: list[Node] = []
    for node in code.nodes:
        out.extend(_convert_node(node))
    return out


def _convert_node(node) -> list[Node]:
    if isinstance(node, WikiText):
        return [Text(node.value)]
    if isinstance(node, Heading):
        return [Text(str(node))]
    if isinstance(node, HTMLEntity):
        return [Text(node.normalize())]
    if isinstance(node, Wikilink):
        return [_convert_wikilink(node)]
    if isinstance(node, ExternalLink):
        if node.title is None:
            return [Text(str(node.url))]
        return [Link(display=tuple(convert(node.title)), target=str(node.url))]
    if isinstance(node, Tag):
        return _convert_tag(node)
    if isinstance(node, Template):
        return [Opaque("template")]
    if isinstance(node, Comment):
        return [Opaque("comment")]
    return [Opaque(type(node).__name__.lower())]


def _convert_wikilink(link: Wikilink) -> Node:
    """Namespaced file and category links render no text; a blank label shows the title."""
    target = str(link.title).strip()
    namespace, sep, _ = target.partition(":")
    if sep and namespace.strip().lower() in _FILE_NAMESPACES:
        return Opaque("file")
    if sep and namespace.strip().lower() in _CATEGORY_NAMESPACES:
        return Opaque("category")
    if link.text is not None and str(link.text).strip():
        return Link(display=tuple(convert(link.text)), target=target)
    return Link(display=(Text(target.lstrip(":")),), target=target)


def _convert_tag(tag: Tag) -> list[Node]:
    name = str(tag.tag).strip().lower()
    if name == "table":
        return [Table(rows=tuple(_table_rows(tag.contents)))]
    if name in _INLINE_TAGS:
        return convert(tag.contents)
    return [Opaque(name)]


def _table_rows(contents: Optional[Wikicode]) -> list[Row]:
    """Group the cells of a table body into rows.

    Cells written before the first ``|-`` belong to an implicit first row.
    """
    rows: list[Row] = []
    loose: list[Cell] = []
    for node in _tags(contents):
        name = str(node.tag).strip().lower()
        if name in _CELL_TAGS:
            loose.append(_cell(node))
        elif name == "tr":
            if loose:
                rows.append(tuple(loose))
                loose = []
            cells = tuple(
                _cell(cell) for cell in _tags(node.contents)
                if str(cell.tag).strip().lower() in _CELL_TAGS
            )
            if cells:
                rows.append(cells)
    if loose:
        rows.append(tuple(loose))
    return rows


def _tags(code: Optional[Wikicode]) -> Iterable[Tag]:
    if code is None:
        return ()
    return (node for node in code.nodes if isinstance(node, Tag))


def _cell(tag: Tag) -> Cell:
    return tuple(_strip(convert(tag.contents)))


def _strip(nodes: list[Node]) -> list[Node]:
    """Trim surrounding whitespace of a cell, dropping blank edge text runs.

    ``Opaque`` nodes render nothing, so trimming looks past them to the first
    and last visible text.
    """
    _trim_edge(nodes, str.lstrip)
    nodes.reverse()
    _trim_edge(nodes, str.rstrip)
    nodes.reverse()
    return nodes


def _trim_edge(nodes: list[Node], strip) -> None:
    i = 0
    while i < len(nodes):
        node = nodes[i]
        if isinstance(node, Opaque):
            i += 1
            continue
        if isinstance(node, Text):
            value = strip(node.value)
            if not value:
                del nodes[i]
                continue
            nodes[i] = Text(value)
        return
