"""wiki_watch.parser: wikitext → node tree used by the extraction engine."""

from wiki_watch.parser.nodes import Cell, Link, Node, Opaque, Row, Table, Text
from wiki_watch.parser.wikitext_parser import parse_wikitext

__all__ = ["Cell", "Link", "Node", "Opaque", "Row", "Table", "Text", "parse_wikitext"]
