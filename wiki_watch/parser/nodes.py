# wiki_watch/parser/nodes.py
"""
Node tree consumed by the extraction engine.

Only three variants carry meaning for extraction: :class:`Text`, :class:`Link`
and :class:`Table`. Everything else the wikitext parser produces is reduced to
:class:`Opaque` and ignored downstream.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True, slots=True)
class Text:
    """A run of literal text (headings are kept as their raw markup)."""

    value: str


@dataclass(frozen=True, slots=True)
class Link:
    """A link; only ``display`` is what a reader sees."""

    display: tuple[Node, ...] = ()
    target: str = ""


@dataclass(frozen=True, slots=True)
class Table:
    """A table; the first row is the header row."""

    rows: tuple[Row, ...] = ()


@dataclass(frozen=True, slots=True)
class Opaque:
    """Any parser variant without meaning for extraction (templates, comments, ...)."""

    kind: str = ""


Node = Union[Text, Link, Table, Opaque]
Cell = Sequence[Node]
Row = Sequence[Cell]

__all__ = ["Text", "Link", "Table", "Opaque", "Node", "Cell", "Row"]
