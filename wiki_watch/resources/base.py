# File: wiki_watch/resources/base.py
"""
Resource abstraction: every table-backed wiki resource is a frozen pydantic
model exposing ``parse``, ``title``, ``difference`` and ``is_empty``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Mapping, Self, Sequence

from pydantic import BaseModel, ConfigDict

from wiki_watch import differ
from wiki_watch.extraction import SectionMarkers, locate_table, map_records
from wiki_watch.parser.nodes import Node


class WikiResource(BaseModel, ABC):
    """Snapshot of one wiki resource at one point in time."""

    model_config = ConfigDict(frozen=True)

    #: page title, used as the fetch and storage key; unique per resource type
    title: ClassVar[str]

    @classmethod
    @abstractmethod
    def parse(cls, nodes: Sequence[Node]) -> Self:
        """Build a snapshot from the top-level nodes of the page."""

    @abstractmethod
    def difference(self, other: Self) -> Self:
        """Return the part of this snapshot that *other* does not contain."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True when the snapshot holds nothing."""


class TableResource(WikiResource):
    """A resource read from the first table of one wiki section.

    Subclasses set ``title``, ``section``, ``columns`` and ``record_type`` and
    narrow the type of ``records``.
    """

    section: ClassVar[SectionMarkers]
    columns: ClassVar[Mapping[str, str]]
    record_type: ClassVar[Callable[..., Any]]

    records: tuple[Any, ...] = ()

    @classmethod
    def parse(cls, nodes: Sequence[Node]) -> Self:
        table = locate_table(nodes, cls.section)
        if table is None:
            return cls()
        return cls(records=tuple(map_records(table, cls.columns, cls.record_type)))

    def difference(self, other: Self) -> Self:
        return type(self)(records=tuple(differ.difference(self.records, other.records)))

    def is_empty(self) -> bool:
        return not self.records


__all__ = ["WikiResource", "TableResource"]
