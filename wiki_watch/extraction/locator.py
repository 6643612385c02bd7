# File: wiki_watch/extraction/locator.py
"""wiki_watch.extraction.locator: find the table that belongs to a named section."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from wiki_watch.logger import logger
from wiki_watch.parser.nodes import Node, Table, Text


@dataclass(frozen=True, slots=True)
class SectionMarkers:
    """Heading text opening and closing the section that holds the table."""

    start: str
    end: str


def locate_table(nodes: Iterable[Node], markers: SectionMarkers) -> Optional[Table]:
    """Return the first top-level table found inside the marked section.

    Scanning starts outside the section. A text node containing
    ``markers.start`` enters it, one containing ``markers.end`` leaves it; the
    end marker is checked last, so a node holding both leaves the section.
    Returns ``None`` when no table is seen while inside.
    """
    inside = False
    for node in nodes:
        if isinstance(node, Text):
            if markers.start in node.value:
                inside = True
            if markers.end in node.value:
                inside = False
        elif isinstance(node, Table) and inside:
            logger.debug("Located table with %d rows after %r", len(node.rows), markers.start)
            return node
    logger.debug("No table found between %r and %r", markers.start, markers.end)
    return None


__all__ = ["SectionMarkers", "locate_table"]
