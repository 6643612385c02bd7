"""wiki_watch.extraction: section-scoped table extraction."""

from wiki_watch.extraction.cells import flatten_cell
from wiki_watch.extraction.locator import SectionMarkers, locate_table
from wiki_watch.extraction.mapper import map_records

__all__ = ["flatten_cell", "SectionMarkers", "locate_table", "map_records"]
