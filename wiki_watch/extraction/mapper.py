# File: wiki_watch/extraction/mapper.py
"""wiki_watch.extraction.mapper: turn table rows into records by header name."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, TypeVar

from wiki_watch.extraction.cells import flatten_cell
from wiki_watch.logger import logger
from wiki_watch.parser.nodes import Table

R = TypeVar("R")


def map_records(
    table: Table,
    columns: Mapping[str, str],
    factory: Callable[..., R],
) -> List[R]:
    """Build one record per data row of *table*.

    Args:
        table: located table; its first row is the header row.
        columns: header text → record field name. Unknown headers are skipped.
        factory: record constructor, called with the assigned fields as keywords.

    Returns:
        Records in row order. Fields whose column is missing stay unset.

    Cells are paired with headers by position; cells past the header width
    are ignored.
    """
    if not table.rows:
        return []

    header_row, *data_rows = table.rows
    headers = [flatten_cell(cell) for cell in header_row]

    records: List[R] = []
    for index, row in enumerate(data_rows, start=1):
        if len(row) > len(headers):
            logger.debug(
                "Row %d has %d cells for %d headers; ignoring the extra cells",
                index, len(row), len(headers),
            )
        values: Dict[str, Any] = {}
        for header, cell in zip(headers, row):
            field = columns.get(header)
            if field is not None:
                values[field] = flatten_cell(cell)
        records.append(factory(**values))
    return records


__all__ = ["map_records"]
