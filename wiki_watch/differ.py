# File: wiki_watch/differ.py
"""wiki_watch.differ: detect records that are new since the previous snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, TypeVar

from wiki_watch.logger import logger

if TYPE_CHECKING:
    from wiki_watch.resources.base import WikiResource

R = TypeVar("R")
W = TypeVar("W", bound="WikiResource")

Sink = Callable[["WikiResource"], None]


def difference(current: Sequence[R], previous: Optional[Sequence[R]]) -> List[R]:
    """Return the records of *current* that are not equal to any in *previous*.

    ``previous=None`` means nothing was captured before, so everything is new.
    Order of *current* is preserved.
    """
    if previous is None:
        return list(current)
    return [record for record in current if record not in previous]


def log_difference(changes: WikiResource) -> None:
    """Default sink: report the new records through the project logger."""
    logger.info("Resource %s updated, added %r", changes.title, changes)


def report_changes(previous: Optional[W], current: W, sink: Sink = log_difference) -> W:
    """Hand the difference between *current* and *previous* to *sink*.

    The sink is called at most once, and never for an empty difference.
    """
    changes = current if previous is None else current.difference(previous)
    if changes.is_empty():
        logger.debug("Resource %s unchanged", current.title)
        return changes
    sink(changes)
    return changes


__all__ = ["Sink", "difference", "log_difference", "report_changes"]
