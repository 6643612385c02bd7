# File: wiki_watch/errors.py
"""wiki_watch.errors: the single failure type surfaced by a refresh pass."""

from __future__ import annotations


class WikiError(Exception):
    """Fetching, parsing or persisting a wiki resource failed."""

    def __init__(self, message: str = "An error occurred during wiki fetching") -> None:
        super().__init__(message)


__all__ = ["WikiError"]
