# File: wiki_watch/store.py
"""wiki_watch.store: the last captured snapshot of every resource, one JSON file per title."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional, Type, TypeVar, Union

from pydantic import ValidationError

from wiki_watch.errors import WikiError
from wiki_watch.logger import logger
from wiki_watch.resources.base import WikiResource

W = TypeVar("W", bound=WikiResource)


class SnapshotStore:
    """File-backed snapshot store keyed by resource title."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory).expanduser()

    def path_for(self, title: str) -> Path:
        return self.directory / f"{title}.json"

    def get(self, resource_type: Type[W]) -> Optional[W]:
        """Return the stored snapshot, or None if there is none usable."""
        path = self.path_for(resource_type.title)
        if not path.is_file():
            return None
        try:
            return resource_type.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as exc:
            logger.warning("Ignoring unreadable snapshot %s: %s", path, exc)
            return None

    def set(self, snapshot: WikiResource) -> Path:
        """Replace the stored snapshot for ``snapshot.title``."""
        path = self.path_for(snapshot.title)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{snapshot.title}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(snapshot.model_dump_json(indent=2))
            os.replace(tmp, path)
        except OSError as exc:
            raise WikiError(f"Unable to store snapshot {path}: {exc}") from exc
        logger.debug("Stored snapshot %s", path)
        return path


__all__ = ["SnapshotStore"]
