# File: wiki_watch/resources/__init__.py
"""wiki_watch.resources: registry of the wiki resources WikiWatch can track."""

from __future__ import annotations

from typing import Dict, List, Type, TypeVar

from wiki_watch.resources.base import TableResource, WikiResource

T = TypeVar("T", bound=Type[WikiResource])

RESOURCES: Dict[str, Type[WikiResource]] = {}


def register(resource_type: T) -> T:
    """Class decorator adding *resource_type* to :data:`RESOURCES` under its title."""
    title = resource_type.title
    if title in RESOURCES and RESOURCES[title] is not resource_type:
        raise ValueError(f"Resource title already registered: {title}")
    RESOURCES[title] = resource_type
    return resource_type


def get_resource(title: str) -> Type[WikiResource]:
    """Return the resource type registered under *title*."""
    try:
        return RESOURCES[title]
    except KeyError:
        known = ", ".join(sorted(RESOURCES)) or "none"
        raise ValueError(f"Unknown resource {title!r} (registered: {known})") from None


def resource_titles() -> List[str]:
    return sorted(RESOURCES)


# Concrete resources register themselves on import.
from wiki_watch.resources.promotional_codes import PromotionalCode, PromotionalCodes  # noqa: E402

__all__ = [
    "RESOURCES",
    "PromotionalCode",
    "PromotionalCodes",
    "TableResource",
    "WikiResource",
    "get_resource",
    "register",
    "resource_titles",
]
