# File: wiki_watch/resources/promotional_codes.py
"""wiki_watch.resources.promotional_codes: the "Promotional Codes" wiki table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Mapping, Optional

from wiki_watch.extraction import SectionMarkers
from wiki_watch.resources import register
from wiki_watch.resources.base import TableResource


@dataclass(frozen=True)
class PromotionalCode:
    """One row of the redeemable codes table; unknown columns stay ``None``."""

    code: Optional[str] = None
    server: Optional[str] = None
    reward: Optional[str] = None
    discovered: Optional[str] = None
    expires: Optional[str] = None


@register
class PromotionalCodes(TableResource):
    """Codes listed under the "Available" heading, up to "Expired"."""

    title: ClassVar[str] = "Promotional_Codes"
    section: ClassVar[SectionMarkers] = SectionMarkers(start="== Available ==", end="== Expired ==")
    columns: ClassVar[Mapping[str, str]] = {
        "Code": "code",
        "Server": "server",
        "Reward": "reward",
        "Discovered": "discovered",
        "Expires": "expires",
    }
    record_type: ClassVar[Callable[..., PromotionalCode]] = PromotionalCode

    records: tuple[PromotionalCode, ...] = ()


__all__ = ["PromotionalCode", "PromotionalCodes"]
