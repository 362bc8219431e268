from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ConfidenceTier(str, Enum):
    EXACT = "exact"
    ALIAS = "alias"
    FUZZY = "fuzzy"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class CategoryEntry:
    main_category: str
    subcategory: Optional[str] = None
    # display order, never re-sorted
    stores: Tuple[str, ...] = ()
    aliases: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolveResult:
    found: bool
    keyword: str
    main_category: str
    stores: Tuple[str, ...]
    confidence: ConfidenceTier
    matched_key: Optional[str] = None
    subcategory: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape used at the UI/API boundary (optional keys omitted)."""
        out: Dict[str, Any] = {"found": self.found, "keyword": self.keyword}
        if self.matched_key is not None:
            out["matchedKey"] = self.matched_key
        if self.subcategory is not None:
            out["subcategory"] = self.subcategory
        out["main_category"] = self.main_category
        out["stores"] = list(self.stores)
        out["confidence"] = self.confidence.value
        return out
