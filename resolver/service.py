"""
Gift keyword resolver.

Single pass, first success wins:
  normalize -> exact -> alias -> fuzzy -> heuristic category -> default category

resolve() never raises: "no match" is a fallback result, not an error. All
validation happens when the resolver is built.
"""
from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from config.loader import REPO_ROOT, load_config, resolve_path
from gkr_core.models import CategoryEntry, ConfidenceTier, ResolveResult
from gkr_utils.categories import DEFAULT_CATEGORY
from gkr_utils.normalizers import normalize_fr
from resolver.errors import ConfigError
from resolver.fuzzy import DEFAULT_MAX_DISTANCE, nearest
from resolver.heuristics import DEFAULT_HEURISTICS, HeuristicRule, classify, load_rules
from resolver.lexicon import Lexicon, load_fallbacks, load_lexicon

log = logging.getLogger("resolver")

DEFAULT_STORE_LIMIT = 6


def top_stores(result: ResolveResult, limit: int = DEFAULT_STORE_LIMIT) -> List[str]:
    """First `limit` stores of a result, in order. No padding, no dedup."""
    return list(result.stores[: max(limit, 0)])


class GiftResolver:
    """Resolves gift keywords against an immutable lexicon and fallback table."""

    def __init__(
        self,
        lexicon: Lexicon,
        fallbacks: Mapping[str, Sequence[str]],
        rules: Iterable[HeuristicRule] = DEFAULT_HEURISTICS,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        default_category: str = DEFAULT_CATEGORY,
        store_limit: int = DEFAULT_STORE_LIMIT,
    ):
        if max_distance < 0:
            raise ConfigError(f"max_distance must be >= 0, got {max_distance}")
        if default_category not in fallbacks:
            raise ConfigError(
                f"Default category {default_category!r} missing from fallback table"
            )
        rules = tuple(rules)
        missing = [r.category for r in rules if r.category not in fallbacks]
        if missing:
            raise ConfigError(f"Heuristic categories missing from fallback table: {missing}")

        self.lexicon = lexicon
        self.fallbacks: Dict[str, Tuple[str, ...]] = {
            cat: tuple(stores) for cat, stores in fallbacks.items()
        }
        self.rules: Tuple[HeuristicRule, ...] = rules
        self.max_distance = max_distance
        self.default_category = default_category
        self.store_limit = store_limit

    @classmethod
    def from_config(cls, cfg: Dict[str, Any], root: Path = REPO_ROOT) -> "GiftResolver":
        """Build from the [resolver] section of config.toml."""
        rc = cfg.get("resolver", {})
        if "lexicon" not in rc or "fallbacks" not in rc:
            raise ConfigError("[resolver] needs 'lexicon' and 'fallbacks' paths")

        lexicon = load_lexicon(resolve_path(rc["lexicon"], root))
        fallbacks = load_fallbacks(resolve_path(rc["fallbacks"], root))
        heuristics = rc.get("heuristics") or ""
        rules = load_rules(resolve_path(heuristics, root)) if heuristics else DEFAULT_HEURISTICS

        return cls(
            lexicon,
            fallbacks,
            rules=rules,
            max_distance=int(rc.get("max_distance", DEFAULT_MAX_DISTANCE)),
            default_category=rc.get("default_category", DEFAULT_CATEGORY),
            store_limit=int(rc.get("store_limit", DEFAULT_STORE_LIMIT)),
        )

    # ---------------- result builders ----------------

    def _found(
        self, keyword: str, key: str, entry: CategoryEntry, tier: ConfidenceTier
    ) -> ResolveResult:
        return ResolveResult(
            found=True,
            keyword=keyword,
            matched_key=key,
            subcategory=entry.subcategory,
            main_category=entry.main_category,
            stores=entry.stores,
            confidence=tier,
        )

    def _fallback(self, keyword: str, category: str) -> ResolveResult:
        return ResolveResult(
            found=False,
            keyword=keyword,
            main_category=category,
            stores=self.fallbacks.get(category, ()),
            confidence=ConfidenceTier.FALLBACK,
        )

    # ---------------- public API ----------------

    def resolve(self, raw: Optional[str]) -> ResolveResult:
        keyword = normalize_fr(raw if isinstance(raw, str) else None)
        if not keyword:
            return self._fallback(keyword, self.default_category)

        entry = self.lexicon.exact(keyword)
        if entry is not None:
            log.debug("exact hit %r", keyword)
            return self._found(keyword, keyword, entry, ConfidenceTier.EXACT)

        canonical = self.lexicon.alias(keyword)
        if canonical is not None:
            log.debug("alias hit %r -> %r", keyword, canonical)
            return self._found(
                keyword, canonical, self.lexicon.exact(canonical), ConfidenceTier.ALIAS
            )

        match = nearest(keyword, self.lexicon.keys(), self.max_distance)
        if match is not None:
            log.debug("fuzzy hit %r -> %r (d=%d)", keyword, match.key, match.distance)
            return self._found(
                keyword, match.key, self.lexicon.exact(match.key), ConfidenceTier.FUZZY
            )

        category = classify(keyword, self.rules)
        if category is not None:
            log.debug("heuristic %r -> %s", keyword, category)
            return self._fallback(keyword, category)

        log.debug("no match for %r, default category", keyword)
        return self._fallback(keyword, self.default_category)

    def stores_for(self, raw: Optional[str], limit: Optional[int] = None) -> List[str]:
        """Resolve and cap the store list (configured limit by default)."""
        return top_stores(self.resolve(raw), self.store_limit if limit is None else limit)


def summarize(results: Iterable[ResolveResult]) -> Dict[str, Any]:
    """Batch diagnostics: totals per confidence tier and per main category."""
    tiers: Counter = Counter()
    categories: Counter = Counter()
    total = 0
    for r in results:
        total += 1
        tiers[r.confidence.value] += 1
        categories[r.main_category] += 1
    return {
        "total": total,
        "found": total - tiers.get(ConfidenceTier.FALLBACK.value, 0),
        "by_confidence": {t.value: tiers.get(t.value, 0) for t in ConfidenceTier},
        "by_category": dict(categories.most_common()),
    }


_DEFAULT: Optional[GiftResolver] = None


def default_resolver() -> GiftResolver:
    """Process-wide resolver built once from the repo config.toml."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = GiftResolver.from_config(load_config())
    return _DEFAULT


def resolve(raw: Optional[str]) -> ResolveResult:
    return default_resolver().resolve(raw)


def stores_for_gift(raw: Optional[str], limit: int = DEFAULT_STORE_LIMIT) -> List[str]:
    return default_resolver().stores_for(raw, limit)
