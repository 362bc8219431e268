"""
Keyword heuristics used when the lexicon has no direct or fuzzy hit.

Rules are evaluated in declaration order and the first match wins; there is
no scoring. The order comes from gkr_utils.categories or from a YAML file:

    rules:
      - category: "Maison & décoration"
        keywords: [bougie, vase, plaid]
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import yaml

from gkr_utils.categories import HEURISTIC_KEYWORDS
from gkr_utils.normalizers import normalize_fr
from resolver.errors import ConfigError

log = logging.getLogger("resolver.heuristics")


@dataclass
class HeuristicRule:
    """One category with its whole-word keyword alternation."""

    category: str
    keywords: List[str] = field(default_factory=list)
    pattern: re.Pattern = field(init=False, repr=False)

    def __post_init__(self) -> None:
        alternation = "|".join(re.escape(k) for k in self.keywords)
        # ASCII \b: letters like œ or ß that survive normalization are boundaries
        self.pattern = re.compile(rf"\b(?:{alternation})\b", re.ASCII)

    def matches(self, normalized: str) -> bool:
        if not self.keywords:
            return False
        return bool(self.pattern.search(f" {normalized} "))


def parse_rule(r: Dict[str, Any]) -> HeuristicRule:
    """Parse a rule from its YAML config dict."""
    if not isinstance(r, dict):
        raise ConfigError(f"Heuristic rule must be a mapping, got {r!r}")
    category = r.get("category")
    if not category:
        raise ConfigError(f"Heuristic rule without category: {r!r}")
    raw_keywords = r.get("keywords") or []
    if isinstance(raw_keywords, str):
        raw_keywords = [raw_keywords]
    keywords = [normalize_fr(str(k)) for k in raw_keywords]
    keywords = [k for k in keywords if k]
    if not keywords:
        raise ConfigError(f"Heuristic rule {category!r} has no keywords")
    return HeuristicRule(category=str(category), keywords=keywords)


def compile_rules(cfg: Dict[str, Any]) -> List[HeuristicRule]:
    """Compile rules from config, keeping list order (first = highest precedence)."""
    if not isinstance(cfg, dict):
        raise ConfigError(f"Heuristics config must be a mapping with a 'rules' list, got {cfg!r}")
    return [parse_rule(r) for r in cfg.get("rules", [])]


def load_rules(path: Union[str, Path]) -> List[HeuristicRule]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Heuristics file not found: {p}")
    with open(p, "r", encoding="utf-8") as f:
        rules = compile_rules(yaml.safe_load(f) or {})
    log.info("Loaded %d heuristic rules from %s", len(rules), p)
    return rules


DEFAULT_HEURISTICS: Tuple[HeuristicRule, ...] = tuple(
    HeuristicRule(category=cat, keywords=list(kws)) for cat, kws in HEURISTIC_KEYWORDS
)


def classify(
    normalized: str, rules: Sequence[HeuristicRule] = DEFAULT_HEURISTICS
) -> Optional[str]:
    """Category of the first rule with a whole-word hit, else None."""
    for rule in rules:
        if rule.matches(normalized):
            return rule.category
    return None
