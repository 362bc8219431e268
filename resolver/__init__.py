# resolver/__init__.py
"""
Gift keyword resolver.

Maps a French gift keyword to a merchandising category, an optional
subcategory and a ranked list of retailers, tagged with a confidence tier.
"""

from .errors import ResolverError, LexiconError, ConfigError
from .fuzzy import DEFAULT_MAX_DISTANCE, FuzzyMatch, levenshtein, nearest
from .heuristics import (
    DEFAULT_HEURISTICS,
    HeuristicRule,
    classify,
    compile_rules,
    load_rules,
)
from .lexicon import Lexicon, load_lexicon, load_fallbacks, fallbacks_from_mapping
from .service import (
    DEFAULT_STORE_LIMIT,
    GiftResolver,
    default_resolver,
    resolve,
    stores_for_gift,
    summarize,
    top_stores,
)

__all__ = [
    # Errors
    "ResolverError",
    "LexiconError",
    "ConfigError",
    # Fuzzy matching
    "DEFAULT_MAX_DISTANCE",
    "FuzzyMatch",
    "levenshtein",
    "nearest",
    # Heuristics
    "DEFAULT_HEURISTICS",
    "HeuristicRule",
    "classify",
    "compile_rules",
    "load_rules",
    # Data
    "Lexicon",
    "load_lexicon",
    "load_fallbacks",
    "fallbacks_from_mapping",
    # Resolution
    "DEFAULT_STORE_LIMIT",
    "GiftResolver",
    "default_resolver",
    "resolve",
    "stores_for_gift",
    "summarize",
    "top_stores",
]
