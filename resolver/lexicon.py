"""
Read-only gift keyword lexicon.

Keys are normalized with normalize_fr at load time so that lookups use the
same canonical form as queries. Key order is the file order and is kept in
a tuple: the fuzzy matcher relies on it to break ties deterministically.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from gkr_core.models import CategoryEntry
from gkr_utils.normalizers import normalize_fr
from resolver.errors import LexiconError

log = logging.getLogger("resolver.lexicon")


def parse_entry(raw_key: str, r: Any) -> CategoryEntry:
    """Parse one lexicon record from its JSON dict."""
    if not isinstance(r, dict):
        raise LexiconError(f"Entry {raw_key!r} must be an object, got {type(r).__name__}")

    main = r.get("main_category")
    if not isinstance(main, str) or not main.strip():
        raise LexiconError(f"Entry {raw_key!r} has no main_category")

    stores = r.get("stores", [])
    if not isinstance(stores, list) or not all(isinstance(s, str) for s in stores):
        raise LexiconError(f"Entry {raw_key!r}: stores must be a list of strings")

    aliases = r.get("aliases", [])
    if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
        raise LexiconError(f"Entry {raw_key!r}: aliases must be a list of strings")

    sub = r.get("subcategory")
    return CategoryEntry(
        main_category=main,
        subcategory=sub if sub else None,
        stores=tuple(stores),
        aliases=tuple(aliases),
    )


class Lexicon:
    """Immutable mapping of canonical keyword -> CategoryEntry."""

    def __init__(self, entries: Dict[str, CategoryEntry], aliases: Dict[str, str]):
        self._entries: Mapping[str, CategoryEntry] = MappingProxyType(dict(entries))
        self._keys: Tuple[str, ...] = tuple(entries)
        self._aliases: Mapping[str, str] = MappingProxyType(dict(aliases))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Lexicon":
        """
        Build from a Record<keyword, entry> dict (insertion order kept).

        Raises LexiconError on:
        - keys that normalize to "" or collide after normalization
        - malformed entries
        - aliases colliding with a key or another alias
        """
        if not isinstance(data, Mapping):
            raise LexiconError("Lexicon must be a JSON object of keyword -> entry")

        entries: Dict[str, CategoryEntry] = {}
        for raw_key, r in data.items():
            key = normalize_fr(raw_key)
            if not key:
                raise LexiconError(f"Keyword {raw_key!r} is empty after normalization")
            if key in entries:
                raise LexiconError(f"Duplicate keyword after normalization: {key!r}")
            entries[key] = parse_entry(raw_key, r)

        aliases: Dict[str, str] = {}
        for key, entry in entries.items():
            for raw_alias in entry.aliases:
                alias = normalize_fr(raw_alias)
                if not alias:
                    continue
                if alias in entries:
                    raise LexiconError(f"Alias {alias!r} of {key!r} shadows a keyword")
                if alias in aliases and aliases[alias] != key:
                    raise LexiconError(
                        f"Alias {alias!r} claimed by {aliases[alias]!r} and {key!r}"
                    )
                aliases[alias] = key

        return cls(entries, aliases)

    # ---------------- lookups ----------------

    def exact(self, key: str) -> Optional[CategoryEntry]:
        return self._entries.get(key)

    def alias(self, key: str) -> Optional[str]:
        """Canonical keyword for a curated synonym, or None."""
        return self._aliases.get(key)

    def keys(self) -> Tuple[str, ...]:
        return self._keys

    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def categories(self) -> List[str]:
        """Distinct main categories in first-seen order."""
        seen: Dict[str, None] = {}
        for entry in self._entries.values():
            seen.setdefault(entry.main_category, None)
        return list(seen)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __repr__(self) -> str:
        return f"Lexicon({len(self)} entries, {len(self._aliases)} aliases)"


def _read_json(path: Union[str, Path]) -> Any:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Data file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise LexiconError(f"Invalid JSON in {p}: {e}") from e


def load_lexicon(path: Union[str, Path]) -> Lexicon:
    lex = Lexicon.from_mapping(_read_json(path))
    log.info("Loaded lexicon %s: %d entries, %d aliases", path, len(lex), len(lex.aliases()))
    return lex


def fallbacks_from_mapping(data: Any) -> Mapping[str, Tuple[str, ...]]:
    """Validate a Record<category, string[]> and freeze it."""
    if not isinstance(data, Mapping):
        raise LexiconError("Fallback table must be a JSON object of category -> stores")
    out: Dict[str, Tuple[str, ...]] = {}
    for cat, stores in data.items():
        if not isinstance(stores, list) or not all(isinstance(s, str) for s in stores):
            raise LexiconError(f"Fallback stores for {cat!r} must be a list of strings")
        out[cat] = tuple(stores)
    return MappingProxyType(out)


def load_fallbacks(path: Union[str, Path]) -> Mapping[str, Tuple[str, ...]]:
    table = fallbacks_from_mapping(_read_json(path))
    log.info("Loaded fallback table %s: %d categories", path, len(table))
    return table
