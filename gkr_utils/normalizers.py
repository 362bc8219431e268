from __future__ import annotations

import re
import unicodedata
from typing import Optional


# ---------------- French keyword normalization ----------------

# Punctuation that separates words in typed keywords: "rhum (arrangé)" -> "rhum arrange"
_PUNCT_RX = re.compile(r"[.,;:!?'\"()]")
_SPACES_RX = re.compile(r"\s+")


def remove_accents(s: str) -> str:
    """Decompose to NFD and drop combining marks: "Crème brûlée" -> "Creme brulee"."""
    decomposed = unicodedata.normalize("NFD", s or "")
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def normalize_fr(text: Optional[str]) -> str:
    """
    Canonical form for gift keywords and lexicon keys.
    - lowercase
    - accents removed
    - punctuation -> space
    - whitespace collapsed and stripped
    """
    s = remove_accents((text or "").lower())
    s = _PUNCT_RX.sub(" ", s)
    return _SPACES_RX.sub(" ", s).strip()
