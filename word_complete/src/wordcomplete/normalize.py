from __future__ import annotations
import unicodedata

from . import config as CFG


def _fold_accents(s: str) -> str:
    """Drop combining marks after NFKD decomposition ("naïve" -> "naive")."""
    decomposed = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_word(token: str) -> str:
    """
    Normalize one dictionary token or query prefix for the prefix index:
      * surrounding whitespace trimmed
      * case-insensitive via .casefold() (when NORMALIZE_CASE)
      * accents folded (when FOLD_ACCENTS)
    Characters outside the alphabet are NOT removed here; the index rejects them.
    """
    s = token.strip()
    if CFG.NORMALIZE_CASE:
        s = s.casefold()
    if CFG.FOLD_ACCENTS:
        s = _fold_accents(s)
    return s
