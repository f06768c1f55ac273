"""
Name Collation.

Deterministic, locale-independent approximation of a locale-aware
string comparison: accents and case only decide when the base letters
are equal. "alice" sorts before "Bob", and "Élodie" next to "Elodie".
"""

from __future__ import annotations

import unicodedata
from typing import Optional, Tuple


def _base_letters(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def collation_key(value: Optional[str]) -> Tuple[str, str, str]:
    """
    Sort key for a display name.

    Levels: base letters, then accented letters ignoring case, then case
    with lowercase first ("alice" before "Alice"). Missing names collate
    as the empty string.
    """
    text = value or ""
    return (_base_letters(text), unicodedata.normalize("NFC", text).casefold(), text.swapcase())


def compare_names(a: Optional[str], b: Optional[str]) -> int:
    """Three-way comparison of two names: -1, 0 or 1."""
    ka, kb = collation_key(a), collation_key(b)
    return (ka > kb) - (ka < kb)
