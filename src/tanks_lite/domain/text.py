"""Text normalization for search comparisons."""

from __future__ import annotations

import unicodedata


def _is_latin(char: str) -> bool:
    return unicodedata.name(char, "").startswith("LATIN ")


def normalize_text(text: str) -> str:
    """
    Canonicalize a string for diacritic-insensitive search.

    Lower-cases the text and drops combining marks attached to Latin
    letters, so "Löwe" and "Lowe" both become "lowe". Marks on other
    scripts are recomposed untouched: "й" stays "й" and "Ё" becomes "ё".

    The function is total and idempotent.

    Args:
        text: Any string (empty strings are returned as-is)

    Returns:
        Normalized text
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text.lower())

    kept: list[str] = []
    base_is_latin = False
    for char in decomposed:
        if unicodedata.combining(char):
            if base_is_latin:
                continue
        else:
            base_is_latin = _is_latin(char)
        kept.append(char)

    return unicodedata.normalize("NFC", "".join(kept))
