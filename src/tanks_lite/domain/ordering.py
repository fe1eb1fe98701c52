"""
Canonical vehicle ordering.

Vehicles are ordered by tier (ascending), then by name using a
Russian-locale collation at base strength:

- case, accents and "ё"/"е" are ignored ("Löwe" == "lowe")
- stroked letters and ligatures fold to their base ("Łódź" == "Lodz",
  "Æ" == "ae")
- punctuation and spaces sort before digits, digits before letters;
  punctuation follows the root collation order ("_" before "-" before "#")
- Cyrillic letters sort before Latin letters
- within a script, letters follow the alphabet

Names that are equal at base strength keep their input order
(sorting is stable).
"""

from __future__ import annotations

import unicodedata
from typing import Iterable

from tanks_lite.domain.text import normalize_text
from tanks_lite.domain.vehicle import Vehicle

# Character classes in collation order
_PUNCTUATION = 0
_DIGIT = 1
_CYRILLIC = 2
_OTHER_LETTER = 3

# Punctuation and symbols in root collation order; anything else follows
_PUNCTUATION_ORDER = " \t\n_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"

# Latin letters with no canonical decomposition that still share a base letter
_LATIN_FOLDS = str.maketrans(
    {
        "ł": "l",
        "ø": "o",
        "đ": "d",
        "ħ": "h",
        "ı": "i",
        "ŧ": "t",
        "æ": "ae",
        "œ": "oe",
    }
)

CollationKey = tuple[tuple[int, int, str], ...]


def _char_class(char: str) -> int:
    if char.isdigit():
        return _DIGIT
    if char.isalpha():
        if unicodedata.name(char, "").startswith("CYRILLIC "):
            return _CYRILLIC
        return _OTHER_LETTER
    return _PUNCTUATION


def _punctuation_rank(char: str) -> int:
    rank = _PUNCTUATION_ORDER.find(char)
    return rank if rank >= 0 else len(_PUNCTUATION_ORDER)


def _collation_element(char: str) -> tuple[int, int, str]:
    char_class = _char_class(char)
    rank = _punctuation_rank(char) if char_class == _PUNCTUATION else 0
    return char_class, rank, char


def collation_key(name: str) -> CollationKey:
    """
    Build the base-strength collation key for a name.

    Args:
        name: Vehicle display name

    Returns:
        Tuple of (character class, punctuation rank, folded character) triples
    """
    folded = normalize_text(name).casefold().replace("ё", "е").translate(_LATIN_FOLDS)
    return tuple(
        _collation_element(char) for char in folded if not unicodedata.combining(char)
    )


def vehicle_sort_key(vehicle: Vehicle) -> tuple[int, CollationKey]:
    return vehicle.tier, collation_key(vehicle.name)


def compare_vehicles(a: Vehicle, b: Vehicle) -> int:
    """
    Three-way comparison under the canonical ordering.

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if equal
    """
    key_a = vehicle_sort_key(a)
    key_b = vehicle_sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sort_vehicles(vehicles: Iterable[Vehicle]) -> list[Vehicle]:
    """Return a new list in canonical order (stable for equal keys)."""
    return sorted(vehicles, key=vehicle_sort_key)
