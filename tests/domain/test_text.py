"""Tests for normalize_text."""

from __future__ import annotations

import pytest

from tanks_lite.domain.text import normalize_text


def test_umlaut_matches_plain_latin() -> None:
    assert normalize_text("Löwe") == normalize_text("Lowe")
    assert normalize_text("Löwe") == "lowe"


def test_lower_cases() -> None:
    assert normalize_text("BOURRASQUE") == "bourrasque"


def test_empty_string() -> None:
    assert normalize_text("") == ""


@pytest.mark.parametrize(
    "text",
    ["Löwe", "Т-34", "Ёж", "Йорк", "Crème Brûlée", "ŠKODA T 50", "İstanbul", "  mixed Ä ё  "],
)
def test_is_idempotent(text: str) -> None:
    once = normalize_text(text)

    assert normalize_text(once) == once


def test_strips_latin_accents() -> None:
    assert normalize_text("Crème Brûlée") == "creme brulee"
    assert normalize_text("Škoda") == "skoda"


def test_cyrillic_only_case_folded() -> None:
    """Cyrillic letters with marks keep their meaning."""
    assert normalize_text("Т-34") == "т-34"
    assert normalize_text("ЙОРК") == "йорк"
    assert normalize_text("Ёж") == "ёж"


def test_keeps_whitespace_and_digits() -> None:
    assert normalize_text(" AMX 13 90 ") == " amx 13 90 "
