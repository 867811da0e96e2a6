"""Tests for the IPA symbol table."""

from __future__ import annotations

import pytest

from ipatalk import transliterate
from ipatalk.core.errors import UnknownSymbol
from ipatalk.core.symbols import (
    ACTION_KINDS,
    APPLY_FEATURE,
    CAPTURE_TONE,
    FEATURES,
    MAX_KEY_LENGTH,
    SYMBOLS,
    lookup,
    match,
    supported_symbols,
)
from ipatalk.data.marks import RHOTIC_HOOK, TONE_CONTOURS


def test_every_entry_is_well_formed() -> None:
    for symbol, actions in SYMBOLS.items():
        assert symbol, "empty key"
        assert actions, f"no actions for {symbol!r}"
        for action in actions:
            assert action.kind in ACTION_KINDS
            if action.kind == APPLY_FEATURE:
                assert action.value in FEATURES
            if action.kind == CAPTURE_TONE:
                assert action.value in TONE_CONTOURS


@pytest.mark.parametrize("symbol", supported_symbols())
def test_table_is_total_after_a_syllable(symbol: str) -> None:
    # "ta" gives every diacritic a vowel and a consonant to work on.
    assert isinstance(transliterate("ta" + symbol + "ta"), str)
    assert isinstance(transliterate("ta" + symbol, {"tones": False}), str)


def test_lookup_miss_raises() -> None:
    with pytest.raises(UnknownSymbol) as info:
        lookup("A", prefix="tA")
    assert info.value.symbol == "A"
    assert info.value.prefix == "tA"
    assert "U+0041" in str(info.value)


@pytest.mark.parametrize(
    ("ipa", "expected"),
    [
        ("ɑ", "a"), ("ɐ", "a"), ("ɒ", "a"), ("ä", "a"),
        ("ɛ", "E"), ("ε", "E"),
        ("ʃ", "x"), ("ʂ", "X"), ("ŋ", "q"), ("ɴ", "q"),
        ("θ", "c"), ("ð", "C"), ("χ", "H"), ("x", "H"),
    ],
)
def test_distinct_symbols_collapse(ipa: str, expected: str) -> None:
    assert transliterate(ipa) == expected


@pytest.mark.parametrize(
    ("ipa", "expected"),
    [
        ("ɲ", "ny~"),
        ("c", "ky~"),
        ("ç", "hy~"),
        ("ɟ", "gy~"),
        ("ʄ", "g?y~"),
        ("ɕ", "xy~"),
        ("ʑ", "jy~"),
        ("ʎ", "ly~"),
        ("ɫ", "lG~"),
        ("ɗ", "d?"),
        ("ɱ", "m~"),
        ("ɦ", "hh~"),
        ("ħ", "Hh~"),
        ("ʍ", "wh!"),
        ("ã", "a&"),
        ("ṵ", "u&"),
        ("ō", "o_"),
        ("ă", "a!"),
    ],
)
def test_composite_symbols(ipa: str, expected: str) -> None:
    assert transliterate(ipa) == expected


def test_rhotic_hook_sequences_use_longest_match() -> None:
    assert MAX_KEY_LENGTH >= 2
    assert transliterate("ɜ") == "O"
    assert transliterate("ɜ" + RHOTIC_HOOK) == "u$"
    assert transliterate("ə" + RHOTIC_HOOK) == transliterate("ɚ")
    with pytest.raises(UnknownSymbol):
        transliterate(RHOTIC_HOOK)


def test_match_reports_miss_as_single_codepoint() -> None:
    assert match(list("Aa"), 0) == (1, None)
    length, actions = match(list("a"), 0)
    assert length == 1 and actions == SYMBOLS["a"]
