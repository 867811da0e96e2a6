"""Tests for diacritic handling."""

from __future__ import annotations

import pytest

from ipatalk import transliterate
from ipatalk.core.accumulator import Accumulator
from ipatalk.core.errors import InvalidFeatureTarget, UnknownDiacriticCombination
from ipatalk.core.features import FeatureApplicator
from ipatalk.core.scanner import Scanner
from ipatalk.data import marks as m


# ── Devoicing ───────────────────────────────────────────────────────

@pytest.mark.parametrize(
    ("ipa", "expected"),
    [
        ("b" + m.DOWN_RING, "p"),
        ("d" + m.DOWN_RING, "t"),
        ("ɡ" + m.UP_RING, "k"),
        ("z" + m.DOWN_RING, "zh!"),
        ("n" + m.LOW_RING, "nh!"),
        ("ʍa", "wh!a"),
    ],
)
def test_voiceless(ipa: str, expected: str) -> None:
    assert transliterate(ipa) == expected


def test_voiceless_needs_a_consonant() -> None:
    with pytest.raises(InvalidFeatureTarget):
        transliterate("a" + m.DOWN_RING)


def test_voiceless_reaches_back_past_vowels() -> None:
    # the last consonant is kept across cells
    assert transliterate("za" + m.DOWN_RING) == "zh!a"


# ── Consonant features ──────────────────────────────────────────────

@pytest.mark.parametrize(
    ("ipa", "expected"),
    [
        ("kʰ", "kh~"),
        ("kʷ", "kw~"),
        ("tˤ", "tQ~"),
        ("tʲ", "ty~"),
        ("tˠ", "tG~"),
        ("kʼ", "k!"),
        ("t" + m.DOWN_BRIDGE, "t~"),
        ("t" + m.NO_AUDIBLE_RELEASE, "t."),
        ("tʷʰ", "tw~h~"),
        ("tʰʷ", "tw~h~"),
    ],
)
def test_consonant_features(ipa: str, expected: str) -> None:
    assert transliterate(ipa) == expected


def test_consonant_feature_without_consonant_is_skipped() -> None:
    assert transliterate("ʰa") == "a"
    assert transliterate("aʷ") == "a"


def test_consonant_feature_targets_last_consonant_across_vowels() -> None:
    assert transliterate("taʰ") == "th~a"


# ── Vowel features ──────────────────────────────────────────────────

@pytest.mark.parametrize(
    ("ipa", "expected"),
    [
        ("a" + m.UP_TILDE, "a&"),
        ("a" + m.DOWN_TILDE, "a&"),
        ("a" + m.UP_BREVE, "a!"),
        ("i" + m.DOWN_INVERTED_BREVE, "i@"),
        ("at" + m.UP_TILDE, "a&t"),
    ],
)
def test_vowel_features(ipa: str, expected: str) -> None:
    assert transliterate(ipa) == expected


@pytest.mark.parametrize(
    "ipa",
    ["t" + m.UP_TILDE, m.UP_BREVE, "k" + m.DOWN_INVERTED_BREVE],
)
def test_vowel_feature_without_vowel_fails(ipa: str) -> None:
    with pytest.raises(InvalidFeatureTarget):
        transliterate(ipa)


# ── Length ──────────────────────────────────────────────────────────

def test_long_targets_whichever_came_last() -> None:
    assert transliterate("aː") == "a_"
    assert transliterate("tː") == "tt"
    assert transliterate("atː") == "att"
    assert transliterate("taː") == "ta_"
    assert transliterate("tʰː") == "th~th~"


def test_long_without_target_fails() -> None:
    with pytest.raises(InvalidFeatureTarget):
        transliterate("ː")


# ── Tense ───────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    ("base", "rest", "expected"),
    [
        ("p", "", "p@"),
        ("s", "", "s@"),
        ("ks", "", "k@s"),
        ("ms", "", "ms@"),
        ("p", "a", "p@a"),
    ],
)
def test_tense(base: str, rest: str, expected: str) -> None:
    assert transliterate(base + m.DOWN_DOUBLE_VERTICAL + rest) == expected


def test_tense_without_consonant_is_skipped() -> None:
    assert transliterate("a" + m.DOWN_DOUBLE_VERTICAL) == "a"


# ── Lowering ────────────────────────────────────────────────────────

@pytest.mark.parametrize("mark", [m.DOWN_MACRON, m.DOWN_MINUS])
def test_lowering(mark: str) -> None:
    assert transliterate("s" + mark) == "x"
    assert transliterate("n" + mark) == "n"
    assert transliterate("l" + mark) == "l"
    assert transliterate("a" + mark) == "a_"


def test_lowering_after_other_consonant_fails() -> None:
    with pytest.raises(UnknownDiacriticCombination) as info:
        transliterate("at" + m.DOWN_MACRON)
    assert info.value.prefix == "at" + m.DOWN_MACRON


def test_lowering_without_target_fails() -> None:
    with pytest.raises(InvalidFeatureTarget):
        transliterate(m.DOWN_MACRON)


# ── Revoicing ───────────────────────────────────────────────────────

@pytest.mark.parametrize(
    ("ipa", "expected"),
    [("s", "z"), ("t", "d"), ("k", "g"), ("p", "b"), ("f", "v"), ("ʃ", "j"), ("m", "m")],
)
def test_revoicing(ipa: str, expected: str) -> None:
    assert transliterate(ipa + m.DOWN_CARON) == expected


# ── Glottal stop ────────────────────────────────────────────────────

def test_glottal_stop() -> None:
    assert transliterate("ʔa") == "'a"
    assert transliterate("aʔaʔ") == "a'a'"
    assert transliterate("ʔ" + m.GLOTTAL_MODIFIER) == "'"
    assert transliterate("aʔʔ") == "a'"


# ── Applicator ──────────────────────────────────────────────────────

def test_unknown_feature_name_is_a_programming_error() -> None:
    applicator = FeatureApplicator(Accumulator(), Scanner(""))
    with pytest.raises(ValueError):
        applicator.apply("sparkle")
