"""Tests for cell grouping in the engine state."""

from __future__ import annotations

from ipatalk.core.accumulator import Accumulator
from ipatalk.core.nodes import CONSONANT, PUNCTUATION, VOWEL, Consonant, Punctuation, Vowel


def test_alternating_kinds_open_new_cells() -> None:
    state = Accumulator()
    state.emit_vowel(Vowel("a"))
    state.emit_consonant(Consonant("t"))
    state.emit_vowel(Vowel("a"))
    assert [c.kind for c in state.cells] == [VOWEL, CONSONANT, VOWEL]


def test_same_kind_extends_cell() -> None:
    state = Accumulator()
    state.emit_consonant(Consonant("s"))
    state.emit_consonant(Consonant("t"))
    state.emit_vowel(Vowel("a"))
    state.emit_vowel(Vowel("i"))
    assert [len(c) for c in state.cells] == [2, 2]
    assert [n.value for n in state.cluster] == []


def test_cluster_is_open_consonant_cell() -> None:
    state = Accumulator()
    state.emit_vowel(Vowel("a"))
    state.emit_consonant(Consonant("n"))
    state.emit_consonant(Consonant("t"))
    assert [n.value for n in state.cluster] == ["n", "t"]


def test_punctuation_closes_both_cells() -> None:
    state = Accumulator()
    state.emit_vowel(Vowel("a"))
    state.emit_punctuation(Punctuation(" "))
    state.emit_punctuation(Punctuation(" "))
    state.emit_vowel(Vowel("a"))
    assert [c.kind for c in state.cells] == [VOWEL, PUNCTUATION, PUNCTUATION, VOWEL]
    assert state.tone_domain == [state.cells[-1].nodes[0]]


def test_punctuation_does_not_touch_last_handles() -> None:
    state = Accumulator()
    vowel = state.emit_vowel(Vowel("a"))
    state.emit_punctuation(Punctuation(" "))
    assert state.last_any is vowel
    assert state.last_vowel is vowel


def test_tone_domain_survives_consonants() -> None:
    state = Accumulator()
    vowel = state.emit_vowel(Vowel("a"))
    state.emit_consonant(Consonant("n"))
    assert state.tone_domain == [vowel]
    assert state.tone_domain[0] is vowel


def test_vowel_after_consonant_resets_domain() -> None:
    state = Accumulator()
    state.emit_vowel(Vowel("a"))
    state.emit_consonant(Consonant("n"))
    second = state.emit_vowel(Vowel("i"))
    assert len(state.tone_domain) == 1
    assert state.tone_domain[0] is second


def test_reset_keeps_cell_open() -> None:
    state = Accumulator()
    state.emit_vowel(Vowel("a"))
    state.reset_tone_domain()
    second = state.emit_vowel(Vowel("e"))
    assert len(state.cells) == 1
    assert len(state.tone_domain) == 1
    assert state.tone_domain[0] is second


def test_pending_stress_lands_on_next_vowel() -> None:
    state = Accumulator()
    state.pending_stress = True
    state.emit_consonant(Consonant("t"))
    first = state.emit_vowel(Vowel("a"))
    second = state.emit_vowel(Vowel("a"))
    assert first.stress and not second.stress
    assert not state.pending_stress
