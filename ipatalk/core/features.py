"""Diacritic handling.

A diacritic never describes the symbol it is scanned on; it modifies a
phoneme that was already emitted.  Which phoneme depends on the
feature:

* the last vowel: nasalization, short, non-syllabic;
* the last consonant: aspiration, dental, pharyngealization,
  palatalization, velarization, labialization, glottalization,
  ejection, implosion, stop, tense, voiceless;
* the last vowel or consonant, whichever came later: long.

Vowel features and ``long`` fail when there is nothing to modify.
Consonant features are skipped silently when no consonant exists yet,
except ``voiceless``, which always requires one.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Optional

from .accumulator import Accumulator
from .errors import InvalidFeatureTarget, TalkError, UnknownDiacriticCombination
from .nodes import CONSONANT, Consonant
from .scanner import Scanner
from .symbols import FEATURES

logger = logging.getLogger(__name__)


# Consonant flags set directly, skipped when there is no consonant.
_CONSONANT_FLAGS = frozenset({
    "aspiration", "dental", "pharyngealization", "palatalization",
    "velarization", "labialization", "glottalization", "ejection",
    "implosion", "stop",
})

# Vowel flags; a missing vowel is an error.
_VOWEL_FLAGS = {
    "nasalization": ("nasalization", True),
    "short": ("short", True),
    "non-syllabic": ("syllabic", False),
}

# Voiced stops whose voiceless counterpart has its own token.
_DEVOICED: Dict[str, str] = {'b': 'p', 'd': 't', 'g': 'k'}

# Voiceless consonants turned voiced by the caron below.
_REVOICED: Dict[str, str] = {
    'f': 'v', 's': 'z', 'k': 'g', 'p': 'b', 't': 'd', 'x': 'j',
}

# Macron/minus below after these consonants: retracted articulation
# that the notation spells as a different consonant.
_RETRACTED: Dict[str, Optional[str]] = {
    's': 'x',
    'n': None,   # retracted n, l: no distinct token, keep as is
    'l': None,
}

_TENSE_SKIP = re.compile('[ptk]')

GLOTTAL = "'"


class FeatureApplicator:
    """Applies diacritics to the nodes held by an :class:`Accumulator`."""

    def __init__(self, state: Accumulator, scanner: Scanner) -> None:
        self.state = state
        self.scanner = scanner

    def _fail(self, error: type, label: str) -> TalkError:
        return error(label, self.scanner.prefix(), self.scanner.current or None)

    def apply(self, name: str) -> None:
        if name not in FEATURES:
            raise ValueError(f"unknown feature {name!r}")

        state = self.state
        if name in _CONSONANT_FLAGS:
            if state.last_consonant is not None:
                setattr(state.last_consonant, name, True)
        elif name in _VOWEL_FLAGS:
            if state.last_vowel is None:
                raise self._fail(InvalidFeatureTarget, f"{name}: no vowel to modify")
            attr, value = _VOWEL_FLAGS[name]
            setattr(state.last_vowel, attr, value)
        elif name == "voiceless":
            self._devoice()
        elif name == "tense":
            self._tense()
        elif name == "long":
            if state.last_any is None:
                raise self._fail(InvalidFeatureTarget, "long: nothing to lengthen")
            state.last_any.long = True

    def _devoice(self) -> None:
        consonant = self.state.last_consonant
        if consonant is None:
            raise self._fail(InvalidFeatureTarget, "voiceless: no consonant to modify")
        if consonant.value in _DEVOICED:
            consonant.value = _DEVOICED[consonant.value]
        else:
            consonant.voice = False

    def _tense(self) -> None:
        consonant = self.state.last_consonant
        if consonant is None:
            return
        cluster = self.state.cluster
        if len(cluster) >= 2 and _TENSE_SKIP.search(cluster[-2].value):
            cluster[-2].tense = True
        else:
            consonant.tense = True

    def lower(self) -> None:
        """Macron or minus below.

        After one of the consonants in ``_RETRACTED`` it selects another
        consonant; after a vowel it lengthens.  Any other consonant is
        an unsupported combination.
        """
        last = self.state.last_any
        if last is not None and last.kind == CONSONANT:
            if last.value not in _RETRACTED:
                raise self._fail(
                    UnknownDiacriticCombination,
                    f"unknown lowering mark after {last.value!r}",
                )
            replacement = _RETRACTED[last.value]
            if replacement is not None:
                logger.debug("retracted %r read as %r", last.value, replacement)
                last.value = replacement
            return
        self.apply("long")

    def revoice(self) -> None:
        """Caron below: voice a voiceless consonant that has a voiced token."""
        consonant = self.state.last_consonant
        if consonant is not None and consonant.value in _REVOICED:
            consonant.value = _REVOICED[consonant.value]

    def glottal_stop(self) -> None:
        """Emit ``'`` unless the previous node already is a glottal stop."""
        last = self.state.last_any
        if last is not None and last.kind == CONSONANT and last.value == GLOTTAL:
            return
        self.state.emit_consonant(Consonant(GLOTTAL))
