"""IPA → talk notation transliteration.

The engine scans the input once, left to right.  At each position the
longest matching symbol-table key is consumed and its actions are run
in order against the engine state.  Tone capture may consume further
tone letters ahead of the cursor but never moves it back.

Example::

    >>> transliterate("ˈta˥˩")
    'ta++^a--'

The whole call either returns a string or raises a
:class:`~ipatalk.core.errors.TalkError`; there is no partial result.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from ..config import TalkOptions
from .accumulator import Accumulator
from .errors import UnknownSymbol
from .features import FeatureApplicator
from .nodes import Consonant, Punctuation, Vowel
from .scanner import Scanner
from .serializer import serialize
from .symbols import (
    APPLY_FEATURE,
    CAPTURE_TONE,
    EMIT_CONSONANT,
    EMIT_PUNCTUATION,
    EMIT_VOWEL,
    GLOTTAL_STOP,
    LOWER,
    NO_OP,
    RESET_TONES,
    REVOICE,
    STRESS,
    Action,
    match,
)
from .tones import ToneCapture

logger = logging.getLogger(__name__)

OptionsLike = Union[TalkOptions, Mapping[str, Any], None]


class Transliterator:
    """Single-use scanner over one IPA string.

    Create one per input; :meth:`run` returns the filled
    :class:`Accumulator`.
    """

    def __init__(self, ipa: str, options: Optional[TalkOptions] = None) -> None:
        self.options = options or TalkOptions()
        self.scanner = Scanner(ipa)
        self.state = Accumulator()
        self.features = FeatureApplicator(self.state, self.scanner)
        self.tones = ToneCapture(self.state, self.scanner, self.features, enabled=self.options.tones)

    def run(self) -> Accumulator:
        scanner = self.scanner
        while not scanner.done():
            length, actions = match(scanner.symbols, scanner.pos)
            symbol = scanner.advance(length)
            if actions is None:
                raise UnknownSymbol("unknown symbol", scanner.prefix(), symbol)
            for action in actions:
                self._dispatch(action)
        return self.state

    def _dispatch(self, action: Action) -> None:
        kind = action.kind
        state = self.state
        if kind == EMIT_VOWEL:
            state.emit_vowel(Vowel(action.value))
        elif kind == EMIT_CONSONANT:
            state.emit_consonant(Consonant(action.value))
        elif kind == EMIT_PUNCTUATION:
            state.emit_punctuation(Punctuation(action.value))
        elif kind == APPLY_FEATURE:
            self.features.apply(action.value)
        elif kind == CAPTURE_TONE:
            self.tones.capture(action.value)
        elif kind == RESET_TONES:
            state.reset_tone_domain()
        elif kind == STRESS:
            state.pending_stress = True
        elif kind == GLOTTAL_STOP:
            self.features.glottal_stop()
        elif kind == LOWER:
            self.features.lower()
        elif kind == REVOICE:
            self.features.revoice()
        elif kind != NO_OP:
            raise ValueError(f"unknown action kind {kind!r}")


def scan(ipa: str, options: OptionsLike = None) -> Accumulator:
    """Run the scan and return the engine state with its cells."""
    return Transliterator(ipa, TalkOptions.coerce(options)).run()


def transliterate(ipa: str, options: OptionsLike = None) -> str:
    """Convert an IPA string to talk notation.

    :param ipa: IPA text.
    :param options: :class:`TalkOptions`, a mapping such as
        ``{"tones": False}``, or ``None`` for defaults.
    :return: The serialized notation.
    :raises TalkError: if the input cannot be transliterated.
    """
    state = scan(ipa, options)
    out = serialize(state.cells)
    logger.debug("transliterated %d codepoint(s) into %d cell(s)", len(ipa), len(state.cells))
    return out


__all__ = ["Transliterator", "scan", "transliterate"]
