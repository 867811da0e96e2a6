"""IPA symbol table.

Every supported IPA symbol maps to a short, fixed sequence of
:class:`Action` records.  Most symbols resolve to a single action
(emit a vowel, emit a consonant, apply a feature to the previous
phoneme, ...).  Precomposed letters resolve to several, e.g. ``ɲ``
emits ``n`` and then palatalizes it.

The table is deliberately lossy: many phonetically distinct symbols
collapse onto the same output token (``ɑ``, ``ɐ``, ``ɒ`` and ``ä`` all
become ``a``).

The table is plain data so it can be inspected and tested without
running a scan; see :func:`supported_symbols` and :func:`lookup`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..data import marks as m
from .errors import UnknownSymbol


# ── Action kinds ────────────────────────────────────────────────────

EMIT_VOWEL = "emit-vowel"
EMIT_CONSONANT = "emit-consonant"
EMIT_PUNCTUATION = "emit-punctuation"
APPLY_FEATURE = "apply-feature"
NO_OP = "no-op"
CAPTURE_TONE = "capture-tone"      # value: the first tone letter
RESET_TONES = "reset-tones"        # start a fresh tone domain
STRESS = "stress"                  # mark the next vowel as stressed
GLOTTAL_STOP = "glottal-stop"      # emit ' unless one was just emitted
LOWER = "lower"                    # macron/minus below, see features.lower
REVOICE = "revoice"                # caron below, see features.revoice

ACTION_KINDS = frozenset({
    EMIT_VOWEL, EMIT_CONSONANT, EMIT_PUNCTUATION, APPLY_FEATURE, NO_OP,
    CAPTURE_TONE, RESET_TONES, STRESS, GLOTTAL_STOP, LOWER, REVOICE,
})


# ── Features ────────────────────────────────────────────────────────

FEATURES = frozenset({
    "aspiration",
    "dental",
    "ejection",
    "glottalization",
    "implosion",
    "labialization",
    "long",
    "nasalization",
    "non-syllabic",
    "palatalization",
    "pharyngealization",
    "short",
    "stop",
    "tense",
    "velarization",
    "voiceless",
})


@dataclass(frozen=True)
class Action:
    """One step performed when a symbol is scanned."""
    kind: str
    value: Optional[str] = None


Actions = Tuple[Action, ...]


def _vowel(token: str, *then: Action) -> Actions:
    return (Action(EMIT_VOWEL, token),) + then


def _consonant(token: str, *then: Action) -> Actions:
    return (Action(EMIT_CONSONANT, token),) + then


def _punctuation(token: str) -> Actions:
    return (Action(EMIT_PUNCTUATION, token),)


def _feature(name: str) -> Action:
    return Action(APPLY_FEATURE, name)


def _tone(level: str) -> Action:
    return Action(CAPTURE_TONE, level)


_NOOP: Actions = (Action(NO_OP),)
_RESET = Action(RESET_TONES)
_NASAL = _feature("nasalization")
_LONG = _feature("long")
_PALATAL = _feature("palatalization")
_HIGH = _tone(m.TONE_HIGH)
_LOW = _tone(m.TONE_LOW)


# ── Punctuation and ignored marks ───────────────────────────────────

_PUNCTUATION: Dict[str, Actions] = {
    ' ':      _punctuation(' '),
    '-':      _punctuation('=-'),
    '\u2013': _punctuation('=-'),  # en dash
}

# Marks with no counterpart in the output notation.
_IGNORED = (
    m.ZWNJ, '!', '|', '+', "'", '(', ')', '.',
    m.UP_CIRCUMFLEX, m.UP_CARON, m.UP_DIAERESIS, m.UP_X,
    m.DOWN_RAISED, m.DOWN_LOWERED, m.DOWN_PLUS, m.DOWN_COMMA,
    m.DOWN_HALF_RING, m.DOWN_VERTICAL_LINE, m.DOWN_INVERTED_BRIDGE,
    m.DOWN_SQUARE, m.DOWN_SEAGULL, m.DOWN_LEFT_ANGLE, m.DOWN_DIAERESIS,
    m.DOWN_ADVANCED_ROOT, m.DOWN_RETRACTED_ROOT,
    m.SECONDARY_STRESS, m.LOW_LEFT_ARROW,
    m.TIE_ABOVE, m.TIE_BELOW,
    '˖',   # advanced, spacing form
    'ḁ',   # voiceless a
)


# ── Vowels ──────────────────────────────────────────────────────────

_VOWELS: Dict[str, Actions] = {
    'a': _vowel('a'),   'ɐ': _vowel('a'),   'ɑ': _vowel('a'),   'ɒ': _vowel('a'),
    'ä': _vowel('a'),   'â': _vowel('a'),   'ǎ': _vowel('a'),
    'æ': _vowel('A'),
    'ø': _vowel('a$'),
    'e': _vowel('e'),   'ĕ': _vowel('e'),   'ê': _vowel('e'),   'ě': _vowel('e'),
    'ɛ': _vowel('E'),   'ε': _vowel('E'),
    'œ': _vowel('e$'),  'ɶ': _vowel('e$'),
    'i': _vowel('i'),   'ï': _vowel('i'),   'ǐ': _vowel('i'),   'î': _vowel('i'),
    'ɪ': _vowel('I'),   'ɘ': _vowel('I'),
    'y': _vowel('i$'),  'ʏ': _vowel('i$'),  'ɨ': _vowel('i$'),  'ÿ': _vowel('i$'),
    'o': _vowel('o'),   'ọ': _vowel('o'),   'ŏ': _vowel('o'),   'ô': _vowel('o'),
    'ǒ': _vowel('o'),
    'ɔ': _vowel('o$'),
    'ɜ': _vowel('O'),   'ɵ': _vowel('O'),   'ʊ': _vowel('O'),   'ɤ': _vowel('O'),
    'ɯ': _vowel('O'),   'ü': _vowel('O'),
    'u': _vowel('u'),   'ʉ': _vowel('u'),   'ǔ': _vowel('u'),   'û': _vowel('u'),
    'ʌ': _vowel('U'),   'ə': _vowel('U'),   'ǝ': _vowel('U'),   'ɞ': _vowel('U'),
    'ᵊ': _vowel('U'),
    # r-coloured vowels and the approximants written like them
    'ɹ': _vowel('u$'),  'ɻ': _vowel('u$'),  'ɚ': _vowel('u$'),  'ɝ': _vowel('u$'),
    'ʴ': _vowel('u$'),
    'ɜ' + m.RHOTIC_HOOK: _vowel('u$'),
    'ə' + m.RHOTIC_HOOK: _vowel('u$'),

    # precomposed nasal vowels
    'ã': _vowel('a', _NASAL),
    'ẽ': _vowel('e', _NASAL),   'ḛ': _vowel('e', _NASAL),
    'ĩ': _vowel('i', _NASAL),   'ḭ': _vowel('i', _NASAL),
    'õ': _vowel('o', _NASAL),
    'ũ': _vowel('u', _NASAL),   'ṵ': _vowel('u', _NASAL),

    # precomposed length
    'ē': _vowel('e', _LONG),
    'ō': _vowel('o', _LONG),
    'ū': _vowel('u', _LONG),
    'ă': _vowel('a', _feature("short")),

    # precomposed tone vowels open a fresh tone domain once captured
    'á': _vowel('a', _HIGH, _RESET),  'à': _vowel('a', _LOW, _RESET),
    'é': _vowel('e', _HIGH, _RESET),  'è': _vowel('e', _LOW, _RESET),
    'í': _vowel('i', _HIGH, _RESET),  'ì': _vowel('i', _LOW, _RESET),
    'ó': _vowel('o', _HIGH, _RESET),  'ò': _vowel('o', _LOW, _RESET),
    'ú': _vowel('u', _HIGH, _RESET),  'ù': _vowel('u', _LOW, _RESET),
    'ā': _vowel('a', _RESET),
    'ī': _vowel('i', _RESET),
}


# ── Consonants ──────────────────────────────────────────────────────

_CONSONANTS: Dict[str, Actions] = {
    # labials
    'p': _consonant('p'),   'b': _consonant('b'),   'ɓ': _consonant('b?'),
    'ʙ': _consonant('bb'),  'ʘ': _consonant('p*'),
    'm': _consonant('m'),   'ɱ': _consonant('m', _feature("dental")),
    'f': _consonant('f'),   'ɸ': _consonant('F'),
    'v': _consonant('v'),   'ʋ': _consonant('V'),   'ⱱ': _consonant('V'),
    'β': _consonant('V'),
    'w': _consonant('w'),   'ʍ': _consonant('w', _feature("voiceless")),
    'ɥ': _consonant('yw~'),

    # coronals
    't': _consonant('t'),   'ʈ': _consonant('T'),   'ǀ': _consonant('t*'),
    'd': _consonant('d'),   'ɖ': _consonant('D'),   'ǂ': _consonant('d*'),
    'ɗ': _consonant('d', _feature("implosion")),
    'θ': _consonant('c'),   'ð': _consonant('C'),
    's': _consonant('s'),   'ˢ': _consonant('s'),
    'z': _consonant('z'),
    'ʃ': _consonant('x'),   'ɕ': _consonant('x', _PALATAL),
    'ʂ': _consonant('X'),
    'ʒ': _consonant('j'),   'ʑ': _consonant('j', _PALATAL),
    'ʐ': _consonant('J'),
    'n': _consonant('n'),   'ⁿ': _consonant('n'),   'ɳ': _consonant('N'),
    'ɲ': _consonant('n', _PALATAL),
    'l': _consonant('l'),   'ɺ': _consonant('l'),   'ɭ': _consonant('L'),
    'ǁ': _consonant('l*'),
    'ʎ': _consonant('l', _PALATAL),
    'ɫ': _consonant('l', _feature("velarization")),
    'ɬ': _consonant('S'),   'ɮ': _consonant('Z'),
    'r': _consonant('r'),   'ɾ': _consonant('r'),   'ŕ': _consonant('r'),
    'ɽ': _consonant('R'),

    # dorsals
    'j': _consonant('y'),   'ʝ': _consonant('y'),   'ý': _consonant('y'),
    'ŷ': _consonant('y'),
    'c': _consonant('k', _PALATAL),
    'ç': _consonant('h', _PALATAL),
    'ɟ': _consonant('g', _PALATAL),
    'ʄ': _consonant('g?', _PALATAL),
    'k': _consonant('k'),   'ǃ': _consonant('k*'),
    'g': _consonant('g'),   'ɡ': _consonant('g'),   'ɢ': _consonant('g'),
    'ɠ': _consonant('g?'),  'ʛ': _consonant('g?'),
    'q': _consonant('K'),
    'ŋ': _consonant('q'),   'ɴ': _consonant('q'),
    'x': _consonant('H'),   'χ': _consonant('H'),   'ɧ': _consonant('H'),
    'ɣ': _consonant('G'),   'ʁ': _consonant('G'),   'ʀ': _consonant('GG'),
    'ɰ': _consonant('W'),

    # gutturals
    'h': _consonant('h'),   'ʱ': _consonant('hh~'),
    'ɦ': _consonant('h', _feature("aspiration")),
    'ħ': _consonant('H', _feature("aspiration")),
    'ʕ': _consonant('Q'),
    'ʔ': (Action(GLOTTAL_STOP),),
    m.GLOTTAL_MODIFIER: (Action(GLOTTAL_STOP),),

    # breve u is a glide; it is treated as a consonant and opens a
    # rising contour on the preceding vowel
    'ŭ': _consonant('u', _tone(m.TONE_MID)),
}


# ── Diacritics ──────────────────────────────────────────────────────

_DIACRITICS: Dict[str, Actions] = {
    'ʰ': (_feature("aspiration"),),
    'ʲ': (_PALATAL,),
    'ʷ': (_feature("labialization"),),
    'ˠ': (_feature("velarization"),),
    'ˤ': (_feature("pharyngealization"),),
    'ʼ': (_feature("ejection"),),
    ':': (_LONG,),
    'ː': (_LONG,),
    'ˑ': (_LONG,),
    m.UP_TILDE:             (_NASAL,),
    m.DOWN_TILDE:           (_NASAL,),
    m.UP_BREVE:             (_feature("short"),),
    m.UP_RING:              (_feature("voiceless"),),
    m.DOWN_RING:            (_feature("voiceless"),),
    m.LOW_RING:             (_feature("voiceless"),),
    m.DOWN_BRIDGE:          (_feature("dental"),),
    m.NO_AUDIBLE_RELEASE:   (_feature("stop"),),
    m.DOWN_DOUBLE_VERTICAL: (_feature("tense"),),
    m.DOWN_INVERTED_BREVE:  (_feature("non-syllabic"),),
    m.DOWN_MACRON:          (Action(LOWER),),
    m.DOWN_MINUS:           (Action(LOWER),),
    m.DOWN_CARON:           (Action(REVOICE),),
    m.PRIMARY_STRESS:       (Action(STRESS),),
}


# ── Tones ───────────────────────────────────────────────────────────

_TONES: Dict[str, Actions] = {letter: (_tone(letter),) for letter in m.TONE_LETTERS}
_TONES.update({
    m.UP_ACUTE:  (_HIGH, _RESET),
    m.UP_GRAVE:  (_LOW, _RESET),
    m.UP_MACRON: (_RESET,),
})


def _build_table() -> Dict[str, Actions]:
    table: Dict[str, Actions] = {}
    sections: List[Dict[str, Actions]] = [
        _PUNCTUATION,
        {ch: _NOOP for ch in _IGNORED},
        _VOWELS,
        _CONSONANTS,
        _DIACRITICS,
        _TONES,
    ]
    for section in sections:
        for key, actions in section.items():
            if key in table:
                raise ValueError(f"duplicate symbol table entry {key!r}")
            table[key] = actions
    return table


SYMBOLS: Dict[str, Actions] = _build_table()

# Longest key in the table, in codepoints.
MAX_KEY_LENGTH = max(len(key) for key in SYMBOLS)


def supported_symbols() -> List[str]:
    """Return every symbol (or symbol sequence) the table accepts."""
    return sorted(SYMBOLS)


def lookup(symbol: str, prefix: str = "") -> Actions:
    """Return the actions for *symbol* or raise :class:`UnknownSymbol`."""
    try:
        return SYMBOLS[symbol]
    except KeyError:
        raise UnknownSymbol("unknown symbol", prefix, symbol) from None


def match(symbols: Sequence[str], pos: int) -> Tuple[int, Optional[Actions]]:
    """Find the longest table key starting at ``symbols[pos]``.

    :return: ``(length, actions)``; ``(1, None)`` when nothing matches.
    """
    longest = min(MAX_KEY_LENGTH, len(symbols) - pos)
    for length in range(longest, 0, -1):
        actions = SYMBOLS.get("".join(symbols[pos:pos + length]))
        if actions is not None:
            return length, actions
    return 1, None


__all__ = [
    "Action",
    "ACTION_KINDS",
    "FEATURES",
    "SYMBOLS",
    "MAX_KEY_LENGTH",
    "supported_symbols",
    "lookup",
    "match",
]
