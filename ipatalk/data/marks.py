"""Named Unicode marks used as keys in the IPA symbol table.

The combining characters below are invisible on their own, so the
symbol table refers to them by name rather than by literal.  The
``UP_`` prefix marks diacritics written above the base letter and
``DOWN_`` those written below it.
"""

from __future__ import annotations

from typing import Dict


# ── Above the letter ────────────────────────────────────────────────

UP_GRAVE      = '\u0300'
UP_ACUTE      = '\u0301'
UP_CIRCUMFLEX = '\u0302'
UP_TILDE      = '\u0303'
UP_MACRON     = '\u0304'
UP_BREVE      = '\u0306'
UP_DIAERESIS  = '\u0308'
UP_RING       = '\u030A'
UP_CARON      = '\u030C'
UP_X          = '\u033D'

# ── Below the letter ────────────────────────────────────────────────

DOWN_ADVANCED_ROOT   = '\u0318'
DOWN_RETRACTED_ROOT  = '\u0319'
NO_AUDIBLE_RELEASE   = '\u031A'
DOWN_RAISED          = '\u031D'
DOWN_LOWERED         = '\u031E'
DOWN_PLUS            = '\u031F'
DOWN_MINUS           = '\u0320'
DOWN_DIAERESIS       = '\u0324'
DOWN_RING            = '\u0325'
DOWN_COMMA           = '\u0326'
DOWN_VERTICAL_LINE   = '\u0329'
DOWN_BRIDGE          = '\u032A'
DOWN_CARON           = '\u032C'
DOWN_INVERTED_BREVE  = '\u032F'
DOWN_TILDE           = '\u0330'
DOWN_MACRON          = '\u0331'
DOWN_HALF_RING       = '\u0339'
DOWN_INVERTED_BRIDGE = '\u033A'
DOWN_SQUARE          = '\u033B'
DOWN_SEAGULL         = '\u033C'
DOWN_DOUBLE_VERTICAL = '\u0348'
DOWN_LEFT_ANGLE      = '\u0349'

# ── Ties and joiners ────────────────────────────────────────────────

TIE_BELOW = '\u035C'
TIE_ABOVE = '\u0361'
ZWNJ      = '\u200C'

# ── Spacing modifiers ───────────────────────────────────────────────

PRIMARY_STRESS   = '\u02C8'
SECONDARY_STRESS = '\u02CC'
RHOTIC_HOOK      = '\u02DE'
LOW_RING         = '\u02F3'
LOW_LEFT_ARROW   = '\u02FD'

# ── Tone letters (Chao) ─────────────────────────────────────────────

TONE_EXTRA_HIGH = '\u02E5'
TONE_HIGH       = '\u02E6'
TONE_MID        = '\u02E7'
TONE_LOW        = '\u02E8'
TONE_EXTRA_LOW  = '\u02E9'

TONE_LETTERS = (TONE_EXTRA_HIGH, TONE_HIGH, TONE_MID, TONE_LOW, TONE_EXTRA_LOW)

# Chao level → contour token of the output notation.  Mid tone is
# unmarked.
TONE_CONTOURS: Dict[str, str] = {
    TONE_EXTRA_HIGH: '++',
    TONE_HIGH:       '+',
    TONE_MID:        '',
    TONE_LOW:        '-',
    TONE_EXTRA_LOW:  '--',
}

# Modifier glottal stop, picked up during tone lookahead as well.
GLOTTAL_MODIFIER = '\u02C0'


def codepoint_label(ch: str) -> str:
    """Return a readable ``U+XXXX`` label for a (possibly invisible) mark."""
    return f"U+{ord(ch):04X}"
