"""Exceptions raised by the transliteration engine.

Every failure is fatal for the call that raised it; no partial output
is returned.  Each exception records the input consumed so far and the
codepoint being processed, which is usually enough to find the
offending spot in a long transcription.
"""

from __future__ import annotations

from typing import Optional

from ..data.marks import codepoint_label


class TalkError(ValueError):
    """Base class for all transliteration failures."""

    def __init__(self, label: str, prefix: str = "", symbol: Optional[str] = None) -> None:
        self.label = label
        self.prefix = prefix
        self.symbol = symbol
        if symbol:
            where = " + ".join(codepoint_label(ch) for ch in symbol)
            message = f"{label} ({prefix} + {where})"
        else:
            message = f"{label} ({prefix})"
        super().__init__(message)


class UnknownSymbol(TalkError):
    """The scanned codepoint has no entry in the symbol table."""


class UnknownDiacriticCombination(TalkError):
    """A context-dependent mark followed a consonant it cannot modify."""


class InvalidFeatureTarget(TalkError):
    """A feature was applied but the node it targets does not exist."""


class UnsupportedFeatureCombination(TalkError):
    """A node carries a feature the output notation cannot express."""


__all__ = [
    "TalkError",
    "UnknownSymbol",
    "UnknownDiacriticCombination",
    "InvalidFeatureTarget",
    "UnsupportedFeatureCombination",
]
