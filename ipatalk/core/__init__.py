"""
Core transliteration logic for ipatalk.

This subpackage contains the pipeline that turns IPA text into talk
notation: the symbol table, the engine state that groups phonemes into
cells, the diacritic and tone handling, and the serializer.

The primary entry point is :func:`transliterate`.  :func:`scan` runs
the same pipeline but stops before serialization and returns the
:class:`Accumulator`, whose ``cells`` can be inspected directly.

Example::

    from ipatalk.core import transliterate
    transliterate("kʰat")      # 'kh~at'
"""

# Public API of the core package
from .engine import Transliterator, scan, transliterate  # noqa: F401
from .errors import (  # noqa: F401
    InvalidFeatureTarget,
    TalkError,
    UnknownDiacriticCombination,
    UnknownSymbol,
    UnsupportedFeatureCombination,
)
from .nodes import Cell, Consonant, Punctuation, Vowel  # noqa: F401
from .serializer import serialize  # noqa: F401
from .symbols import lookup, supported_symbols  # noqa: F401

__all__ = [
    "Transliterator",
    "scan",
    "transliterate",
    "serialize",
    "lookup",
    "supported_symbols",
    "Cell",
    "Vowel",
    "Consonant",
    "Punctuation",
    "TalkError",
    "UnknownSymbol",
    "UnknownDiacriticCombination",
    "InvalidFeatureTarget",
    "UnsupportedFeatureCombination",
]
