"""
Top‑level package for ipatalk.

ipatalk converts text written in the International Phonetic Alphabet
into talk notation, a compact ASCII phoneme alphabet.  The package
exposes a minimal API so that callers do not have to delve into
internal submodules; the heavy lifting lives in ``ipatalk.core``.

Example usage::

    from ipatalk import transliterate, TalkOptions

    transliterate("ɲa˥˩")                           # 'ny~a++a--'
    transliterate("ɲa˥˩", TalkOptions(tones=False))  # 'ny~a'

The optional preview window lives in ``ipatalk.gui`` and requires
PyQt6; it is not imported here.
"""

from .config import AppConfig, TalkOptions, get_app_config, load_config  # noqa: F401
from .core import (  # noqa: F401
    InvalidFeatureTarget,
    TalkError,
    UnknownDiacriticCombination,
    UnknownSymbol,
    UnsupportedFeatureCombination,
    scan,
    supported_symbols,
    transliterate,
)

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "TalkOptions",
    "get_app_config",
    "load_config",
    "transliterate",
    "scan",
    "supported_symbols",
    "TalkError",
    "UnknownSymbol",
    "UnknownDiacriticCombination",
    "InvalidFeatureTarget",
    "UnsupportedFeatureCombination",
]
