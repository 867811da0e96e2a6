"""Display-independent part of the preview window."""

from __future__ import annotations

from typing import Optional, Tuple

from ..config import TalkOptions
from ..core import TalkError, transliterate


def render_preview(text: str, tones: bool = True) -> Tuple[str, Optional[str]]:
    """Transliterate *text* for display.

    :return: ``(output, None)`` on success, ``("", message)`` when the
        input cannot be transliterated.
    """
    try:
        return transliterate(text, TalkOptions(tones=tones)), None
    except TalkError as exc:
        return "", str(exc)
