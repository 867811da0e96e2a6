"""Tone letters and their distribution over vowels.

A tone is triggered by a tone letter (˥ ˦ ˧ ˨ ˩) or by a vowel carrying
an acute or grave accent.  The capture reads ahead over any further
tone letters so that a contour such as ``˥˩`` becomes one queue of
levels, ``['++', '--']``.  Adjacent repeats collapse (``˥˥`` is a
single ``++``) and mid tone only counts when it opens the contour.

The queue is then spread over the vowels of the current tone domain:

1. vowels before the last one take levels left to right while more
   than one level is still queued;
2. the last vowel takes the next level;
3. any levels left over are carried by copies of the last vowel,
   appended after it.  If the last vowel was long, the length moves
   to the final copy.

With tones disabled the letters are still consumed, but no vowel is
touched.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List

from ..data.marks import GLOTTAL_MODIFIER, TONE_CONTOURS
from .accumulator import Accumulator
from .errors import InvalidFeatureTarget
from .features import FeatureApplicator
from .nodes import Vowel
from .scanner import Scanner

logger = logging.getLogger(__name__)


class ToneCapture:
    """Reads tone contours from the scanner and writes them onto vowels."""

    def __init__(
        self,
        state: Accumulator,
        scanner: Scanner,
        features: FeatureApplicator,
        enabled: bool = True,
    ) -> None:
        self.state = state
        self.scanner = scanner
        self.features = features
        self.enabled = enabled

    def capture(self, first: str) -> List[str]:
        """Collect the contour starting with tone letter *first*.

        Consumes following tone letters (and modifier glottal stops,
        which are emitted as consonants on the way) and commits the
        result.  Returns the contour queue that was committed.
        """
        tones: List[str] = [TONE_CONTOURS[first]]
        while True:
            nxt = self.scanner.peek()
            if nxt in TONE_CONTOURS:
                self.scanner.advance()
                tone = TONE_CONTOURS[nxt]
                if tone and tone != tones[-1]:
                    tones.append(tone)
            elif nxt == GLOTTAL_MODIFIER:
                self.scanner.advance()
                self.features.glottal_stop()
            else:
                break
        self.commit(tones)
        return tones

    def commit(self, tones: List[str]) -> None:
        if not self.enabled:
            return

        vowels = self.state.tone_domain
        if not vowels:
            raise InvalidFeatureTarget(
                "tone: no vowel to carry it", self.scanner.prefix(), self.scanner.current or None
            )
        logger.debug("tone contour %r over %d vowel(s)", tones, len(vowels))

        queue: Deque[str] = deque(tones)
        for vowel in vowels[:-1]:
            if len(queue) <= 1:
                break
            vowel.tone = queue.popleft()

        last = vowels[-1]
        if queue:
            last.tone = queue.popleft()

        extra = [Vowel(last.value, tone=tone) for tone in queue]
        if extra and last.long:
            extra[-1].long = True
            last.long = False
        self.state.extend_tone_domain(extra)
