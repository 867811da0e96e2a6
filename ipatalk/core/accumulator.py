"""Engine state for a single transliteration call.

The :class:`Accumulator` owns the growing list of cells and the
"last" handles that diacritics use to find their target:

* ``last_vowel`` / ``last_consonant``: most recent node of that kind,
  kept across cell and word boundaries;
* ``last_any``: most recent vowel or consonant;
* ``cluster``: the consonants of the currently open consonant cell;
* ``tone_domain``: the vowels a tone mark may be spread over.

Only one of the open vowel cell and the open consonant cell exists at
any time.  The tone domain is separate from cell membership: it
survives consonants (a tone letter written after a coda still reaches
the nucleus), and it is cleared by punctuation, by a vowel following a
consonant, and by the tone-reset symbols.
"""

from __future__ import annotations

from typing import List, Optional

from .nodes import CONSONANT, PUNCTUATION, VOWEL, Cell, Consonant, Node, Punctuation, Vowel


class Accumulator:
    """Collects phoneme nodes into cells in input order."""

    def __init__(self) -> None:
        self.cells: List[Cell] = []
        self.vowel_cell: Optional[Cell] = None
        self.consonant_cell: Optional[Cell] = None
        self.last_vowel: Optional[Vowel] = None
        self.last_consonant: Optional[Consonant] = None
        self.last_any: Optional[Node] = None
        self.tone_domain: List[Vowel] = []
        self.tone_cell: Optional[Cell] = None
        self.pending_stress = False

    # ── Emission ────────────────────────────────────────────────────

    def emit_vowel(self, vowel: Vowel) -> Vowel:
        if self.pending_stress:
            vowel.stress = True
            self.pending_stress = False

        if self.consonant_cell is not None:
            # vowel → consonant → vowel: the old tone domain is done
            self.consonant_cell = None
            self.reset_tone_domain()

        if self.vowel_cell is None:
            self.vowel_cell = self._open(VOWEL)

        self.vowel_cell.append(vowel)
        self.tone_domain.append(vowel)
        self.tone_cell = self.vowel_cell
        self.last_vowel = vowel
        self.last_any = vowel
        return vowel

    def emit_consonant(self, consonant: Consonant) -> Consonant:
        self.vowel_cell = None
        if self.consonant_cell is None:
            self.consonant_cell = self._open(CONSONANT)

        self.consonant_cell.append(consonant)
        self.last_consonant = consonant
        self.last_any = consonant
        return consonant

    def emit_punctuation(self, punctuation: Punctuation) -> Punctuation:
        self.vowel_cell = None
        self.consonant_cell = None
        self.reset_tone_domain()
        self._open(PUNCTUATION).append(punctuation)
        return punctuation

    def _open(self, kind: str) -> Cell:
        cell = Cell(kind)
        self.cells.append(cell)
        return cell

    # ── Tone domain ─────────────────────────────────────────────────

    def reset_tone_domain(self) -> None:
        self.tone_domain = []
        self.tone_cell = None

    def extend_tone_domain(self, vowels: List[Vowel]) -> None:
        """Append synthesized vowels to the cell holding the tone domain.

        The domain always ends with the last node of that cell, so the
        new vowels land directly after it even if consonants have been
        emitted since.
        """
        if not vowels:
            return
        assert self.tone_cell is not None, "tone domain without a cell"
        for vowel in vowels:
            self.tone_cell.append(vowel)
        self.tone_domain.extend(vowels)
        self.last_vowel = vowels[-1]
        self.last_any = vowels[-1]

    # ── Introspection ───────────────────────────────────────────────

    @property
    def cluster(self) -> List[Node]:
        """Consonants of the open consonant cell, oldest first."""
        if self.consonant_cell is None:
            return []
        return self.consonant_cell.nodes

    def nodes(self) -> List[Node]:
        """Flat list of every node in output order."""
        return [node for cell in self.cells for node in cell]
