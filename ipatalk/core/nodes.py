"""Phoneme nodes and cells produced by the transliteration scan.

A scan produces an ordered list of :class:`Cell` objects.  Each cell
holds a run of nodes of the same kind: vowels, consonants, or a
single punctuation mark.  Nodes are mutable while the scan runs
because diacritics modify the phoneme emitted *before* them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


VOWEL = "vowel"
CONSONANT = "consonant"
PUNCTUATION = "punctuation"


@dataclass
class Vowel:
    value: str
    long: bool = False
    short: bool = False
    nasalization: bool = False
    stress: bool = False
    syllabic: bool = True
    tone: Optional[str] = None

    kind = VOWEL


@dataclass
class Consonant:
    value: str
    voice: bool = True
    aspiration: bool = False
    dental: bool = False
    pharyngealization: bool = False
    palatalization: bool = False
    velarization: bool = False
    labialization: bool = False
    glottalization: bool = False
    ejection: bool = False
    implosion: bool = False
    stop: bool = False
    tense: bool = False
    long: bool = False

    kind = CONSONANT


@dataclass
class Punctuation:
    value: str

    kind = PUNCTUATION


Node = Union[Vowel, Consonant, Punctuation]


@dataclass
class Cell:
    """A homogeneous run of nodes.

    ``kind`` is fixed when the cell is opened; :meth:`append` refuses
    nodes of another kind so a mixed cell can never be built by
    mistake.
    """

    kind: str
    nodes: List[Node] = field(default_factory=list)

    def append(self, node: Node) -> None:
        if node.kind != self.kind:
            raise TypeError(f"cannot add a {node.kind} to a {self.kind} cell")
        self.nodes.append(node)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)
