"""Rendering of phoneme cells into the output notation.

Each node is written as its token followed by marker suffixes in a
fixed order.  Consonant length is written by repeating the whole
rendered consonant (``t~`` long becomes ``t~t~``).
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .errors import UnsupportedFeatureCombination
from .nodes import CONSONANT, VOWEL, Cell, Consonant, Node, Vowel


# (attribute, marker) for consonant flags, in output order.
_CONSONANT_MARKERS: Tuple[Tuple[str, str], ...] = (
    ("tense", "@"),
    ("dental", "~"),
    ("pharyngealization", "Q~"),
    ("palatalization", "y~"),
    ("velarization", "G~"),
    ("labialization", "w~"),
    ("aspiration", "h~"),
    ("ejection", "!"),
    ("implosion", "?"),
)


def render_vowel(vowel: Vowel) -> str:
    parts = [vowel.value]
    if vowel.nasalization:
        parts.append("&")
    if vowel.tone:
        parts.append(vowel.tone)
    if not vowel.syllabic:
        parts.append("@")
    if vowel.short:
        parts.append("!")
    if vowel.long:
        parts.append("_")
    if vowel.stress:
        parts.append("^")
    return "".join(parts)


def _unsupported(consonant: Consonant) -> Optional[str]:
    if consonant.glottalization:
        return f"glottalized {consonant.value!r} has no notation"
    return None


def render_consonant(consonant: Consonant) -> str:
    problem = _unsupported(consonant)
    if problem:
        raise UnsupportedFeatureCombination(problem)
    parts = [consonant.value]
    for attr, marker in _CONSONANT_MARKERS:
        if getattr(consonant, attr):
            parts.append(marker)
    if not consonant.voice:
        parts.append("h!")
    if consonant.stop:
        parts.append(".")
    text = "".join(parts)
    if consonant.long:
        text += text
    return text


def render_node(node: Node) -> str:
    if node.kind == VOWEL:
        return render_vowel(node)
    if node.kind == CONSONANT:
        return render_consonant(node)
    return node.value


def serialize(cells: Iterable[Cell]) -> str:
    """Concatenate every rendered node, cell by cell.

    :raises UnsupportedFeatureCombination: for a node the notation
        cannot express; the error carries the output rendered so far.
    """
    out: List[str] = []
    for cell in cells:
        for node in cell:
            if node.kind == CONSONANT:
                problem = _unsupported(node)
                if problem:
                    raise UnsupportedFeatureCombination(problem, "".join(out))
            out.append(render_node(node))
    return "".join(out)
