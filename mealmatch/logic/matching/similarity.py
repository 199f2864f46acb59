"""String similarity used to decide whether an ingredient and an inventory item are the same thing.

The overlap ratio is a loose bag-of-characters heuristic rather than an edit
distance: it favours recall, so short names sharing common letters can
score above the match threshold ("chicken breast" vs "chicken thighs").
"""
from __future__ import annotations

from mealmatch.utilities.constants import CONTAINMENT_SIMILARITY

__all__ = ["similarity", "character_overlap"]


def character_overlap(a: str, b: str) -> float:
    """Share of the longer string covered by characters of the shorter one.

    Every position of the shorter string counts on its own; matched
    characters are not consumed from the longer string. Equal-length inputs
    are ordered lexicographically so the result does not depend on argument
    order.
    """
    shorter, longer = sorted((a, b), key=lambda s: (len(s), s))
    if not longer:
        return 1.0
    present = set(longer)
    matches = sum(1 for ch in shorter if ch in present)
    return matches / len(longer)


def similarity(a: str, b: str, *, containment: float = CONTAINMENT_SIMILARITY) -> float:
    """Similarity in [0, 1]: 1.0 when equal ignoring case, `containment` when one contains the other."""
    s1 = (a or "").casefold()
    s2 = (b or "").casefold()
    if s1 == s2:
        return 1.0
    if s1 in s2 or s2 in s1:
        return containment
    return character_overlap(s1, s2)
