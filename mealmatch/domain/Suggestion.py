"""Derived, read-only results of matching a recipe against the inventory."""
from dataclasses import dataclass, field
from typing import Tuple

from mealmatch.domain.Recipe import Recipe


@dataclass(frozen=True)
class MatchEvidence:
    score: float = 0.0
    matched_items: Tuple[str, ...] = field(default_factory=tuple)
    expiring_items: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def uses_expiring(self) -> bool:
        return bool(self.expiring_items)

    def to_dict(self):
        return {
            "score": self.score,
            "matched_items": list(self.matched_items),
            "expiring_items": list(self.expiring_items),
        }


EMPTY_EVIDENCE = MatchEvidence()


@dataclass(frozen=True)
class RankedSuggestion:
    recipe: Recipe
    evidence: MatchEvidence

    @property
    def score(self) -> float:
        return self.evidence.score

    def to_dict(self):
        '''Payload consumed by the UI: "uses expiring items" and "N items in stock" badges.'''
        return {
            "recipe_id": self.recipe.id,
            "recipe_name": self.recipe.name,
            "score": self.evidence.score,
            "matched_items": list(self.evidence.matched_items),
            "expiring_items": list(self.evidence.expiring_items),
            "in_stock_count": len(self.evidence.matched_items),
            "uses_expiring": self.evidence.uses_expiring,
        }
