"""Inventory-aware recipe matching: normalizer, similarity, matcher, ranker."""
from mealmatch.logic.matching.normalizer import normalize
from mealmatch.logic.matching.similarity import similarity
from mealmatch.logic.matching.matcher import (
    BestMatchPolicy, FirstMatchPolicy, MatchPolicy, ScoringWeights,
    find_inventory_match, get_policy, match_recipe,
)
from mealmatch.logic.matching.ranker import rank

__all__ = [
    "normalize", "similarity", "match_recipe", "find_inventory_match", "rank",
    "ScoringWeights", "MatchPolicy", "FirstMatchPolicy", "BestMatchPolicy", "get_policy",
]
