"""Recipe ranker: "what to cook" suggestions for the current inventory.

Pure and stateless; callers recompute whenever the recipe catalog or the
inventory snapshot changes.
"""
from __future__ import annotations
import logging
from datetime import date as _date
from typing import Iterable, List, Optional

from mealmatch.domain.Suggestion import RankedSuggestion
from mealmatch.logic.matching.matcher import (
    MatchPolicy, ScoringWeights, coerce_recipe, match_prepared, prepare_inventory
)
from mealmatch.utilities.constants import SUGGESTION_LIMIT

__all__ = ["rank"]

logger = logging.getLogger(__name__)


def rank(recipes: Iterable, inventory: Iterable, limit: Optional[int] = SUGGESTION_LIMIT, *,
         today: Optional[_date] = None, weights: Optional[ScoringWeights] = None,
         policy: Optional[MatchPolicy] = None) -> List[RankedSuggestion]:
    """Rank recipes by how well they use the inventory.

    Recipes scoring 0 are dropped. Ordering is by score, highest first; equal
    scores keep catalog order. At most `limit` suggestions are returned
    (`None` returns all of them).
    """
    if limit is not None and limit <= 0:
        return []
    candidates = prepare_inventory(inventory)
    today = today or _date.today()

    scored: List[RankedSuggestion] = []
    total = 0
    for raw in recipes or ():
        total += 1
        recipe = coerce_recipe(raw)
        evidence = match_prepared(recipe, candidates, today=today, weights=weights, policy=policy)
        if evidence.score > 0:
            scored.append(RankedSuggestion(recipe=recipe, evidence=evidence))

    # list.sort is stable: ties stay in catalog order
    scored.sort(key=lambda s: s.score, reverse=True)
    if limit is not None:
        scored = scored[:limit]
    logger.debug("Ranked %d recipes against %d inventory items: %d suggestions",
                 total, len(candidates), len(scored))
    return scored
