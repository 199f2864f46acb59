"""Proposed inventory updates after cooking meals or buying groceries.

Nothing here writes anywhere: the functions return the changes a caller
should persist.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Optional

from mealmatch.domain.Recipe import resolve_ingredients
from mealmatch.logic.matching.matcher import MatchPolicy, ScoringWeights, prepare_inventory, select_match
from mealmatch.utilities.constants import DEFAULT_CATEGORY, QUANTITY_LEVELS

__all__ = ["reduce_quantity_level", "plan_meal_consumption", "plan_receipt_restock"]

logger = logging.getLogger(__name__)


def reduce_quantity_level(level: str) -> str:
    """One step down: full -> medium -> low. Low stays low."""
    try:
        idx = QUANTITY_LEVELS.index(level)
    except ValueError:
        return QUANTITY_LEVELS[0]
    return QUANTITY_LEVELS[max(idx - 1, 0)]


def plan_meal_consumption(ingredient_lists: Iterable[Any], inventory: Iterable, *,
                          weights: Optional[ScoringWeights] = None,
                          policy: Optional[MatchPolicy] = None) -> Dict[str, List]:
    """Propose lower quantity levels for the items used by confirmed meals.

    Each ingredient list may use any shape accepted for recipe ingredients.
    An inventory item is reduced at most once, however many meals use it.

    Returns:
        { 'updates': [ { id, name, from, to } ], 'items_used': [ name, ... ] }
    """
    candidates = prepare_inventory(inventory)
    updates: List[Dict[str, str]] = []
    items_used: List[str] = []
    seen = set()
    for payload in ingredient_lists or ():
        for ingredient in resolve_ingredients(payload):
            item = select_match(ingredient, candidates, weights=weights, policy=policy)
            if item is None or id(item) in seen:
                continue
            seen.add(id(item))
            updates.append({
                'id': item.id,
                'name': item.name,
                'from': item.quantity_level,
                'to': reduce_quantity_level(item.quantity_level),
            })
            items_used.append(item.name)
    logger.debug("Meal consumption: %d inventory items used", len(items_used))
    return {'updates': updates, 'items_used': items_used}


def plan_receipt_restock(purchased_names: Iterable[str], inventory: Iterable, *,
                         weights: Optional[ScoringWeights] = None,
                         policy: Optional[MatchPolicy] = None) -> Dict[str, List]:
    """Propose inventory changes for purchased items.

    Purchases matching an existing item bring it back to "full"; the rest
    become new items.

    Returns:
        { 'restocked': [ { id, name, purchased } ], 'new_items': [ { name, category, quantity_level } ] }
    """
    candidates = prepare_inventory(inventory)
    restocked: List[Dict[str, str]] = []
    new_items: List[Dict[str, str]] = []
    for name in purchased_names or ():
        if not isinstance(name, str) or not name.strip():
            continue
        item = select_match(name, candidates, weights=weights, policy=policy)
        if item is not None:
            restocked.append({'id': item.id, 'name': item.name, 'purchased': name})
        else:
            new_items.append({'name': name.strip(), 'category': DEFAULT_CATEGORY, 'quantity_level': 'full'})
    return {'restocked': restocked, 'new_items': new_items}
