"""Shopping list helpers.

Groups free-text shopping entries under a shared core ingredient and tells
which ones the household already has in stock.
"""
from typing import Any, Dict, Iterable, List, Optional

from mealmatch.logic.matching.matcher import MatchPolicy, ScoringWeights, prepare_inventory, select_match
from mealmatch.logic.matching.normalizer import normalize
from mealmatch.logic.matching.similarity import similarity
from mealmatch.utilities.constants import DATE_FORMAT, MATCH_THRESHOLD

__all__ = ["check_inventory_status", "find_or_create_key", "consolidate_shopping_items"]


def _status(item) -> Dict[str, Any]:
    exp = item.expiration_date
    return {
        'in_stock': True,
        'item_name': item.name,
        'quantity_level': item.quantity_level,
        'expiration_date': exp.strftime(DATE_FORMAT) if exp else None,
    }


def check_inventory_status(name: str, inventory: Iterable, *, weights: Optional[ScoringWeights] = None,
                           policy: Optional[MatchPolicy] = None) -> Optional[Dict[str, Any]]:
    """Return { in_stock, item_name, quantity_level, expiration_date } for a matching item, else None."""
    item = select_match(name, prepare_inventory(inventory), weights=weights, policy=policy)
    return _status(item) if item is not None else None


def find_or_create_key(name: str, existing_keys: Iterable[str], threshold: float = MATCH_THRESHOLD) -> str:
    """Return the first existing key similar enough to name's core, otherwise the core itself."""
    core = normalize(name)
    for key in existing_keys:
        if similarity(core, key) >= threshold:
            return key
    return core


def consolidate_shopping_items(names: Iterable[str], inventory: Iterable = (), *,
                               threshold: float = MATCH_THRESHOLD,
                               weights: Optional[ScoringWeights] = None,
                               policy: Optional[MatchPolicy] = None) -> List[Dict[str, Any]]:
    """Merge shopping entries that refer to the same ingredient.

    Returns:
        List of groups in order of first appearance:
        { key, names, count, in_stock, quantity_level }
    """
    groups: Dict[str, Dict[str, Any]] = {}
    for name in names or ():
        if not isinstance(name, str) or not name.strip():
            continue
        key = find_or_create_key(name, groups.keys(), threshold)
        group = groups.setdefault(key, {'key': key, 'names': [], 'count': 0})
        group['names'].append(name.strip())
        group['count'] += 1

    candidates = prepare_inventory(inventory)
    result: List[Dict[str, Any]] = []
    for group in groups.values():
        item = select_match(group['key'], candidates, weights=weights, policy=policy)
        group['in_stock'] = item is not None
        group['quantity_level'] = item.quantity_level if item is not None else None
        result.append(group)
    return result
