from fastapi import APIRouter

from mealmatch.logic.matching.matcher import ScoringWeights
from mealmatch.logic.shopping.list_builder import consolidate_shopping_items
from mealmatch.utilities.validators import ShoppingConsolidateRequest

router = APIRouter(prefix="/api/shopping-list")


@router.post("/consolidate")
def api_shopping_consolidate(payload: ShoppingConsolidateRequest):
    """Group shopping entries by core ingredient and flag the ones already in stock."""
    weights = ScoringWeights.from_config()
    groups = consolidate_shopping_items(
        payload.items, [i.to_domain() for i in payload.inventory],
        threshold=weights.threshold, weights=weights,
    )
    return {
        'count': len(groups),
        'in_stock': sum(1 for g in groups if g['in_stock']),
        'groups': groups,
    }
