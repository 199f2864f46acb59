import logging
from datetime import date as _date

from fastapi import APIRouter

from mealmatch.logic.matching.matcher import ScoringWeights, get_policy
from mealmatch.logic.matching.normalizer import normalize
from mealmatch.logic.matching.ranker import rank
from mealmatch.utilities.validators import NormalizeRequest, SuggestionRequest

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/suggestions")
def api_suggestions(payload: SuggestionRequest):
    """Return "what to cook" suggestions for the posted catalog and inventory.

    Response JSON structure:
        {
          "count": <int>,
          "total": <int>,
          "suggestions": [ { recipe_id, recipe_name, score, matched_items,
                             expiring_items, in_stock_count, uses_expiring } ]
        }
    """
    recipes = [r.to_domain() for r in payload.recipes]
    inventory = [i.to_domain() for i in payload.inventory]
    suggestions = rank(
        recipes, inventory, payload.limit,
        today=payload.today or _date.today(),
        weights=ScoringWeights.from_config(),
        policy=get_policy(payload.policy),
    )
    logger.info("Suggestions: %d of %d recipes against %d inventory items",
                len(suggestions), len(recipes), len(inventory))
    return {
        'count': len(suggestions),
        'total': len(recipes),
        'suggestions': [s.to_dict() for s in suggestions],
    }


@router.post("/ingredients/normalize")
def api_normalize(payload: NormalizeRequest):
    """Return the core ingredient for each posted name."""
    return {'items': [{'name': n, 'core': normalize(n)} for n in payload.names]}
