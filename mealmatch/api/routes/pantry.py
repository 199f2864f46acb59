import logging

from fastapi import APIRouter

from mealmatch.logic.matching.matcher import ScoringWeights
from mealmatch.logic.pantry.updates import plan_meal_consumption, plan_receipt_restock
from mealmatch.utilities.validators import ConsumptionRequest, RestockRequest

router = APIRouter(prefix="/api/pantry")
logger = logging.getLogger(__name__)


@router.post("/consume")
def api_pantry_consume(payload: ConsumptionRequest):
    """Propose lower quantity levels for items used by confirmed meals. Nothing is saved."""
    result = plan_meal_consumption(payload.meals, [i.to_domain() for i in payload.inventory],
                                   weights=ScoringWeights.from_config())
    logger.info("Meal confirmation: %d meals, %d items used", len(payload.meals), len(result['items_used']))
    return result


@router.post("/restock")
def api_pantry_restock(payload: RestockRequest):
    """Propose inventory changes for purchased items. Nothing is saved."""
    return plan_receipt_restock(payload.purchased, [i.to_domain() for i in payload.inventory],
                                weights=ScoringWeights.from_config())
