from datetime import date as _date

from fastapi import APIRouter

from mealmatch.logic.matching.matcher import ScoringWeights
from mealmatch.logic.pantry.analysis import compute_expiring_soon
from mealmatch.logic.shopping.list_builder import check_inventory_status
from mealmatch.utilities.validators import ExpiringRequest, InventoryStatusRequest

router = APIRouter(prefix="/api/inventory")


@router.post("/status")
def api_inventory_status(payload: InventoryStatusRequest):
    """Tell, for each posted name, whether a matching item is in stock."""
    inventory = [i.to_domain() for i in payload.inventory]
    weights = ScoringWeights.from_config()
    items = []
    for name in payload.items:
        status = check_inventory_status(name, inventory, weights=weights)
        items.append({'name': name, **(status or {'in_stock': False})})
    return {
        'count': sum(1 for it in items if it['in_stock']),
        'items': items,
    }


@router.post("/expiring")
def api_inventory_expiring(payload: ExpiringRequest):
    """Dashboard panel: items expiring within the window (already expired included), soonest first."""
    inventory = [i.to_domain() for i in payload.inventory]
    items = compute_expiring_soon(inventory, payload.today or _date.today(),
                                  window=payload.window, limit=payload.limit)
    return {'count': len(items), 'window': payload.window, 'items': items}
