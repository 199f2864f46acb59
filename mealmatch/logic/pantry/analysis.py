"""Pantry expiry helpers.

Shared by the matcher (expiring-soon bonus) and the dashboard's
"expiring soon" panel.
"""
from __future__ import annotations
import math
from datetime import date as _date, datetime
from typing import Any, Dict, Iterable, List, Optional

from mealmatch.domain.InventoryItem import Expiration, InventoryItem, coerce_item
from mealmatch.utilities.constants import DATE_FORMAT, EXPIRING_SOON_DAYS, URGENT_EXPIRY_DAYS

__all__ = ["days_until_expiration", "is_expiring_soon", "compute_expiring_soon"]

_SECONDS_PER_DAY = 24 * 60 * 60


def days_until_expiration(expiration: Optional[Expiration], today: Optional[_date] = None) -> Optional[int]:
    """Whole days from today until expiration, rounded up. None when there is no expiration."""
    if expiration is None:
        return None
    if isinstance(expiration, datetime):
        if isinstance(today, datetime):
            now = today
            # naive and aware values cannot be subtracted; read today in the expiration's zone
            if (now.tzinfo is None) != (expiration.tzinfo is None):
                now = now.replace(tzinfo=expiration.tzinfo)
        elif today is not None:
            now = datetime.combine(today, datetime.min.time(), tzinfo=expiration.tzinfo)
        else:
            now = datetime.now(expiration.tzinfo)
        return math.ceil((expiration - now).total_seconds() / _SECONDS_PER_DAY)
    reference = today.date() if isinstance(today, datetime) else (today or _date.today())
    return (expiration - reference).days


def is_expiring_soon(item: InventoryItem, today: Optional[_date] = None, *, window: int = EXPIRING_SOON_DAYS) -> bool:
    """True when the item expires today or within `window` days. Expired items are not expiring."""
    days = days_until_expiration(item.expiration_date, today)
    return days is not None and 0 <= days <= window


def compute_expiring_soon(inventory: Iterable[InventoryItem], today: Optional[_date] = None, *,
                          window: int = EXPIRING_SOON_DAYS, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """Return items expiring in <= window days (including already expired), soonest first."""
    today = today or _date.today()
    result: List[Dict[str, Any]] = []
    for raw in inventory or ():
        item = coerce_item(raw)
        days_left = days_until_expiration(item.expiration_date, today)
        if days_left is None or days_left > window:
            continue
        result.append({
            'name': item.name,
            'category': item.category,
            'expiration_date': item.expiration_date.strftime(DATE_FORMAT),
            'days_left': days_left,
            'urgent': days_left <= URGENT_EXPIRY_DAYS,
            'expired': days_left < 0,
        })
    result.sort(key=lambda x: (x['days_left'], x['name'].lower()))
    if limit is not None:
        result = result[:max(limit, 0)]
    return result
