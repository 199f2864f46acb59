"""InventoryItem domain entity: name, quantity level, optional expiration date, category."""
from datetime import date, datetime
from typing import Optional, Union

from mealmatch.utilities.constants import (
    DATE_FORMAT, DEFAULT_CATEGORY, DEFAULT_QUANTITY_LEVEL, QUANTITY_LEVELS
)

Expiration = Union[date, datetime]


def parse_expiration(value) -> Optional[Expiration]:
    '''Coerces an expiration value to a date (datetimes are kept). Unparseable values become None.'''
    if isinstance(value, (datetime, date)):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip()[:10], DATE_FORMAT).date()
    except ValueError:
        return None


def coerce_quantity_level(value) -> str:
    level = str(value).strip().lower() if value is not None else ""
    return level if level in QUANTITY_LEVELS else DEFAULT_QUANTITY_LEVEL


class InventoryItem:
    def __init__(self, id: str = "", name: str = "", quantity_level: str = DEFAULT_QUANTITY_LEVEL,
                 expiration_date: Optional[Expiration] = None, category: str = DEFAULT_CATEGORY):
        self.id = id
        self.name = name
        self.quantity_level = coerce_quantity_level(quantity_level)
        self.expiration_date = parse_expiration(expiration_date)
        self.category = category or DEFAULT_CATEGORY

    @property
    def is_full(self) -> bool:
        return self.quantity_level == "full"

    def __str__(self) -> str:
        parts = [f"{self.name} ({self.quantity_level})"]
        if self.expiration_date:
            parts.append(f"Exp: {self.expiration_date.strftime(DATE_FORMAT)}")
        return " - ".join(parts)

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, InventoryItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates an InventoryItem from a dictionary. Ignores unknown keys, accepts camelCase aliases.'''
        d = dict(data) if isinstance(data, dict) else {}
        if "quantityLevel" in d and "quantity_level" not in d:
            d["quantity_level"] = d["quantityLevel"]
        if "expirationDate" in d and "expiration_date" not in d:
            d["expiration_date"] = d["expirationDate"]
        allowed = {"id", "name", "quantity_level", "expiration_date", "category"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered["id"] = str(filtered.get("id") or "")
        name = filtered.get("name")
        filtered["name"] = name if isinstance(name, str) else ("" if name is None else str(name))
        return InventoryItem(**filtered)

    def to_dict(self):
        '''Converts the InventoryItem to a JSON-friendly dictionary.'''
        if isinstance(self.expiration_date, (datetime, date)):
            exp_val = self.expiration_date.strftime(DATE_FORMAT)
        else:
            exp_val = None
        return {
            "id": self.id,
            "name": self.name,
            "quantity_level": self.quantity_level,
            "expiration_date": exp_val,
            "category": self.category,
        }


def coerce_item(item) -> InventoryItem:
    '''Returns InventoryItem instances unchanged and builds one from anything else via from_dict.'''
    return item if isinstance(item, InventoryItem) else InventoryItem.from_dict(item)
