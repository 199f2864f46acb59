"""Recipe domain entity: identity, display name and a loosely shaped ingredients payload."""
from typing import Any, List

from mealmatch.utilities.constants import INGREDIENTS_KEY


def resolve_ingredients(payload: Any) -> List[str]:
    """Coerce an ingredients payload to a list of ingredient strings.

    Accepts a list of strings, a container object holding that list under
    "ingredients", or structured entries carrying a "name" (or "item").
    Anything else resolves to an empty list.
    """
    if isinstance(payload, dict):
        payload = payload.get(INGREDIENTS_KEY)
    if not isinstance(payload, (list, tuple)):
        return []
    resolved: List[str] = []
    for entry in payload:
        if isinstance(entry, dict):
            entry = entry.get("name") or entry.get("item")
        if isinstance(entry, str) and entry.strip():
            resolved.append(entry.strip())
    return resolved


class Recipe:
    def __init__(self, id: str = "", name: str = "", ingredients: Any = None):
        self.id = id
        self.name = name
        # Raw payload is kept as received; resolution happens on read
        self.ingredients = ingredients

    def __str__(self) -> str:
        return f"{self.name} - {len(self.ingredient_names())} ingredients"

    __repr__ = __str__

    def ingredient_names(self) -> List[str]:
        return resolve_ingredients(self.ingredients)

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        name = d.get("name")
        return Recipe(
            id=str(d.get("id") or ""),
            name=name if isinstance(name, str) else ("" if name is None else str(name)),
            ingredients=d.get("ingredients"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": self.ingredient_names(),
        }
