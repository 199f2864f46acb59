"""
Input validation schemas using Pydantic for the HTTP layer.
"""
from datetime import date
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mealmatch.domain.InventoryItem import InventoryItem
from mealmatch.domain.Recipe import Recipe
from mealmatch.utilities import config
from mealmatch.utilities.constants import DEFAULT_CATEGORY, EXPIRING_SOON_DAYS, MAX_SUGGESTION_LIMIT

QuantityLevel = Literal["low", "medium", "full"]


def _id_to_str(v):
    return "" if v is None else str(v)


class InventoryItemInput(BaseModel):
    """Schema for one inventory item. Accepts camelCase aliases used by the web client."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    name: str = Field(..., min_length=1, max_length=200)
    quantity_level: QuantityLevel = Field("medium", alias="quantityLevel")
    expiration_date: Optional[date] = Field(None, alias="expirationDate")
    category: str = DEFAULT_CATEGORY

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return _id_to_str(v)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        v = v.strip()
        if not v:
            raise ValueError('Inventory item name cannot be empty')
        return v

    @field_validator('quantity_level', mode='before')
    @classmethod
    def lower_level(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    def to_domain(self) -> InventoryItem:
        return InventoryItem(id=self.id, name=self.name, quantity_level=self.quantity_level,
                             expiration_date=self.expiration_date, category=self.category or DEFAULT_CATEGORY)


class RecipeInput(BaseModel):
    """Schema for one recipe. The ingredients payload is deliberately loose."""
    id: str = ""
    name: str = ""
    ingredients: Any = None

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return _id_to_str(v)

    def to_domain(self) -> Recipe:
        return Recipe(id=self.id, name=self.name.strip(), ingredients=self.ingredients)


class SuggestionRequest(BaseModel):
    recipes: List[RecipeInput] = Field(default_factory=list)
    inventory: List[InventoryItemInput] = Field(default_factory=list)
    limit: int = Field(default_factory=lambda: config.SUGGESTION_LIMIT, ge=1, le=MAX_SUGGESTION_LIMIT)
    today: Optional[date] = None
    policy: Literal["first", "best"] = "first"


class NormalizeRequest(BaseModel):
    names: List[str] = Field(default_factory=list)


class InventoryStatusRequest(BaseModel):
    items: List[str] = Field(default_factory=list)
    inventory: List[InventoryItemInput] = Field(default_factory=list)


class ExpiringRequest(BaseModel):
    inventory: List[InventoryItemInput] = Field(default_factory=list)
    today: Optional[date] = None
    window: int = Field(EXPIRING_SOON_DAYS, ge=0, le=365)
    limit: Optional[int] = Field(None, ge=1, le=MAX_SUGGESTION_LIMIT)


class ShoppingConsolidateRequest(BaseModel):
    items: List[str] = Field(default_factory=list)
    inventory: List[InventoryItemInput] = Field(default_factory=list)


class ConsumptionRequest(BaseModel):
    """Ingredients of confirmed meals; each entry may be a list or a container payload."""
    meals: List[Any] = Field(default_factory=list)
    inventory: List[InventoryItemInput] = Field(default_factory=list)


class RestockRequest(BaseModel):
    purchased: List[str] = Field(default_factory=list)
    inventory: List[InventoryItemInput] = Field(default_factory=list)
