"""Inventory matcher: scores one recipe against the household inventory.

For every ingredient the inventory is scanned for an item whose core name is
similar enough; each hit earns points (more when the item expires soon, a
little extra when the item is fully stocked) and the recipe gets a coverage
bonus proportional to the share of ingredients found.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date as _date
from typing import Iterable, List, Optional, Sequence, Tuple

from mealmatch.domain.InventoryItem import InventoryItem, coerce_item
from mealmatch.domain.Recipe import Recipe
from mealmatch.domain.Suggestion import EMPTY_EVIDENCE, MatchEvidence
from mealmatch.logic.matching.normalizer import normalize
from mealmatch.logic.matching.similarity import similarity
from mealmatch.logic.pantry.analysis import is_expiring_soon
from mealmatch.utilities import config, constants

__all__ = [
    "ScoringWeights", "MatchPolicy", "FirstMatchPolicy", "BestMatchPolicy", "get_policy",
    "coerce_item", "coerce_recipe", "prepare_inventory", "find_inventory_match", "select_match", "match_recipe", "match_prepared",
]

logger = logging.getLogger(__name__)

Candidate = Tuple[InventoryItem, str]


@dataclass(frozen=True)
class ScoringWeights:
    """Tunable constants of the matcher. Defaults are uncalibrated starting values."""
    threshold: float = constants.MATCH_THRESHOLD
    containment: float = constants.CONTAINMENT_SIMILARITY
    expiring: float = constants.EXPIRING_WEIGHT
    in_stock: float = constants.IN_STOCK_WEIGHT
    full_stock: float = constants.FULL_STOCK_WEIGHT
    coverage: float = constants.COVERAGE_WEIGHT
    expiring_days: int = constants.EXPIRING_SOON_DAYS

    def __post_init__(self):
        for label in ("threshold", "containment"):
            value = getattr(self, label)
            if not 0 <= value <= 1:
                raise ValueError(f"{label} must be within [0, 1]: {value}")
        if self.expiring_days < 0:
            raise ValueError(f"expiring_days cannot be negative: {self.expiring_days}")

    @classmethod
    def from_config(cls) -> "ScoringWeights":
        """Build weights from environment-backed settings (see utilities.config)."""
        return cls(
            threshold=config.MATCH_THRESHOLD,
            containment=config.CONTAINMENT_SIMILARITY,
            expiring=config.EXPIRING_WEIGHT,
            in_stock=config.IN_STOCK_WEIGHT,
            full_stock=config.FULL_STOCK_WEIGHT,
            coverage=config.COVERAGE_WEIGHT,
            expiring_days=config.EXPIRING_SOON_DAYS,
        )


DEFAULT_WEIGHTS = ScoringWeights()


class MatchPolicy:
    """Chooses which inventory candidate, if any, gets credit for an ingredient."""
    name = "base"

    def select(self, core: str, candidates: Sequence[Candidate], weights: ScoringWeights) -> Optional[InventoryItem]:
        raise NotImplementedError


class FirstMatchPolicy(MatchPolicy):
    """Greedy: the first item in inventory order that reaches the threshold."""
    name = "first"

    def select(self, core, candidates, weights):
        for item, item_core in candidates:
            if similarity(core, item_core, containment=weights.containment) >= weights.threshold:
                return item
        return None


class BestMatchPolicy(MatchPolicy):
    """Highest similarity over the threshold; the earliest item wins ties."""
    name = "best"

    def select(self, core, candidates, weights):
        best_item, best_value = None, -1.0
        for item, item_core in candidates:
            value = similarity(core, item_core, containment=weights.containment)
            if value >= weights.threshold and value > best_value:
                best_item, best_value = item, value
                if value == 1.0:
                    break
        return best_item


POLICIES = {p.name: p for p in (FirstMatchPolicy(), BestMatchPolicy())}
DEFAULT_POLICY = POLICIES["first"]


def get_policy(name: Optional[str]) -> MatchPolicy:
    if not name:
        return DEFAULT_POLICY
    try:
        return POLICIES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown match policy '{name}'. Expected one of: {', '.join(sorted(POLICIES))}") from None


def coerce_recipe(recipe) -> Recipe:
    return recipe if isinstance(recipe, Recipe) else Recipe.from_dict(recipe)


def prepare_inventory(inventory: Iterable) -> List[Candidate]:
    """Pair each inventory item with its normalized name, preserving order.

    Items without a usable name are skipped: an empty core would be contained
    in every ingredient.
    """
    candidates: List[Candidate] = []
    for raw in inventory or ():
        item = coerce_item(raw)
        if not isinstance(item.name, str) or not item.name.strip():
            logger.debug("Skipping nameless inventory item '%s'", item.id)
            continue
        candidates.append((item, normalize(item.name)))
    return candidates


def find_inventory_match(name: str, inventory: Iterable, *, weights: Optional[ScoringWeights] = None,
                         policy: Optional[MatchPolicy] = None) -> Optional[InventoryItem]:
    """Return the inventory item matching a free-text name, or None."""
    return select_match(name, prepare_inventory(inventory), weights=weights, policy=policy)


def select_match(name: str, candidates: Sequence[Candidate], *, weights: Optional[ScoringWeights] = None,
                 policy: Optional[MatchPolicy] = None) -> Optional[InventoryItem]:
    if not candidates:
        return None
    return (policy or DEFAULT_POLICY).select(normalize(name), candidates, weights or DEFAULT_WEIGHTS)


def match_recipe(recipe, inventory: Iterable, *, today: Optional[_date] = None,
                 weights: Optional[ScoringWeights] = None, policy: Optional[MatchPolicy] = None) -> MatchEvidence:
    """Score one recipe against the inventory.

    Never raises for malformed data: a recipe without resolvable ingredients
    or an empty inventory yields zero evidence.
    """
    return match_prepared(recipe, prepare_inventory(inventory), today=today, weights=weights, policy=policy)


def match_prepared(recipe, candidates: Sequence[Candidate], *, today: Optional[_date] = None,
                   weights: Optional[ScoringWeights] = None, policy: Optional[MatchPolicy] = None) -> MatchEvidence:
    """match_recipe over an inventory already passed through prepare_inventory."""
    weights = weights or DEFAULT_WEIGHTS
    policy = policy or DEFAULT_POLICY
    recipe = coerce_recipe(recipe)

    ingredients = recipe.ingredient_names()
    if not ingredients or not candidates:
        return EMPTY_EVIDENCE

    today = today or _date.today()
    score = 0.0
    matched: List[str] = []
    expiring: List[str] = []
    for ingredient in ingredients:
        item = policy.select(normalize(ingredient), candidates, weights)
        if item is None:
            continue
        matched.append(item.name)
        if is_expiring_soon(item, today, window=weights.expiring_days):
            expiring.append(item.name)
            score += weights.expiring
        else:
            score += weights.in_stock
        if item.is_full:
            score += weights.full_stock

    score += len(matched) / len(ingredients) * weights.coverage
    logger.debug("Recipe '%s': %d/%d ingredients matched, score %.2f",
                 recipe.name, len(matched), len(ingredients), score)
    return MatchEvidence(score=score, matched_items=tuple(matched), expiring_items=tuple(expiring))
