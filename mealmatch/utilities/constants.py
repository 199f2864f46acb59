from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Inventory quantity levels, lowest first
QUANTITY_LEVELS: Final[tuple[str, ...]] = ("low", "medium", "full")
DEFAULT_QUANTITY_LEVEL: Final[str] = "medium"
DEFAULT_CATEGORY: Final[str] = "other"

# Matching / scoring defaults
MATCH_THRESHOLD: Final[float] = 0.75
CONTAINMENT_SIMILARITY: Final[float] = 0.85
EXPIRING_WEIGHT: Final[float] = 5
IN_STOCK_WEIGHT: Final[float] = 2
FULL_STOCK_WEIGHT: Final[float] = 1
COVERAGE_WEIGHT: Final[float] = 10
EXPIRING_SOON_DAYS: Final[int] = 7
URGENT_EXPIRY_DAYS: Final[int] = 3
SUGGESTION_LIMIT: Final[int] = 5
MAX_SUGGESTION_LIMIT: Final[int] = 100

# Key under which a container payload keeps its ingredient list
INGREDIENTS_KEY: Final[str] = "ingredients"

HEDGE_WORDS: Final[tuple[str, ...]] = ("about", "approximately", "roughly", "around")

ARTICLES: Final[tuple[str, ...]] = ("a", "an", "the")

DESCRIPTORS: Final[tuple[str, ...]] = (
    # preparation
    "fresh", "frozen", "canned", "dried", "chopped", "diced", "sliced",
    "minced", "crushed", "ground", "shredded", "grated", "crumbled",
    "peeled", "deveined", "trimmed", "cut", "halved", "quartered",
    "julienned", "cubed", "chunked", "mashed", "pureed", "blended",
    # cooking state
    "raw", "cooked", "pre-cooked", "uncooked", "blanched", "roasted",
    "grilled", "baked", "fried", "sauteed", "steamed", "boiled",
    "rotisserie", "smoked", "cured", "marinated",
    # quality / source
    "organic", "natural", "premium", "artisan", "local",
    "imported", "domestic", "homemade", "store-bought",
    "free-range", "cage-free", "grass-fed", "pasture-raised",
    "wild-caught", "farm-raised", "sustainable",
    # fat / sodium / sugar / diet
    "low-fat", "reduced-fat", "fat-free", "nonfat", "skim",
    "low-sodium", "reduced-sodium", "sodium-free", "no-salt", "unsalted", "salted",
    "low-sugar", "sugar-free", "unsweetened", "sweetened", "no-sugar-added",
    "gluten-free", "dairy-free", "vegan", "vegetarian",
    "light", "lite", "diet", "reduced-calorie",
    # grade
    "extra-virgin", "virgin", "pure", "refined", "unrefined",
    "grade-a", "grade-b", "choice", "select", "prime",
    # size / shape
    "large", "medium", "small", "extra-large", "jumbo", "baby", "mini",
    "thick", "thin", "fine", "coarse", "whole", "half", "pieces",
    # bone / skin
    "boneless", "bone-in", "skinless", "skin-on",
    # colour
    "white", "red", "green", "yellow", "black", "brown", "golden",
)

MEASUREMENT_UNITS: Final[tuple[str, ...]] = (
    "cup", "cups", "c",
    "tablespoon", "tablespoons", "tbsp", "tbsps", "tbs",
    "teaspoon", "teaspoons", "tsp", "tsps",
    "pound", "pounds", "lb", "lbs",
    "ounce", "ounces", "oz",
    "gram", "grams", "g",
    "kilogram", "kilograms", "kg",
    "liter", "liters", "litre", "litres", "l",
    "milliliter", "milliliters", "millilitre", "millilitres", "ml",
    "pinch", "pinches", "dash", "dashes",
    "can", "cans", "jar", "jars", "package", "packages", "pkg",
    "bunch", "bunches", "clove", "cloves", "slice", "slices",
    "stick", "sticks", "handful", "handfuls",
)
