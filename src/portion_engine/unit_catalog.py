"""Default unit-to-gram table and food category multiplier rules."""

from portion_engine.domain.matching import keywords
from portion_engine.domain.units import CanonicalUnitTable, CategoryMultiplierRule

UNIT_GRAMS: dict[str, float] = {
    # Basic measurements
    "gram": 1,
    "g": 1,
    "100g": 100,
    "kg": 1000,
    "ml": 1,
    # Pieces
    "piece": 15,
    "small piece": 10,
    "medium piece": 20,
    "large piece": 35,
    "extra large piece": 50,
    # Handfuls and scoops
    "handful": 30,
    "small handful": 20,
    "large handful": 45,
    "scoop": 25,
    "small scoop": 15,
    "large scoop": 40,
    # Cups of solid food
    "cup": 120,
    "small cup": 80,
    "large cup": 180,
    "half cup": 60,
    "quarter cup": 30,
    # Bowls
    "bowl": 150,
    "small bowl": 100,
    "medium bowl": 150,
    "large bowl": 225,
    "katori": 150,
    "small katori": 100,
    "large katori": 200,
    # Servings and portions
    "serving": 100,
    "small serving": 75,
    "medium serving": 100,
    "large serving": 150,
    "half serving": 50,
    "quarter serving": 25,
    "portion": 150,
    "small portion": 100,
    "medium portion": 150,
    "large portion": 200,
    "plate": 250,
    "thali portion": 400,
    "small pack": 30,
    "pack": 50,
    # Spoons
    "tablespoon": 15,
    "tbsp": 15,
    "teaspoon": 5,
    "tsp": 5,
    # Slices
    "slice": 25,
    "thin slice": 15,
    "thick slice": 40,
    "small slice": 20,
    "medium slice": 25,
    "large slice": 35,
    # Breads
    "roti": 50,
    "chapati": 50,
    "phulka": 35,
    "naan": 80,
    "paratha": 80,
    "puri": 25,
    "bread slice": 25,
    "toast": 25,
    # South Indian
    "idli": 30,
    "vada": 50,
    "dosa": 100,
    "uttapam": 120,
    # Rice portions
    "rice portion": 150,
    "small rice portion": 100,
    "medium rice portion": 150,
    "large rice portion": 200,
    # Visual guides
    "palm size": 90,
    "closed fist": 150,
    "cupped hand": 30,
    "thumb size": 15,
    # Liquids, 1 ml ~ 1 g
    "glass": 250,
    "bottle": 500,
    "can": 330,
    "mug": 250,
    "shot": 30,
}

_PIECE = keywords("piece")
_HANDFUL = keywords("handful")
_CUP = keywords("cup")
_NUTS = keywords(
    "almond", "cashew", "walnut", "peanut", "pistachio", "raisin", "date", "nut"
)
_LEAFY = keywords("lettuce", "spinach", "cabbage", "kale", "leafy")
_CHIPS = keywords("chip", "crisp", "cracker", "biscuit")

CATEGORY_MULTIPLIER_RULES: tuple[CategoryMultiplierRule, ...] = (
    CategoryMultiplierRule(
        category="beverages",
        food_keywords=keywords(
            "tea", "coffee", "juice", "water", "milk", "beer", "wine", "lassi"
        ),
        multiplier=1.0,
    ),
    CategoryMultiplierRule("almonds", keywords("almond"), _PIECE, piece_grams=1.2),
    CategoryMultiplierRule("cashews", keywords("cashew"), _PIECE, piece_grams=1.5),
    CategoryMultiplierRule("walnuts", keywords("walnut"), _PIECE, piece_grams=4.0),
    CategoryMultiplierRule("peanuts", keywords("peanut"), _PIECE, piece_grams=0.7),
    CategoryMultiplierRule(
        "pistachios", keywords("pistachio"), _PIECE, piece_grams=0.7
    ),
    CategoryMultiplierRule("raisins", keywords("raisin"), _PIECE, piece_grams=0.5),
    CategoryMultiplierRule("dates", keywords("date"), _PIECE, piece_grams=8.0),
    CategoryMultiplierRule("nuts", _NUTS, _HANDFUL, multiplier=0.6),
    CategoryMultiplierRule("nuts", _NUTS, _PIECE, multiplier=0.3),
    CategoryMultiplierRule("leafy greens", _LEAFY, _CUP, multiplier=0.4),
    CategoryMultiplierRule("leafy greens", _LEAFY, _HANDFUL, multiplier=0.3),
    CategoryMultiplierRule("chips", _CHIPS, _PIECE, multiplier=0.4),
    CategoryMultiplierRule("chips", _CHIPS, _HANDFUL, multiplier=0.7),
    CategoryMultiplierRule("fruit", keywords("apple"), _PIECE, piece_grams=180),
    CategoryMultiplierRule("fruit", keywords("orange"), _PIECE, piece_grams=180),
    CategoryMultiplierRule("fruit", keywords("banana"), _PIECE, piece_grams=120),
    CategoryMultiplierRule("fruit", keywords("mango"), _PIECE, piece_grams=200),
)


def default_unit_table(fallback_label: str = "serving") -> CanonicalUnitTable:
    """Build the default canonical unit table."""
    return CanonicalUnitTable(UNIT_GRAMS, fallback_label=fallback_label)
