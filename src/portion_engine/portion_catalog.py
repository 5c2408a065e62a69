"""Default portion recommendation rules and plausibility ranges.

Rules are evaluated top to bottom and the first match wins, so more specific
rules (branded beer, special rice dishes) sit above their generic siblings.
"""

from portion_engine.domain.matching import keywords
from portion_engine.domain.portions import (
    PlausibilityRange,
    PortionRecommendation,
    PortionRule,
)


def _rule(  # noqa: PLR0913
    category: str,
    words: tuple[str, ...],
    unit_label: str,
    grams: float,
    note: str,
    *,
    qualifiers: tuple[str, ...] = (),
    quantity: int = 1,
) -> PortionRule:
    basis = "100ml" if unit_label.endswith("ml)") else "100g"
    return PortionRule(
        category=category,
        keywords=keywords(*words),
        qualifiers=keywords(*qualifiers) if qualifiers else None,
        recommendation=PortionRecommendation(
            canonical_unit_label=unit_label,
            unit_size_grams=grams,
            explanatory_note=f"{note}; calculated from base per {basis}",
            suggested_quantity=quantity,
        ),
    )


PORTION_RULES: tuple[PortionRule, ...] = (
    # Non-alcoholic drinks named after alcoholic ones
    _rule(
        "soft drink",
        ("ginger ale", "root beer"),
        "bottle (500ml)",
        500,
        "Standard soft drink bottle size",
    ),
    # Alcoholic beverages
    _rule(
        "beer",
        ("beer", "lager", "ale"),
        "bottle (650ml)",
        650,
        "Standard large beer bottle size in India",
        qualifiers=("kingfisher", "budweiser"),
    ),
    _rule(
        "beer",
        ("beer", "lager", "ale"),
        "bottle (500ml)",
        500,
        "Standard beer bottle size",
    ),
    _rule("wine", ("wine",), "glass (150ml)", 150, "Standard wine serving glass"),
    _rule(
        "spirits",
        ("whiskey", "whisky", "vodka", "rum", "gin", "brandy", "tequila"),
        "shot (30ml)",
        30,
        "Standard spirit shot size",
    ),
    # Non-alcoholic beverages
    _rule(
        "soft drink",
        ("coca-cola", "coke", "pepsi", "sprite", "fanta", "cola", "soda", "soft drink"),
        "bottle (500ml)",
        500,
        "Standard soft drink bottle size",
    ),
    _rule(
        "juice",
        ("juice", "smoothie", "milkshake"),
        "glass (250ml)",
        250,
        "Standard juice glass serving",
    ),
    _rule(
        "tea/coffee",
        ("tea", "chai", "coffee", "espresso", "latte", "cappuccino"),
        "cup (200ml)",
        200,
        "Standard tea/coffee cup size",
    ),
    _rule(
        "yogurt drink",
        ("lassi", "buttermilk", "chaas"),
        "glass (250ml)",
        250,
        "Traditional Indian drink glass size",
    ),
    # Rice dishes
    _rule(
        "special rice",
        ("biryani", "pulao", "pilaf", "fried rice"),
        "medium portion (200g)",
        200,
        "Larger portion for special rice dishes",
    ),
    _rule(
        "rice",
        ("rice",),
        "medium portion (150g)",
        150,
        "Standard rice serving with Indian meals",
    ),
    # Lentils and curries
    _rule(
        "dal",
        ("dal", "daal", "sambhar", "sambar", "rasam"),
        "medium bowl (200g)",
        200,
        "Standard dal serving bowl in Indian meals",
    ),
    _rule(
        "curry",
        ("curry", "sabzi", "gravy", "masala"),
        "serving (150g)",
        150,
        "Standard curry serving with rice/roti",
    ),
    # Indian breads
    _rule(
        "roti",
        ("roti", "chapati", "phulka"),
        "medium roti (50g)",
        50,
        "Standard homemade roti size; typically eaten 2-3 pieces",
        quantity=2,
    ),
    _rule(
        "naan",
        ("naan", "kulcha", "paratha"),
        "piece (80g)",
        80,
        "Restaurant-style bread size",
    ),
    _rule(
        "idli",
        ("idli", "vada"),
        "piece (30g)",
        30,
        "Standard South Indian breakfast item; typically served 3-4 pieces",
        quantity=3,
    ),
    _rule("dosa", ("dosa", "uttapam"), "piece (100g)", 100, "Standard dosa size"),
    # Fruit
    _rule("apple", ("apple",), "medium (180g)", 180, "Medium-sized apple weight"),
    _rule("banana", ("banana",), "medium (120g)", 120, "Medium-sized banana weight"),
    _rule("mango", ("mango",), "medium (200g)", 200, "Medium-sized mango weight"),
    _rule("orange", ("orange",), "medium (180g)", 180, "Medium-sized orange weight"),
    # Snacks and fast food
    _rule(
        "samosa",
        ("samosa",),
        "piece (100g)",
        100,
        "Standard samosa size; typically eaten 1-2 pieces",
    ),
    _rule("pizza", ("pizza",), "slice (120g)", 120, "Medium pizza slice weight"),
    _rule(
        "burger",
        ("burger", "hamburger"),
        "piece (150g)",
        150,
        "Standard burger weight",
    ),
    _rule(
        "hot dog",
        ("hot dog", "hotdog"),
        "piece (75g)",
        75,
        "Standard hot dog with bun weight",
    ),
    # Dairy
    _rule("milk", ("milk",), "glass (250ml)", 250, "Standard milk glass serving"),
    _rule(
        "curd",
        ("dahi", "yogurt", "yoghurt", "curd"),
        "bowl (150g)",
        150,
        "Standard curd serving bowl",
    ),
    _rule(
        "paneer",
        ("paneer", "cottage cheese"),
        "serving (100g)",
        100,
        "Standard paneer curry serving",
    ),
    # Meat and seafood
    _rule(
        "chicken",
        ("chicken",),
        "serving (120g)",
        120,
        "Standard chicken serving portion",
    ),
    _rule(
        "fish",
        ("fish", "salmon", "tuna", "prawn", "shrimp"),
        "serving (100g)",
        100,
        "Standard fish serving portion",
    ),
    # Soups
    _rule("soup", ("soup", "broth"), "bowl (250ml)", 250, "Standard soup bowl serving"),
)

FALLBACK_RECOMMENDATION = PortionRecommendation(
    canonical_unit_label="serving (100g)",
    unit_size_grams=100,
    explanatory_note="Standard serving size; calculated from base per 100g",
)

# Calories per gram. Beverages come first so "almond milk" is not judged as a
# nut, and nuts precede fats so "peanut butter" is not judged as an oil.
PLAUSIBILITY_RANGES: tuple[PlausibilityRange, ...] = (
    PlausibilityRange(
        "beverages",
        keywords(
            "tea",
            "coffee",
            "juice",
            "water",
            "milk",
            "beer",
            "wine",
            "lassi",
            "buttermilk",
        ),
        0.0,
        1.5,
    ),
    PlausibilityRange(
        "nuts",
        keywords("almond", "cashew", "walnut", "peanut", "pistachio", "nut"),
        4.0,
        7.0,
    ),
    PlausibilityRange(
        "oils",
        keywords("oil", "ghee", "lard"),
        8.0,
        9.5,
        exact_names=frozenset({"butter", "salted butter", "unsalted butter"}),
    ),
    PlausibilityRange(
        "fruits",
        keywords("fruit", "apple", "banana", "orange", "mango", "grape"),
        0.2,
        1.0,
    ),
    PlausibilityRange(
        "vegetables",
        keywords(
            "vegetable", "lettuce", "spinach", "cabbage", "carrot", "onion", "cucumber"
        ),
        0.1,
        0.8,
    ),
)

GRAINS_RANGE = PlausibilityRange("grains", keywords(), 1.0, 4.0)
