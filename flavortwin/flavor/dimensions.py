"""
Flavor dimension registry and ingredient keyword table.

The table maps a lowercase keyword to the flavor dimensions it expresses
and a weight per dimension. Matching is substring based, so keywords are
chosen to avoid accidental hits ("black pepper" rather than "pepper").
When two keywords hit the same ingredient and one contains the other, the
longer keyword wins; several entries below ("eggplant", "sausage",
"pineapple", "peppercorn", "garlic clove") exist partly to shadow a shorter keyword.

Bump TABLE_VERSION whenever a keyword or weight changes.
"""
from __future__ import annotations

TABLE_VERSION = "2024.1"

FLAVOR_DIMENSIONS: tuple[str, ...] = (
    "Spicy",
    "Heat",
    "Sour",
    "Sweet",
    "Salty",
    "Umami",
    "Bitter",
    "Aromatic",
    "Creamy",
    "Herbal",
)

UNIQUE_TRAIT = "Unique"

INGREDIENT_RULES: dict[str, dict[str, float]] = {
    # ── Heat / pungency ──────────────────────────────────────────────────
    "chili": {"Heat": 1.5, "Spicy": 1.0},
    "chilli": {"Heat": 1.5, "Spicy": 1.0},
    "chile": {"Heat": 1.5, "Spicy": 1.0},
    "jalapeno": {"Heat": 1.0, "Spicy": 0.5},
    "habanero": {"Heat": 2.0, "Spicy": 0.5},
    "cayenne": {"Heat": 1.5, "Spicy": 0.5},
    "sriracha": {"Heat": 1.0, "Sour": 0.5, "Sweet": 0.5},
    "gochujang": {"Heat": 1.0, "Umami": 1.0, "Sweet": 0.5},
    "harissa": {"Heat": 1.0, "Spicy": 1.0, "Aromatic": 0.5},
    "chipotle": {"Heat": 1.0, "Bitter": 0.5},
    "wasabi": {"Heat": 1.0, "Aromatic": 0.5},
    "horseradish": {"Heat": 1.0},
    "sichuan": {"Heat": 1.0, "Spicy": 1.0},
    "mustard": {"Spicy": 0.5, "Sour": 0.5},
    "paprika": {"Spicy": 0.5, "Sweet": 0.5},
    # ── Warm spices ──────────────────────────────────────────────────────
    "garam masala": {"Spicy": 1.5, "Aromatic": 1.0},
    "masala": {"Spicy": 1.0, "Aromatic": 1.0},
    "curry": {"Spicy": 1.0, "Aromatic": 1.0},
    "cumin": {"Spicy": 1.0, "Aromatic": 0.5},
    "turmeric": {"Spicy": 0.5, "Bitter": 0.5},
    "black pepper": {"Spicy": 1.0, "Heat": 0.5},
    "white pepper": {"Spicy": 1.0, "Heat": 0.5},
    "peppercorn": {"Spicy": 1.0, "Heat": 0.5},
    "ginger": {"Spicy": 1.0, "Aromatic": 1.0},
    "cinnamon": {"Aromatic": 1.0, "Sweet": 0.5, "Spicy": 0.5},
    "clove": {"Aromatic": 1.0, "Spicy": 0.5, "Bitter": 0.5},
    # "garlic cloves" is garlic, not the spice
    "garlic clove": {"Aromatic": 1.5, "Spicy": 0.5},
    "cardamom": {"Aromatic": 1.5},
    "star anise": {"Aromatic": 1.0, "Sweet": 0.5},
    "five spice": {"Spicy": 1.0, "Aromatic": 1.0},
    "nutmeg": {"Aromatic": 1.0, "Spicy": 0.5},
    # ── Sour ─────────────────────────────────────────────────────────────
    "lemon": {"Sour": 1.5, "Aromatic": 0.5},
    "lime": {"Sour": 1.5, "Aromatic": 0.5},
    "citrus": {"Sour": 1.0, "Aromatic": 1.0},
    "orange": {"Sweet": 1.0, "Sour": 0.5, "Aromatic": 0.5},
    "vinegar": {"Sour": 1.5},
    "tamarind": {"Sour": 1.5, "Sweet": 0.5},
    "yogurt": {"Sour": 0.5, "Creamy": 1.0},
    "yoghurt": {"Sour": 0.5, "Creamy": 1.0},
    "tomato": {"Sour": 0.5, "Umami": 1.0, "Sweet": 0.5},
    "pickle": {"Sour": 1.0, "Salty": 0.5},
    "kimchi": {"Sour": 1.0, "Heat": 0.5, "Umami": 0.5},
    "sauerkraut": {"Sour": 1.0},
    "sour cream": {"Sour": 1.0, "Creamy": 1.0},
    "buttermilk": {"Sour": 0.5, "Creamy": 0.5},
    # ── Sweet ────────────────────────────────────────────────────────────
    "sugar": {"Sweet": 1.5},
    "honey": {"Sweet": 1.5, "Aromatic": 0.5},
    "maple": {"Sweet": 1.5},
    "jaggery": {"Sweet": 1.5},
    "molasses": {"Sweet": 1.0, "Bitter": 0.5},
    "mango": {"Sweet": 1.0, "Sour": 0.5},
    "pineapple": {"Sweet": 1.0, "Sour": 0.5},
    "apple": {"Sweet": 1.0, "Sour": 0.5},
    "raisin": {"Sweet": 1.0},
    "onion": {"Sweet": 0.5, "Aromatic": 0.5},
    "carrot": {"Sweet": 0.5},
    "sweet potato": {"Sweet": 1.0},
    "coconut": {"Sweet": 0.5, "Creamy": 1.0},
    "chocolate": {"Sweet": 1.0, "Bitter": 1.0},
    "mirin": {"Sweet": 1.0, "Umami": 0.5},
    "hoisin": {"Sweet": 1.0, "Umami": 1.0, "Salty": 0.5},
    "bell pepper": {"Sweet": 0.5, "Herbal": 0.5},
    # ── Salty ────────────────────────────────────────────────────────────
    "salt": {"Salty": 1.5},
    # shadow-only: keeps "unsalted butter" from reading as salty
    "unsalted": {},
    "soy sauce": {"Salty": 1.5, "Umami": 1.5},
    "soy": {"Salty": 1.0, "Umami": 1.0},
    "fish sauce": {"Salty": 1.5, "Umami": 1.5},
    "anchov": {"Salty": 1.0, "Umami": 1.5},
    "bacon": {"Salty": 1.0, "Umami": 1.0},
    "prosciutto": {"Salty": 1.0, "Umami": 1.0},
    "sausage": {"Umami": 1.0, "Salty": 1.0, "Spicy": 0.5},
    "feta": {"Salty": 1.0, "Creamy": 0.5, "Sour": 0.5},
    "olive": {"Salty": 1.0, "Bitter": 0.5},
    "olive oil": {"Bitter": 0.5, "Aromatic": 0.5},
    "caper": {"Salty": 1.0, "Sour": 0.5},
    "miso": {"Salty": 1.0, "Umami": 1.5},
    "parmesan": {"Salty": 1.0, "Umami": 1.5},
    # ── Umami ────────────────────────────────────────────────────────────
    "chicken": {"Umami": 1.0},
    "beef": {"Umami": 1.5},
    "pork": {"Umami": 1.0},
    "lamb": {"Umami": 1.0, "Aromatic": 0.5},
    "mushroom": {"Umami": 1.5},
    "shiitake": {"Umami": 1.5, "Aromatic": 0.5},
    "dashi": {"Umami": 1.5, "Salty": 0.5},
    "fish": {"Umami": 1.0},
    "shrimp": {"Umami": 1.0, "Sweet": 0.5},
    "prawn": {"Umami": 1.0, "Sweet": 0.5},
    "egg": {"Umami": 0.5, "Creamy": 0.5},
    # shadow-only: "veggie" must not read as egg
    "veggie": {},
    "eggplant": {"Bitter": 0.5, "Umami": 0.5},
    "cheese": {"Umami": 1.0, "Creamy": 1.0, "Salty": 0.5},
    "tofu": {"Umami": 0.5, "Creamy": 0.5},
    "seaweed": {"Umami": 1.0, "Salty": 0.5},
    "nori": {"Umami": 1.0, "Salty": 0.5},
    "stock": {"Umami": 1.0, "Salty": 0.5},
    "broth": {"Umami": 1.0, "Salty": 0.5},
    # ── Bitter ───────────────────────────────────────────────────────────
    "coffee": {"Bitter": 1.5, "Aromatic": 0.5},
    "cocoa": {"Bitter": 1.5},
    "kale": {"Bitter": 1.0, "Herbal": 0.5},
    "arugula": {"Bitter": 1.0, "Spicy": 0.5},
    "radicchio": {"Bitter": 1.5},
    "bitter melon": {"Bitter": 2.0},
    "fenugreek": {"Bitter": 1.0, "Aromatic": 0.5},
    "beer": {"Bitter": 1.0},
    "matcha": {"Bitter": 1.0, "Herbal": 1.0},
    # ── Aromatic ─────────────────────────────────────────────────────────
    "garlic": {"Aromatic": 1.5, "Spicy": 0.5},
    "shallot": {"Aromatic": 1.0, "Sweet": 0.5},
    "lemongrass": {"Aromatic": 1.5, "Herbal": 1.0, "Sour": 0.5},
    "galangal": {"Aromatic": 1.0, "Spicy": 0.5},
    "lime leaf": {"Aromatic": 1.0, "Herbal": 0.5, "Sour": 0.5},
    "lime leaves": {"Aromatic": 1.0, "Herbal": 0.5, "Sour": 0.5},
    "saffron": {"Aromatic": 1.5},
    "vanilla": {"Aromatic": 1.0, "Sweet": 1.0},
    "sesame": {"Aromatic": 1.0, "Umami": 0.5},
    "fennel": {"Aromatic": 1.0, "Sweet": 0.5},
    "truffle": {"Aromatic": 1.0, "Umami": 1.0},
    # ── Creamy ───────────────────────────────────────────────────────────
    "cream": {"Creamy": 1.5},
    "butter": {"Creamy": 1.5, "Salty": 0.5},
    "peanut butter": {"Creamy": 1.0, "Umami": 0.5, "Sweet": 0.5},
    "milk": {"Creamy": 1.0},
    "coconut milk": {"Creamy": 1.5, "Sweet": 1.0, "Aromatic": 0.5},
    "ghee": {"Creamy": 1.0, "Aromatic": 0.5},
    "mayonnaise": {"Creamy": 1.0, "Sour": 0.5},
    "avocado": {"Creamy": 1.0, "Herbal": 0.5},
    "cashew": {"Creamy": 1.0, "Sweet": 0.5},
    "peanut": {"Creamy": 0.5, "Umami": 0.5},
    "paneer": {"Creamy": 1.0},
    "mozzarella": {"Creamy": 1.0, "Salty": 0.5},
    "tahini": {"Creamy": 1.0, "Bitter": 0.5, "Aromatic": 0.5},
    # ── Herbal ───────────────────────────────────────────────────────────
    "basil": {"Herbal": 1.5, "Aromatic": 0.5},
    "cilantro": {"Herbal": 1.5},
    "coriander": {"Herbal": 1.0, "Aromatic": 0.5},
    "mint": {"Herbal": 1.5, "Aromatic": 0.5},
    "parsley": {"Herbal": 1.0},
    "dill": {"Herbal": 1.0},
    "oregano": {"Herbal": 1.0, "Bitter": 0.5},
    "thyme": {"Herbal": 1.0, "Aromatic": 0.5},
    "rosemary": {"Herbal": 1.0, "Aromatic": 1.0},
    "sage": {"Herbal": 1.0},
    "bay leaf": {"Herbal": 1.0, "Aromatic": 0.5},
    "curry leaf": {"Herbal": 1.0, "Aromatic": 1.0},
    "curry leaves": {"Herbal": 1.0, "Aromatic": 1.0},
    "scallion": {"Herbal": 1.0, "Aromatic": 0.5},
    "spring onion": {"Herbal": 1.0, "Aromatic": 0.5},
    "green onion": {"Herbal": 1.0, "Aromatic": 0.5},
    "cucumber": {"Herbal": 1.0},
    "spinach": {"Herbal": 1.0, "Bitter": 0.5},
    "lettuce": {"Herbal": 0.5},
}


def empty_vector() -> dict[str, float]:
    """Return a fresh all-zero vector over every flavor dimension."""
    return {dim: 0.0 for dim in FLAVOR_DIMENSIONS}


def dimension_index(dimension: str) -> int:
    """Position of *dimension* in declaration order (the tie-break order)."""
    return FLAVOR_DIMENSIONS.index(dimension)
