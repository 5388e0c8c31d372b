"""Static table of common ingredients: category, shelf life (days), default unit, package size.

Matching is case-insensitive and exact; there is no fuzzy matching.
"""
from typing import Any, Dict, List, Optional

from grocer.utilities.constants import DEFAULT_CATEGORY, DEFAULT_SHELF_LIFE_DAYS

__all__ = ["INGREDIENT_TABLE", "lookup", "shelf_life_days", "category_for",
           "all_ingredient_names", "entity_defaults"]

# (name, category, shelf life days, unit, package size or None)
_ROWS = [
    # Produce - short shelf life
    ("lettuce", "produce", 7, "whole", None),
    ("salad leaves", "produce", 7, "bag", None),
    ("spinach", "produce", 7, "bunch", None),
    ("arugula", "produce", 5, "bunch", None),
    ("tomato", "produce", 7, "whole", None),
    ("cucumber", "produce", 7, "whole", None),
    ("bell pepper", "produce", 10, "whole", None),
    ("mushrooms", "produce", 7, "g", 250),
    ("avocado", "produce", 5, "whole", None),
    ("banana", "produce", 5, "whole", None),
    ("berries", "produce", 5, "g", 250),
    ("strawberries", "produce", 5, "g", 250),
    ("blueberries", "produce", 7, "g", 125),
    ("grapes", "produce", 7, "g", 500),
    ("herbs", "produce", 7, "bunch", None),
    ("basil", "produce", 7, "bunch", None),
    ("parsley", "produce", 7, "bunch", None),
    ("cilantro", "produce", 7, "bunch", None),
    # Produce - medium shelf life
    ("carrot", "produce", 14, "whole", None),
    ("celery", "produce", 14, "bunch", None),
    ("broccoli", "produce", 10, "whole", None),
    ("cauliflower", "produce", 10, "whole", None),
    ("cabbage", "produce", 21, "whole", None),
    ("apple", "produce", 21, "whole", None),
    ("orange", "produce", 14, "whole", None),
    ("lemon", "produce", 21, "whole", None),
    ("lime", "produce", 21, "whole", None),
    # Produce - long shelf life
    ("onion", "produce", 30, "whole", None),
    ("garlic", "produce", 30, "clove", None),
    ("potato", "produce", 30, "whole", None),
    ("sweet potato", "produce", 21, "whole", None),
    ("ginger", "produce", 21, "g", 100),
    # Dairy
    ("milk", "dairy", 7, "ml", 1000),
    ("cream", "dairy", 7, "ml", 300),
    ("yogurt", "dairy", 14, "g", 500),
    ("cheese", "dairy", 21, "g", 200),
    ("parmesan", "dairy", 30, "g", 100),
    ("mozzarella", "dairy", 14, "g", 250),
    ("cheddar", "dairy", 21, "g", 200),
    ("butter", "dairy", 30, "g", 250),
    ("eggs", "dairy", 21, "whole", 12),
    # Meat & seafood
    ("chicken", "meat", 2, "g", 500),
    ("beef", "meat", 3, "g", 500),
    ("pork", "meat", 3, "g", 500),
    ("fish", "meat", 2, "g", 400),
    ("salmon", "meat", 2, "g", 400),
    ("shrimp", "meat", 2, "g", 300),
    ("bacon", "meat", 7, "g", 200),
    ("sausage", "meat", 7, "g", 400),
    # Pantry staples
    ("rice", "pantry", 365, "g", 1000),
    ("pasta", "pantry", 365, "g", 500),
    ("flour", "pantry", 180, "g", 1000),
    ("sugar", "pantry", 365, "g", 1000),
    ("salt", "pantry", 365, "g", 500),
    ("olive oil", "pantry", 180, "ml", 500),
    ("vegetable oil", "pantry", 180, "ml", 1000),
    ("soy sauce", "pantry", 365, "ml", 250),
    ("vinegar", "pantry", 365, "ml", 500),
    ("canned tomatoes", "pantry", 365, "can", 400),
    ("beans", "pantry", 365, "can", 400),
    ("lentils", "pantry", 365, "g", 500),
    ("chickpeas", "pantry", 365, "can", 400),
    ("bread", "pantry", 5, "slice", 20),
    ("tortilla", "pantry", 14, "pc", 8),
    # Frozen
    ("frozen vegetables", "frozen", 90, "g", 500),
    ("frozen peas", "frozen", 90, "g", 500),
    ("frozen corn", "frozen", 90, "g", 500),
    ("ice cream", "frozen", 60, "ml", 500),
]

INGREDIENT_TABLE: Dict[str, Dict[str, Any]] = {
    name: {
        "name": name,
        "category": category,
        "shelf_life_days": shelf_life,
        "unit": unit,
        "package_size": package_size,
    }
    for name, category, shelf_life, unit, package_size in _ROWS
}


def lookup(name: str) -> Optional[Dict[str, Any]]:
    """Return a copy of the table row for `name` (case-insensitive), or None."""
    if not isinstance(name, str):
        return None
    row = INGREDIENT_TABLE.get(name.lower())
    return dict(row) if row else None


def shelf_life_days(name: str) -> int:
    row = lookup(name)
    return row["shelf_life_days"] if row else DEFAULT_SHELF_LIFE_DAYS


def category_for(name: str) -> str:
    row = lookup(name)
    return row["category"] if row else DEFAULT_CATEGORY


def all_ingredient_names() -> List[str]:
    return sorted(INGREDIENT_TABLE)


def entity_defaults(name: str) -> Dict[str, Any]:
    """Prefill values for a new catalog entity named `name`.

    Unknown names get the default category and shelf life, no unit and no package size.
    """
    row = lookup(name)
    if not row:
        return {
            "name": name,
            "category": DEFAULT_CATEGORY,
            "shelfLifeDays": DEFAULT_SHELF_LIFE_DAYS,
            "packageSize": 0,
            "unit": "",
            "known": False,
        }
    return {
        "name": name,
        "category": row["category"],
        "shelfLifeDays": row["shelf_life_days"],
        "packageSize": row["package_size"] or 0,
        "unit": row["unit"],
        "known": True,
    }
