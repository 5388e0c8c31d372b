"""Pantry freshness helpers.

An item's expiry is its added date plus the shelf life of the catalog entity it points to.
"""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from grocer.domain.IngredientEntity import IngredientEntity
from grocer.domain.Pantry import Pantry
from grocer.utilities.config import DAYS_BEFORE_EXPIRY

__all__ = ["compute_expiring_soon"]


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def compute_expiring_soon(pantry: Pantry, catalog: Iterable[IngredientEntity], *,
                          as_of: datetime | None = None, window: int | None = None) -> List[Dict[str, Any]]:
    """Return pantry items expiring in <= window days (including already expired).

    Items whose ingredient id is not in the catalog are skipped.
    """
    expiring_window = window if window is not None else DAYS_BEFORE_EXPIRY
    now = _as_utc(as_of or datetime.now(timezone.utc))
    by_id = {e.id: e for e in catalog}
    result: List[Dict[str, Any]] = []
    for item in pantry.get_items():
        entity = by_id.get(item.ingredient_id)
        if entity is None:
            continue
        age_days = (now - _as_utc(item.added_date)).days
        days_left = entity.shelf_life_days - age_days
        if days_left <= expiring_window:
            result.append({
                'ingredientId': item.ingredient_id,
                'name': entity.name,
                'quantity': item.quantity,
                'unit': item.unit,
                'category': entity.category,
                'days_left': days_left,
            })
    result.sort(key=lambda x: (x['days_left'], x['name']))
    return result
