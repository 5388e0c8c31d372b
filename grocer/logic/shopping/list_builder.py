"""Shopping list builder.

Provides aggregate_ingredients(plan) and enrich_shopping_list(items, catalog, pantry),
composed by build_shopping_list(plan, catalog, pantry).
"""
import logging
import math
from typing import Dict, Iterable, List, Optional

from grocer.domain.Ingredient import IngredientReference
from grocer.domain.IngredientEntity import IngredientEntity
from grocer.domain.Pantry import Pantry
from grocer.domain.Plan import MealPlan
from grocer.domain.ShoppingList import ShoppingListItem

logger = logging.getLogger(__name__)


def aggregate_ingredients(plan: MealPlan) -> List[IngredientReference]:
    """Merge the plan's ingredient lines by (name, unit), summing quantities.

    Output keeps the trimmed name/unit of the first line seen for each key and
    the first ingredient id found among the merged lines.
    """
    merged: Dict[tuple, IngredientReference] = {}
    for recipe in plan.recipes:
        for ing in recipe.ingredients:
            key = ing.merge_key()
            existing = merged.get(key)
            if existing is None:
                merged[key] = IngredientReference(
                    name=(ing.name or "").strip(),
                    quantity=ing.quantity,
                    unit=(ing.unit or "").strip(),
                    ingredient_id=ing.ingredient_id,
                )
                continue
            existing.quantity += ing.quantity
            if existing.ingredient_id is None:
                existing.ingredient_id = ing.ingredient_id
            elif ing.ingredient_id and ing.ingredient_id != existing.ingredient_id:
                logger.warning("Conflicting ingredient ids for '%s' (%s): keeping %s, ignoring %s",
                               existing.name, existing.unit, existing.ingredient_id, ing.ingredient_id)
    return list(merged.values())


def resolve_entity(item: IngredientReference, catalog: Iterable[IngredientEntity]) -> Optional[IngredientEntity]:
    '''Catalog entity for a line: by id first, else by case-insensitive name. None when nothing matches.'''
    entities = list(catalog)
    if item.ingredient_id:
        for entity in entities:
            if entity.id == item.ingredient_id:
                return entity
    for entity in entities:
        if entity.matches_name(item.name):
            return entity
    return None


def enrich_shopping_list(items: Iterable[IngredientReference], catalog: Iterable[IngredientEntity],
                         pantry: Pantry) -> List[ShoppingListItem]:
    """Net aggregated demand against pantry stock and compute pack counts.

    Pantry stock counts only when its unit equals the line's unit exactly.
    Lines without a catalog match get packs_needed=None.
    Returns items sorted by name (case-sensitive).
    """
    catalog = list(catalog)
    result: List[ShoppingListItem] = []
    for item in items:
        entity = resolve_entity(item, catalog)
        stock = pantry.get(entity.id) if entity else None

        adjusted = item.quantity
        in_pantry = 0
        if stock is not None and stock.unit == item.unit:
            adjusted = max(0, item.quantity - stock.quantity)
            in_pantry = stock.quantity

        packs = None
        if entity is not None and entity.package_size and entity.package_size > 0:
            packs = math.ceil(adjusted / entity.package_size) if adjusted > 0 else 0

        result.append(ShoppingListItem(
            name=item.name,
            quantity=item.quantity,
            unit=item.unit,
            ingredient_id=item.ingredient_id,
            adjusted_quantity=adjusted,
            in_pantry=in_pantry,
            packs_needed=packs,
        ))

    result.sort(key=lambda x: x.name)
    return result


def build_shopping_list(plan: MealPlan, catalog: Iterable[IngredientEntity], pantry: Pantry) -> List[ShoppingListItem]:
    if not plan or not plan.recipes:
        return []
    return enrich_shopping_list(aggregate_ingredients(plan), catalog, pantry)


__all__ = ['aggregate_ingredients', 'resolve_entity', 'enrich_shopping_list', 'build_shopping_list']
