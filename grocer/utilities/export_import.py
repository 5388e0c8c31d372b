"""
Export and import of the whole application document (recipes, meal plans,
ingredient catalog, pantry), plus the import preview used to resolve name
conflicts before merging.
"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Union
from uuid import uuid4
import logging

from pydantic import ValidationError

from grocer.domain.AppData import AppData
from grocer.domain.IngredientEntity import IngredientEntity
from grocer.domain.Pantry import Pantry
from grocer.domain.Plan import MealPlan
from grocer.domain.Recipe import Recipe
from grocer.utilities.constants import BACKUP_FILENAME_FORMAT
from grocer.utilities.errors import FormatError
from grocer.utilities.validators import DocumentInput

logger = logging.getLogger(__name__)


def parse_document(raw: Union[str, bytes, dict]) -> AppData:
    """Convert a raw document into AppData.

    Raises FormatError when the JSON is invalid, `recipes` or `mealPlans` is
    not a list, or any record cannot be converted. Nothing is returned on
    failure, so callers never see a partial import.
    """
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise FormatError(f"Invalid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise FormatError("Invalid data format: document must be an object")
    try:
        doc = DocumentInput.model_validate(raw)
    except ValidationError as e:
        raise FormatError(f"Invalid data format: {e.error_count()} error(s)\n{e}") from e
    try:
        return AppData(
            recipes=[Recipe.from_dict(r) for r in doc.recipes],
            meal_plans=[MealPlan.from_dict(p) for p in doc.meal_plans],
            ingredients=[IngredientEntity.from_dict(i) for i in doc.ingredients],
            pantry=Pantry.from_dict(doc.pantry),
        )
    except (ValueError, TypeError, KeyError) as e:
        raise FormatError(f"Invalid record: {e}") from e


class DataExporter:
    """Export the application document."""

    def __init__(self, repository):
        self.repository = repository

    def export_document(self) -> dict:
        data = self.repository.load()
        logger.info(f"Exporting {data}")
        return data.to_dict()

    def export_json(self) -> str:
        return json.dumps(self.export_document(), indent=2, ensure_ascii=False)

    def export_to_file(self, output_path: Optional[Path] = None) -> Path:
        """Write the document to a JSON file named after today's date unless a path is given."""
        if output_path is None:
            output_path = Path(datetime.now().strftime(BACKUP_FILENAME_FORMAT))
        output_path = Path(output_path)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.export_json())
        logger.info(f"Exported data to {output_path}")
        return output_path


class DataImporter:
    """Import a document into the repository (all-or-nothing)."""

    def __init__(self, repository):
        self.repository = repository

    def import_document(self, raw: Union[str, bytes, dict], merge: bool = False) -> AppData:
        """
        Import a document.

        Args:
            raw: JSON text or an already-decoded document
            merge: If True, merge with existing data using the default preview
                   decisions; if False, replace everything
        Returns:
            The data stored after the import.
        """
        incoming = parse_document(raw)
        if not merge:
            logger.info(f"Importing {incoming} (replace mode)")
            self.repository.save(incoming)
            return incoming

        current = self.repository.load()
        preview = ImportPreview(incoming, current.recipes, current.ingredients)
        merged = merge_data(current, preview.apply())
        logger.info(f"Merged import into existing data: {merged}")
        self.repository.save(merged)
        return merged

    def import_from_file(self, input_path: Path, merge: bool = False) -> AppData:
        with open(input_path, 'r', encoding='utf-8') as f:
            return self.import_document(f.read(), merge=merge)


class RecipeConflict:
    ACTIONS = ("add", "skip", "replace")

    def __init__(self, imported: Recipe, existing: Optional[Recipe] = None):
        self.imported = imported
        self.existing = existing
        self.action = "skip" if existing else "add"

    def to_dict(self):
        return {
            "name": self.imported.name,
            "existingId": self.existing.id if self.existing else None,
            "action": self.action,
        }


class IngredientMapping:
    ACTIONS = ("create", "map", "skip")

    def __init__(self, imported: IngredientEntity, existing: Optional[IngredientEntity] = None):
        self.imported = imported
        self.existing = existing
        self.action = "map" if existing else "create"
        self.map_to_id = existing.id if existing else None

    def to_dict(self):
        return {
            "name": self.imported.name,
            "category": self.imported.category,
            "action": self.action,
            "mapToId": self.map_to_id,
        }


class ImportPreview:
    """Detects recipe name conflicts and ingredient matches between an import and existing data.

    Defaults: new recipes are added, recipes whose name already exists are
    skipped; imported ingredients matching an existing name are mapped onto
    it, others are created. Actions can be changed before calling apply().
    """

    def __init__(self, incoming: AppData, existing_recipes: List[Recipe],
                 existing_ingredients: List[IngredientEntity]):
        self.incoming = incoming
        self.existing_recipe_ids = {r.id for r in existing_recipes}
        self.existing_ingredients = list(existing_ingredients)
        self.recipe_conflicts = [
            RecipeConflict(r, next((e for e in existing_recipes if e.name.lower() == r.name.lower()), None))
            for r in incoming.recipes
        ]
        self.ingredient_mappings = [
            IngredientMapping(i, next((e for e in self.existing_ingredients if e.matches_name(i.name)), None))
            for i in incoming.ingredients
        ]

    def set_recipe_action(self, index: int, action: str):
        if action not in RecipeConflict.ACTIONS:
            raise ValueError(f"Unknown recipe action: {action!r}")
        self.recipe_conflicts[index].action = action

    def set_ingredient_action(self, index: int, action: str, map_to_id: Optional[str] = None):
        if action not in IngredientMapping.ACTIONS:
            raise ValueError(f"Unknown ingredient action: {action!r}")
        mapping = self.ingredient_mappings[index]
        mapping.action = action
        mapping.map_to_id = map_to_id if action == "map" else None

    @property
    def conflict_count(self) -> int:
        return sum(1 for c in self.recipe_conflicts if c.existing)

    @property
    def new_ingredient_count(self) -> int:
        return sum(1 for m in self.ingredient_mappings if m.action == "create")

    def _mapped_name(self, ingredient_name: str) -> Optional[str]:
        for mapping in self.ingredient_mappings:
            if mapping.imported.matches_name(ingredient_name) and mapping.action == "map" and mapping.map_to_id:
                target = next((e for e in self.existing_ingredients if e.id == mapping.map_to_id), None)
                return target.name if target else None
        return None

    def apply(self) -> AppData:
        """Build the data to merge: accepted recipes (with mapped ingredient names) and new ingredients."""
        recipes = []
        for conflict in self.recipe_conflicts:
            if conflict.action not in ("add", "replace"):
                continue
            recipe = conflict.imported.copy()
            if conflict.action == "replace" and conflict.existing:
                recipe.id = conflict.existing.id
            elif recipe.id in self.existing_recipe_ids:
                recipe.id = str(uuid4())
            for ing in recipe.ingredients:
                target_name = self._mapped_name(ing.name)
                if target_name:
                    ing.name = target_name
            recipes.append(recipe)
        ingredients = [m.imported for m in self.ingredient_mappings if m.action == "create"]
        return AppData(recipes=recipes, meal_plans=self.incoming.meal_plans,
                       ingredients=ingredients, pantry=self.incoming.pantry)

    def to_dict(self) -> dict:
        return {
            "recipes": [c.to_dict() for c in self.recipe_conflicts],
            "ingredients": [m.to_dict() for m in self.ingredient_mappings],
            "mealPlans": len(self.incoming.meal_plans),
            "conflicts": self.conflict_count,
            "newIngredients": self.new_ingredient_count,
        }


def merge_data(current: AppData, incoming: AppData) -> AppData:
    """Merge `incoming` into a copy of `current`.

    Recipes replace an existing recipe with the same id, else are appended;
    ingredients are appended unless their id exists; meal plans with a new id
    go first; pantry entries replace entries for the same ingredient id.
    """
    recipes: List[Any] = list(current.recipes)
    for recipe in incoming.recipes:
        idx = next((i for i, r in enumerate(recipes) if r.id == recipe.id), None)
        if idx is None:
            recipes.append(recipe)
        else:
            recipes[idx] = recipe

    ingredient_ids = {i.id for i in current.ingredients}
    ingredients = list(current.ingredients) + [i for i in incoming.ingredients if i.id not in ingredient_ids]

    plan_ids = {p.id for p in current.meal_plans}
    meal_plans = [p for p in incoming.meal_plans if p.id not in plan_ids] + list(current.meal_plans)

    pantry = Pantry(current.pantry.get_items())
    for item in incoming.pantry.get_items():
        pantry.add_item(item)

    return AppData(recipes=recipes, meal_plans=meal_plans, ingredients=ingredients, pantry=pantry)
