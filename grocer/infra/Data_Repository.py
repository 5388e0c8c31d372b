"""Key-value persistence for the application document.

The whole document is stored as one JSON string under a single storage key.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from grocer.domain.AppData import AppData
from grocer.domain.Plan import MealPlan
from grocer.domain.Recipe import Recipe
from grocer.infra.paths import DATA_DIR
from grocer.utilities.config import STORAGE_KEY
from grocer.utilities.errors import FormatError
from grocer.utilities.export_import import parse_document

logger = logging.getLogger(__name__)


class KeyValueStore:
    """String values addressed by string keys."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """One `<key>.json` file per key inside `data_dir`, written atomically."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def set_item(self, key: str, value: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{key}_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(value)
            shutil.move(tmp_path, self._path(key))
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()


class DataRepository:
    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY):
        self.store = store
        self.key = key

    def load(self) -> AppData:
        """Read the stored document. Missing or unreadable data yields an empty AppData."""
        raw = self.store.get_item(self.key)
        if not raw:
            return AppData()
        try:
            return parse_document(raw)
        except FormatError as e:
            logger.error(f"Failed to parse stored data under '{self.key}': {e}")
            return AppData()

    def save(self, data: AppData) -> None:
        self.store.set_item(self.key, json.dumps(data.to_dict(), ensure_ascii=False))
        logger.info(f"Saved {data}")

    # --- Convenience accessors ------------------------------------------------
    def list_recipes(self) -> List[Recipe]:
        return self.load().recipes

    def add_recipe(self, recipe: Recipe) -> Recipe:
        data = self.load()
        data.recipes.append(recipe)
        self.save(data)
        return recipe

    def list_meal_plans(self) -> List[MealPlan]:
        return self.load().meal_plans

    def get_meal_plan(self, plan_id: str) -> Optional[MealPlan]:
        return self.load().find_meal_plan(plan_id)

    def add_meal_plan(self, plan: MealPlan) -> MealPlan:
        '''Newest plans first.'''
        data = self.load()
        data.meal_plans.insert(0, plan)
        self.save(data)
        return plan

    def update_meal_plan(self, plan: MealPlan) -> MealPlan:
        data = self.load()
        for i, existing in enumerate(data.meal_plans):
            if existing.id == plan.id:
                data.meal_plans[i] = plan
                self.save(data)
                return plan
        raise KeyError(plan.id)

    def delete_meal_plan(self, plan_id: str) -> bool:
        data = self.load()
        remaining = [p for p in data.meal_plans if p.id != plan_id]
        if len(remaining) == len(data.meal_plans):
            return False
        data.meal_plans = remaining
        self.save(data)
        return True


def get_repository() -> DataRepository:
    """Repository over the configured data directory; FastAPI dependency."""
    return DataRepository(JsonFileStore(DATA_DIR))
