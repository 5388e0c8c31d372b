from fastapi import APIRouter, Depends, Query
from typing import Optional

from grocer.infra.Data_Repository import DataRepository, get_repository
from grocer.logic.catalog.shelf_life import entity_defaults
from grocer.logic.pantry.analysis import compute_expiring_soon

router = APIRouter(prefix="/api", tags=["pantry"])


@router.get('/ingredients/lookup')
def ingredient_lookup(name: str = Query(..., min_length=1)):
    """Prefill values for a new catalog ingredient, from the built-in shelf-life table."""
    return entity_defaults(name.strip())


@router.get('/pantry/expiring')
def pantry_expiring(window: Optional[int] = Query(default=None, ge=0),
                    repo: DataRepository = Depends(get_repository)):
    data = repo.load()
    items = compute_expiring_soon(data.pantry, data.ingredients, window=window)
    return {"count": len(items), "items": items}
