from fastapi import APIRouter, Body, Depends, HTTPException, Query
import logging

from grocer.infra.Data_Repository import DataRepository, get_repository
from grocer.utilities.errors import GrocerError
from grocer.utilities.export_import import DataExporter, DataImporter, ImportPreview, parse_document

logger = logging.getLogger("grocer_app")

router = APIRouter(prefix="/api", tags=["import-export"])


@router.get('/export')
def export_data(repo: DataRepository = Depends(get_repository)):
    return DataExporter(repo).export_document()


@router.post('/import/preview')
def import_preview(document: dict = Body(...), repo: DataRepository = Depends(get_repository)):
    """Recipe name conflicts and ingredient mappings the merge would apply by default."""
    try:
        incoming = parse_document(document)
    except GrocerError as e:
        raise HTTPException(status_code=400, detail=str(e))
    current = repo.load()
    return ImportPreview(incoming, current.recipes, current.ingredients).to_dict()


@router.post('/import')
def import_data(document: dict = Body(...), merge: bool = Query(default=False),
                repo: DataRepository = Depends(get_repository)):
    try:
        data = DataImporter(repo).import_document(document, merge=merge)
    except GrocerError as e:
        logger.warning("Import rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return {"status": "ok", "recipes": len(data.recipes), "mealPlans": len(data.meal_plans),
            "ingredients": len(data.ingredients), "pantry": len(data.pantry)}
