from fastapi import Depends, FastAPI, HTTPException, Query, Response

from datetime import date as _date, datetime
from typing import Optional
from uuid import uuid4
import logging

from grocer.domain.Recipe import Recipe
from grocer.infra.Data_Repository import DataRepository, get_repository
from grocer.infra.pdf_utils import generate_pdf_for_plan
from grocer.logic.planning.generator import PlanOptions, SystemRandomSource, generate_meal_plan
from grocer.logic.seasonal.evaluator import filter_seasonal_recipes, get_season, seasonal_badge
from grocer.logic.shopping.list_builder import build_shopping_list
from grocer.utilities.errors import GrocerError
from grocer.utilities.validators import PlanOptionsInput, RecipeInput, ScaleSlotInput

# Routers
from grocer.api.routes import pantry, transfer

# Logging
logger = logging.getLogger("grocer_app")

# Initialize FastAPI app
app = FastAPI(title="Grocer Meal Planner API")

# Include routers
app.include_router(pantry.router)
app.include_router(transfer.router)


def _plan_or_404(repo: DataRepository, plan_id: str):
    plan = repo.get_meal_plan(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Meal plan not found")
    return plan


def _recipe_summary(recipe: Recipe) -> dict:
    d = recipe.to_dict()
    d["seasonalBadge"] = seasonal_badge(recipe.seasonal_info)
    return d


# -------------------- Recipes --------------------
@app.get('/api/recipes')
def api_recipes(repo: DataRepository = Depends(get_repository)):
    recipes = repo.list_recipes()
    return {"count": len(recipes), "recipes": [_recipe_summary(r) for r in recipes]}


@app.post('/api/recipes', status_code=201)
def api_add_recipe(payload: RecipeInput, repo: DataRepository = Depends(get_repository)):
    data = payload.model_dump(by_alias=True, exclude_none=True)
    if any(r.name.lower() == payload.name.lower() for r in repo.list_recipes()):
        raise HTTPException(status_code=400, detail="Recipe with this name already exists")
    try:
        recipe = Recipe.from_dict({**data, "id": payload.id or str(uuid4())})
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    repo.add_recipe(recipe)
    logger.info("Added recipe '%s'", recipe.name)
    return recipe.to_dict()


@app.get('/api/recipes/in-season')
def api_recipes_in_season(date: Optional[_date] = Query(default=None),
                          repo: DataRepository = Depends(get_repository)):
    as_of = date or _date.today()
    recipes = filter_seasonal_recipes(repo.list_recipes(), as_of)
    return {"date": as_of.isoformat(), "season": get_season(as_of), "count": len(recipes),
            "recipes": [_recipe_summary(r) for r in recipes]}


# -------------------- Meal plans --------------------
@app.get('/api/plans')
def api_plans(repo: DataRepository = Depends(get_repository)):
    plans = repo.list_meal_plans()
    return {"count": len(plans), "plans": [p.to_dict() for p in plans]}


@app.post('/api/plans/generate', status_code=201)
def api_generate_plan(payload: PlanOptionsInput, repo: DataRepository = Depends(get_repository)):
    try:
        options = PlanOptions(
            days=payload.days,
            start_date=payload.start_date or datetime.now(),
            optimize_waste=payload.optimize_waste,
            allow_repeats=payload.allow_repeats,
            seasonal_only=payload.seasonal_only,
            recent_recipes=payload.recent_recipes,
        )
    except GrocerError as e:
        raise HTTPException(status_code=400, detail=str(e))
    plan = generate_meal_plan(repo.list_recipes(), options, SystemRandomSource(payload.seed))
    repo.add_meal_plan(plan)
    return {"plan": plan.to_dict(), "short": plan.is_short()}


@app.get('/api/plans/{plan_id}')
def api_plan(plan_id: str, repo: DataRepository = Depends(get_repository)):
    return _plan_or_404(repo, plan_id).to_dict()


@app.delete('/api/plans/{plan_id}')
def api_delete_plan(plan_id: str, repo: DataRepository = Depends(get_repository)):
    if not repo.delete_meal_plan(plan_id):
        raise HTTPException(status_code=404, detail="Meal plan not found")
    return {"deleted": plan_id}


@app.post('/api/plans/{plan_id}/scale')
def api_scale_slot(plan_id: str, payload: ScaleSlotInput, repo: DataRepository = Depends(get_repository)):
    plan = _plan_or_404(repo, plan_id)
    try:
        plan.scale_slot(payload.slot, payload.servings)
    except (IndexError, GrocerError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    repo.update_meal_plan(plan)
    return plan.to_dict()


@app.post('/api/plans/{plan_id}/favorite')
def api_toggle_favorite(plan_id: str, repo: DataRepository = Depends(get_repository)):
    plan = _plan_or_404(repo, plan_id)
    plan.toggle_favorite()
    repo.update_meal_plan(plan)
    return {"id": plan.id, "isFavorite": plan.is_favorite}


# -------------------- Shopping list --------------------
@app.get('/api/plans/{plan_id}/shopping-list')
def api_shopping_list(plan_id: str, repo: DataRepository = Depends(get_repository)):
    data = repo.load()
    plan = data.find_meal_plan(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Meal plan not found")
    items = build_shopping_list(plan, data.ingredients, data.pantry)
    to_buy = [i for i in items if i.needs_purchase()]
    return {"planId": plan.id, "items": [i.to_dict() for i in items], "count": len(items),
            "toBuy": len(to_buy)}


@app.get('/api/plans/{plan_id}/export_pdf')
def api_export_pdf(plan_id: str, repo: DataRepository = Depends(get_repository)):
    data = repo.load()
    plan = data.find_meal_plan(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Meal plan not found")
    pdf_bytes = generate_pdf_for_plan(plan, build_shopping_list(plan, data.ingredients, data.pantry))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=meal_plan_{plan.id}.pdf"},
    )

