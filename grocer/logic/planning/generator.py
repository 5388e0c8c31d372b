"""Meal plan generation.

Two selection modes:
- random: uniform picks from the candidate pool (optionally without repeats);
- waste-optimized: greedy scoring that front-loads perishable recipes and
  rewards reusing ingredients already bought for earlier slots.

Randomness comes from an injectable RandomSource so tests can pin the sequence.
"""
from __future__ import annotations

import logging
import math
import random
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Set

from grocer.domain.Plan import MealPlan
from grocer.domain.Recipe import Recipe
from grocer.logic.catalog.shelf_life import shelf_life_days
from grocer.logic.seasonal.evaluator import is_in_season
from grocer.utilities.constants import OVERLAP_BONUS, SHELF_STABLE_SCORE
from grocer.utilities.errors import ConfigurationError

logger = logging.getLogger(__name__)

__all__ = ["RandomSource", "SystemRandomSource", "PlanOptions", "perishability_score",
           "candidate_pool", "generate_meal_plan"]


class RandomSource:
    """Source of floats in [0, 1)."""

    def next(self) -> float:
        raise NotImplementedError


class SystemRandomSource(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()


class PlanOptions:
    def __init__(self, days: int, start_date: Optional[datetime] = None, optimize_waste: bool = False,
                 allow_repeats: bool = False, seasonal_only: bool = False,
                 recent_recipes: Optional[Iterable[str]] = None):
        if isinstance(days, bool) or not isinstance(days, int) or days < 1:
            raise ConfigurationError(f"Plan must cover at least one day, got {days!r}")
        self.days = days
        self.start_date = start_date or datetime.now()
        self.optimize_waste = optimize_waste
        self.allow_repeats = allow_repeats
        self.seasonal_only = seasonal_only
        self.recent_recipes = frozenset(recent_recipes or ())

    def __repr__(self) -> str:
        return (f"PlanOptions(days={self.days}, optimize_waste={self.optimize_waste}, "
                f"allow_repeats={self.allow_repeats}, seasonal_only={self.seasonal_only}, "
                f"recent={len(self.recent_recipes)})")


def perishability_score(recipe: Recipe) -> int:
    '''Minimum shelf life across the recipe's ingredients; lower is more perishable.'''
    if not recipe.ingredients:
        return SHELF_STABLE_SCORE
    return min(shelf_life_days(ing.name) for ing in recipe.ingredients)


def candidate_pool(recipes: Iterable[Recipe], options: PlanOptions) -> List[Recipe]:
    pool = list(recipes)
    if options.seasonal_only:
        pool = [r for r in pool if is_in_season(r, options.start_date)]
    # Recent recipes are only dropped when the plan can still be filled without them
    if options.recent_recipes and len(pool) > options.days + len(options.recent_recipes):
        pool = [r for r in pool if r.id not in options.recent_recipes]
    return pool


def _select_random(pool: List[Recipe], options: PlanOptions, rng: RandomSource) -> List[Recipe]:
    remaining = list(pool)
    selected: List[Recipe] = []
    for _ in range(options.days):
        if not remaining:
            break
        index = min(int(math.floor(rng.next() * len(remaining))), len(remaining) - 1)
        if options.allow_repeats:
            selected.append(remaining[index])
        else:
            selected.append(remaining.pop(index))
    return selected


def _select_waste_optimized(pool: List[Recipe], options: PlanOptions) -> List[Recipe]:
    days = options.days
    perishability: Dict[int, int] = {i: perishability_score(r) for i, r in enumerate(pool)}
    used: Set[int] = set()
    used_names: Set[str] = set()
    selected: List[Recipe] = []

    for slot in range(days):
        weight = (days - slot) / days
        best_index = None
        best_score = -math.inf
        for i, recipe in enumerate(pool):
            if i in used and not options.allow_repeats:
                continue
            overlap = sum(1 for name in recipe.ingredient_names() if name in used_names)
            score = (SHELF_STABLE_SCORE - perishability[i]) * weight + OVERLAP_BONUS * overlap
            if score > best_score:
                best_score = score
                best_index = i
        if best_index is None:
            break
        choice = pool[best_index]
        logger.debug("Slot %d: picked '%s' (score %.2f)", slot, choice.name, best_score)
        used.add(best_index)
        used_names.update(choice.ingredient_names())
        selected.append(choice)
    return selected


def generate_meal_plan(recipes: Iterable[Recipe], options: PlanOptions,
                       rng: Optional[RandomSource] = None) -> MealPlan:
    """Select recipes for `options.days` slots and return a new MealPlan.

    The plan holds snapshot copies of the chosen recipes. It has fewer than
    `days` recipes when repeats are disallowed and the pool runs out, and no
    recipes at all when nothing passes the filters.
    """
    pool = candidate_pool(recipes, options)
    if not pool:
        logger.info("No candidate recipes for %r; returning empty plan", options)
        return MealPlan(recipes=[], days=options.days, start_date=options.start_date)

    if options.optimize_waste:
        selected = _select_waste_optimized(pool, options)
    else:
        selected = _select_random(pool, options, rng or SystemRandomSource())

    plan = MealPlan(
        recipes=[r.copy() for r in selected],
        days=options.days,
        start_date=options.start_date,
    )
    logger.info("Generated plan %s with %d/%d recipes (%r)", plan.id, len(plan.recipes), plan.days, options)
    return plan
