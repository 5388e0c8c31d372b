"""Seasonal gate evaluation.

A recipe without seasonal info is always in season. Seasons use fixed
Northern-Hemisphere month ranges.
"""
from datetime import date
from typing import Iterable, List, Optional

from grocer.domain.Recipe import Recipe, SeasonalInfo
from grocer.utilities.constants import SEASON_MONTHS

__all__ = ["MONTH_NAMES", "get_season", "is_in_season", "filter_seasonal_recipes", "seasonal_badge"]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def get_season(as_of: date) -> str:
    for season, months in SEASON_MONTHS.items():
        if as_of.month in months:
            return season
    return "winter"


def is_in_season(recipe: Recipe, as_of: Optional[date] = None) -> bool:
    info = recipe.seasonal_info
    if info is None:
        return True
    as_of = as_of or date.today()
    month = as_of.month

    if info.kind == "season":
        if not info.seasons:
            return True
        return get_season(as_of) in info.seasons

    if info.kind == "months":
        # include list wins when both are present
        if info.include_months:
            return month in info.include_months
        if info.exclude_months:
            return month not in info.exclude_months

    return True


def filter_seasonal_recipes(recipes: Iterable[Recipe], as_of: Optional[date] = None) -> List[Recipe]:
    as_of = as_of or date.today()
    return [r for r in recipes if is_in_season(r, as_of)]


def seasonal_badge(info: Optional[SeasonalInfo]) -> Optional[str]:
    """Short display text for a seasonal gate, or None when unrestricted."""
    if info is None:
        return None
    if info.kind == "season" and info.seasons:
        return ", ".join(info.seasons)
    if info.kind == "months":
        if info.include_months:
            return "Months: " + ", ".join(str(m) for m in info.include_months)
        if info.exclude_months:
            return "Except: " + ", ".join(str(m) for m in info.exclude_months)
    return None
