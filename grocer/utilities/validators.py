"""
Input validation schemas using Pydantic for HTTP payloads and imported documents.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class IngredientInput(BaseModel):
    """Schema for one recipe ingredient line."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0)
    unit: str = Field("", max_length=20)
    ingredient_id: Optional[str] = Field(None, alias="ingredientId")

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class SeasonalInfoInput(BaseModel):
    """Schema for a recipe's seasonal gate."""
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["season", "months"]
    seasons: List[Literal["spring", "summer", "fall", "winter"]] = Field(default_factory=list)
    include_months: List[int] = Field(default_factory=list, alias="includeMonths")
    exclude_months: List[int] = Field(default_factory=list, alias="excludeMonths")

    @field_validator('include_months', 'exclude_months')
    @classmethod
    def validate_months(cls, v):
        for m in v:
            if not 1 <= m <= 12:
                raise ValueError(f'Month out of range: {m}')
        return v

    @model_validator(mode='after')
    def include_or_exclude(self):
        """Include and exclude lists are mutually exclusive."""
        if self.include_months and self.exclude_months:
            raise ValueError('Use either includeMonths or excludeMonths, not both')
        return self


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=200)
    servings: int = Field(2, ge=1, le=50)
    ingredients: List[IngredientInput] = Field(default_factory=list)
    instructions: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    seasonal_info: Optional[SeasonalInfoInput] = Field(None, alias="seasonalInfo")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()


class PlanOptionsInput(BaseModel):
    """Schema for meal plan generation options."""
    model_config = ConfigDict(populate_by_name=True)

    days: int = Field(..., ge=1, le=366)
    start_date: Optional[datetime] = Field(None, alias="startDate")
    optimize_waste: bool = Field(False, alias="optimizeWaste")
    allow_repeats: bool = Field(False, alias="allowRepeats")
    seasonal_only: bool = Field(False, alias="seasonalOnly")
    recent_recipes: List[str] = Field(default_factory=list, alias="recentRecipes")
    seed: Optional[int] = None


class ScaleSlotInput(BaseModel):
    """Schema for rescaling one meal plan slot."""
    slot: int = Field(..., ge=0)
    servings: int = Field(..., ge=1, le=100)


class DocumentInput(BaseModel):
    """Top-level shape of an imported document; records are converted by the domain classes."""
    model_config = ConfigDict(populate_by_name=True)

    recipes: List[dict]
    meal_plans: List[dict] = Field(..., alias="mealPlans")
    ingredients: List[dict] = Field(default_factory=list)
    pantry: List[dict] = Field(default_factory=list)

    @field_validator('ingredients', 'pantry', mode='before')
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v
