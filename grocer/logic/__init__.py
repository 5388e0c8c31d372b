"""Core planning logic.

Subpackages:
- catalog: static shelf-life / package-size table
- seasonal: seasonal gate evaluation
- scaling: serving-size rescaling with readability rounding
- planning: meal plan generation
- shopping: shopping list aggregation and pantry netting
- pantry: pantry freshness analysis
"""
__all__ = ["catalog", "seasonal", "scaling", "planning", "shopping", "pantry"]
