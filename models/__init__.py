"""
Data models for the Gastronome application.

This module contains the cookbook entities (Recipe, Ingredient, Book), the
static reference records used by the cooking tools, and the typed options
and results of the recommendation engine.
"""

from .recipe_models import Recipe, Ingredient, Book
from .cooking_models import (
    Substitution, SubstitutionContext, MeasurementConversion, ConversionType,
    RecommendationOptions, IngredientMatchResult, RecipeRecommendation
)

__all__ = [
    'Recipe',
    'Ingredient',
    'Book',
    'Substitution',
    'SubstitutionContext',
    'MeasurementConversion',
    'ConversionType',
    'RecommendationOptions',
    'IngredientMatchResult',
    'RecipeRecommendation'
]
