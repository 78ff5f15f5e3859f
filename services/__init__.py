"""
Services package for the Gastronome application.

Contains the cooking tools (measurement conversion, substitutions), the
recipe recommendation engine and the cookbook state service.
"""

from .conversion_service import (
    convert_measurement,
    get_ingredient_density,
    get_measure_category,
    get_measures_for_category,
    convert_with_density,
    get_related_conversions,
    format_amount,
)
from .substitution_service import (
    find_substitutions,
    filter_substitutions_by_context,
    describe_ratio,
    scale_substitute_amount,
)
from .recommendation_service import (
    fuzzy_match,
    levenshtein_distance,
    match_ingredients,
    get_recipe_recommendations,
    get_ingredient_suggestions,
    analyze_ingredient_patterns,
)
from .cookbook_service import CookbookService, get_cookbook_service

__all__ = [
    # Conversion
    'convert_measurement',
    'get_ingredient_density',
    'get_measure_category',
    'get_measures_for_category',
    'convert_with_density',
    'get_related_conversions',
    'format_amount',
    # Substitution
    'find_substitutions',
    'filter_substitutions_by_context',
    'describe_ratio',
    'scale_substitute_amount',
    # Recommendation
    'fuzzy_match',
    'levenshtein_distance',
    'match_ingredients',
    'get_recipe_recommendations',
    'get_ingredient_suggestions',
    'analyze_ingredient_patterns',
    # Cookbook
    'CookbookService',
    'get_cookbook_service'
]
