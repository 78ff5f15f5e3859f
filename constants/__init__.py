"""
Constants Package

Static reference data compiled into the application: measures, conversion
rules, densities, substitutions, ingredient pairings and the sample catalog.
"""

from .units import (
    MEASURE_CATEGORIES,
    COOKING_MEASURES,
    MEASUREMENT_CONVERSIONS,
    INGREDIENT_DENSITIES,
    DENSITY_VOLUME_UNITS,
    DENSITY_WEIGHT_UNITS,
    DENSITY_VOLUME_REFERENCE,
    DENSITY_WEIGHT_REFERENCE,
    FAHRENHEIT,
    CELSIUS,
)

from .ingredients import (
    INGREDIENT_SUBSTITUTIONS,
    INGREDIENT_COMBINATIONS,
    MAX_INGREDIENT_SUGGESTIONS,
)

from .sample_data import build_global_recipes, build_global_books

__all__ = [
    # Units
    'MEASURE_CATEGORIES',
    'COOKING_MEASURES',
    'MEASUREMENT_CONVERSIONS',
    'INGREDIENT_DENSITIES',
    'DENSITY_VOLUME_UNITS',
    'DENSITY_WEIGHT_UNITS',
    'DENSITY_VOLUME_REFERENCE',
    'DENSITY_WEIGHT_REFERENCE',
    'FAHRENHEIT',
    'CELSIUS',
    # Ingredients
    'INGREDIENT_SUBSTITUTIONS',
    'INGREDIENT_COMBINATIONS',
    'MAX_INGREDIENT_SUGGESTIONS',
    # Sample catalog
    'build_global_recipes',
    'build_global_books',
]
