"""
Unit Constants and Conversion Tables

Measure symbols accepted on recipe ingredients, their categories, the
directional conversion table and per-ingredient densities used to bridge
volume and weight.
"""

from models.cooking_models import MeasurementConversion, ConversionType

# Measure symbols grouped by category (display order)
MEASURE_CATEGORIES = {
    'volume': ['ml', 'l', 'dl', 'cl', 'tsp', 'tbsp', 'fl oz', 'cup', 'pint', 'quart', 'gallon'],
    'weight': ['mg', 'g', 'kg', 'oz', 'lb', 'stone'],
    'temperature': ['°C', '°F'],
    'length': ['mm', 'cm', 'inch', 'inches'],
    'pieces': ['piece', 'pieces', 'slice', 'slices', 'clove', 'cloves', 'dozen', 'half dozen',
               'bunch', 'head', 'can', 'jar', 'bottle', 'packet', 'bag', 'box', 'tin'],
    'special': ['pinch', 'dash', 'splash', 'handful', 'q.s.', 'to taste'],
}

# Every measure an ingredient may carry
COOKING_MEASURES = [
    # Volume - Metric
    'ml', 'l', 'dl', 'cl',
    # Volume - Imperial/US
    'tsp', 'tbsp', 'fl oz', 'cup', 'pint', 'quart', 'gallon',
    # Weight - Metric
    'g', 'kg', 'mg',
    # Weight - Imperial/US
    'oz', 'lb', 'stone',
    # Pieces/Count
    'piece', 'pieces', 'slice', 'slices', 'clove', 'cloves',
    'dozen', 'half dozen', 'bunch', 'head', 'can', 'jar',
    'bottle', 'packet', 'bag', 'box', 'tin',
    # Special/Approximate
    'pinch', 'dash', 'splash', 'handful', 'q.s.', 'to taste',
    # Length
    'inch', 'inches', 'cm', 'mm',
    # Temperature
    '°F', '°C',
]

# Units the density bridge understands
DENSITY_VOLUME_UNITS = {'ml', 'l', 'tsp', 'tbsp', 'fl oz', 'cup'}
DENSITY_WEIGHT_UNITS = {'g', 'kg', 'oz', 'lb'}

# Reference units for the density bridge (densities are grams per cup)
DENSITY_VOLUME_REFERENCE = 'cup'
DENSITY_WEIGHT_REFERENCE = 'g'

FAHRENHEIT = '°F'
CELSIUS = '°C'

_VOLUME = ConversionType.VOLUME
_WEIGHT = ConversionType.WEIGHT
_TEMPERATURE = ConversionType.TEMPERATURE
_LENGTH = ConversionType.LENGTH

# Directional conversion rules: amount_in_to = amount_in_from * ratio
MEASUREMENT_CONVERSIONS = [
    # Volume - Metric
    MeasurementConversion('ml', 'l', 0.001, _VOLUME),
    MeasurementConversion('l', 'ml', 1000, _VOLUME),
    MeasurementConversion('cl', 'ml', 10, _VOLUME),
    MeasurementConversion('dl', 'ml', 100, _VOLUME),

    # Volume - Imperial/US
    MeasurementConversion('tsp', 'tbsp', 0.333, _VOLUME),
    MeasurementConversion('tbsp', 'tsp', 3, _VOLUME),
    MeasurementConversion('tbsp', 'fl oz', 0.5, _VOLUME),
    MeasurementConversion('fl oz', 'tbsp', 2, _VOLUME),
    MeasurementConversion('fl oz', 'cup', 0.125, _VOLUME),
    MeasurementConversion('cup', 'fl oz', 8, _VOLUME),
    MeasurementConversion('cup', 'tbsp', 16, _VOLUME),
    MeasurementConversion('cup', 'tsp', 48, _VOLUME),
    MeasurementConversion('cup', 'pint', 0.5, _VOLUME),
    MeasurementConversion('pint', 'cup', 2, _VOLUME),
    MeasurementConversion('pint', 'quart', 0.5, _VOLUME),
    MeasurementConversion('quart', 'pint', 2, _VOLUME),
    MeasurementConversion('quart', 'gallon', 0.25, _VOLUME),
    MeasurementConversion('gallon', 'quart', 4, _VOLUME),

    # Volume - Metric to Imperial
    MeasurementConversion('ml', 'tsp', 0.202884, _VOLUME),
    MeasurementConversion('ml', 'tbsp', 0.067628, _VOLUME),
    MeasurementConversion('ml', 'fl oz', 0.033814, _VOLUME),
    MeasurementConversion('ml', 'cup', 0.004227, _VOLUME),
    MeasurementConversion('l', 'cup', 4.227, _VOLUME),
    MeasurementConversion('l', 'pint', 2.113, _VOLUME),
    MeasurementConversion('l', 'quart', 1.057, _VOLUME),
    MeasurementConversion('l', 'gallon', 0.264, _VOLUME),

    # Volume - Imperial to Metric
    MeasurementConversion('tsp', 'ml', 4.929, _VOLUME),
    MeasurementConversion('tbsp', 'ml', 14.787, _VOLUME),
    MeasurementConversion('fl oz', 'ml', 29.574, _VOLUME),
    MeasurementConversion('cup', 'ml', 236.588, _VOLUME),
    MeasurementConversion('cup', 'l', 0.237, _VOLUME),
    MeasurementConversion('pint', 'l', 0.473, _VOLUME),
    MeasurementConversion('quart', 'l', 0.946, _VOLUME),
    MeasurementConversion('gallon', 'l', 3.785, _VOLUME),

    # Weight - Metric
    MeasurementConversion('mg', 'g', 0.001, _WEIGHT),
    MeasurementConversion('g', 'mg', 1000, _WEIGHT),
    MeasurementConversion('g', 'kg', 0.001, _WEIGHT),
    MeasurementConversion('kg', 'g', 1000, _WEIGHT),

    # Weight - Imperial
    MeasurementConversion('oz', 'lb', 0.0625, _WEIGHT),
    MeasurementConversion('lb', 'oz', 16, _WEIGHT),
    MeasurementConversion('lb', 'stone', 0.071, _WEIGHT),
    MeasurementConversion('stone', 'lb', 14, _WEIGHT),

    # Weight - Metric to Imperial
    MeasurementConversion('g', 'oz', 0.035274, _WEIGHT),
    MeasurementConversion('kg', 'lb', 2.205, _WEIGHT),
    MeasurementConversion('kg', 'oz', 35.274, _WEIGHT),

    # Weight - Imperial to Metric
    MeasurementConversion('oz', 'g', 28.35, _WEIGHT),
    MeasurementConversion('lb', 'kg', 0.454, _WEIGHT),
    MeasurementConversion('lb', 'g', 453.592, _WEIGHT),

    # Temperature (ratio unused, converted by formula)
    MeasurementConversion('°F', '°C', 1, _TEMPERATURE),
    MeasurementConversion('°C', '°F', 1, _TEMPERATURE),

    # Length
    MeasurementConversion('mm', 'cm', 0.1, _LENGTH),
    MeasurementConversion('cm', 'mm', 10, _LENGTH),
    MeasurementConversion('cm', 'inch', 0.394, _LENGTH),
    MeasurementConversion('inch', 'cm', 2.54, _LENGTH),
    MeasurementConversion('inch', 'inches', 1, _LENGTH),
]

# Density in grams per cup
INGREDIENT_DENSITIES = {
    'flour': 120,
    'all-purpose flour': 120,
    'bread flour': 120,
    'cake flour': 100,
    'sugar': 200,
    'white sugar': 200,
    'brown sugar': 213,
    'powdered sugar': 120,
    'butter': 227,
    'olive oil': 216,
    'vegetable oil': 220,
    'honey': 340,
    'maple syrup': 322,
    'milk': 245,
    'water': 240,
    'rice': 185,
    'oats': 90,
    'breadcrumbs': 108,
    'cocoa powder': 75,
    'baking powder': 192,
    'baking soda': 220,
    'salt': 300,
    'vanilla extract': 208,
}
