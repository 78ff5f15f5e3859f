"""
Measurement Conversion Service

Table-driven unit conversion for cooking measures, plus the ingredient
density lookup used to bridge volume and weight. Every function here is
pure and total: an unsupported request answers None instead of raising.
"""

from typing import Iterable, List, Optional, Tuple

from constants import (
    MEASURE_CATEGORIES,
    MEASUREMENT_CONVERSIONS,
    INGREDIENT_DENSITIES,
    DENSITY_VOLUME_UNITS,
    DENSITY_WEIGHT_UNITS,
    DENSITY_VOLUME_REFERENCE,
    DENSITY_WEIGHT_REFERENCE,
    FAHRENHEIT,
    CELSIUS,
)
from models.cooking_models import MeasurementConversion


def _find_rule(from_unit: str, to_unit: str) -> Optional[MeasurementConversion]:
    for rule in MEASUREMENT_CONVERSIONS:
        if rule.from_unit == from_unit and rule.to_unit == to_unit:
            return rule
    return None


def convert_measurement(amount: float, from_unit: str, to_unit: str) -> Optional[float]:
    """
    Convert an amount between two measures.

    Temperatures use the Fahrenheit/Celsius formulas. Everything else goes
    through the conversion table: a direct rule multiplies by its ratio, and
    when only the inverse rule exists the amount is divided by that ratio.

    Returns:
        Converted amount, or None when no rule links the two units
        (including volume/weight requests, which need a density).
    """
    if from_unit == to_unit:
        return amount

    if from_unit == FAHRENHEIT and to_unit == CELSIUS:
        return (amount - 32) * 5 / 9
    if from_unit == CELSIUS and to_unit == FAHRENHEIT:
        return amount * 9 / 5 + 32

    direct = _find_rule(from_unit, to_unit)
    if direct:
        return amount * direct.ratio

    reverse = _find_rule(to_unit, from_unit)
    if reverse:
        return amount / reverse.ratio

    return None


def get_ingredient_density(ingredient: str) -> Optional[float]:
    """
    Grams per cup for a named ingredient.

    Exact (case-insensitive) name first, then the first table key that
    contains or is contained in the name.
    """
    name_lower = ingredient.lower()

    if name_lower in INGREDIENT_DENSITIES:
        return INGREDIENT_DENSITIES[name_lower]

    for key, density in INGREDIENT_DENSITIES.items():
        if key in name_lower or name_lower in key:
            return density

    return None


def get_measure_category(unit: str) -> Optional[str]:
    """Category name for a measure symbol (volume, weight, ...)"""
    for category, measures in MEASURE_CATEGORIES.items():
        if unit in measures:
            return category
    return None


def get_measures_for_category(category: str) -> List[str]:
    """Measures belonging to a category; every known measure for 'all'"""
    if category == 'all':
        return [unit for measures in MEASURE_CATEGORIES.values() for unit in measures]
    return list(MEASURE_CATEGORIES.get(category, []))


def convert_with_density(amount: float, from_unit: str, to_unit: str,
                         ingredient: str) -> Optional[float]:
    """
    Convert between volume and weight for a specific ingredient.

    Volume goes to cups, cups to grams via the density, grams to the target
    weight; weight to volume runs the same path backwards. Returns None if
    the ingredient has no known density, the units are not a volume/weight
    pair, or either leg of the conversion is unsupported.
    """
    density = get_ingredient_density(ingredient) if ingredient else None
    if not density:
        return None

    if from_unit in DENSITY_VOLUME_UNITS and to_unit in DENSITY_WEIGHT_UNITS:
        cups = convert_measurement(amount, from_unit, DENSITY_VOLUME_REFERENCE)
        if cups is None:
            return None
        return convert_measurement(cups * density, DENSITY_WEIGHT_REFERENCE, to_unit)

    if from_unit in DENSITY_WEIGHT_UNITS and to_unit in DENSITY_VOLUME_UNITS:
        grams = convert_measurement(amount, from_unit, DENSITY_WEIGHT_REFERENCE)
        if grams is None:
            return None
        return convert_measurement(grams / density, DENSITY_VOLUME_REFERENCE, to_unit)

    return None


def get_related_conversions(amount: float, from_unit: str, exclude: Iterable[str] = (),
                            limit: int = 6) -> List[Tuple[str, float]]:
    """
    Convert an amount into the other units of its category.

    Units without a rule are skipped, as are from_unit and anything in
    exclude (typically the unit the user already converted to).
    """
    category = get_measure_category(from_unit)
    if category is None:
        return []

    skipped = set(exclude) | {from_unit}
    related = []
    for unit in MEASURE_CATEGORIES[category]:
        if unit in skipped:
            continue
        value = convert_measurement(amount, from_unit, unit)
        if value is not None:
            related.append((unit, value))

    return related[:limit]


def format_amount(value: float) -> str:
    """Three decimals with trailing zeros removed (0.500 -> 0.5, 16.000 -> 16)"""
    text = f"{value:.3f}".rstrip('0').rstrip('.')
    return "0" if text in ("", "-0") else text
