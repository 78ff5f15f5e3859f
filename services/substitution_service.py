"""
Ingredient Substitution Service

Looks up alternatives for an ingredient in the curated substitution table.
"""

from typing import List, Optional, Union

from constants import INGREDIENT_SUBSTITUTIONS
from models.cooking_models import Substitution, SubstitutionContext
from utils import get_logger

logger = get_logger(__name__)


def find_substitutions(ingredient: str) -> List[Substitution]:
    """
    All substitution rules related to an ingredient.

    Case-insensitive; a rule matches when its original name contains the
    query or the query contains it ("all-purpose flour" finds the flour
    rules, "BUTTER" finds the butter rules). Table order is preserved.
    """
    query = ingredient.lower()
    return [
        sub for sub in INGREDIENT_SUBSTITUTIONS
        if query in sub.original.lower() or sub.original.lower() in query
    ]


def filter_substitutions_by_context(substitutions: List[Substitution],
                                    context: Optional[Union[SubstitutionContext, str]]) -> List[Substitution]:
    """
    Keep rules usable for baking or cooking; None or 'all' keeps everything.
    An unknown context name matches nothing.
    """
    if context is None or context == 'all':
        return list(substitutions)
    if isinstance(context, str):
        try:
            context = SubstitutionContext(context)
        except ValueError:
            logger.warning(f"Unknown substitution context '{context}'")
            return []
    return [sub for sub in substitutions if sub.applies_to(context)]


def describe_ratio(ratio: float) -> str:
    """Human readable ratio text"""
    if ratio == 1.0:
        return "1:1 ratio"
    return f"Use {ratio:g}x the amount"


def scale_substitute_amount(substitution: Substitution, amount: float) -> float:
    """Amount of substitute for a given amount of the original ingredient"""
    return amount * substitution.ratio
