"""
Cooking reference and recommendation models for the Gastronome application.

Covers the static reference records (substitution and conversion rules),
the typed options for recipe recommendation and the derived, never-persisted
recommendation results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from models.recipe_models import Recipe
    from utils.config import Config


class SubstitutionContext(Enum):
    """Where a substitution is known to work"""
    BAKING = "baking"
    COOKING = "cooking"
    BOTH = "both"


class ConversionType(Enum):
    """Physical dimension a conversion rule belongs to"""
    VOLUME = "volume"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    LENGTH = "length"


@dataclass(frozen=True)
class Substitution:
    """
    Ingredient substitution rule.

    substitute amount = original amount * ratio
    """
    original: str
    substitute: str
    ratio: float
    context: Optional[SubstitutionContext] = None
    notes: str = ""

    def applies_to(self, context: Optional[SubstitutionContext]) -> bool:
        """Check whether this rule can be used in the given cooking context"""
        if context is None or self.context is None:
            return True
        return self.context in (SubstitutionContext.BOTH, context)


@dataclass(frozen=True)
class MeasurementConversion:
    """Directional unit conversion rule: to = from * ratio"""
    from_unit: str
    to_unit: str
    ratio: float
    type: ConversionType


@dataclass
class RecommendationOptions:
    """Tuning knobs for recipe recommendations"""
    min_match_score: float = 0.3
    max_results: int = 20
    prefer_fewer_ingredients: bool = True
    prefer_quick_recipes: bool = False

    @classmethod
    def from_config(cls, config: 'Config') -> 'RecommendationOptions':
        """Build options from application configuration"""
        return cls(
            min_match_score=config.min_match_score,
            max_results=config.max_results,
            prefer_fewer_ingredients=config.prefer_fewer_ingredients,
            prefer_quick_recipes=config.prefer_quick_recipes
        )


@dataclass
class IngredientMatchResult:
    """Outcome of greedily matching available ingredients to a recipe"""
    matched: List[str] = field(default_factory=list)
    unmatched: List[str] = field(default_factory=list)
    available_used: List[str] = field(default_factory=list)
    match_score: float = 0.0


@dataclass
class RecipeRecommendation:
    """Recipe ranked against the ingredients a cook has on hand"""
    recipe: 'Recipe'
    match_score: float
    available_ingredients: List[str] = field(default_factory=list)
    missing_ingredients: List[str] = field(default_factory=list)

    @property
    def match_percentage(self) -> int:
        """Score as a whole percentage for display"""
        return round(self.match_score * 100)
