"""
Recipe recommendation service for the Gastronome application.

Answers "what can I make with what I have": ingredient names are compared
with a fuzzy similarity score, available ingredients are assigned greedily
to each recipe's ingredients, and recipes are ranked by the share of
ingredients covered, adjusted for simplicity, speed, rating and favorites.

All functions are pure. Each call scans its arguments and the static
pairing table; nothing is cached between calls.
"""

from typing import Dict, List, Optional

from constants import INGREDIENT_COMBINATIONS, MAX_INGREDIENT_SUGGESTIONS
from models.recipe_models import Recipe
from models.cooking_models import (
    RecommendationOptions, IngredientMatchResult, RecipeRecommendation
)
from utils import get_logger

logger = get_logger(__name__)

# Minimum fuzzy score for an available ingredient to count as a match
MATCH_THRESHOLD = 0.6

CONTAINMENT_SCORE = 0.8
WORD_OVERLAP_WEIGHT = 0.7
CHARACTER_WEIGHT = 0.3


def levenshtein_distance(str1: str, str2: str) -> int:
    """Edit distance with unit cost insertions, deletions and substitutions"""
    if len(str1) < len(str2):
        str1, str2 = str2, str1

    previous = list(range(len(str2) + 1))
    for i, char1 in enumerate(str1, 1):
        current = [i]
        for j, char2 in enumerate(str2, 1):
            if char1 == char2:
                current.append(previous[j - 1])
            else:
                current.append(min(
                    previous[j - 1] + 1,  # substitution
                    current[j - 1] + 1,   # insertion
                    previous[j] + 1       # deletion
                ))
        previous = current

    return previous[-1]


def fuzzy_match(ingredient1: str, ingredient2: str) -> float:
    """
    Similarity between two ingredient names, from 0.0 to 1.0.

    Exact match (ignoring case and surrounding whitespace) scores 1.0 and
    containment ("chicken breast" / "chicken") scores 0.8. Anything else
    blends word overlap (70%) with Levenshtein character similarity (30%).
    """
    str1 = ingredient1.lower().strip()
    str2 = ingredient2.lower().strip()

    if str1 == str2:
        return 1.0

    if str1 in str2 or str2 in str1:
        return CONTAINMENT_SCORE

    words1 = str1.split()
    words2 = str2.split()

    matching_words = 0
    for word1 in words1:
        for word2 in words2:
            if word1 == word2 or word2 in word1 or word1 in word2:
                matching_words += 1
                break

    word_ratio = max(matching_words / len(words1), matching_words / len(words2))

    max_len = max(len(str1), len(str2))
    char_similarity = 1 - levenshtein_distance(str1, str2) / max_len

    return max(word_ratio * WORD_OVERLAP_WEIGHT + char_similarity * CHARACTER_WEIGHT, 0.0)


def match_ingredients(available_ingredients: List[str],
                      recipe_ingredients: List[str]) -> IngredientMatchResult:
    """
    Greedily assign available ingredients to a recipe's ingredients.

    Recipe ingredients are visited in order; each takes the best-scoring
    unused available ingredient at or above MATCH_THRESHOLD (first one wins
    a tie). An available ingredient satisfies at most one recipe ingredient.

    The score is the matched share, nudged up for short recipes and down
    when many ingredients are missing, capped at 1.0.
    """
    result = IngredientMatchResult()
    total = len(recipe_ingredients)
    if total == 0:
        return result

    used = set()
    for recipe_ingredient in recipe_ingredients:
        best_index = -1
        best_score = 0.0

        for index, available in enumerate(available_ingredients):
            if index in used:
                continue
            score = fuzzy_match(recipe_ingredient, available)
            if score > best_score and score >= MATCH_THRESHOLD:
                best_score = score
                best_index = index

        if best_index >= 0:
            used.add(best_index)
            result.matched.append(recipe_ingredient)
            result.available_used.append(available_ingredients[best_index])
        else:
            result.unmatched.append(recipe_ingredient)

    score = len(result.matched) / total

    # Fewer ingredients, easier recipe
    if total <= 5:
        score *= 1.1
    elif total <= 10:
        score *= 1.05

    missing = len(result.unmatched)
    if missing > 5:
        score *= 0.8
    elif missing > 3:
        score *= 0.9

    result.match_score = min(score, 1.0)
    return result


def _apply_preferences(score: float, recipe: Recipe, options: RecommendationOptions) -> float:
    if options.prefer_fewer_ingredients:
        count = len(recipe.ingredients)
        if count <= 5:
            score *= 1.2
        elif count <= 8:
            score *= 1.1
        elif count > 15:
            score *= 0.9

    if options.prefer_quick_recipes:
        minutes = recipe.time_minutes
        if minutes <= 15:
            score *= 1.3
        elif minutes <= 30:
            score *= 1.2
        elif minutes <= 45:
            score *= 1.1
        elif minutes > 120:
            score *= 0.8

    if recipe.rating >= 4:
        score *= 1.1
    elif recipe.rating >= 3:
        score *= 1.05

    if recipe.loved:
        score *= 1.1

    return min(score, 1.0)


def get_recipe_recommendations(available_ingredients: List[str], recipes: List[Recipe],
                               options: Optional[RecommendationOptions] = None) -> List[RecipeRecommendation]:
    """
    Rank recipes by how well the available ingredients cover them.

    Args:
        available_ingredients: Ingredient names the cook has on hand
        recipes: Recipes to consider
        options: Thresholds and ranking preferences (defaults if omitted)

    Returns:
        Recommendations sorted by descending score, at most
        options.max_results long. Equal scores keep the recipes' input order.
    """
    options = options or RecommendationOptions()

    cleaned = [ing.strip().lower() for ing in available_ingredients]
    cleaned = [ing for ing in cleaned if ing]
    if not cleaned:
        return []

    recommendations = []
    for recipe in recipes:
        names = [ing.name.lower() for ing in recipe.ingredients]
        if not names:
            continue

        match = match_ingredients(cleaned, names)
        if match.match_score < options.min_match_score:
            continue

        recommendations.append(RecipeRecommendation(
            recipe=recipe,
            match_score=_apply_preferences(match.match_score, recipe, options),
            available_ingredients=match.available_used,
            missing_ingredients=match.unmatched
        ))

    recommendations.sort(key=lambda rec: rec.match_score, reverse=True)

    logger.debug(f"Recommended {min(len(recommendations), options.max_results)} of "
                 f"{len(recipes)} recipes for {len(cleaned)} ingredients")

    return recommendations[:options.max_results]


def _related(name1: str, name2: str) -> bool:
    return name1 in name2 or name2 in name1


def get_ingredient_suggestions(current_ingredients: List[str]) -> List[str]:
    """
    Ingredients that pair well with what is already on the list.

    Companions already covered by a current ingredient are left out.
    Order follows discovery, duplicates removed, at most 10 entries.
    """
    current = [ing.lower() for ing in current_ingredients]
    suggestions = []

    for ingredient in current:
        for key, companions in INGREDIENT_COMBINATIONS.items():
            if not _related(ingredient, key):
                continue
            for companion in companions:
                if companion in suggestions:
                    continue
                if any(_related(existing, companion) for existing in current):
                    continue
                suggestions.append(companion)

    return suggestions[:MAX_INGREDIENT_SUGGESTIONS]


def analyze_ingredient_patterns(recipes: List[Recipe]) -> Dict[str, List[str]]:
    """Map each ingredient to the other ingredients it shares a recipe with"""
    patterns: Dict[str, Dict[str, None]] = {}

    for recipe in recipes:
        names = [ing.name.lower() for ing in recipe.ingredients]
        for i, name in enumerate(names):
            companions = patterns.setdefault(name, {})
            for j, other in enumerate(names):
                if i != j:
                    companions.setdefault(other, None)

    return {name: list(companions) for name, companions in patterns.items()}
