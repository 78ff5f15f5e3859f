#!/usr/bin/env python3
"""
Test script for the recipe recommendation engine.
Tests fuzzy matching, greedy ingredient assignment, ranking and suggestions.
"""

import sys
import math
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from services.recommendation_service import (
    levenshtein_distance, fuzzy_match, match_ingredients,
    get_recipe_recommendations, get_ingredient_suggestions, analyze_ingredient_patterns
)
from models import Recipe, Ingredient, RecommendationOptions


def make_recipe(recipe_id, title, names, time_minutes=30, rating=0.0, loved=False):
    return Recipe(
        id=recipe_id,
        title=title,
        ingredients=[Ingredient(name) for name in names],
        time_minutes=time_minutes,
        rating=rating,
        loved=loved
    )


def sample_recipes():
    return [
        make_recipe('1', 'Chicken Pasta', ['chicken breast', 'pasta', 'garlic', 'olive oil'],
                    time_minutes=30, rating=4.5, loved=True),
        make_recipe('2', 'Simple Salad', ['lettuce', 'tomato', 'cucumber', 'olive oil'],
                    time_minutes=10, rating=3.5),
        make_recipe('3', 'Chicken Soup', ['chicken', 'onion', 'carrot', 'celery', 'water'],
                    time_minutes=60, rating=4.0),
    ]


def titles(recommendations):
    return [rec.recipe.title for rec in recommendations]


def test_levenshtein_distance():
    print("Testing Levenshtein Distance...")

    assert levenshtein_distance('kitten', 'sitting') == 3
    assert levenshtein_distance('', 'abc') == 3
    assert levenshtein_distance('abc', '') == 3
    assert levenshtein_distance('flour', 'flour') == 0
    assert levenshtein_distance('flour', 'floor') == 1
    print("[OK] Levenshtein distance correct")


def test_fuzzy_match():
    """Exact, containment and blended scores"""
    print("\nTesting Fuzzy Match...")

    assert fuzzy_match('milk', 'milk') == 1.0, "Exact match scores 1.0"
    assert fuzzy_match('  Chicken ', 'CHICKEN') == 1.0, "Case and whitespace are ignored"
    assert fuzzy_match('chicken breast', 'chicken') == 0.8, "Containment scores 0.8"
    assert fuzzy_match('tomato', 'cherry tomato') == 0.8, "Containment works both ways"

    reordered = fuzzy_match('olive oil', 'oil olive')
    assert 0.7 <= reordered < 1.0, f"Full word overlap should score at least 0.7, got {reordered}"

    unrelated = fuzzy_match('salt', 'chocolate')
    assert 0.0 <= unrelated < 0.6, f"Unrelated names should stay below the threshold, got {unrelated}"

    for pair in [('chicken', 'chicken breast'), ('oil', 'olive oil'), ('salt', 'pasta')]:
        assert fuzzy_match(*pair) == fuzzy_match(*reversed(pair)), f"fuzzy_match should be symmetric for {pair}"
    print("[OK] Fuzzy match works")


def test_match_ingredients_one_to_one():
    """An available ingredient satisfies at most one recipe ingredient"""
    print("\nTesting One-to-One Matching...")

    result = match_ingredients(['chicken'], ['chicken breast', 'chicken thigh'])
    assert result.matched == ['chicken breast'], f"Only the first should match: {result.matched}"
    assert result.unmatched == ['chicken thigh']
    assert result.available_used == ['chicken']
    assert math.isclose(result.match_score, 0.5 * 1.1), f"Unexpected score {result.match_score}"
    print("[OK] One-to-one matching works")


def test_match_ingredients_best_candidate():
    """Best score wins; first candidate wins a tie"""
    print("\nTesting Candidate Selection...")

    best = match_ingredients(['garlic powder', 'garlic'], ['garlic'])
    assert best.available_used == ['garlic'], "Exact match beats containment"

    tie = match_ingredients(['chicken breast', 'chicken thigh'], ['chicken'])
    assert tie.available_used == ['chicken breast'], "First candidate wins a tie"
    print("[OK] Candidate selection works")


def test_match_ingredients_scoring():
    """Simplicity bonus, missing-ingredient penalty and cap"""
    print("\nTesting Match Scoring...")

    full = match_ingredients(['salt', 'pepper'], ['salt', 'pepper'])
    assert full.match_score == 1.0, "Score is capped at 1.0"

    required = ['flour', 'sugar', 'butter', 'eggs', 'milk', 'vanilla', 'cocoa']
    sparse = match_ingredients(['flour'], required)
    expected = (1 / 7) * 1.05 * 0.8
    assert math.isclose(sparse.match_score, expected), f"Expected {expected}, got {sparse.match_score}"

    empty = match_ingredients(['flour'], [])
    assert empty.match_score == 0.0 and empty.matched == [], "Empty recipe scores 0"
    print("[OK] Match scoring works")


# Distinct single-word names; none contains another
SPICE_RACK = ['anise', 'basil', 'cumin', 'dill', 'endive', 'fennel', 'ginger', 'hazelnut',
              'icing', 'jam', 'kale', 'leek', 'mango', 'nutmeg', 'okra', 'parsley']


def test_match_ingredients_penalty_tiers():
    """Size bonus and missing-ingredient penalty, one case per tier"""
    print("\nTesting Match Score Tiers...")

    cases = [
        # (available, required, expected score)
        (['anise'], SPICE_RACK[:4], (1 / 4) * 1.1),                # 3 missing, no penalty
        (['anise'], SPICE_RACK[:5], (1 / 5) * 1.1 * 0.9),          # 4 missing
        (['anise', 'basil'], SPICE_RACK[:6], (2 / 6) * 1.05 * 0.9),  # 4 missing, 6-10 bonus
        (['anise'], SPICE_RACK[:6], (1 / 6) * 1.05 * 0.9),         # 5 missing
        (SPICE_RACK[:11], SPICE_RACK[:12], 11 / 12),               # no bonus above 10, 1 missing
    ]
    for available, required, expected in cases:
        result = match_ingredients(available, required)
        assert math.isclose(result.match_score, expected), \
            f"{len(required)} required, {len(available)} available: expected {expected}, got {result.match_score}"

    print("[OK] Match score tiers correct")


def single_score(recipe, options):
    recommendations = get_recipe_recommendations(['anise'], [recipe], options)
    assert len(recommendations) == 1, f"{recipe.title} should be recommended"
    return recommendations[0].match_score


def test_ingredient_count_preference_tiers():
    """prefer_fewer_ingredients multiplier for each recipe size"""
    print("\nTesting Ingredient Count Tiers...")

    options = RecommendationOptions(min_match_score=0.0, prefer_fewer_ingredients=True)
    cases = [
        # (ingredient count, base match score, preference multiplier)
        (5, (1 / 5) * 1.1 * 0.9, 1.2),
        (6, (1 / 6) * 1.05 * 0.9, 1.1),
        (8, (1 / 8) * 1.05 * 0.8, 1.1),
        (9, (1 / 9) * 1.05 * 0.8, 1.0),
        (15, (1 / 15) * 0.8, 1.0),
        (16, (1 / 16) * 0.8, 0.9),
    ]
    for count, base, multiplier in cases:
        recipe = make_recipe(f'n{count}', f'{count} ingredients', SPICE_RACK[:count])
        score = single_score(recipe, options)
        assert math.isclose(score, base * multiplier), \
            f"{count} ingredients: expected {base * multiplier}, got {score}"

    print("[OK] Ingredient count tiers correct")


def test_quick_recipe_preference_tiers():
    """prefer_quick_recipes multiplier for each cooking time"""
    print("\nTesting Cooking Time Tiers...")

    options = RecommendationOptions(min_match_score=0.0, prefer_fewer_ingredients=False,
                                    prefer_quick_recipes=True)
    base = 0.5 * 1.1
    cases = [
        (15, 1.3),
        (16, 1.2),
        (30, 1.2),
        (31, 1.1),
        (45, 1.1),
        (46, 1.0),
        (120, 1.0),
        (121, 0.8),
    ]
    for minutes, multiplier in cases:
        recipe = make_recipe(f't{minutes}', f'{minutes} minutes', SPICE_RACK[:2], time_minutes=minutes)
        score = single_score(recipe, options)
        assert math.isclose(score, base * multiplier), \
            f"{minutes} minutes: expected {base * multiplier}, got {score}"

    print("[OK] Cooking time tiers correct")


def test_rating_and_love_tiers():
    print("\nTesting Rating Tiers...")

    options = RecommendationOptions(min_match_score=0.0, prefer_fewer_ingredients=False)
    base = 0.5 * 1.1
    cases = [
        # (rating, loved, multiplier)
        (2.9, False, 1.0),
        (3.0, False, 1.05),
        (3.9, False, 1.05),
        (4.0, False, 1.1),
        (0.0, True, 1.1),
        (3.0, True, 1.05 * 1.1),
    ]
    for rating, loved, multiplier in cases:
        recipe = make_recipe('r', 'Rated', SPICE_RACK[:2], rating=rating, loved=loved)
        score = single_score(recipe, options)
        assert math.isclose(score, base * multiplier), \
            f"rating {rating}, loved {loved}: expected {base * multiplier}, got {score}"

    print("[OK] Rating tiers correct")


def test_recommendations_basic():
    """Matching recipes come back with what is available and what is missing"""
    print("\nTesting Basic Recommendations...")

    recommendations = get_recipe_recommendations(['chicken', 'pasta', 'garlic'], sample_recipes())
    assert titles(recommendations) == ['Chicken Pasta'], f"Unexpected results: {titles(recommendations)}"

    top = recommendations[0]
    assert top.available_ingredients == ['chicken', 'pasta', 'garlic']
    assert top.missing_ingredients == ['olive oil']
    assert 0.0 <= top.match_score <= 1.0
    print("[OK] Basic recommendations work")


def test_recommendations_edge_inputs():
    print("\nTesting Edge Inputs...")

    assert get_recipe_recommendations([], sample_recipes()) == [], "No ingredients, no results"
    assert get_recipe_recommendations(['  ', ''], sample_recipes()) == [], "Blank ingredients are ignored"
    assert get_recipe_recommendations(['chicken'], []) == [], "No recipes, no results"

    empty = make_recipe('x', 'Air Sandwich', [])
    loose = RecommendationOptions(min_match_score=0.0)
    assert get_recipe_recommendations(['bread'], [empty], loose) == [], "Recipes without ingredients are skipped"

    shouted = get_recipe_recommendations(['  CHICKEN  ', 'Pasta', 'garlic'], sample_recipes())
    assert titles(shouted) == ['Chicken Pasta'], "Available ingredients are normalized"
    print("[OK] Edge inputs handled")


def test_recommendations_threshold():
    print("\nTesting Minimum Score...")

    loose = RecommendationOptions(min_match_score=0.1)
    strict = RecommendationOptions(min_match_score=0.8)

    assert titles(get_recipe_recommendations(['lettuce'], sample_recipes(), loose)) == ['Simple Salad']
    assert get_recipe_recommendations(['lettuce'], sample_recipes(), strict) == [], \
        "Nothing should pass a strict threshold"
    print("[OK] Minimum score respected")


def test_recommendations_max_results():
    print("\nTesting Result Limit...")

    loose = RecommendationOptions(min_match_score=0.1)
    everything = get_recipe_recommendations(['chicken', 'olive oil'], sample_recipes(), loose)
    assert titles(everything) == ['Chicken Pasta', 'Simple Salad', 'Chicken Soup'], \
        f"Unexpected ranking: {titles(everything)}"

    limited = RecommendationOptions(min_match_score=0.1, max_results=1)
    assert titles(get_recipe_recommendations(['chicken', 'olive oil'], sample_recipes(), limited)) == \
        ['Chicken Pasta']

    scores = [rec.match_score for rec in everything]
    assert scores == sorted(scores, reverse=True), "Results are sorted by descending score"
    assert all(0.0 <= score <= 1.0 for score in scores), "Scores stay within [0, 1]"
    print("[OK] Result limit respected")


def test_recommendations_ranking():
    """Better coverage, rating and love rank higher"""
    print("\nTesting Ranking...")

    favorite = make_recipe('a', 'Garlic Chicken Pasta', ['chicken', 'pasta', 'garlic', 'olive oil'],
                           rating=4.5, loved=True)
    soup = make_recipe('b', 'Chicken Soup', ['chicken', 'onion', 'carrot', 'celery', 'water'], rating=4.0)

    options = RecommendationOptions(min_match_score=0.1)
    ranked = get_recipe_recommendations(['chicken', 'pasta', 'garlic'], [soup, favorite], options)
    assert titles(ranked) == ['Garlic Chicken Pasta', 'Chicken Soup'], f"Unexpected ranking: {titles(ranked)}"
    assert ranked[0].match_score == 1.0
    assert ranked[0].match_score > ranked[1].match_score
    print("[OK] Ranking works")


def test_recommendations_preferences():
    """Quick-recipe preference and stable ordering of ties"""
    print("\nTesting Preferences...")

    slow = make_recipe('slow', 'Slow Rice', ['rice', 'beans'], time_minutes=90)
    quick = make_recipe('quick', 'Quick Rice', ['rice', 'beans'], time_minutes=10)

    neutral = RecommendationOptions(prefer_fewer_ingredients=False)
    tied = get_recipe_recommendations(['rice'], [slow, quick], neutral)
    assert titles(tied) == ['Slow Rice', 'Quick Rice'], "Equal scores keep input order"
    assert tied[0].match_score == tied[1].match_score

    hurried = RecommendationOptions(prefer_fewer_ingredients=False, prefer_quick_recipes=True)
    ranked = get_recipe_recommendations(['rice'], [slow, quick], hurried)
    assert titles(ranked) == ['Quick Rice', 'Slow Rice'], "Quick recipes rank first when preferred"
    assert math.isclose(ranked[0].match_score, 0.55 * 1.3)
    print("[OK] Preferences work")


def test_match_percentage():
    print("\nTesting Match Percentage...")

    loose = RecommendationOptions(min_match_score=0.1)
    salad = get_recipe_recommendations(['lettuce'], sample_recipes(), loose)[0]
    # 1/4 matched, short recipe, few ingredients, 3.5 stars
    assert math.isclose(salad.match_score, 0.25 * 1.1 * 1.2 * 1.05)
    assert salad.match_percentage == 35
    print("[OK] Match percentage works")


def test_ingredient_suggestions():
    print("\nTesting Ingredient Suggestions...")

    assert get_ingredient_suggestions(['chicken']) == ['onion', 'garlic', 'herbs', 'lemon', 'olive oil']

    combined = get_ingredient_suggestions(['chicken', 'onion', 'garlic'])
    assert combined == ['herbs', 'lemon', 'olive oil', 'tomato', 'bell pepper', 'celery'], \
        f"Unexpected suggestions: {combined}"
    assert not {'chicken', 'onion', 'garlic'} & set(combined), "Current ingredients are never suggested"

    many = get_ingredient_suggestions(['tomato', 'onion', 'chicken', 'pasta', 'rice', 'egg', 'beef', 'fish'])
    assert len(many) <= 10, "Suggestions are capped at 10"
    assert len(many) == len(set(many)), "Suggestions are unique"

    assert get_ingredient_suggestions([]) == []
    assert get_ingredient_suggestions(['dragonfruit']) == []
    print("[OK] Ingredient suggestions work")


def test_analyze_ingredient_patterns():
    print("\nTesting Ingredient Patterns...")

    recipes = sample_recipes()[:2]
    patterns = analyze_ingredient_patterns(recipes)

    assert patterns['olive oil'] == ['chicken breast', 'pasta', 'garlic', 'lettuce', 'tomato', 'cucumber']
    assert patterns['lettuce'] == ['tomato', 'cucumber', 'olive oil']
    assert 'lettuce' not in patterns['lettuce'], "Ingredients are not their own companions"
    assert analyze_ingredient_patterns([]) == {}
    print("[OK] Ingredient patterns work")


if __name__ == "__main__":
    try:
        test_levenshtein_distance()
        test_fuzzy_match()
        test_match_ingredients_one_to_one()
        test_match_ingredients_best_candidate()
        test_match_ingredients_scoring()
        test_match_ingredients_penalty_tiers()
        test_recommendations_basic()
        test_recommendations_edge_inputs()
        test_recommendations_threshold()
        test_recommendations_max_results()
        test_recommendations_ranking()
        test_recommendations_preferences()
        test_ingredient_count_preference_tiers()
        test_quick_recipe_preference_tiers()
        test_rating_and_love_tiers()
        test_match_percentage()
        test_ingredient_suggestions()
        test_analyze_ingredient_patterns()
        print("\n[SUCCESS] All recommendation tests passed!")
        sys.exit(0)
    except AssertionError as e:
        print(f"\n[FAIL] Recommendation test failed: {e}")
        sys.exit(1)
