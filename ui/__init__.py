"""
UI components for the Gastronome application.

Streamlit pages for the cookbook (recipes and books) and the kitchen tools
(converter, substitutions, recommender).
"""

from .kitchen_tools import (
    KitchenToolsInterface, build_recommendation_rows, build_substitution_rows, parse_ingredient_list,
    bounded_max_results
)
from .cookbook_views import CookbookViews, build_ingredient_table, parse_ingredient_lines

__all__ = [
    'KitchenToolsInterface',
    'build_recommendation_rows',
    'build_substitution_rows',
    'parse_ingredient_list',
    'bounded_max_results',
    'CookbookViews',
    'build_ingredient_table',
    'parse_ingredient_lines'
]
