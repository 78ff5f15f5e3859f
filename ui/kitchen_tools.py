"""
Kitchen tools UI for the Gastronome application.

Streamlit pages for the measurement converter, the substitution wizard and
the "what can I make" ingredient recommender.
"""

import streamlit as st
import pandas as pd
from typing import List, Dict, Any, Optional

from models import RecommendationOptions, RecipeRecommendation, Substitution
from services import (
    CookbookService, get_cookbook_service,
    convert_measurement, convert_with_density, get_related_conversions,
    get_ingredient_density, get_measures_for_category, format_amount,
    find_substitutions, filter_substitutions_by_context, describe_ratio, scale_substitute_amount,
    get_ingredient_suggestions, analyze_ingredient_patterns,
)
from utils import get_logger, get_config

logger = get_logger(__name__)

CATEGORY_LABELS = {
    'all': 'All',
    'volume': '💧 Volume',
    'weight': '⚖️ Weight',
    'temperature': '🌡️ Temperature',
    'length': '📏 Length',
}


# Upper bound of the "Maximum results" input
MAX_RESULTS_LIMIT = 100


def bounded_max_results(value: int) -> int:
    """Keep a configured result limit inside the input's 1..MAX_RESULTS_LIMIT range"""
    return max(1, min(value, MAX_RESULTS_LIMIT))


def parse_ingredient_list(text: str) -> List[str]:
    """Split comma or newline separated ingredient input"""
    parts = text.replace('\n', ',').split(',')
    return [part.strip() for part in parts if part.strip()]


def build_recommendation_rows(recommendations: List[RecipeRecommendation]) -> List[Dict[str, Any]]:
    """Table rows for ranked recommendations"""
    return [
        {
            "Recipe": rec.recipe.title,
            "Match": f"{rec.match_percentage}%",
            "You have": ", ".join(rec.available_ingredients) or "-",
            "Missing": ", ".join(rec.missing_ingredients) or "-",
            "Time (min)": rec.recipe.time_minutes,
            "Rating": rec.recipe.rating,
        }
        for rec in recommendations
    ]


def build_substitution_rows(substitutions: List[Substitution],
                            amount: Optional[float] = None) -> List[Dict[str, Any]]:
    """Table rows for substitution results; adds the scaled quantity when amount is given"""
    rows = []
    for sub in substitutions:
        row = {
            "Instead of": sub.original,
            "Use": sub.substitute,
            "Ratio": describe_ratio(sub.ratio),
            "Context": sub.context.value if sub.context else "-",
            "Notes": sub.notes or "-",
        }
        if amount is not None:
            row["Amount"] = format_amount(scale_substitute_amount(sub, amount))
        rows.append(row)
    return rows


class KitchenToolsInterface:
    """
    Cooking tools page.

    Provides:
    - Measurement conversion with an ingredient density bridge
    - Substitution lookup filtered by baking or cooking
    - Recipe recommendations from ingredients on hand
    """

    def __init__(self, cookbook_service: Optional[CookbookService] = None):
        self.cookbook = cookbook_service or get_cookbook_service()
        self.config = get_config()

        # Session state keys
        self.AVAILABLE_KEY = "available_ingredients_text"

    def render_tools_page(self):
        """Render all tools as tabs"""
        st.title("🧰 Kitchen Tools")

        tab1, tab2, tab3 = st.tabs([
            "⚖️ Converter",
            "🔄 Substitutions",
            "🍽️ What Can I Make?"
        ])

        with tab1:
            self.render_measurement_converter()

        with tab2:
            self.render_substitution_wizard()

        with tab3:
            self.render_ingredient_recommender()

    def render_measurement_converter(self):
        """Unit converter with optional ingredient density"""
        st.markdown("### Convert Measurements")

        category = st.radio(
            "Category", list(CATEGORY_LABELS.keys()),
            format_func=lambda key: CATEGORY_LABELS[key], horizontal=True
        )
        measures = get_measures_for_category(category)

        col1, col2, col3 = st.columns(3)
        with col1:
            amount = st.number_input("Amount", value=1.0, step=0.25, format="%.3f")
        with col2:
            from_unit = st.selectbox("From", measures, key="convert_from")
        with col3:
            to_unit = st.selectbox("To", measures, index=min(1, len(measures) - 1), key="convert_to")

        ingredient = st.text_input("Ingredient (optional, for volume ↔ weight)",
                                   placeholder="e.g. flour, butter, honey")

        result = convert_measurement(amount, from_unit, to_unit)
        if result is not None:
            st.success(f"**{format_amount(amount)} {from_unit} = {format_amount(result)} {to_unit}**")
        elif not ingredient:
            st.warning(f"No conversion from {from_unit} to {to_unit}. "
                       f"Enter an ingredient to convert between volume and weight.")

        if ingredient:
            bridged = convert_with_density(amount, from_unit, to_unit, ingredient)
            density = get_ingredient_density(ingredient)
            if bridged is not None:
                st.info(f"**{format_amount(amount)} {from_unit} of {ingredient} ≈ "
                        f"{bridged:.2f} {to_unit}**  \nBased on {ingredient} density: {density:g}g/cup")
            elif density is None:
                st.caption(f"No density known for '{ingredient}'")

        related = get_related_conversions(amount, from_unit, exclude=[to_unit])
        if related:
            st.markdown("#### Related conversions")
            cols = st.columns(min(3, len(related)))
            for index, (unit, value) in enumerate(related):
                cols[index % len(cols)].metric(unit, format_amount(value))

    def render_substitution_wizard(self):
        """Substitution lookup"""
        st.markdown("### Find a Substitute")

        col1, col2, col3 = st.columns([3, 1, 1])
        with col1:
            query = st.text_input("Ingredient", placeholder="e.g. butter, egg, all-purpose flour")
        with col2:
            context = st.selectbox("Context", ["all", "baking", "cooking"])
        with col3:
            amount = st.number_input("Amount needed", min_value=0.0, value=1.0, step=0.25)

        if not query:
            st.caption("Type an ingredient to see alternatives")
            return

        substitutions = filter_substitutions_by_context(find_substitutions(query), context)
        if not substitutions:
            logger.debug(f"No substitutions for '{query}' ({context})")
            st.info(f"No substitutions known for '{query}'")
            return

        st.dataframe(pd.DataFrame(build_substitution_rows(substitutions, amount)),
                     use_container_width=True, hide_index=True)

    def render_ingredient_recommender(self):
        """Rank recipes by the ingredients the user has"""
        st.markdown("### What Can I Make?")

        text = st.text_area("Ingredients you have (comma or line separated)",
                            key=self.AVAILABLE_KEY, placeholder="chicken, pasta, garlic")
        available = parse_ingredient_list(text)

        defaults = RecommendationOptions.from_config(self.config)
        with st.expander("Options"):
            min_score = st.slider("Minimum match", 0.0, 1.0, defaults.min_match_score, 0.05)
            max_results = st.number_input("Maximum results", 1, MAX_RESULTS_LIMIT,
                                          bounded_max_results(defaults.max_results))
            prefer_fewer = st.checkbox("Prefer fewer ingredients", defaults.prefer_fewer_ingredients)
            prefer_quick = st.checkbox("Prefer quick recipes", defaults.prefer_quick_recipes)
            include_global = st.checkbox("Include catalog recipes", True)

        if not available:
            st.caption("Add some ingredients to get recommendations")
            return

        options = RecommendationOptions(
            min_match_score=min_score,
            max_results=int(max_results),
            prefer_fewer_ingredients=prefer_fewer,
            prefer_quick_recipes=prefer_quick
        )
        recommendations = self.cookbook.recommend(available, options, include_global=include_global)

        if recommendations:
            st.dataframe(pd.DataFrame(build_recommendation_rows(recommendations)),
                         use_container_width=True, hide_index=True)
        else:
            st.info("No recipes match those ingredients yet")

        suggestions = get_ingredient_suggestions(available)
        if suggestions:
            st.markdown("#### 💡 Goes well with")
            st.write(", ".join(suggestions))

        patterns = analyze_ingredient_patterns(self.cookbook.recipes)
        companions = {name: patterns[name.lower()] for name in available if patterns.get(name.lower())}
        if companions:
            st.markdown("#### 📒 In your recipes it appears with")
            for name, others in companions.items():
                st.write(f"**{name}**: {', '.join(others)}")
