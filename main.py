#!/usr/bin/env python3
"""
Gastronome - Main Application Entry Point

A personal recipe and cookbook manager with cooking tools: measurement
conversion, ingredient substitutions and "what can I make" recommendations.

Run with: streamlit run main.py
"""

import sys
import streamlit as st
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from services import get_cookbook_service
from ui import KitchenToolsInterface, CookbookViews
from utils import get_config, setup_logging, get_logger

logger = get_logger(__name__)

PAGES = {
    "📖 Recipes": "recipes",
    "📚 Books": "books",
    "🧰 Kitchen Tools": "tools",
}

THEME_LABELS = {
    "light": "☀️ Light",
    "dark": "🌙 Dark",
    "cozy": "🕯️ Cozy",
    "seasonal": "🍂 Seasonal",
}


def init_app(config):
    """Set up logging once per Streamlit session"""
    if 'logging_ready' not in st.session_state:
        setup_logging(config)
        st.session_state.logging_ready = True
        logger.info("Gastronome session started")


def render_sidebar(cookbook) -> str:
    """Navigation and preferences; returns the selected page key"""
    st.sidebar.title("🍳 Gastronome")

    label = st.sidebar.radio("Go to", list(PAGES.keys()))

    st.sidebar.markdown("---")
    themes = list(THEME_LABELS.keys())
    theme = st.sidebar.selectbox(
        "Theme", themes, index=themes.index(cookbook.theme),
        format_func=lambda key: THEME_LABELS[key]
    )
    if theme != cookbook.theme:
        cookbook.set_theme(theme)

    st.sidebar.caption(f"{len(cookbook.recipes)} recipes · {len(cookbook.books)} books")
    return PAGES[label]


def main():
    """Main application entry point"""
    config = get_config()
    st.set_page_config(
        page_title="Gastronome",
        page_icon="🍳",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    init_app(config)
    cookbook = get_cookbook_service()

    page = render_sidebar(cookbook)

    if page == "recipes":
        CookbookViews(cookbook).render_recipes_page()
    elif page == "books":
        CookbookViews(cookbook).render_books_page()
    else:
        KitchenToolsInterface(cookbook).render_tools_page()

    if config.debug_mode:
        with st.expander("Debug"):
            st.json(cookbook.to_snapshot())


if __name__ == "__main__":
    main()
