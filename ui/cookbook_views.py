"""
Cookbook views for the Gastronome application.

Browse, search, create, copy and delete recipes and books.
"""

import streamlit as st
import pandas as pd
from typing import List, Optional

from models import Recipe, Book, Ingredient
from constants import COOKING_MEASURES
from services import CookbookService, get_cookbook_service
from utils import get_logger

logger = get_logger(__name__)


def build_ingredient_table(recipe: Recipe) -> pd.DataFrame:
    """Ingredient table for a recipe in recipe order"""
    rows = [
        {
            "Order": index + 1,
            "Amount": ingredient.amount or "-",
            "Measure": ingredient.measure or "-",
            "Ingredient": ingredient.name,
        }
        for index, ingredient in enumerate(recipe.ingredients)
    ]
    return pd.DataFrame(rows, columns=["Order", "Amount", "Measure", "Ingredient"])


def parse_ingredient_lines(text: str) -> List[Ingredient]:
    """
    Parse "amount | measure | name" lines.
    Two fields are "amount | name"; a single field is just a name.
    Unknown measures are dropped.
    """
    ingredients = []
    for line in text.splitlines():
        fields = [field.strip() for field in line.split('|')]
        if not any(fields):
            continue
        if len(fields) == 1:
            ingredients.append(Ingredient(fields[0]))
        elif len(fields) == 2:
            ingredients.append(Ingredient(fields[1], fields[0]))
        else:
            amount, measure, name = fields[:3]
            if measure not in COOKING_MEASURES:
                measure = ""
            ingredients.append(Ingredient(name, amount, measure))
    return ingredients


class CookbookViews:
    """Recipes and books pages backed by the cookbook service"""

    def __init__(self, cookbook_service: Optional[CookbookService] = None):
        self.cookbook = cookbook_service or get_cookbook_service()

    # Recipes

    def render_recipes_page(self):
        st.title("📖 Recipes")

        col1, col2 = st.columns([3, 1])
        with col1:
            term = st.text_input("Search recipes", placeholder="Title, author or keyword")
        with col2:
            show_global = st.toggle("Catalog", value=False)

        recipes = self.cookbook.search_recipes(term, include_global=show_global)
        if not recipes:
            st.info("Try adjusting your search terms" if term else "No recipes yet")

        for recipe in recipes:
            self._render_recipe_card(recipe)

        if not show_global:
            with st.expander("➕ New recipe"):
                self._render_recipe_form()

    def _render_recipe_card(self, recipe: Recipe):
        loved = " ❤️" if recipe.loved else ""
        with st.expander(f"{recipe.title} · {recipe.author}{loved}"):
            st.caption(f"⏱️ {recipe.time_minutes} min · 🍽️ {recipe.servings} servings · "
                       f"⭐ {recipe.rating:g}")
            if recipe.ingredients:
                st.dataframe(build_ingredient_table(recipe), use_container_width=True, hide_index=True)
            for number, step in enumerate(recipe.steps, 1):
                st.markdown(f"{number}. {step}")

            if recipe.is_global:
                destinations = {book.title: book.id for book in self.cookbook.books}
                choice = st.selectbox("Copy into", ["New book"] + list(destinations),
                                      key=f"dest_{recipe.id}")
                if st.button("📥 Copy to my cookbook", key=f"copy_{recipe.id}"):
                    if choice == "New book":
                        self.cookbook.copy_recipe_to_book(recipe, new_book_title=recipe.title)
                    else:
                        self.cookbook.copy_recipe_to_book(recipe, book_id=destinations[choice])
                    st.success(f"Copied '{recipe.title}'")
            else:
                col1, col2 = st.columns(2)
                with col1:
                    if st.button("❤️ Toggle love", key=f"love_{recipe.id}"):
                        self.cookbook.update_recipe(recipe.id, loved=not recipe.loved)
                        st.rerun()
                with col2:
                    if st.button("🗑️ Delete", key=f"delete_{recipe.id}"):
                        self.cookbook.delete_recipe(recipe.id)
                        st.rerun()

    def _render_recipe_form(self):
        with st.form("new_recipe", clear_on_submit=True):
            title = st.text_input("Title")
            author = st.text_input("Author")
            keywords = st.text_input("Keywords (comma separated)")
            ingredients_text = st.text_area("Ingredients, one per line: amount | measure | name")
            steps_text = st.text_area("Steps, one per line")
            time_minutes = st.number_input("Time (minutes)", 0, 1440, 30)
            servings = st.number_input("Servings", 1, 100, 4)

            if st.form_submit_button("Save recipe"):
                if not title.strip():
                    st.error("A title is required")
                    return
                self.cookbook.add_recipe(
                    title.strip(),
                    author=author.strip(),
                    keywords=[k.strip() for k in keywords.split(',') if k.strip()],
                    ingredients=parse_ingredient_lines(ingredients_text),
                    steps=[s.strip() for s in steps_text.splitlines() if s.strip()],
                    time_minutes=int(time_minutes),
                    servings=int(servings)
                )
                st.success(f"Saved '{title.strip()}'")

    # Books

    def render_books_page(self):
        st.title("📚 Books")

        col1, col2 = st.columns([3, 1])
        with col1:
            term = st.text_input("Search books", placeholder="Title, author, category or keyword")
        with col2:
            show_global = st.toggle("Catalog", value=False, key="books_catalog")

        books = self.cookbook.search_books(term, include_global=show_global)
        if not books:
            st.info("Try adjusting your search terms" if term else "No books yet")

        for book in books:
            self._render_book_card(book)

        if not show_global:
            with st.expander("➕ New book"):
                with st.form("new_book", clear_on_submit=True):
                    title = st.text_input("Title")
                    author = st.text_input("Author")
                    description = st.text_area("Description")
                    categories = st.text_input("Categories (comma separated)")
                    if st.form_submit_button("Create book") and title.strip():
                        self.cookbook.add_book(
                            title.strip(), author=author.strip(), description=description.strip(),
                            categories=[c.strip() for c in categories.split(',') if c.strip()]
                        )
                        st.success(f"Created '{title.strip()}'")

    def _render_book_card(self, book: Book):
        count = book.recipe_count
        with st.expander(f"{book.title} · {count} recipe{'s' if count != 1 else ''}"):
            if book.description:
                st.write(book.description)
            if book.categories:
                st.caption(" · ".join(book.categories))

            if book.is_global:
                if st.button("📥 Copy book", key=f"copy_book_{book.id}"):
                    self.cookbook.copy_global_book(book)
                    st.success(f"Copied '{book.title}' and its recipes")
                return

            for recipe in self.cookbook.get_book_recipes(book.id):
                st.markdown(f"- {recipe.title}")

            others = {r.title: r.id for r in self.cookbook.recipes if r.id not in book.recipe_ids}
            if others:
                choice = st.selectbox("Add recipe", list(others), key=f"add_to_{book.id}")
                if st.button("Add", key=f"add_btn_{book.id}"):
                    self.cookbook.add_recipe_to_book(book.id, others[choice])
                    st.rerun()

            st.warning("Deleting a book also deletes every recipe in it.")
            if st.button("🗑️ Delete book", key=f"delete_book_{book.id}"):
                logger.info(f"User deleted book '{book.title}' with {count} recipes")
                self.cookbook.delete_book(book.id)
                st.rerun()
