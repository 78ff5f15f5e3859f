"""
Cookbook service for the Gastronome application.

Owns the user's recipes and books: CRUD operations, copying entries from the
global catalog, filing recipes into books and simple text search. State is
persisted as a single JSON snapshot file, rewritten after every change.
"""

import json
import secrets
import string
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Dict, Any

from constants import build_global_recipes, build_global_books
from models import Recipe, Book, RecommendationOptions, RecipeRecommendation
from services.recommendation_service import get_recipe_recommendations
from utils import get_logger, get_config, log_operation
from utils.config import THEMES

logger = get_logger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 9

# Fields callers may not overwrite through update_*
_PROTECTED_FIELDS = {'id', 'created_at', 'updated_at'}


def generate_id() -> str:
    """Random 9 character lowercase base-36 id"""
    return ''.join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


class CookbookService:
    """
    State container for the user's cookbook.

    Recipes and books live in insertion order. Global catalog entries are
    read-only; copy them with copy_global_recipe / copy_global_book.
    """

    def __init__(self, data_file: Optional[str] = None, autosave: bool = True,
                 global_recipes: Optional[List[Recipe]] = None,
                 global_books: Optional[List[Book]] = None,
                 theme: str = "light"):
        self.data_file = Path(data_file) if data_file else None
        self.autosave = autosave

        self.recipes: List[Recipe] = []
        self.books: List[Book] = []
        self.global_recipes: List[Recipe] = global_recipes if global_recipes is not None else build_global_recipes()
        self.global_books: List[Book] = global_books if global_books is not None else build_global_books()
        self.theme = theme if theme in THEMES else "light"

    # Recipe Operations

    def add_recipe(self, title: str, **fields) -> str:
        """
        Create a recipe and return its id.

        Args:
            title: Recipe title
            **fields: Any other Recipe field (author, ingredients, steps, ...)
        """
        now = datetime.now()
        recipe = Recipe(id=generate_id(), title=title, created_at=now, updated_at=now,
                        **self._without_protected(fields))
        self.recipes.append(recipe)
        logger.info(f"Added recipe '{recipe.title}' ({recipe.id})")
        self._autosave()
        return recipe.id

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        for recipe in self.recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def update_recipe(self, recipe_id: str, **updates) -> Optional[Recipe]:
        """Apply a partial update and refresh updated_at"""
        index = self._index_of(self.recipes, recipe_id)
        if index is None:
            logger.warning(f"Recipe {recipe_id} not found for update")
            return None

        updated = replace(self.recipes[index], updated_at=datetime.now(),
                          **self._without_protected(updates))
        self.recipes[index] = updated
        logger.info(f"Updated recipe {recipe_id}: {list(updates.keys())}")
        self._autosave()
        return updated

    def delete_recipe(self, recipe_id: str) -> bool:
        """Delete a recipe. Books that list it keep the dangling id."""
        index = self._index_of(self.recipes, recipe_id)
        if index is None:
            logger.warning(f"Recipe {recipe_id} not found for deletion")
            return False

        del self.recipes[index]
        logger.info(f"Deleted recipe {recipe_id}")
        self._autosave()
        return True

    def copy_global_recipe(self, global_recipe: Recipe) -> str:
        """Copy a catalog recipe into the cookbook, resetting rating, love and comments"""
        now = datetime.now()
        copied = replace(
            global_recipe,
            id=generate_id(),
            ingredients=[replace(ing) for ing in global_recipe.ingredients],
            keywords=list(global_recipe.keywords),
            steps=list(global_recipe.steps),
            is_global=False,
            original_id=global_recipe.id,
            created_at=now,
            updated_at=now,
            loved=False,
            rating=0.0,
            comments=[]
        )
        self.recipes.append(copied)
        logger.info(f"Copied global recipe {global_recipe.id} as {copied.id}")
        self._autosave()
        return copied.id

    def search_recipes(self, term: str, include_global: bool = False) -> List[Recipe]:
        """Recipes whose title, author or keywords contain the term"""
        pool = self.global_recipes if include_global else self.recipes
        if not term:
            return list(pool)
        return [recipe for recipe in pool if recipe.matches_search(term)]

    # Book Operations

    def add_book(self, title: str, **fields) -> str:
        """Create a book and return its id"""
        now = datetime.now()
        book = Book(id=generate_id(), title=title, created_at=now, updated_at=now,
                    **self._without_protected(fields))
        self.books.append(book)
        logger.info(f"Added book '{book.title}' ({book.id})")
        self._autosave()
        return book.id

    def get_book(self, book_id: str) -> Optional[Book]:
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def update_book(self, book_id: str, **updates) -> Optional[Book]:
        """Apply a partial update and refresh updated_at"""
        index = self._index_of(self.books, book_id)
        if index is None:
            logger.warning(f"Book {book_id} not found for update")
            return None

        updated = replace(self.books[index], updated_at=datetime.now(),
                          **self._without_protected(updates))
        self.books[index] = updated
        logger.info(f"Updated book {book_id}: {list(updates.keys())}")
        self._autosave()
        return updated

    def delete_book(self, book_id: str) -> bool:
        """
        Delete a book together with every recipe it lists.

        Recipes are removed even when another book also lists them.
        """
        index = self._index_of(self.books, book_id)
        if index is None:
            logger.warning(f"Book {book_id} not found for deletion")
            return False

        book = self.books.pop(index)
        doomed = set(book.recipe_ids)
        before = len(self.recipes)
        self.recipes = [recipe for recipe in self.recipes if recipe.id not in doomed]

        logger.info(f"Deleted book {book_id} and {before - len(self.recipes)} of its recipes")
        self._autosave()
        return True

    def copy_global_book(self, global_book: Book) -> str:
        """
        Copy a catalog book along with the catalog recipes it lists.

        The copy's recipe_ids point at the new recipe copies; ids missing
        from the catalog are dropped.
        """
        catalog = {recipe.id: recipe for recipe in self.global_recipes}
        copied_ids = []

        autosave, self.autosave = self.autosave, False
        try:
            for recipe_id in global_book.recipe_ids:
                global_recipe = catalog.get(recipe_id)
                if global_recipe:
                    copied_ids.append(self.copy_global_recipe(global_recipe))
                else:
                    logger.warning(f"Global book {global_book.id} lists unknown recipe {recipe_id}")
        finally:
            self.autosave = autosave

        now = datetime.now()
        copied = replace(
            global_book,
            id=generate_id(),
            recipe_ids=copied_ids,
            categories=list(global_book.categories),
            keywords=list(global_book.keywords),
            is_global=False,
            original_id=global_book.id,
            created_at=now,
            updated_at=now,
            loved=False,
            rating=0.0,
            comments=[]
        )
        self.books.append(copied)
        logger.info(f"Copied global book {global_book.id} as {copied.id} with {len(copied_ids)} recipes")
        self._autosave()
        return copied.id

    def add_recipe_to_book(self, book_id: str, recipe_id: str) -> bool:
        """File a recipe in a book; a recipe already listed is not added twice"""
        book = self.get_book(book_id)
        if not book:
            logger.warning(f"Book {book_id} not found when adding recipe {recipe_id}")
            return False

        if recipe_id not in book.recipe_ids:
            book.recipe_ids.append(recipe_id)
        book.updated_at = datetime.now()
        self._autosave()
        return True

    def get_book_recipes(self, book_id: str) -> List[Recipe]:
        """Recipes listed by a book, in book order, skipping ids that no longer resolve"""
        book = self.get_book(book_id)
        if not book:
            return []

        by_id = {recipe.id: recipe for recipe in self.recipes}
        return [by_id[recipe_id] for recipe_id in book.recipe_ids if recipe_id in by_id]

    def copy_recipe_to_book(self, global_recipe: Recipe, book_id: Optional[str] = None,
                            new_book_title: Optional[str] = None) -> Optional[str]:
        """
        Copy a catalog recipe and file it in a book.

        Uses the existing book when book_id is given, otherwise creates a book
        titled new_book_title. Returns the new recipe id, or None when neither
        destination is usable.
        """
        if book_id is None and not new_book_title:
            logger.warning("No destination book given for recipe copy")
            return None
        if book_id is not None and not self.get_book(book_id):
            logger.warning(f"Destination book {book_id} not found")
            return None

        recipe_id = self.copy_global_recipe(global_recipe)
        if book_id is not None:
            self.add_recipe_to_book(book_id, recipe_id)
        else:
            self.add_book(new_book_title, author=global_recipe.author, recipe_ids=[recipe_id])
        return recipe_id

    def search_books(self, term: str, include_global: bool = False) -> List[Book]:
        """Books whose title, author, categories or keywords contain the term"""
        pool = self.global_books if include_global else self.books
        if not term:
            return list(pool)
        return [book for book in pool if book.matches_search(term)]

    # Recommendations

    def recommend(self, available_ingredients: List[str],
                  options: Optional[RecommendationOptions] = None,
                  include_global: bool = False) -> List[RecipeRecommendation]:
        """Rank the cookbook's recipes (optionally plus the catalog) against available ingredients"""
        pool = self.recipes + self.global_recipes if include_global else self.recipes
        return get_recipe_recommendations(available_ingredients, pool, options)

    # Preferences

    def set_theme(self, theme: str) -> bool:
        if theme not in THEMES:
            logger.warning(f"Unknown theme '{theme}'")
            return False
        self.theme = theme
        self._autosave()
        return True

    # Persistence

    def to_snapshot(self) -> Dict[str, Any]:
        return {
            'recipes': [recipe.to_dict() for recipe in self.recipes],
            'books': [book.to_dict() for book in self.books],
            'theme': self.theme
        }

    def save_to_storage(self) -> bool:
        """Write the whole cookbook to the data file"""
        if not self.data_file:
            return False

        try:
            with log_operation(logger, f"save cookbook to {self.data_file}"):
                self.data_file.parent.mkdir(parents=True, exist_ok=True)
                tmp_path = self.data_file.with_suffix(self.data_file.suffix + '.tmp')
                tmp_path.write_text(json.dumps(self.to_snapshot(), indent=2, ensure_ascii=False),
                                    encoding='utf-8')
                tmp_path.replace(self.data_file)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save cookbook: {e}")
            return False

    def load_from_storage(self) -> bool:
        """
        Replace in-memory state with the data file's contents.

        A missing file is not an error. A corrupt file is logged and the
        current state is left untouched.
        """
        if not self.data_file or not self.data_file.exists():
            return False

        try:
            with log_operation(logger, f"load cookbook from {self.data_file}"):
                data = json.loads(self.data_file.read_text(encoding='utf-8'))
                recipes = [Recipe.from_dict(item) for item in data.get('recipes') or []]
                books = [Book.from_dict(item) for item in data.get('books') or []]
                theme = data.get('theme') or 'light'
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"Failed to load cookbook: {e}")
            return False

        self.recipes = recipes
        self.books = books
        self.theme = theme if theme in THEMES else 'light'
        logger.info(f"Loaded {len(recipes)} recipes and {len(books)} books")
        return True

    # Helpers

    def _autosave(self):
        if self.autosave:
            self.save_to_storage()

    @staticmethod
    def _index_of(items: List[Any], item_id: str) -> Optional[int]:
        for index, item in enumerate(items):
            if item.id == item_id:
                return index
        return None

    @staticmethod
    def _without_protected(fields: Dict[str, Any]) -> Dict[str, Any]:
        return {key: value for key, value in fields.items() if key not in _PROTECTED_FIELDS}


def get_cookbook_service() -> CookbookService:
    """Get singleton cookbook service built from configuration"""
    global _cookbook_service
    if '_cookbook_service' not in globals():
        config = get_config()
        service = CookbookService(config.data_file, autosave=config.autosave,
                                  theme=config.default_theme)
        service.load_from_storage()
        globals()['_cookbook_service'] = service
    return globals()['_cookbook_service']
