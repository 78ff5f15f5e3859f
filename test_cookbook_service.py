#!/usr/bin/env python3
"""
Test script for cookbook state management.
Tests recipe and book CRUD, catalog copies, cascade deletes and JSON persistence.
"""

import sys
import json
import tempfile
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from services.cookbook_service import CookbookService, generate_id
from models import Ingredient, RecommendationOptions


def make_service(data_file=None):
    return CookbookService(data_file=data_file, autosave=data_file is not None)


def test_generate_id():
    print("Testing Id Generation...")

    ids = {generate_id() for _ in range(200)}
    assert len(ids) == 200, "Ids should not collide"
    for item_id in ids:
        assert len(item_id) == 9, f"Id {item_id} should be 9 characters"
        assert item_id.isalnum() and item_id == item_id.lower(), f"Id {item_id} should be lowercase base-36"
    print("[OK] Id generation works")


def test_recipe_crud():
    """Add, read, update and delete recipes"""
    print("\nTesting Recipe CRUD...")

    service = make_service()
    recipe_id = service.add_recipe(
        "Pancakes",
        author="Grandma",
        ingredients=[Ingredient("flour", 2, "cup"), Ingredient("milk", "1", "cup")],
        steps=["Mix", "Fry"],
        time_minutes=20
    )

    recipe = service.get_recipe(recipe_id)
    assert recipe is not None, "Recipe should be retrievable"
    assert recipe.title == "Pancakes"
    assert recipe.ingredients[0].amount == "2", "Numeric amounts are stored as text"
    assert recipe.created_at == recipe.updated_at

    updated = service.update_recipe(recipe_id, loved=True, rating=4.0, id="hijacked")
    assert updated.loved and updated.rating == 4.0
    assert updated.id == recipe_id, "Ids cannot be overwritten"
    assert updated.updated_at >= recipe.updated_at
    assert service.get_recipe(recipe_id).loved, "Update should be stored"

    assert service.update_recipe("missing", loved=True) is None, "Unknown id updates nothing"
    assert service.delete_recipe("missing") is False, "Unknown id deletes nothing"

    assert service.delete_recipe(recipe_id) is True
    assert service.get_recipe(recipe_id) is None
    assert service.recipes == []
    print("[OK] Recipe CRUD works")


def test_copy_global_recipe():
    """Copies are independent, reset and linked to their source"""
    print("\nTesting Global Recipe Copy...")

    service = make_service()
    source = service.global_recipes[0]
    copy_id = service.copy_global_recipe(source)
    copy = service.get_recipe(copy_id)

    assert copy_id != source.id
    assert copy.original_id == source.id
    assert copy.is_global is False
    assert copy.loved is False and copy.rating == 0.0 and copy.comments == []
    assert copy.title == source.title
    assert [ing.name for ing in copy.ingredients] == [ing.name for ing in source.ingredients]

    copy.ingredients[0].name = "changed"
    copy.keywords.append("mine")
    assert source.ingredients[0].name != "changed", "Copy must not share ingredients with the catalog"
    assert "mine" not in source.keywords, "Copy must not share keywords with the catalog"
    print("[OK] Global recipe copy works")


def test_copy_global_book():
    """Book copies bring their recipes along under new ids"""
    print("\nTesting Global Book Copy...")

    service = make_service()
    source = next(book for book in service.global_books if book.id == 'global-book-1')
    book_id = service.copy_global_book(source)
    book = service.get_book(book_id)

    assert book.original_id == 'global-book-1'
    assert book.is_global is False
    assert len(book.recipe_ids) == len(source.recipe_ids) == 1
    assert book.recipe_ids[0] != 'global-1', "The copy should point at the copied recipe"

    copied_recipe = service.get_recipe(book.recipe_ids[0])
    assert copied_recipe.original_id == 'global-1'
    assert service.get_book_recipes(book_id) == [copied_recipe]

    empty_source = next(book for book in service.global_books if book.id == 'global-book-3')
    empty_id = service.copy_global_book(empty_source)
    assert service.get_book(empty_id).recipe_ids == []
    print("[OK] Global book copy works")


def test_books_and_cascade_delete():
    """Deleting a book deletes its recipes, even ones shared with other books"""
    print("\nTesting Book Cascade Delete...")

    service = make_service()
    shared = service.add_recipe("Shared Stew")
    own = service.add_recipe("Own Pie")
    loose = service.add_recipe("Loose Toast")

    first = service.add_book("Winter", recipe_ids=[shared, own])
    second = service.add_book("Comfort", recipe_ids=[shared])

    assert service.delete_book(first) is True
    remaining = [recipe.id for recipe in service.recipes]
    assert remaining == [loose], f"Only the unlisted recipe should remain, got {remaining}"

    # The other book keeps a dangling id that no longer resolves
    assert service.get_book(second).recipe_ids == [shared]
    assert service.get_book_recipes(second) == []

    assert service.delete_book(first) is False, "Deleting twice does nothing"
    print("[OK] Cascade delete works")


def test_delete_recipe_leaves_book_ids():
    print("\nTesting Recipe Delete Inside Book...")

    service = make_service()
    recipe_id = service.add_recipe("Soup")
    book_id = service.add_book("Soups", recipe_ids=[recipe_id])

    service.delete_recipe(recipe_id)
    assert service.get_book(book_id).recipe_ids == [recipe_id]
    assert service.get_book_recipes(book_id) == []
    print("[OK] Recipe delete leaves book references")


def test_add_recipe_to_book():
    print("\nTesting Add Recipe To Book...")

    service = make_service()
    recipe_id = service.add_recipe("Bread")
    book_id = service.add_book("Baking")
    before = service.get_book(book_id).updated_at

    assert service.add_recipe_to_book(book_id, recipe_id) is True
    assert service.add_recipe_to_book(book_id, recipe_id) is True
    book = service.get_book(book_id)
    assert book.recipe_ids == [recipe_id], "A recipe is listed at most once"
    assert book.recipe_count == 1
    assert book.updated_at >= before

    assert service.add_recipe_to_book("missing", recipe_id) is False, "Unknown book"
    print("[OK] Add recipe to book works")


def test_copy_recipe_to_book():
    """Catalog recipes can be copied into a new or existing book"""
    print("\nTesting Copy Recipe To Book...")

    service = make_service()
    source = service.global_recipes[1]

    new_recipe = service.copy_recipe_to_book(source, new_book_title="Desserts")
    assert new_recipe is not None
    desserts = service.search_books("Desserts")[0]
    assert desserts.recipe_ids == [new_recipe]

    existing = service.add_book("Favorites")
    another = service.copy_recipe_to_book(source, book_id=existing)
    assert service.get_book(existing).recipe_ids == [another]

    assert service.copy_recipe_to_book(source) is None, "A destination is required"
    assert service.copy_recipe_to_book(source, book_id="missing") is None, "Unknown destination book"
    assert len(service.recipes) == 2, "Failed copies create nothing"
    print("[OK] Copy recipe to book works")


def test_search():
    print("\nTesting Search...")

    service = make_service()
    service.add_recipe("Lemon Tart", author="Ana", keywords=["dessert"])
    service.add_recipe("Beef Stew", author="Ben", keywords=["winter"])
    service.add_book("Sweet Things", categories=["Desserts"])

    assert [r.title for r in service.search_recipes("lemon")] == ["Lemon Tart"]
    assert [r.title for r in service.search_recipes("BEN")] == ["Beef Stew"], "Author search ignores case"
    assert [r.title for r in service.search_recipes("winter")] == ["Beef Stew"], "Keyword search"
    assert len(service.search_recipes("")) == 2, "Empty term returns everything"
    assert [b.title for b in service.search_books("dessert")] == ["Sweet Things"], "Category search"

    catalog = service.search_recipes("cookies", include_global=True)
    assert [r.id for r in catalog] == ['global-2'], "Catalog search uses the global recipes"
    print("[OK] Search works")


def test_recommend():
    print("\nTesting Cookbook Recommendations...")

    service = make_service()
    service.add_recipe("Garlic Pasta", ingredients=[Ingredient("pasta"), Ingredient("garlic")])

    mine = service.recommend(["pasta", "garlic"])
    assert [rec.recipe.title for rec in mine] == ["Garlic Pasta"]

    options = RecommendationOptions(min_match_score=0.1)
    with_catalog = service.recommend(["spaghetti", "eggs", "salt"], options, include_global=True)
    assert with_catalog[0].recipe.id == 'global-1', "Catalog recipes are considered on request"
    print("[OK] Cookbook recommendations work")


def test_theme():
    print("\nTesting Theme...")

    service = make_service()
    assert service.theme == "light"
    assert service.set_theme("cozy") is True
    assert service.theme == "cozy"
    assert service.set_theme("neon") is False
    assert service.theme == "cozy"
    print("[OK] Theme works")


def test_persistence_round_trip():
    """Every change is written and can be loaded into a fresh service"""
    print("\nTesting Persistence...")

    with tempfile.TemporaryDirectory() as tmp:
        data_file = Path(tmp) / "nested" / "cookbook.json"

        service = make_service(str(data_file))
        recipe_id = service.add_recipe("Risotto", ingredients=[Ingredient("rice", "1", "cup")])
        book_id = service.add_book("Italian", recipe_ids=[recipe_id])
        service.set_theme("dark")

        assert data_file.exists(), "Autosave should create the data file"
        stored = json.loads(data_file.read_text(encoding='utf-8'))
        assert stored['theme'] == "dark"
        assert stored['books'][0]['recipeIds'] == [recipe_id]

        fresh = make_service(str(data_file))
        assert fresh.load_from_storage() is True
        assert fresh.theme == "dark"
        assert fresh.get_book(book_id).recipe_ids == [recipe_id]
        loaded = fresh.get_recipe(recipe_id)
        assert loaded.ingredients[0].get_display_text() == "1 cup rice"
        assert loaded.created_at == service.get_recipe(recipe_id).created_at

    print("[OK] Persistence round trip works")


def test_load_missing_and_corrupt_files():
    """Bad storage never wipes the current state"""
    print("\nTesting Corrupt Storage...")

    with tempfile.TemporaryDirectory() as tmp:
        missing = make_service(str(Path(tmp) / "nothing.json"))
        assert missing.load_from_storage() is False, "Missing file loads nothing"

        corrupt_file = Path(tmp) / "corrupt.json"
        corrupt_file.write_text("{not json", encoding='utf-8')
        service = CookbookService(data_file=str(corrupt_file), autosave=False)
        service.add_recipe("Keep Me")
        assert service.load_from_storage() is False, "Corrupt JSON is rejected"
        assert [r.title for r in service.recipes] == ["Keep Me"], "State survives a failed load"

        corrupt_file.write_text(json.dumps({'recipes': [{'title': 'No id'}]}), encoding='utf-8')
        assert service.load_from_storage() is False, "Records without ids are rejected"
        assert [r.title for r in service.recipes] == ["Keep Me"]

    assert make_service().save_to_storage() is False, "No data file, nothing saved"
    print("[OK] Corrupt storage handled")


if __name__ == "__main__":
    try:
        test_generate_id()
        test_recipe_crud()
        test_copy_global_recipe()
        test_copy_global_book()
        test_books_and_cascade_delete()
        test_delete_recipe_leaves_book_ids()
        test_add_recipe_to_book()
        test_copy_recipe_to_book()
        test_search()
        test_recommend()
        test_theme()
        test_persistence_round_trip()
        test_load_missing_and_corrupt_files()
        print("\n[SUCCESS] All cookbook tests passed!")
        sys.exit(0)
    except AssertionError as e:
        print(f"\n[FAIL] Cookbook test failed: {e}")
        sys.exit(1)
