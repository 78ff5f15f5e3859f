"""
Sample Catalog

Global recipes and books offered for discovery. Users copy them into their
own cookbook; the catalog itself is never modified.
"""

from datetime import datetime

from models.recipe_models import Recipe, Book, Ingredient


def build_global_recipes():
    """Fresh copies of the sample global recipes"""
    return [
        Recipe(
            id='global-1',
            title='Classic Pasta Carbonara',
            author='Chef Marco',
            keywords=['pasta', 'italian', 'quick'],
            ingredients=[
                Ingredient('spaghetti', '400', 'g'),
                Ingredient('pancetta', '200', 'g'),
                Ingredient('eggs', '4'),
                Ingredient('pecorino cheese', '100', 'g'),
                Ingredient('black pepper', 'q.s.'),
                Ingredient('salt', 'q.s.'),
            ],
            steps=[
                'Cook pasta according to package instructions',
                'Fry pancetta until crispy',
                'Beat eggs with cheese and pepper',
                'Combine hot pasta with pancetta, then add egg mixture off heat',
                'Toss quickly and serve immediately',
            ],
            time_minutes=20,
            servings=4,
            rating=4.5,
            created_at=datetime(2024, 1, 1),
            updated_at=datetime(2024, 1, 1),
            is_global=True
        ),
        Recipe(
            id='global-2',
            title='Chocolate Chip Cookies',
            author='Baker Sarah',
            keywords=['cookies', 'dessert', 'baking'],
            ingredients=[
                Ingredient('flour', '2 1/4', 'cup'),
                Ingredient('baking soda', '1', 'tsp'),
                Ingredient('salt', '1', 'tsp'),
                Ingredient('butter', '1', 'cup'),
                Ingredient('sugar', '3/4', 'cup'),
                Ingredient('eggs', '2'),
                Ingredient('chocolate chips', '2', 'cup'),
            ],
            steps=[
                'Preheat oven to 375°F',
                'Mix dry ingredients',
                'Cream butter and sugars',
                'Add eggs and vanilla',
                'Combine wet and dry ingredients',
                'Fold in chocolate chips',
                'Bake for 9-11 minutes',
            ],
            time_minutes=45,
            servings=24,
            rating=4.8,
            created_at=datetime(2024, 1, 2),
            updated_at=datetime(2024, 1, 2),
            is_global=True
        ),
    ]


def build_global_books():
    """Fresh copies of the sample global books"""
    return [
        Book(
            id='global-book-1',
            title='Italian Classics',
            author='Chef Marco',
            description='Traditional Italian recipes passed down through generations',
            categories=['Italian', 'Traditional'],
            keywords=['pasta', 'pizza', 'risotto'],
            recipe_ids=['global-1'],
            rating=4.6,
            created_at=datetime(2024, 1, 1),
            updated_at=datetime(2024, 1, 1),
            is_global=True
        ),
        Book(
            id='global-book-2',
            title='Sweet Treats & Desserts',
            author='Baker Sarah',
            description='Indulgent desserts and sweet treats for every occasion',
            categories=['Desserts', 'Baking'],
            keywords=['cookies', 'cakes', 'sweet', 'dessert'],
            recipe_ids=['global-2'],
            rating=4.8,
            created_at=datetime(2024, 1, 2),
            updated_at=datetime(2024, 1, 2),
            is_global=True
        ),
        Book(
            id='global-book-3',
            title='Quick & Easy Weeknight Meals',
            author='Chef Alex',
            description='Simple, delicious meals that can be prepared in 30 minutes or less',
            categories=['Quick', 'Easy', 'Weeknight'],
            keywords=['fast', 'simple', 'weeknight', 'easy'],
            recipe_ids=[],
            rating=4.3,
            created_at=datetime(2024, 1, 3),
            updated_at=datetime(2024, 1, 3),
            is_global=True
        ),
    ]
