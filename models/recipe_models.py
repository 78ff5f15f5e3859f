"""
Recipe-related data models for the Gastronome application.

Recipes own their ingredients; books only reference recipes by id.
All models are dataclasses that round-trip through the plain JSON snapshot
the cookbook store keeps on disk (camelCase keys, ISO timestamps).
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from datetime import datetime


def _parse_timestamp(value: Any) -> datetime:
    """Accept datetime objects or ISO strings from stored snapshots"""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            pass
    return datetime.now()


@dataclass
class Ingredient:
    """
    Ingredient line within a recipe.
    amount stays free text so qualitative values like "q.s." survive.
    """
    name: str
    amount: str = ""
    measure: str = ""  # one of COOKING_MEASURES or empty

    def __post_init__(self):
        """Store numeric amounts as text"""
        if self.amount is None:
            self.amount = ""
        elif isinstance(self.amount, (int, float)) and not isinstance(self.amount, bool):
            self.amount = f"{self.amount:g}"
        elif not isinstance(self.amount, str):
            self.amount = str(self.amount)

    def get_display_text(self) -> str:
        """Format ingredient for display in recipe"""
        parts = [part for part in (self.amount, self.measure, self.name) if part]
        return " ".join(parts)

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'amount': self.amount, 'measure': self.measure}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Ingredient':
        return cls(
            name=data.get('name', ''),
            amount=data.get('amount', ''),
            measure=data.get('measure') or ''
        )


@dataclass
class Recipe:
    """
    Core recipe model.
    Global recipes come from the sample catalog; copies made from them keep
    a back-reference in original_id.
    """
    id: str
    title: str
    author: str = ""
    keywords: List[str] = field(default_factory=list)
    ingredients: List[Ingredient] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)
    time_minutes: int = 0
    servings: int = 1
    loved: bool = False
    rating: float = 0.0  # 0-5 stars
    comments: List[str] = field(default_factory=list)
    picture: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    is_global: bool = False
    original_id: Optional[str] = None

    def __post_init__(self):
        """Accept ingredient dicts as well as Ingredient objects"""
        self.ingredients = [
            Ingredient.from_dict(ing) if isinstance(ing, dict) else ing
            for ing in self.ingredients
        ]

    def get_ingredient_names(self) -> List[str]:
        """Ingredient names in recipe order"""
        return [ing.name for ing in self.ingredients]

    def matches_search(self, term: str) -> bool:
        """Case-insensitive match on title, author or any keyword"""
        term = term.lower()
        return (
            term in self.title.lower()
            or term in self.author.lower()
            or any(term in keyword.lower() for keyword in self.keywords)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the JSON snapshot"""
        data = {
            'id': self.id,
            'title': self.title,
            'author': self.author,
            'keywords': list(self.keywords),
            'ingredients': [ing.to_dict() for ing in self.ingredients],
            'steps': list(self.steps),
            'timeMinutes': self.time_minutes,
            'servings': self.servings,
            'loved': self.loved,
            'rating': self.rating,
            'comments': list(self.comments),
            'createdAt': self.created_at.isoformat(),
            'updatedAt': self.updated_at.isoformat(),
            'isGlobal': self.is_global,
        }
        if self.picture:
            data['picture'] = self.picture
        if self.original_id:
            data['originalId'] = self.original_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Recipe':
        """Deserialize from the JSON snapshot"""
        return cls(
            id=data['id'],
            title=data.get('title', ''),
            author=data.get('author', ''),
            keywords=list(data.get('keywords') or []),
            ingredients=[Ingredient.from_dict(ing) for ing in data.get('ingredients') or []],
            steps=list(data.get('steps') or []),
            time_minutes=int(data.get('timeMinutes') or 0),
            servings=int(data.get('servings') or 1),
            loved=bool(data.get('loved', False)),
            rating=float(data.get('rating') or 0),
            comments=list(data.get('comments') or []),
            picture=data.get('picture'),
            created_at=_parse_timestamp(data.get('createdAt')),
            updated_at=_parse_timestamp(data.get('updatedAt')),
            is_global=bool(data.get('isGlobal', False)),
            original_id=data.get('originalId')
        )


@dataclass
class Book:
    """
    Recipe book (collection).
    recipe_ids is an ordered list of references; the book does not own them.
    """
    id: str
    title: str
    author: str = ""
    description: str = ""
    categories: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    recipe_ids: List[str] = field(default_factory=list)
    loved: bool = False
    rating: float = 0.0
    comments: List[str] = field(default_factory=list)
    picture: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    is_global: bool = False
    original_id: Optional[str] = None

    @property
    def recipe_count(self) -> int:
        return len(self.recipe_ids)

    def matches_search(self, term: str) -> bool:
        """Case-insensitive match on title, author, categories or keywords"""
        term = term.lower()
        return (
            term in self.title.lower()
            or term in self.author.lower()
            or any(term in category.lower() for category in self.categories)
            or any(term in keyword.lower() for keyword in self.keywords)
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'title': self.title,
            'author': self.author,
            'description': self.description,
            'categories': list(self.categories),
            'keywords': list(self.keywords),
            'recipeIds': list(self.recipe_ids),
            'loved': self.loved,
            'rating': self.rating,
            'comments': list(self.comments),
            'createdAt': self.created_at.isoformat(),
            'updatedAt': self.updated_at.isoformat(),
            'isGlobal': self.is_global,
        }
        if self.picture:
            data['picture'] = self.picture
        if self.original_id:
            data['originalId'] = self.original_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Book':
        return cls(
            id=data['id'],
            title=data.get('title', ''),
            author=data.get('author', ''),
            description=data.get('description') or '',
            categories=list(data.get('categories') or []),
            keywords=list(data.get('keywords') or []),
            recipe_ids=list(data.get('recipeIds') or []),
            loved=bool(data.get('loved', False)),
            rating=float(data.get('rating') or 0),
            comments=list(data.get('comments') or []),
            picture=data.get('picture'),
            created_at=_parse_timestamp(data.get('createdAt')),
            updated_at=_parse_timestamp(data.get('updatedAt')),
            is_global=bool(data.get('isGlobal', False)),
            original_id=data.get('originalId')
        )
