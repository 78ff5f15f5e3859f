"""
Ingredient Constants

Curated substitution rules and the ingredient pairing table used for
suggestions.
"""

from models.cooking_models import Substitution, SubstitutionContext

_BAKING = SubstitutionContext.BAKING
_COOKING = SubstitutionContext.COOKING
_BOTH = SubstitutionContext.BOTH

INGREDIENT_SUBSTITUTIONS = [
    # Dairy
    Substitution('butter', 'margarine', 1.0, _BOTH),
    Substitution('butter', 'coconut oil', 0.75, _BAKING, 'Use solid coconut oil'),
    Substitution('butter', 'olive oil', 0.75, _COOKING),
    Substitution('milk', 'almond milk', 1.0, _BOTH),
    Substitution('milk', 'oat milk', 1.0, _BOTH),
    Substitution('milk', 'coconut milk', 1.0, _BOTH),
    Substitution('heavy cream', 'coconut cream', 1.0, _BOTH),
    Substitution('sour cream', 'greek yogurt', 1.0, _BOTH),
    Substitution('cream cheese', 'cashew cream', 1.0, _BOTH),

    # Eggs
    Substitution('egg', 'flax egg', 1.0, _BAKING, '1 tbsp ground flaxseed + 3 tbsp water'),
    Substitution('egg', 'chia egg', 1.0, _BAKING, '1 tbsp chia seeds + 3 tbsp water'),
    Substitution('egg', 'applesauce', 0.25, _BAKING, '1/4 cup per egg'),
    Substitution('egg', 'mashed banana', 0.25, _BAKING, '1/4 cup per egg'),

    # Flour
    Substitution('all-purpose flour', 'almond flour', 0.25, _BAKING,
                 'Use 1/4 the amount, add binding agent'),
    Substitution('all-purpose flour', 'coconut flour', 0.25, _BAKING,
                 'Use 1/4 the amount, very absorbent'),
    Substitution('all-purpose flour', 'oat flour', 1.3, _BAKING, 'Use 1.3x the amount'),
    Substitution('cake flour', 'all-purpose flour', 1.0, _BAKING,
                 'Remove 2 tbsp per cup and add 2 tbsp cornstarch'),

    # Sugar
    Substitution('white sugar', 'coconut sugar', 1.0, _BOTH),
    Substitution('white sugar', 'maple syrup', 0.75, _BOTH, 'Reduce liquid by 1/4 cup'),
    Substitution('white sugar', 'honey', 0.75, _BOTH, 'Reduce liquid by 1/4 cup'),
    Substitution('brown sugar', 'coconut sugar', 1.0, _BOTH),

    # Baking agents
    Substitution('baking powder', 'baking soda + cream of tartar', 1.0, _BAKING,
                 '1/4 tsp baking soda + 1/2 tsp cream of tartar per 1 tsp baking powder'),
    Substitution('vanilla extract', 'vanilla bean paste', 1.0, _BAKING),
    Substitution('vanilla extract', 'almond extract', 0.5, _BAKING),

    # Herbs and spices
    Substitution('fresh herbs', 'dried herbs', 0.33, _COOKING, '1/3 the amount of dried'),
    Substitution('garlic clove', 'garlic powder', 0.125, _COOKING, '1/8 tsp per clove'),
    Substitution('onion', 'onion powder', 0.25, _COOKING, '1 tbsp per medium onion'),

    # Vinegars and acids
    Substitution('lemon juice', 'lime juice', 1.0, _BOTH),
    Substitution('lemon juice', 'white vinegar', 1.0, _COOKING),
    Substitution('balsamic vinegar', 'red wine vinegar + sugar', 1.0, _COOKING, 'Add pinch of sugar'),

    # Oils
    Substitution('vegetable oil', 'canola oil', 1.0, _BOTH),
    Substitution('vegetable oil', 'olive oil', 1.0, _COOKING),
    Substitution('sesame oil', 'olive oil + sesame seeds', 1.0, _COOKING, 'Toast sesame seeds for flavor'),
]

# Ingredient -> companions that commonly go with it
INGREDIENT_COMBINATIONS = {
    'tomato': ['onion', 'garlic', 'basil', 'olive oil', 'mozzarella'],
    'onion': ['garlic', 'tomato', 'bell pepper', 'celery'],
    'garlic': ['onion', 'olive oil', 'tomato', 'herbs'],
    'chicken': ['onion', 'garlic', 'herbs', 'lemon', 'olive oil'],
    'pasta': ['tomato', 'garlic', 'olive oil', 'parmesan', 'basil'],
    'rice': ['onion', 'garlic', 'broth', 'vegetables'],
    'egg': ['butter', 'milk', 'cheese', 'herbs'],
    'flour': ['butter', 'sugar', 'egg', 'baking powder'],
    'beef': ['onion', 'garlic', 'herbs', 'wine', 'vegetables'],
    'fish': ['lemon', 'herbs', 'olive oil', 'garlic'],
}

MAX_INGREDIENT_SUGGESTIONS = 10
