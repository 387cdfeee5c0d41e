"""
Ingredient Constants

Contains ingredient type aliases used to fold placeholder names and
ingredient categories onto canonical types.
"""

# Ingredient type aliases (lowercased name -> canonical type)
INGREDIENT_TYPE_ALIASES = {
    # Protein
    'protein': 'protein',
    'proteins': 'protein',
    # Base / carbohydrate
    'base': 'base',
    'carb': 'base',
    'carbs': 'base',
    'starch': 'base',
    # Vegetables
    'veg': 'veg',
    'veggie': 'veg',
    'veggies': 'veg',
    'vegetable': 'veg',
    'vegetables': 'veg',
    # Flavour
    'flavour': 'flavour',
    'flavor': 'flavour',
    # Binding / functional ingredients (eggs, stock, oil)
    'function': 'function',
    # Sauce
    'sauce': 'sauce',
}

# Shown for quantities whose ingredient no longer exists
UNKNOWN_INGREDIENT = 'Unknown ingredient'
