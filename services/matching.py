"""
Ingredient Type Matching Service

Functions for folding ingredient types and placeholder names onto the
canonical categories used for placeholder lookup.
"""

from constants import INGREDIENT_TYPE_ALIASES


def normalize_type(name):
    """
    Normalize an ingredient type or placeholder name for matching.

    Lowercases and strips the name, then folds known synonyms
    ('Proteins' -> 'protein', 'carbs' -> 'base'). Unknown names pass
    through lowercased.
    """
    if name is None:
        return ''
    normalized = name.strip().lower()
    return INGREDIENT_TYPE_ALIASES.get(normalized, normalized)
