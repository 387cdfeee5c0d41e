"""
Placeholder Service

Expands `<name>` tokens in method text into the ingredient of that type
used by the recipe. Tokens with no matching ingredient are left as-is so
they stay visible.
"""

import re

from .matching import normalize_type
from .views import RecipeDetail

PLACEHOLDER_PATTERN = re.compile(r'<([\w-]+)>')


def resolve_placeholders(text, type_lookup):
    """Substitute each token once; substituted text is not re-scanned."""
    if not text:
        return ''

    def _replace(match):
        return type_lookup.get(normalize_type(match.group(1)), match.group(0))

    return PLACEHOLDER_PATTERN.sub(_replace, text)


def recipe_detail(collection, composition):
    """Full recipe view: title, ingredient lines and resolved method text."""
    return RecipeDetail(
        title=collection.description,
        ingredient_lines=composition.lines,
        resolved_method_text=resolve_placeholders(collection.method, composition.type_lookup),
    )
