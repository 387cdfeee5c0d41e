"""
Composition Service

Assembles a collection's ingredient lines and the type lookup used to
resolve placeholders in its method text.
"""

from dataclasses import dataclass, field

from constants import UNKNOWN_INGREDIENT
from models import Quantity
from .matching import normalize_type
from .parsing import format_quantity


@dataclass
class IngredientLine:
    quantity: object
    unit: str
    description: str

    @property
    def text(self):
        """'200 g Chicken breast'; no unit suffix when the unit is absent."""
        parts = [format_quantity(self.quantity), self.unit, self.description]
        return ' '.join(part for part in parts if part)

    def to_dict(self):
        return {
            'quantity': self.quantity,
            'unit': self.unit,
            'ingredientDescription': self.description,
            'text': self.text,
        }


@dataclass
class Composition:
    lines: list = field(default_factory=list)
    type_lookup: dict = field(default_factory=dict)


class CompositionResolver:
    """Reads a collection's quantities (in stored order) with their ingredients."""

    def __init__(self, store):
        self.store = store

    def resolve(self, collection_id):
        quantities = (
            self.store.query(Quantity)
            .filter(Quantity.collection_id == collection_id)
            .order_by(Quantity.id)
            .all()
        )

        composition = Composition()
        for q in quantities:
            ingredient = q.ingredient
            if ingredient is None:
                composition.lines.append(IngredientLine(q.quantity, None, UNKNOWN_INGREDIENT))
                continue

            composition.lines.append(IngredientLine(q.quantity, ingredient.unit, ingredient.description))
            key = normalize_type(ingredient.type)
            # First ingredient of a type wins
            if key and key not in composition.type_lookup:
                composition.type_lookup[key] = ingredient.description
        return composition
