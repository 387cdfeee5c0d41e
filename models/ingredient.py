"""
Ingredient Model

Contains the Ingredient model. Ingredients are seeded once from the
bootstrap payload and never edited.
"""

from .base import db


class Ingredient(db.Model):
    """
    Pantry ingredient.

    `type` is the category placeholders resolve against (protein, base,
    veg, ...); it is matched case-insensitively after alias folding.
    """
    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    description = db.Column(db.String(200), nullable=False)
    type = db.Column(db.String(50), nullable=True, index=True)
    unit = db.Column(db.String(20), nullable=True)
    storage = db.Column(db.String(50), nullable=True)
