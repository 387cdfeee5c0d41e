"""
Collection Models

Contains the Collection (recipe, ready-meal, ...) and Quantity models.
Quantities link collections to ingredients; the link is not enforced by
the database, so either side may be missing.
"""

from .base import db


class Collection(db.Model):
    """Recipe or other grouped dish with optional templated method text."""
    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    description = db.Column(db.String(200), nullable=False)
    type = db.Column(db.String(50), nullable=True, index=True)
    method_basic = db.Column(db.Text, nullable=True)
    method_detailed = db.Column(db.Text, nullable=True)

    @property
    def method(self):
        """Method text to display: detailed wins over basic."""
        return self.method_detailed or self.method_basic


class Quantity(db.Model):
    """Join record linking a collection to one ingredient with an amount."""
    id = db.Column(db.Integer, primary_key=True)
    collection_id = db.Column(db.Integer, nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, nullable=False, index=True)
    quantity = db.Column(db.JSON, nullable=True)  # number or free text ("a pinch")
    ingredient = db.relationship(
        'Ingredient',
        primaryjoin='foreign(Quantity.ingredient_id) == Ingredient.id',
        viewonly=True,
    )
