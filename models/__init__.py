"""
Models Package

Exports all database models, the db instance and the store handle for use
throughout the application.
"""

from .base import db

from .ingredient import Ingredient
from .recipe import Collection, Quantity
from .schedule import Schedule
from .settings import Settings
from .store import RecipeStore

__all__ = [
    'db',
    'Ingredient',
    'Collection',
    'Quantity',
    'Schedule',
    'Settings',
    'RecipeStore',
]
