"""
Catalogue Query Service

Read-only queries over collections, the weekly schedule and the pantry,
plus random selection of alternate meals.
"""

import random

from constants import MENU_TYPES, WEEKDAYS, ALTERNATE_COUNT
from errors import InsufficientCandidatesError
from models import Collection, Ingredient, Schedule


def weekday_name(day):
    """Weekday name for a date, indexed Sunday-first."""
    # date.weekday() is Monday=0; shift so Sunday=0
    return WEEKDAYS[(day.weekday() + 1) % 7]


class CatalogueQuery:
    """Queries served from the store. `rng` is any random.Random-like object."""

    def __init__(self, store, rng=None):
        self.store = store
        self.rng = rng or random.Random()

    def list_menu(self):
        """All recipes and ready-meals, in store order."""
        return (
            self.store.query(Collection)
            .filter(Collection.type.in_(MENU_TYPES))
            .order_by(Collection.id)
            .all()
        )

    def get_collection(self, collection_id):
        return self.store.session.get(Collection, collection_id)

    def schedule_for(self, day):
        """The schedule entry for a weekday name, or None."""
        return self.store.session.get(Schedule, day)

    def list_schedule(self):
        """Schedule entries in week order (Sunday first)."""
        entries = {s.day: s for s in self.store.query(Schedule).all()}
        return [entries[day] for day in WEEKDAYS if day in entries]

    def list_pantry(self):
        """All ingredients grouped by type."""
        return (
            self.store.query(Ingredient)
            .order_by(Ingredient.type, Ingredient.description)
            .all()
        )

    def pick_alternates(self, exclude_ids, count=ALTERNATE_COUNT):
        """
        Draw `count` distinct menu entries not in `exclude_ids`.

        Raises InsufficientCandidatesError when fewer than `count`
        candidates remain, rather than returning a short list.
        """
        excluded = set(exclude_ids)
        candidates = [c for c in self.list_menu() if c.id not in excluded]
        if len(candidates) < count:
            raise InsufficientCandidatesError(len(candidates), count)
        return self.rng.sample(candidates, count)
