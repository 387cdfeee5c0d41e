"""
Seeding Service

Populates an empty store from the bootstrap payloads, exactly once per
entity family.

The three core families (ingredient, collection, quantity) are fetched
together and written in one transaction, so a failure part-way leaves all
of them empty and the next run retries all three. The schedule is seeded
on its own whenever it is empty.
"""

import logging
from dataclasses import dataclass, field

from constants import (
    CORE_FAMILIES,
    SCHEDULE_FAMILY,
    REQUIRED_FIELDS,
    MAX_LENGTHS,
    MIN_IDENTIFIER,
    MAX_IDENTIFIER,
    WEEKDAYS,
)
from errors import SeedingError
from models import Ingredient, Collection, Quantity, Schedule

logger = logging.getLogger(__name__)

FAMILY_MODELS = {
    'ingredient': Ingredient,
    'collection': Collection,
    'quantity': Quantity,
    'schedule': Schedule,
}


@dataclass
class SeedReport:
    """Number of records inserted per family by one seed() run."""
    inserted: dict = field(default_factory=dict)

    @property
    def total(self):
        return sum(self.inserted.values())


def _check_record(family, record):
    if not isinstance(record, dict):
        raise SeedingError(f"{family} record must be an object, got {type(record).__name__}")
    missing = [key for key in REQUIRED_FIELDS[family] if record.get(key) is None]
    if missing:
        raise SeedingError(f"{family} record {record!r} is missing {', '.join(missing)}")


def _identifier(family, record, key):
    value = record[key]
    if isinstance(value, float) and not value.is_integer():
        raise SeedingError(f"{family} record has non-integer {key}: {value!r}")
    try:
        identifier = int(value)
    except (ValueError, TypeError, OverflowError):
        raise SeedingError(f"{family} record has non-integer {key}: {value!r}")
    if not MIN_IDENTIFIER <= identifier <= MAX_IDENTIFIER:
        raise SeedingError(f"{family} record {key} out of range: {value!r}")
    return identifier


def _text(family, record, key):
    value = record.get(key)
    if value is None:
        return None
    value = str(value).strip()
    max_length = MAX_LENGTHS.get(key)
    if max_length and len(value) > max_length:
        raise SeedingError(f"{family} {key} longer than {max_length} characters: {value[:40]}...")
    return value


def build_ingredient(record):
    _check_record('ingredient', record)
    return Ingredient(
        id=_identifier('ingredient', record, 'id'),
        description=_text('ingredient', record, 'description'),
        type=_text('ingredient', record, 'type'),
        unit=_text('ingredient', record, 'unit') or None,
        storage=_text('ingredient', record, 'storage'),
    )


def build_collection(record):
    _check_record('collection', record)
    return Collection(
        id=_identifier('collection', record, 'id'),
        description=_text('collection', record, 'description'),
        type=_text('collection', record, 'type'),
        method_basic=record.get('methodBasic'),
        method_detailed=record.get('methodDetailed'),
    )


def build_quantity(record):
    _check_record('quantity', record)
    quantity = Quantity(
        collection_id=_identifier('quantity', record, 'collectionId'),
        ingredient_id=_identifier('quantity', record, 'ingredientId'),
        quantity=record.get('quantity'),
    )
    # Explicit ids are kept; otherwise the store assigns one
    if record.get('id') is not None:
        quantity.id = _identifier('quantity', record, 'id')
    return quantity


def build_schedule(record):
    _check_record('schedule', record)
    day = str(record['day']).strip().capitalize()
    if day not in WEEKDAYS:
        raise SeedingError(f"schedule day is not a weekday: {record['day']!r}")
    return Schedule(
        day=day,
        easy_id=_identifier('schedule', record, 'easyId'),
        less_easy_id=_identifier('schedule', record, 'lessEasyId'),
    )


BUILDERS = {
    'ingredient': build_ingredient,
    'collection': build_collection,
    'quantity': build_quantity,
    'schedule': build_schedule,
}


def build_rows(family, payload):
    """Convert a bootstrap payload (JSON array) into model instances."""
    if not isinstance(payload, list):
        raise SeedingError(f"{family} payload must be a JSON array, got {type(payload).__name__}")
    return [BUILDERS[family](record) for record in payload]


class Seeder:
    """Seeds the store from a bootstrap loader."""

    def __init__(self, store, loader):
        self.store = store
        self.loader = loader

    def family_counts(self):
        return {family: self.store.count(model) for family, model in FAMILY_MODELS.items()}

    def seed(self):
        """
        Seed every empty family. Returns a SeedReport.

        Raises BootstrapLoadError when a payload cannot be fetched and
        SeedingError when records cannot be written; in both cases nothing
        from the failing unit is committed.
        """
        counts = self.family_counts()
        report = SeedReport()

        empty_core = [family for family in CORE_FAMILIES if counts[family] == 0]
        if empty_core:
            logger.info("Seeding %s from bootstrap payloads...", ', '.join(empty_core))
            # Fetch all three before writing anything
            payloads = {family: self.loader.load(family) for family in CORE_FAMILIES}
            rows = {family: build_rows(family, payloads[family]) for family in empty_core}
            self._insert_atomically(rows)
            report.inserted.update({family: len(r) for family, r in rows.items()})
        else:
            logger.info("Core families already seeded.")

        if counts[SCHEDULE_FAMILY] == 0:
            logger.info("Seeding schedule from bootstrap payload...")
            rows = {SCHEDULE_FAMILY: build_rows(SCHEDULE_FAMILY, self.loader.load(SCHEDULE_FAMILY))}
            self._insert_atomically(rows)
            report.inserted[SCHEDULE_FAMILY] = len(rows[SCHEDULE_FAMILY])

        if report.total:
            logger.info("Database seeded successfully (%s records).", report.total)
        return report

    def _insert_atomically(self, rows_by_family):
        session = self.store.session
        try:
            for rows in rows_by_family.values():
                session.add_all(rows)
            session.commit()
        except Exception as e:
            # Driver errors such as OverflowError are not wrapped by SQLAlchemy
            session.rollback()
            raise SeedingError(
                f"Seeding {', '.join(rows_by_family)} failed; nothing was written: {e}"
            ) from e
