"""
Recipe Store

Owns the lifecycle of the persisted record families: opening (with
in-place migration), counting and reset. One store is constructed per
application and handed to every service.
"""

import logging

import sqlalchemy as sa
from alembic.migration import MigrationContext
from alembic.operations import Operations

from errors import StoreClosedError
from migrations import latest_version, migration_path

logger = logging.getLogger(__name__)

_version_metadata = sa.MetaData()

schema_version = sa.Table(
    'schema_version',
    _version_metadata,
    sa.Column('version', sa.Integer, nullable=False),
)


class RecipeStore:
    """Handle over the Flask-SQLAlchemy database with versioned schema."""

    def __init__(self, db):
        self.db = db
        self.version = 0
        self.is_open = False

    def open(self, target_version=None):
        """
        Open the store at `target_version` (latest declared by default).

        Newer versions are migrated in place, keeping existing rows; an
        older version than the persisted one raises SchemaVersionError.
        """
        target = latest_version() if target_version is None else target_version

        with self.db.engine.begin() as conn:
            schema_version.create(conn, checkfirst=True)
            current = conn.execute(sa.select(schema_version.c.version)).scalar() or 0
            steps = migration_path(current, target)

            if steps:
                op = Operations(MigrationContext.configure(conn))
                for step in steps:
                    logger.info("Migrating store to version %s: %s", step.version, step.description)
                    step.upgrade(op)
                conn.execute(schema_version.delete())
                conn.execute(schema_version.insert().values(version=target))

        self.version = target
        self.is_open = True
        logger.info("Store open at version %s", target)
        return self

    def reset(self):
        """Drop every persisted table and close the handle."""
        self.db.session.remove()
        with self.db.engine.begin() as conn:
            persisted = sa.MetaData()
            persisted.reflect(bind=conn)
            persisted.drop_all(bind=conn)
        self.db.engine.dispose()
        self.version = 0
        self.is_open = False
        logger.info("Store reset; all records destroyed")

    def ensure_open(self):
        if not self.is_open:
            raise StoreClosedError("Store is closed; call open() first")

    @property
    def session(self):
        self.ensure_open()
        return self.db.session

    def query(self, model):
        return self.session.query(model)

    def count(self, model):
        return self.query(model).count()
