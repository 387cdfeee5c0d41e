"""
Schema Migrations

Maps each schema version to the step that declares the families and
indexes introduced at that version. Steps are applied in ascending order
with alembic's Operations API.
"""

from errors import SchemaVersionError

from .versions import v001_core_families, v002_schedule, v003_settings

MIGRATIONS = {
    step.version: step
    for step in (v001_core_families, v002_schedule, v003_settings)
}


def latest_version():
    return max(MIGRATIONS)


def migration_path(current, target):
    """
    Return the migration steps needed to move from `current` to `target`.

    Raises SchemaVersionError when going backwards or when a version in
    the path has no declared step.
    """
    if target < current:
        raise SchemaVersionError(
            f"Store is at version {current}; cannot open at older version {target}"
        )
    missing = [v for v in range(current + 1, target + 1) if v not in MIGRATIONS]
    if missing:
        raise SchemaVersionError(f"No migration declared for version(s) {missing}")
    return [MIGRATIONS[v] for v in range(current + 1, target + 1)]
