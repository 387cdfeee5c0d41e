"""
Constants Package

Static lookup tables and labels for the recipe book.
"""

from .ingredients import INGREDIENT_TYPE_ALIASES, UNKNOWN_INGREDIENT
from .units import COMMON_FRACTIONS
from .validation import (
    CORE_FAMILIES,
    SCHEDULE_FAMILY,
    ALL_FAMILIES,
    REQUIRED_FIELDS,
    MAX_LENGTHS,
    MIN_IDENTIFIER,
    MAX_IDENTIFIER,
)
from .catalogue import (
    MENU_TYPES,
    WEEKDAYS,
    VIEWS,
    DEFAULT_VIEW,
    VIEW_SETTING_KEY,
    ALTERNATE_COUNT,
    LABEL_SHOW_ALTERNATES,
    LABEL_SHOW_EVERYTHING,
    STATUS_BOOTSTRAP_FAILED,
    STATUS_NO_SCHEDULE,
    STATUS_MISSING_RECIPE,
    STATUS_INSUFFICIENT_CANDIDATES,
    STATUS_READY,
)
