"""
Validation Constants

Contains whitelist values and required fields for validating bootstrap
payloads before they reach the store.
"""

# Entity families, in seeding order
CORE_FAMILIES = ('ingredient', 'collection', 'quantity')
SCHEDULE_FAMILY = 'schedule'
ALL_FAMILIES = CORE_FAMILIES + (SCHEDULE_FAMILY,)

# Keys every bootstrap record must carry, per family
REQUIRED_FIELDS = {
    'ingredient': ('id', 'description'),
    'collection': ('id', 'description'),
    'quantity': ('collectionId', 'ingredientId'),
    'schedule': ('day', 'easyId', 'lessEasyId'),
}

# Maximum field lengths (mirror the column sizes)
MAX_LENGTHS = {
    'description': 200,
    'type': 50,
    'unit': 20,
    'storage': 50,
}

# Range of a SQLite INTEGER column
MIN_IDENTIFIER = -2 ** 63
MAX_IDENTIFIER = 2 ** 63 - 1
