"""
Catalogue Constants

Contains menu types, weekday names, view names and user-facing labels.
"""

# Collection types offered as meals
MENU_TYPES = ('recipe', 'ready-meal')

# Sunday-first, matching the weekday index used for today's pick
WEEKDAYS = ('Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday')

# Top-level panels
VIEWS = ('suggestions', 'recipes', 'schedule', 'pantry')
DEFAULT_VIEW = 'suggestions'
VIEW_SETTING_KEY = 'current_view'

# Number of alternates drawn when today's pick is rejected
ALTERNATE_COUNT = 2

# Suggestion control labels
LABEL_SHOW_ALTERNATES = 'Something else?'
LABEL_SHOW_EVERYTHING = 'Show everything'

# Status message kinds
STATUS_BOOTSTRAP_FAILED = 'bootstrap-failed'
STATUS_NO_SCHEDULE = 'no-schedule'
STATUS_MISSING_RECIPE = 'missing-recipe'
STATUS_INSUFFICIENT_CANDIDATES = 'insufficient-candidates'
STATUS_READY = 'ready'
