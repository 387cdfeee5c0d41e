"""
Suggestion Session

Drives the suggestion control. Today's scheduled pair is shown once, at
load time; each press of the control then cycles

    today -> two random alternates -> full menu -> two random alternates -> ...

Alternates always exclude today's scheduled meals.
"""

import enum
import logging
import threading
from datetime import date

from constants import (
    ALTERNATE_COUNT,
    LABEL_SHOW_ALTERNATES,
    LABEL_SHOW_EVERYTHING,
    STATUS_NO_SCHEDULE,
    STATUS_MISSING_RECIPE,
    STATUS_INSUFFICIENT_CANDIDATES,
)
from errors import InsufficientCandidatesError
from .catalogue import weekday_name
from .views import MenuItem, MenuList, SuggestionMessage, StatusMessage

logger = logging.getLogger(__name__)


class SuggestionPhase(enum.Enum):
    TODAY = 'today'
    ALTERNATES = 'alternates'
    FULL_LIST = 'full-list'


class SuggestionSession:

    def __init__(self, catalogue, clock=date.today):
        self.catalogue = catalogue
        self.clock = clock
        self.phase = SuggestionPhase.TODAY
        self.control_label = LABEL_SHOW_ALTERNATES
        # One session is shared by every request thread
        self.lock = threading.RLock()

    def today_name(self):
        return weekday_name(self.clock())

    def today(self):
        """Today's scheduled pair, or a status message explaining its absence."""
        day = self.today_name()
        entry = self.catalogue.schedule_for(day)
        if entry is None:
            return StatusMessage(STATUS_NO_SCHEDULE, f"No schedule for {day}.")

        missing = [cid for cid, c in ((entry.easy_id, entry.easy), (entry.less_easy_id, entry.less_easy))
                   if c is None]
        if missing:
            logger.warning("Schedule for %s references missing recipe(s) %s", day, missing)
            return StatusMessage(
                STATUS_MISSING_RECIPE,
                f"Recipe {', '.join(str(cid) for cid in missing)} scheduled for {day} is missing.",
            )
        return SuggestionMessage(MenuItem.from_collection(entry.easy), MenuItem.from_collection(entry.less_easy))

    def advance(self):
        """Handle one press of the suggestion control."""
        with self.lock:
            if self.phase is SuggestionPhase.ALTERNATES:
                return self._show_full_list()
            return self._show_alternates()

    def _show_alternates(self):
        day = self.today_name()
        entry = self.catalogue.schedule_for(day)
        if entry is None:
            return StatusMessage(STATUS_NO_SCHEDULE, f"No schedule for {day}.")

        try:
            first, second = self.catalogue.pick_alternates(entry.collection_ids, ALTERNATE_COUNT)
        except InsufficientCandidatesError as e:
            return StatusMessage(
                STATUS_INSUFFICIENT_CANDIDATES,
                f"Not enough other meals to suggest ({e.available} available).",
            )

        self.phase = SuggestionPhase.ALTERNATES
        self.control_label = LABEL_SHOW_EVERYTHING
        return SuggestionMessage(MenuItem.from_collection(first), MenuItem.from_collection(second))

    def _show_full_list(self):
        items = [MenuItem.from_collection(c) for c in self.catalogue.list_menu()]
        self.phase = SuggestionPhase.FULL_LIST
        self.control_label = LABEL_SHOW_ALTERNATES
        return MenuList(items)
