"""
View State Service

Persists which top-level panel (suggestions, recipes, schedule, pantry)
the user last selected.
"""

from constants import VIEWS, DEFAULT_VIEW, VIEW_SETTING_KEY
from errors import UnknownViewError
from models import Settings


class ViewState:

    def __init__(self, store):
        self.store = store

    def current(self):
        setting = self.store.query(Settings).filter_by(key=VIEW_SETTING_KEY).first()
        if setting is None or setting.value not in VIEWS:
            return DEFAULT_VIEW
        return setting.value

    def switch(self, view):
        if view not in VIEWS:
            raise UnknownViewError(f"Unknown view: {view!r}. Expected one of {', '.join(VIEWS)}")
        setting = self.store.query(Settings).filter_by(key=VIEW_SETTING_KEY).first()
        if setting is None:
            setting = Settings(key=VIEW_SETTING_KEY)
            self.store.session.add(setting)
        setting.value = view
        self.store.session.commit()
        return view
