"""
Recipe Book

Wires the services around one store handle and owns the startup and
refresh flows. Failures while initializing are caught here and kept as a
single status message for the renderer.
"""

import logging
from datetime import date

from sqlalchemy.exc import SQLAlchemyError

from constants import STATUS_BOOTSTRAP_FAILED, STATUS_READY
from errors import RecipeBookError
from .catalogue import CatalogueQuery
from .composition import CompositionResolver
from .placeholders import recipe_detail
from .seeding import Seeder
from .session import SuggestionSession
from .view_state import ViewState
from .views import StatusMessage

logger = logging.getLogger(__name__)


class RecipeBook:

    def __init__(self, store, loader, rng=None, clock=date.today):
        self.store = store
        self.loader = loader
        self.clock = clock
        self.seeder = Seeder(store, loader)
        self.catalogue = CatalogueQuery(store, rng=rng)
        self.resolver = CompositionResolver(store)
        self.view_state = ViewState(store)
        self.session = SuggestionSession(self.catalogue, clock=clock)
        self.status = StatusMessage(STATUS_BOOTSTRAP_FAILED, 'Not initialized.')
        self.last_seed = None

    @property
    def ready(self):
        return self.status.kind == STATUS_READY

    def initialize(self, schema_version=None):
        """Open the store and seed empty families. Never raises."""
        try:
            self.store.open(schema_version)
            self.last_seed = self.seeder.seed()
        except (RecipeBookError, SQLAlchemyError) as e:
            logger.error("Initialization failed: %s", e)
            self.store.db.session.rollback()
            self.status = StatusMessage(STATUS_BOOTSTRAP_FAILED, f"Error: {e}")
            return self.status

        self.status = StatusMessage(STATUS_READY, 'Ready.')
        return self.status

    def refresh(self, schema_version=None):
        """Destroy every record, then re-open and re-seed from scratch."""
        logger.info("Refreshing store from bootstrap payloads")
        self.store.reset()
        self.session = SuggestionSession(self.catalogue, clock=self.clock)
        return self.initialize(schema_version)

    def recipe_detail(self, collection_id):
        """Resolved recipe detail, or None when the collection does not exist."""
        collection = self.catalogue.get_collection(collection_id)
        if collection is None:
            return None
        return recipe_detail(collection, self.resolver.resolve(collection_id))
