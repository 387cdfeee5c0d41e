"""
Services Package

Business logic modules for the recipe book.
"""

from .bootstrap import (
    DirectoryBootstrapLoader,
    HttpBootstrapLoader,
    make_loader,
)

from .seeding import (
    Seeder,
    SeedReport,
    build_rows,
)

from .matching import normalize_type

from .parsing import (
    float_to_fraction,
    format_quantity,
)

from .catalogue import (
    CatalogueQuery,
    weekday_name,
)

from .composition import (
    Composition,
    CompositionResolver,
    IngredientLine,
)

from .placeholders import (
    resolve_placeholders,
    recipe_detail,
)

from .session import (
    SuggestionPhase,
    SuggestionSession,
)

from .view_state import ViewState

from .recipe_book import RecipeBook

from .views import (
    MenuItem,
    MenuList,
    SuggestionMessage,
    StatusMessage,
    RecipeDetail,
)

__all__ = [
    # Bootstrap
    'DirectoryBootstrapLoader',
    'HttpBootstrapLoader',
    'make_loader',
    # Seeding
    'Seeder',
    'SeedReport',
    'build_rows',
    # Matching / formatting
    'normalize_type',
    'float_to_fraction',
    'format_quantity',
    # Queries
    'CatalogueQuery',
    'weekday_name',
    'Composition',
    'CompositionResolver',
    'IngredientLine',
    'resolve_placeholders',
    'recipe_detail',
    # Session
    'SuggestionPhase',
    'SuggestionSession',
    'ViewState',
    'RecipeBook',
    # View models
    'MenuItem',
    'MenuList',
    'SuggestionMessage',
    'StatusMessage',
    'RecipeDetail',
]
