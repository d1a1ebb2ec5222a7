# API Utilities - shared helpers for the route modules
from catalog_admin.api.utils.db_helpers import get_by_id, validate_fk, validate_unique, bulk_validate_ids
from catalog_admin.api.utils.pagination import paginate_response, apply_search_filter, apply_filters
from catalog_admin.api.utils.updates import update_entity
from catalog_admin.api.utils.ordering import reorder_rows

__all__ = [
    # db_helpers
    "get_by_id",
    "validate_fk",
    "validate_unique",
    "bulk_validate_ids",
    # pagination
    "paginate_response",
    "apply_search_filter",
    "apply_filters",
    # updates
    "update_entity",
    # ordering
    "reorder_rows",
]
