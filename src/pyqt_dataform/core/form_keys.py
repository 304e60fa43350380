"""
Reserved form value keys.

The view structure is flattened so it works better with form inputs. These
keys are how the flat form value carries the View's own fields next to the
property filters. Every reserved key starts with an underscore so it never
collides with a property name.
"""

from typing import Dict, Tuple

FORM_SEARCH_KEY = '_search'
FORM_SORT_KEY = '_sort'
FORM_RANGE_KEY = '_range'
FORM_STEP_KEY = '_step'
FORM_PAGE_KEY = '_page'
FORM_COLUMNS_KEY = '_columns'
FORM_VIEW_NAME_KEY = '_view'

# View attribute -> form value key
VIEW_FORM_KEY_MAP: Dict[str, str] = {
    'search': FORM_SEARCH_KEY,
    'sort': FORM_SORT_KEY,
    'step': FORM_STEP_KEY,
    'page': FORM_PAGE_KEY,
    'columns': FORM_COLUMNS_KEY,
    'name': FORM_VIEW_NAME_KEY,
}

RESERVED_FORM_KEYS: Tuple[str, ...] = tuple(VIEW_FORM_KEY_MAP.values())


def is_reserved_key(key: str) -> bool:
    """Return True if key is one of the View's own fields rather than a property."""
    return key in RESERVED_FORM_KEYS
