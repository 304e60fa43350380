"""
Core constants.

Reserved form keys shared by the codec, the normalizer and the touched mapper.
No Qt and no domain logic lives here.
"""

from .form_keys import (
    FORM_SEARCH_KEY,
    FORM_SORT_KEY,
    FORM_RANGE_KEY,
    FORM_STEP_KEY,
    FORM_PAGE_KEY,
    FORM_COLUMNS_KEY,
    FORM_VIEW_NAME_KEY,
    VIEW_FORM_KEY_MAP,
    RESERVED_FORM_KEYS,
    is_reserved_key,
)

__all__ = [
    "FORM_SEARCH_KEY",
    "FORM_SORT_KEY",
    "FORM_RANGE_KEY",
    "FORM_STEP_KEY",
    "FORM_PAGE_KEY",
    "FORM_COLUMNS_KEY",
    "FORM_VIEW_NAME_KEY",
    "VIEW_FORM_KEY_MAP",
    "RESERVED_FORM_KEYS",
    "is_reserved_key",
]
