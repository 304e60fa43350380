"""
pyqt-dataform: keeps a PyQt6 data form in sync with a dataset View.

A View describes a dataset's search text, property filters, sort order,
pagination and visible columns, optionally under a preset name. Form inputs
want something flatter, so the View is encoded into a flat form value,
edited, reconciled and decoded back.

Architecture:
- Core: reserved form value keys
- Protocols: library-wide settings and the update policy enum
- Services: pure codec, normalizer and touched-field reporting
- Forms: typed View model and the DataFormController (QObject + signals)

Key Features:
- Lossless flattening of range filters ({min, max} <-> {'_range': [min, max]})
- Named view switching, and silent un-naming when edits diverge from a preset
- Page reset when filters change
- Idempotent encode/decode so a View pushed straight back in does not oscillate
"""

__version__ = "0.1.0"

from pyqt_dataform.exceptions import (
    DataFormError,
    MalformedViewError,
    MalformedFormValueError,
    DuplicateViewNameError,
    SubmitNotAvailableError,
)
from pyqt_dataform.protocols import UpdateOn, DataFormSettings, set_form_settings, get_form_settings
from pyqt_dataform.forms.property_filter_types import (
    RangeFilter,
    MultiFilter,
    ScalarFilter,
    create_property_filter,
)
from pyqt_dataform.forms.view_types import SortSpec, View, ViewCollection
from pyqt_dataform.services import (
    encode_view,
    decode_form_value,
    prune_empty,
    reset_page,
    reconcile,
    transform_touched,
)

__all__ = [
    "__version__",
    "DataFormError",
    "MalformedViewError",
    "MalformedFormValueError",
    "DuplicateViewNameError",
    "SubmitNotAvailableError",
    "UpdateOn",
    "DataFormSettings",
    "set_form_settings",
    "get_form_settings",
    "RangeFilter",
    "MultiFilter",
    "ScalarFilter",
    "create_property_filter",
    "SortSpec",
    "View",
    "ViewCollection",
    "encode_view",
    "decode_form_value",
    "prune_empty",
    "reset_page",
    "reconcile",
    "transform_touched",
]
