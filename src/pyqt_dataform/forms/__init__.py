"""
Data form model and controller.

The typed View model and DataFormController, which wires the codec and
normalizer to form events. The controller needs PyQt6, so exports are
resolved lazily and the model stays importable on its own.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .data_form_controller import DataFormController, DataFormConfig, DataSource, FormEvent
    from .property_filter_types import RangeFilter, MultiFilter, ScalarFilter, PropertyFilter
    from .view_types import SortSpec, View, ViewCollection

_EXPORTS = {
    "DataFormController": ("pyqt_dataform.forms.data_form_controller", "DataFormController"),
    "DataFormConfig": ("pyqt_dataform.forms.data_form_controller", "DataFormConfig"),
    "DataSource": ("pyqt_dataform.forms.data_form_controller", "DataSource"),
    "FormEvent": ("pyqt_dataform.forms.data_form_controller", "FormEvent"),
    "PropertyFilter": ("pyqt_dataform.forms.property_filter_types", "PropertyFilter"),
    "PropertyFilterBase": ("pyqt_dataform.forms.property_filter_types", "PropertyFilterBase"),
    "RangeFilter": ("pyqt_dataform.forms.property_filter_types", "RangeFilter"),
    "MultiFilter": ("pyqt_dataform.forms.property_filter_types", "MultiFilter"),
    "ScalarFilter": ("pyqt_dataform.forms.property_filter_types", "ScalarFilter"),
    "create_property_filter": ("pyqt_dataform.forms.property_filter_types", "create_property_filter"),
    "SortSpec": ("pyqt_dataform.forms.view_types", "SortSpec"),
    "View": ("pyqt_dataform.forms.view_types", "View"),
    "ViewCollection": ("pyqt_dataform.forms.view_types", "ViewCollection"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
