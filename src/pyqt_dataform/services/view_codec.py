"""
View <-> form value codec.

encode_view() flattens a View into the form value the form inputs edit;
decode_form_value() rebuilds a View from an edited form value. The pair is
idempotent (decode(encode(v)) == v, modulo empty multi-selects) so that a
View pushed straight back in by its owner does not drift.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, Optional
import copy
import logging

from pyqt_dataform.core.form_keys import (
    FORM_SEARCH_KEY,
    FORM_VIEW_NAME_KEY,
    VIEW_FORM_KEY_MAP,
)
from pyqt_dataform.exceptions import MalformedFormValueError, MalformedViewError
from pyqt_dataform.forms.view_types import SortSpec, View, ViewCollection
from .filter_codec_service import FilterCodecService

logger = logging.getLogger(__name__)

FormValue = Dict[str, Any]

_filter_codec = FilterCodecService()


def encode_view(view: Optional[View]) -> FormValue:
    """
    Convert a View into the flat form value format.

    Properties are flattened per filter type, the View's own fields move to
    their '_' prefixed keys, and '_search' is always present. Everything is
    copied; the result never aliases the View.
    """
    if view is not None and not isinstance(view, View):
        raise MalformedViewError(f"Expected a View, got {type(view).__name__}")

    result: FormValue = {}
    if view is not None:
        for key, prop in view.properties.items():
            result[key] = _filter_codec.encode(prop)

        for attr, form_key in VIEW_FORM_KEY_MAP.items():
            attr_value = getattr(view, attr)
            if attr_value is not None:
                result[form_key] = copy.deepcopy(attr_value)

    # always have some blank search text
    if not result.get(FORM_SEARCH_KEY):
        result[FORM_SEARCH_KEY] = ''

    return result


def _coerce_view_field(attr: str, value: Any) -> Any:
    if attr == 'sort':
        return SortSpec.from_dict(value)
    if attr == 'columns':
        return list(value)
    return copy.deepcopy(value)


def decode_form_value(form_value: Mapping, views: Any = None) -> View:
    """
    Convert a form value back into a View.

    If '_view' names a view in the collection, that view seeds the result
    and the form's properties are merged over its own. A name that is not
    in the collection seeds an empty View instead of failing.
    """
    if not isinstance(form_value, Mapping):
        raise MalformedFormValueError(
            f"Form value must be a mapping, got {type(form_value).__name__}"
        )
    views = ViewCollection.coerce(views)

    result = View()
    view_name = form_value.get(FORM_VIEW_NAME_KEY)
    if view_name:
        named = views.get(view_name)
        if named is None:
            logger.warning(
                f"Form value names view {view_name!r} which is not one of {views.names()}; "
                f"decoding without it"
            )
        else:
            result = named

    remaining = dict(form_value)
    for attr, form_key in VIEW_FORM_KEY_MAP.items():
        if form_key not in remaining:
            continue
        value = remaining.pop(form_key)
        # blank search text is the form's default, not a setting
        if value is None or value == '':
            continue
        setattr(result, attr, _coerce_view_field(attr, value))

    decoded = {key: _filter_codec.decode(value) for key, value in remaining.items()}
    result.properties = {**result.properties, **decoded}

    return result
