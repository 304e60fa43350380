"""
Form value normalization.

Rules applied to every edited form value before it is committed:

- prune_empty: an emptied multi-select means "unset", not "match nothing"
- reset_page: while paging past page 1, any edit sends the user back to page 1
- reconcile: choosing a named view loads it wholesale; editing away from a
  named view's values drops the name

All three are pure: they return new dicts and never mutate their inputs.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict
import copy
import logging

from pyqt_dataform.core.form_keys import FORM_PAGE_KEY, FORM_VIEW_NAME_KEY
from pyqt_dataform.forms.view_types import ViewCollection
from .view_codec import encode_view

logger = logging.getLogger(__name__)

FormValue = Dict[str, Any]


def prune_empty(form_value: Mapping) -> FormValue:
    """Drop every key whose value is a list or tuple with no elements; copy the rest."""
    return {
        key: copy.deepcopy(value) for key, value in form_value.items()
        if not (isinstance(value, (list, tuple)) and len(value) == 0)
    }


def reset_page(next_value: Mapping, prev_value: Mapping) -> FormValue:
    """
    Reset pagination to page 1 if the previous value was past page 1.

    Applies to every edit while paging, including an edit of the page
    itself; callers that want page-only edits to stick must not route them
    through here.
    """
    result = copy.deepcopy(dict(next_value))
    prev_page = prev_value.get(FORM_PAGE_KEY)
    if prev_page and prev_page > 1:
        result[FORM_PAGE_KEY] = 1
    return result


def _comparable(value: Any) -> Any:
    # tuples from form inputs compare equal to the lists encode_view produces
    if isinstance(value, (list, tuple)):
        return [_comparable(v) for v in value]
    if isinstance(value, Mapping):
        return {k: _comparable(v) for k, v in value.items()}
    return value


def _has_diverged(form_value: Mapping, canonical: Mapping) -> bool:
    """
    True if the form value contradicts the canonical encoding of its view.

    Only keys set (truthy) on BOTH sides can contradict. A field cleared
    back toward empty keeps the view name.
    """
    return any(
        canonical_value
        and form_value.get(key)
        and _comparable(form_value[key]) != _comparable(canonical_value)
        for key, canonical_value in canonical.items()
    )


def reconcile(next_value: Mapping, prev_value: Mapping, views: Any = None) -> FormValue:
    """
    Coordinate view name changes for an edited form value.

    Switching to a different named view returns that view's canonical form
    value, discarding any other edits in the same event. Otherwise empty
    multi-selects are pruned, and the view name is dropped if the edits no
    longer match the named view (or the name does not resolve).
    """
    views = ViewCollection.coerce(views)
    next_name = next_value.get(FORM_VIEW_NAME_KEY)

    if next_name and next_name != prev_value.get(FORM_VIEW_NAME_KEY):
        view = views.get(next_name)
        if view is not None:
            logger.info(f"Switching to view {next_name!r}")
            return encode_view(view)
        logger.warning(f"Cannot switch to unknown view {next_name!r}; treating as an edit")

    result = prune_empty(next_value)

    view_name = result.get(FORM_VIEW_NAME_KEY)
    if view_name:
        view = views.get(view_name)
        if view is None:
            logger.warning(f"Dropping unknown view name {view_name!r}")
            del result[FORM_VIEW_NAME_KEY]
        elif _has_diverged(result, prune_empty(encode_view(view))):
            logger.debug(f"Form value diverged from view {view_name!r}; dropping name")
            del result[FORM_VIEW_NAME_KEY]

    return result
