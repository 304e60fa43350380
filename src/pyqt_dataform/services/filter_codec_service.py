"""
Property filter codec.

Converts one property between its typed PropertyFilter form (View side) and
the flat value a form input edits (FormValue side):

    RangeFilter(min=1, max=5)   <->  {'_range': [1, 5]}
    MultiFilter(['a', 'b'])     <->  ['a', 'b']
    ScalarFilter('open')        <->  'open'

Encoding dispatches on the filter type. Decoding goes the other way, from a
raw form value whose shape is defined by the form value format itself.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any
import copy
import logging

from pyqt_dataform.core.form_keys import FORM_RANGE_KEY
from pyqt_dataform.exceptions import MalformedFormValueError
from pyqt_dataform.forms.property_filter_types import (
    MultiFilter,
    PropertyFilter,
    RangeFilter,
    ScalarFilter,
)
from .filter_service_abc import FilterServiceABC

logger = logging.getLogger(__name__)


def is_range_value(value: Any) -> bool:
    """True if a form value is a wrapped range ({'_range': [min, max]})."""
    return isinstance(value, Mapping) and FORM_RANGE_KEY in value


class FilterCodecService(FilterServiceABC):
    """
    Encode/decode a single property filter.

    Examples:
        service = FilterCodecService()
        service.encode(RangeFilter(1, 5))       # {'_range': [1, 5]}
        service.decode({'_range': [1, 5]})      # RangeFilter(min=1, max=5)
    """

    def _get_handler_prefix(self) -> str:
        return '_encode_'

    # ========== VIEW -> FORM ==========

    def encode(self, prop: PropertyFilter) -> Any:
        """Flatten a typed filter into a fresh, unaliased form value."""
        return self.dispatch(prop)

    def _encode_RangeFilter(self, prop: RangeFilter) -> dict:
        # RangeSelector inputs edit a [min, max] pair
        return {FORM_RANGE_KEY: [prop.min, prop.max]}

    def _encode_MultiFilter(self, prop: MultiFilter) -> list:
        return copy.deepcopy(list(prop.values))

    def _encode_ScalarFilter(self, prop: ScalarFilter) -> Any:
        return copy.deepcopy(prop.value)

    # ========== FORM -> VIEW ==========

    @staticmethod
    def decode(value: Any) -> PropertyFilter:
        """Rebuild a typed filter from a form value."""
        if is_range_value(value):
            bounds = value[FORM_RANGE_KEY]
            if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
                raise MalformedFormValueError(
                    f"'{FORM_RANGE_KEY}' must hold a [min, max] pair, got {bounds!r}"
                )
            return RangeFilter(min=bounds[0], max=bounds[1])
        if isinstance(value, (list, tuple)):
            return MultiFilter(values=copy.deepcopy(list(value)))
        return ScalarFilter(value=copy.deepcopy(value))
