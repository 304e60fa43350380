"""Touched field reporting."""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, Iterable
import logging

from pyqt_dataform.core.form_keys import FORM_RANGE_KEY

logger = logging.getLogger(__name__)


def _value_at_path(value: Mapping, path: str) -> Any:
    """Literal key first, then a walk through nested mappings."""
    if path in value:
        return value[path]
    current: Any = value
    for segment in path.split('.'):
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]
    return current


def transform_touched(touched: Iterable[str], value: Mapping) -> Dict[str, Any]:
    """
    Map touched field paths to their current values.

    A range input reports its path as '<property>._range'; that edit is
    reported with the whole property's value rather than the inner pair.

    Example:
        transform_touched({'age._range'}, {'age': {'_range': [20, 30]}})
        # {'age._range': {'_range': [20, 30]}}
    """
    if isinstance(touched, Mapping):
        touched = touched.keys()

    result: Dict[str, Any] = {}
    for path in touched:
        parts = path.split('.')
        if len(parts) > 1 and parts[1] == FORM_RANGE_KEY:
            result[path] = value.get(parts[0])
        else:
            result[path] = _value_at_path(value, path)
    return result
