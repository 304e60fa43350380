"""
View data model.

A View is the structured description of a dataset's current search, filter,
sort, pagination and column configuration. Views arrive from (and leave to)
the data source as plain mappings; from_dict()/to_dict() are the only places
that translate between that raw shape and the typed model.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
import copy
import logging

from pyqt_dataform.core.form_keys import FORM_RANGE_KEY, is_reserved_key
from pyqt_dataform.exceptions import DuplicateViewNameError, MalformedViewError
from .property_filter_types import PropertyFilter, ScalarFilter, create_property_filter

logger = logging.getLogger(__name__)

SORT_DIRECTIONS = ('asc', 'desc')


@dataclass
class SortSpec:
    """Sort order for a dataset: one property and a direction."""
    property: str
    direction: str = 'asc'

    def __post_init__(self):
        if self.direction not in SORT_DIRECTIONS:
            raise MalformedViewError(
                f"Sort direction must be one of {SORT_DIRECTIONS}, got {self.direction!r}"
            )

    @classmethod
    def from_dict(cls, data: Mapping) -> 'SortSpec':
        if isinstance(data, SortSpec):
            return copy.deepcopy(data)
        if not isinstance(data, Mapping) or 'property' not in data:
            raise MalformedViewError(f"Sort must be a mapping with a 'property', got {data!r}")
        return cls(property=data['property'], direction=data.get('direction', 'asc'))

    def to_dict(self) -> Dict[str, str]:
        return {'property': self.property, 'direction': self.direction}


@dataclass
class View:
    """
    Search/filter/sort/pagination/column configuration, optionally named.

    None means "not set" for every optional field.
    """
    name: Optional[str] = None
    properties: Dict[str, PropertyFilter] = field(default_factory=dict)
    search: Optional[str] = None
    sort: Optional[SortSpec] = None
    step: Optional[int] = None
    page: Optional[int] = None
    columns: Optional[List[str]] = None

    def __post_init__(self):
        if not isinstance(self.properties, Mapping):
            raise MalformedViewError(
                f"View properties must be a mapping, got {type(self.properties).__name__}"
            )
        reserved = [key for key in self.properties if is_reserved_key(key)]
        if reserved:
            raise MalformedViewError(f"Property names collide with reserved form keys: {reserved}")
        self.properties = {key: create_property_filter(raw) for key, raw in self.properties.items()}
        # a form value mapping holding the range key always decodes as a range
        wrapped = [
            key for key, prop in self.properties.items()
            if isinstance(prop, ScalarFilter)
            and isinstance(prop.value, Mapping)
            and FORM_RANGE_KEY in prop.value
        ]
        if wrapped:
            raise MalformedViewError(
                f"Scalar properties cannot hold a '{FORM_RANGE_KEY}' key: {wrapped}"
            )
        if self.sort is not None:
            self.sort = SortSpec.from_dict(self.sort)
        if self.columns is not None:
            self.columns = list(self.columns)

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> 'View':
        """Build a View from a raw mapping such as the data source supplies."""
        if data is None:
            return cls()
        if isinstance(data, View):
            return copy.deepcopy(data)
        if not isinstance(data, Mapping):
            raise MalformedViewError(f"View must be a mapping, got {type(data).__name__}")

        return cls(
            name=data.get('name'),
            properties=data.get('properties') or {},
            search=data.get('search'),
            sort=data.get('sort'),
            step=data.get('step'),
            page=data.get('page'),
            columns=data.get('columns'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Raw mapping form; unset fields are left out."""
        result: Dict[str, Any] = {
            'properties': {key: f.to_raw() for key, f in self.properties.items()},
        }
        if self.name is not None:
            result['name'] = self.name
        if self.search is not None:
            result['search'] = self.search
        if self.sort is not None:
            result['sort'] = self.sort.to_dict()
        if self.step is not None:
            result['step'] = self.step
        if self.page is not None:
            result['page'] = self.page
        if self.columns is not None:
            result['columns'] = list(self.columns)
        return result


class ViewCollection:
    """
    Ordered, immutable sequence of views.

    Names are unique among the views that have one. Lookups hand out deep
    copies so nobody can edit a preset through a lookup result.

    Examples:
        views = ViewCollection([View(name='open', properties={...})])
        views.get('open')     # independent copy
        views.get('missing')  # None
    """

    def __init__(self, views: Optional[Iterable[Any]] = None):
        self._views: Tuple[View, ...] = tuple(View.from_dict(v) for v in (views or ()))
        self._by_name: Dict[str, View] = {}
        for view in self._views:
            if view.name is None:
                continue
            if view.name in self._by_name:
                raise DuplicateViewNameError(f"Duplicate view name: {view.name!r}")
            self._by_name[view.name] = view
        logger.debug(f"ViewCollection with {len(self._views)} views: {self.names()}")

    @classmethod
    def coerce(cls, views: Any) -> 'ViewCollection':
        """Accept a ViewCollection, any iterable of views/mappings, or None."""
        if isinstance(views, ViewCollection):
            return views
        return cls(views)

    def get(self, name: Optional[str]) -> Optional[View]:
        """Return an independent copy of the named view, or None."""
        if not name:
            return None
        view = self._by_name.get(name)
        return copy.deepcopy(view) if view is not None else None

    def names(self) -> List[str]:
        return [v.name for v in self._views if v.name is not None]

    def __len__(self) -> int:
        return len(self._views)

    def __bool__(self) -> bool:
        return bool(self._views)

    def __repr__(self) -> str:
        return f"ViewCollection({self.names()!r})"
