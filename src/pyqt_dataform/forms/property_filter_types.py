"""
Discriminated union types for property filters.

A View constrains each data property with exactly one filter. Instead of
probing a raw value's shape every time it is touched (does it have a numeric
``min``? is it a list?), the shape is decided once, at the boundary, and
carried through the data model as an explicit type.

Key features:
1. Metaclass auto-registration - all PropertyFilter subclasses with a
   matches() predicate auto-register
2. Value-driven factory - create_property_filter() picks the first match
3. Type-safe dispatch - services use class name for automatic dispatch

Architecture:
    - PropertyFilterMeta: Metaclass that auto-registers all subclasses
    - PropertyFilterBase: Base class for all property filter types
    - RangeFilter: numeric {min, max} bounds (range selectors)
    - MultiFilter: sequence of scalars (multi-selects, check box groups)
    - ScalarFilter: any single value (fallback)
    - create_property_filter(): Factory that auto-selects correct type
"""

from typing import Any, List, Mapping, Optional, Type, Union
from dataclasses import dataclass, field
from abc import ABC, ABCMeta
import copy
import logging

logger = logging.getLogger(__name__)


def is_number(value: Any) -> bool:
    """True for ints and floats; bools are not bounds."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class PropertyFilterBase(ABC):
    """ABC for property filters - enforces explicit interface."""

    def to_raw(self) -> Any:
        """Return the plain (JSON-like) value this filter was parsed from."""
        raise NotImplementedError


class PropertyFilterMeta(ABCMeta):
    """
    Metaclass for auto-registration of PropertyFilter types.

    All classes with a matches() method are automatically registered in
    definition order. The factory tries them in that order, so the catch-all
    ScalarFilter must be defined last.
    """
    _registry: List[Type] = []

    def __new__(mcs, name, bases, namespace):
        cls = super().__new__(mcs, name, bases, namespace)

        if 'matches' in namespace and callable(namespace['matches']):
            mcs._registry.append(cls)
            logger.debug(f"Auto-registered PropertyFilter type: {name}")

        return cls

    @classmethod
    def get_registry(mcs) -> List[Type]:
        """Get all registered PropertyFilter types."""
        return mcs._registry.copy()


@dataclass
class RangeFilter(PropertyFilterBase, metaclass=PropertyFilterMeta):
    """
    Numeric bounds on a property.

    Either bound may be None when only one side is constrained.

    Examples:
        {"age": {"min": 20, "max": 30}}
        {"price": {"max": 100}}
    """
    min: Optional[float] = None
    max: Optional[float] = None

    @staticmethod
    def matches(raw: Any) -> bool:
        """Predicate: a mapping with a numeric min or max."""
        if not isinstance(raw, Mapping):
            return False
        return is_number(raw.get('min')) or is_number(raw.get('max'))

    @classmethod
    def from_raw(cls, raw: Mapping) -> 'RangeFilter':
        return cls(min=raw.get('min'), max=raw.get('max'))

    def to_raw(self) -> dict:
        return {'min': self.min, 'max': self.max}


@dataclass
class MultiFilter(PropertyFilterBase, metaclass=PropertyFilterMeta):
    """
    A set of accepted values for a property.

    An empty MultiFilter means the user cleared every option; the normalizer
    treats that as "unset" rather than "match nothing".
    """
    values: List[Any] = field(default_factory=list)

    @staticmethod
    def matches(raw: Any) -> bool:
        """Predicate: any list or tuple."""
        return isinstance(raw, (list, tuple))

    @classmethod
    def from_raw(cls, raw) -> 'MultiFilter':
        return cls(values=copy.deepcopy(list(raw)))

    def to_raw(self) -> list:
        return copy.deepcopy(self.values)


@dataclass
class ScalarFilter(PropertyFilterBase, metaclass=PropertyFilterMeta):
    """
    A single value for a property (text, number, bool or an opaque object).

    Must stay the LAST registered type so it acts as the catch-all.
    """
    value: Any = None

    @staticmethod
    def matches(raw: Any) -> bool:
        """Predicate: fallback - matches everything."""
        return True

    @classmethod
    def from_raw(cls, raw: Any) -> 'ScalarFilter':
        return cls(value=copy.deepcopy(raw))

    def to_raw(self) -> Any:
        return copy.deepcopy(self.value)


# Union type for type hints
PropertyFilter = Union[RangeFilter, MultiFilter, ScalarFilter]


def create_property_filter(raw: Any) -> PropertyFilter:
    """
    Factory function that auto-selects the correct PropertyFilter subclass.

    Filters that are already typed are copied rather than re-parsed.

    Examples:
        >>> type(create_property_filter({'min': 1, 'max': 5})).__name__
        'RangeFilter'
        >>> type(create_property_filter(['red', 'blue'])).__name__
        'MultiFilter'
        >>> type(create_property_filter('open')).__name__
        'ScalarFilter'
    """
    if isinstance(raw, PropertyFilterBase):
        return copy.deepcopy(raw)

    for filter_class in PropertyFilterMeta.get_registry():
        if filter_class.matches(raw):
            return filter_class.from_raw(raw)

    # Should never reach here due to ScalarFilter fallback
    raise ValueError(
        f"No matching PropertyFilter type for {raw!r}. "
        f"This should never happen - ScalarFilter should match everything."
    )
