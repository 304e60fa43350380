"""
Abstract base class for property filter services with auto-discovery dispatch.

Services that treat each PropertyFilter type differently define one handler
per type and let the base class route to it by class name.

Pattern:
    Instead of:
        class MyService:
            def process(self, prop):
                if isinstance(prop, RangeFilter):
                    ...
                elif isinstance(prop, MultiFilter):
                    ...
                else:
                    ...

    Use:
        class MyService(FilterServiceABC):
            def _get_handler_prefix(self) -> str:
                return '_process_'

            def _process_RangeFilter(self, prop, ...): ...
            def _process_MultiFilter(self, prop, ...): ...
            def _process_ScalarFilter(self, prop, ...): ...

Adding a new PropertyFilter type means adding a handler to every service;
a missing handler fails loudly at dispatch time.
"""

from typing import Dict, Callable, Any
from abc import ABC, abstractmethod
import logging

from pyqt_dataform.forms.property_filter_types import PropertyFilter

logger = logging.getLogger(__name__)


class FilterServiceABC(ABC):
    """
    Abstract base for property filter services with auto-discovery dispatch.

    Subclasses must:
    1. Implement _get_handler_prefix() to return method prefix (e.g., '_encode_')
    2. Define handler methods following naming convention: {prefix}{ClassName}
    """

    def __init__(self):
        self._handlers: Dict[str, Callable] = {}
        prefix = self._get_handler_prefix()

        for attr_name in dir(self):
            if attr_name.startswith(prefix):
                # e.g., '_encode_RangeFilter' -> 'RangeFilter'
                class_name = attr_name[len(prefix):]
                handler = getattr(self, attr_name)
                if callable(handler):
                    self._handlers[class_name] = handler

        if self._handlers:
            logger.debug(
                f"{self.__class__.__name__} auto-discovered handlers: "
                f"{list(self._handlers.keys())}"
            )
        else:
            logger.warning(
                f"{self.__class__.__name__} found no handlers with prefix '{prefix}'. "
                f"Did you forget to define handler methods?"
            )

    @abstractmethod
    def _get_handler_prefix(self) -> str:
        """Return the method prefix for this service's handlers (leading underscore included)."""

    def dispatch(self, prop: PropertyFilter, *args, **kwargs) -> Any:
        """
        Auto-dispatch to handler based on PropertyFilter class name.

        Raises:
            ValueError: If no handler found for the filter type
        """
        class_name = prop.__class__.__name__
        handler = self._handlers.get(class_name)

        if handler is None:
            raise ValueError(
                f"No handler for {class_name} in {self.__class__.__name__}. "
                f"Available handlers: {list(self._handlers.keys())}. "
                f"Did you forget to define {self._get_handler_prefix()}{class_name}()?"
            )

        return handler(prop, *args, **kwargs)

