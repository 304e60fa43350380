"""
Context manager factory for boolean flag management on the controller.

Pattern:
    Instead of:
        self._emitting = True
        try:
            # ... logic
        finally:
            self._emitting = False

    Use:
        with FlagContextManager.manage_flags(self, _emitting=True):
            # ... logic

Previous values are restored even if a connected slot raises.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Set
import logging

logger = logging.getLogger(__name__)


class ControllerFlag(Enum):
    """
    Registry of valid DataFormController flags.

    Add new flags here as they're introduced; manage_flags() rejects
    anything not listed.
    """
    EMITTING = '_emitting'


class FlagContextManager:
    """
    Context manager factory for boolean flag management.

    Examples:
        with FlagContextManager.manage_flags(self, _emitting=True):
            self.view_changed.emit(view)
    """

    VALID_FLAGS: Set[str] = {flag.value for flag in ControllerFlag}

    @staticmethod
    @contextmanager
    def manage_flags(obj: Any, **flags: bool):
        """
        Set flags on entry and restore previous values on exit.

        Raises:
            ValueError: If any flag name is not in VALID_FLAGS registry
        """
        invalid_flags = set(flags.keys()) - FlagContextManager.VALID_FLAGS
        if invalid_flags:
            raise ValueError(
                f"Invalid flags: {invalid_flags}. "
                f"Valid flags: {FlagContextManager.VALID_FLAGS}. "
                f"Add new flags to ControllerFlag enum."
            )

        # No getattr default: every flag must be initialized in __init__
        prev_values: Dict[str, bool] = {name: getattr(obj, name) for name in flags}

        for flag_name, flag_value in flags.items():
            setattr(obj, flag_name, flag_value)
            logger.debug(f"Setting flag {flag_name}={flag_value} on {type(obj).__name__}")

        try:
            yield
        finally:
            for flag_name, prev_value in prev_values.items():
                setattr(obj, flag_name, prev_value)
                logger.debug(f"Restoring flag {flag_name}={prev_value} on {type(obj).__name__}")

    @staticmethod
    @contextmanager
    def emission_context(obj: Any):
        """Mark obj as emitting to observers for the duration of the block."""
        with FlagContextManager.manage_flags(obj, **{ControllerFlag.EMITTING.value: True}):
            yield

    @staticmethod
    def is_flag_set(obj: Any, flag: ControllerFlag) -> bool:
        return getattr(obj, flag.value)

