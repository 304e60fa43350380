"""Library-level settings for data forms.

Provides hooks for applications to change the defaults every data form
falls back to when neither the form nor its data source says otherwise.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class UpdateOn(Enum):
    """When edits propagate out of the form as a new View."""
    CHANGE = "change"
    SUBMIT = "submit"

    @classmethod
    def coerce(cls, value: Union['UpdateOn', str]) -> 'UpdateOn':
        """Accept an UpdateOn or its string value; anything else raises ValueError."""
        return value if isinstance(value, cls) else cls(value)


@dataclass
class DataFormSettings:
    """Defaults for data form behavior.

    Attributes:
        default_update_on: Propagation policy when neither the form config nor
            the data source sets one
        debug_controller: Log every controller event at INFO instead of DEBUG
    """

    default_update_on: UpdateOn = UpdateOn.SUBMIT
    debug_controller: bool = False


# Global settings instance (set by application)
_form_settings: Optional[DataFormSettings] = None


def set_form_settings(settings: Optional[DataFormSettings]) -> None:
    """Install library-wide settings; None restores the defaults."""
    global _form_settings
    _form_settings = settings


def get_form_settings() -> DataFormSettings:
    """Return the installed settings, or defaults if none were set."""
    if _form_settings is None:
        return DataFormSettings()
    return _form_settings
