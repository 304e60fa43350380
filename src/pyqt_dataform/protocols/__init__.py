"""
Application-facing configuration hooks.

Library-wide defaults that applications may override once at startup.
"""

from .form_config import UpdateOn, DataFormSettings, set_form_settings, get_form_settings

__all__ = [
    "UpdateOn",
    "DataFormSettings",
    "set_form_settings",
    "get_form_settings",
]
