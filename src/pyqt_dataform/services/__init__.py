"""
Service layer for data forms.

Pure, synchronous functions and services: the View <-> form value codec,
form value normalization, touched-field reporting and controller flag
management.
"""

from .filter_codec_service import FilterCodecService
from .flag_context_manager import FlagContextManager, ControllerFlag
from .view_codec import encode_view, decode_form_value
from .view_normalizer import prune_empty, reset_page, reconcile
from .touched_mapper import transform_touched

__all__ = [
    "FilterCodecService",
    "FlagContextManager",
    "ControllerFlag",
    "encode_view",
    "decode_form_value",
    "prune_empty",
    "reset_page",
    "reconcile",
    "transform_touched",
]
