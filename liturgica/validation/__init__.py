"""Structural validation of prayer documents."""

from .definitions import load_block_definitions, get_block_definitions
from .validator import PrayerValidator, validate_prayer, errors_for_block, is_valid

__all__ = [
    "load_block_definitions",
    "get_block_definitions",
    "PrayerValidator",
    "validate_prayer",
    "errors_for_block",
    "is_valid",
]
