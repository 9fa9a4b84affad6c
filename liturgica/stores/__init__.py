"""Prayer persistence."""

from .base import BasePrayerStore, parse_prayer_data, LEGACY_TYPE_MAP
from .json_file import JsonFilePrayerStore
from .draft import DraftPrayerStore, default_prayer

__all__ = [
    "BasePrayerStore",
    "parse_prayer_data",
    "LEGACY_TYPE_MAP",
    "JsonFilePrayerStore",
    "DraftPrayerStore",
    "default_prayer",
]
