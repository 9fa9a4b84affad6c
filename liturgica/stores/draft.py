"""
Working draft store for Liturgica.

Keeps the single prayer currently being edited in one file so an editing
session can be resumed. A missing or unusable draft falls back to an empty
default prayer.
"""

import json
import logging
from pathlib import Path
from typing import Union

from ..exceptions import LoadError
from ..models import Prayer
from .base import BasePrayerStore, parse_prayer_data

DRAFT_FILENAME = "prayer-editor-draft.json"


def default_prayer() -> Prayer:
    """The prayer a new editing session starts with."""
    return Prayer(schema_version=1, id="testPrayer", title="Test Prayer", blocks=[])


class DraftPrayerStore(BasePrayerStore):
    """
    Persists the working draft to a single JSON file.

    Drafts are saved as-is (content is not trimmed) so in-progress
    whitespace survives a reload.
    """

    def __init__(self, path: Union[str, Path]):
        path = Path(path)
        self.path = path / DRAFT_FILENAME if path.suffix != ".json" else path

    def load(self, key: str = "") -> Prayer:
        if not self.path.is_file():
            raise LoadError("No saved draft", str(self.path))

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise LoadError(f"Invalid JSON in draft: {e}", str(self.path)) from e
        except UnicodeDecodeError as e:
            raise LoadError(f"Draft is not valid UTF-8: {e}", str(self.path)) from e
        except OSError as e:
            raise LoadError(f"Could not read draft: {e}", str(self.path)) from e

        # Drafts are always written in the current shape
        if not isinstance(data, dict):
            raise LoadError("Draft is not a prayer document", str(self.path))
        return parse_prayer_data(data, str(self.path))

    def load_or_default(self) -> Prayer:
        """Load the saved draft, or the default prayer if there is none usable."""
        try:
            return self.load()
        except LoadError as e:
            logging.info(f"Starting from default prayer: {e}")
            return default_prayer()

    def save(self, prayer: Prayer) -> str:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(prayer.model_dump(by_alias=True, exclude_none=True), f, indent=2, ensure_ascii=False)
        return str(self.path)

    def clear(self) -> None:
        """Remove the saved draft if there is one."""
        if self.path.exists():
            self.path.unlink()
