"""
JSON file prayer store for Liturgica.

Prayers are stored one per file as "<id>.json" in a directory. Loading
accepts both the current document shape and the legacy flat list.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from ..exceptions import LoadError
from ..models import Prayer
from .base import BasePrayerStore, camel_case_id, parse_prayer_data, prepare_for_save


class JsonFilePrayerStore(BasePrayerStore):
    """
    Stores prayers as pretty-printed JSON files in a directory.
    """

    def __init__(self, directory: Union[str, Path]):
        """
        Args:
            directory: Directory holding the prayer files
        """
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        """Resolve a prayer id or file path to the file it is stored in."""
        candidate = Path(key)
        if candidate.suffix == ".json" and (candidate.is_absolute() or candidate.parent != Path(".")):
            return candidate
        if candidate.suffix == ".json":
            return self.directory / candidate.name
        return self.directory / f"{key}.json"

    def load(self, key: str) -> Prayer:
        path = self.path_for(key)
        if not path.is_file():
            raise LoadError("Prayer file not found", str(path))

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise LoadError(f"Invalid JSON in prayer file: {e}", str(path)) from e
        except UnicodeDecodeError as e:
            raise LoadError(f"Prayer file is not valid UTF-8: {e}", str(path)) from e
        except OSError as e:
            raise LoadError(f"Could not read prayer file: {e}", str(path)) from e

        prayer = parse_prayer_data(data, str(path), prayer_id=camel_case_id(path.stem))
        if isinstance(data, list):
            logging.info(f"Converted legacy prayer document: {path}")
        return prayer

    def save(self, prayer: Prayer) -> str:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / f"{prayer.id}.json"

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(prepare_for_save(prayer), f, indent=2, ensure_ascii=False)
            f.write("\n")

        logging.info(f"Saved prayer '{prayer.id}' to {path}")
        return str(path)

    def list_prayers(self) -> List[str]:
        """Ids of all prayers stored in the directory."""
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob("*.json"))
