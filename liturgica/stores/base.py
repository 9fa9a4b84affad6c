"""
Base prayer store interface for Liturgica.

This module defines the abstract interface that all prayer stores must
implement, plus the shared step that turns decoded JSON into a Prayer,
including the legacy flat-list shape.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import LoadError
from ..models import Block, Prayer

# Tags used by the old flat-list format and their current equivalents
LEGACY_TYPE_MAP = {
    "title": "heading",
    "subtitle": "subheading",
    "verse": "stanza",
    "text": "prose",
    "instruction": "rubric",
}

DEFAULT_LEGACY_TYPE = "prose"


class BasePrayerStore(ABC):
    """
    Abstract base class for prayer persistence.

    Stores are passed explicitly to whoever needs them; the validation and
    tree engines never reach a store on their own.
    """

    @abstractmethod
    def load(self, key: str) -> Prayer:
        """
        Load a prayer.

        Args:
            key: Store-specific identifier of the prayer

        Returns:
            The loaded prayer, legacy documents already converted

        Raises:
            LoadError: If the prayer is missing, malformed or incompatible
        """
        pass

    @abstractmethod
    def save(self, prayer: Prayer) -> str:
        """
        Persist a prayer.

        Returns:
            Store-specific identifier the prayer was saved under
        """
        pass


def remap_legacy_type(block_type: Optional[str]) -> str:
    if not block_type:
        return DEFAULT_LEGACY_TYPE
    return LEGACY_TYPE_MAP.get(block_type, block_type)


def camel_case_id(name: str) -> str:
    """
    Build a camelCase prayer id from a file stem such as "morning_prayer".
    """
    words = [w for w in "".join(c if c.isalnum() else " " for c in name).split() if w]
    if not words:
        return ""
    first, rest = words[0], words[1:]
    return first[0].lower() + first[1:] + "".join(w[0].upper() + w[1:] for w in rest)


def _legacy_entry_to_block(entry: Any, source: str) -> Block:
    if isinstance(entry, str):
        return Block(type=DEFAULT_LEGACY_TYPE, content=entry)
    if not isinstance(entry, Mapping):
        raise LoadError(f"Unsupported legacy entry: {entry!r}", source)

    block_type = entry.get("type")
    if block_type is not None and not isinstance(block_type, str):
        raise LoadError(f"Legacy entry type must be a string: {block_type!r}", source)
    content = entry.get("content", entry.get("text"))
    items = entry.get("items")
    if items is not None and not isinstance(items, list):
        raise LoadError(f"Legacy entry items must be a list: {items!r}", source)
    return Block(
        type=remap_legacy_type(block_type),
        content=None if content is None else str(content),
        items=None if items is None else [_legacy_entry_to_block(item, source) for item in items],
        route=entry.get("route"),
        filename=entry.get("filename"),
    )


def _legacy_title(entry: Any) -> str:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, Mapping):
        title = entry.get("title", entry.get("content", entry.get("text")))
        if title is not None:
            return str(title)
    return ""


def parse_legacy_prayer(entries: List[Any], source: str, prayer_id: Optional[str] = None) -> Prayer:
    """
    Convert the legacy flat-list format into a Prayer.

    The first entry supplies the title; every following entry becomes a
    top-level block with its type tag remapped to the current tag set.

    Raises:
        LoadError: If the list is empty or contains unusable entries
    """
    if not entries:
        raise LoadError("Legacy prayer has no entries", source)

    title = _legacy_title(entries[0])
    if not title.strip():
        raise LoadError("Legacy prayer does not start with a title entry", source)

    blocks = [_legacy_entry_to_block(entry, source) for entry in entries[1:]]
    return Prayer(
        schema_version=1,
        id=prayer_id or camel_case_id(title),
        title=title.strip(),
        blocks=blocks,
    )


def parse_prayer_data(data: Any, source: str, prayer_id: Optional[str] = None) -> Prayer:
    """
    Turn decoded JSON into a Prayer, accepting the current and legacy shapes.

    Args:
        data: Decoded JSON document
        source: Human-readable origin used in error messages
        prayer_id: Id to give legacy documents, which carry none

    Raises:
        LoadError: If the data matches neither shape
    """
    try:
        if isinstance(data, list):
            return parse_legacy_prayer(data, source, prayer_id)
        if isinstance(data, dict):
            return Prayer.model_validate(data)
    except PydanticValidationError as e:
        raise LoadError(f"Invalid prayer document: {e}", source) from e

    raise LoadError(f"Unsupported prayer document type: {type(data).__name__}", source)


def trim_block(block: Block) -> Block:
    """Copy of a block with surrounding whitespace removed from all content."""
    update: Dict[str, Any] = {}
    if block.content is not None:
        update["content"] = block.content.strip()
    if block.items is not None:
        update["items"] = [trim_block(item) for item in block.items]
    return block.model_copy(update=update)


def prepare_for_save(prayer: Prayer) -> Dict[str, Any]:
    """
    Serialize a prayer for storage with trimmed block content.
    """
    cleaned = prayer.model_copy(update={"blocks": [trim_block(b) for b in prayer.blocks]})
    return cleaned.model_dump(by_alias=True, exclude_none=True)
