"""
Structural validation of prayer documents.

Blocks are checked against the block definition table: required content,
line limits, first/last position constraints and allowed child types with
minimum counts. Validation never raises; every violation is collected so
one bad block cannot hide another.
"""

import re
from typing import List, Optional

from ..models import Block, BlockDefinition, BlockDefinitions, Prayer, ValidationError
from .definitions import get_block_definitions

# camelCase: lowercase letter first, then letters and digits only
PRAYER_ID_PATTERN = re.compile(r"[a-z][a-zA-Z0-9]*")

DOCUMENT_INDEX = -1


class PrayerValidator:
    """
    Validates prayers against a block definition table.

    Nested items are validated recursively to any depth. Position rules are
    scoped to the sequence a block lives in: top-level blocks are checked
    against the prayer, nested items against their container's items.
    """

    def __init__(self, definitions: BlockDefinitions):
        self.definitions = definitions

    def validate(self, prayer: Prayer) -> List[ValidationError]:
        """
        Validate a prayer.

        Args:
            prayer: The prayer to check

        Returns:
            Errors in document order; an empty list means the prayer is valid
        """
        errors: List[ValidationError] = []

        if not PRAYER_ID_PATTERN.fullmatch(prayer.id):
            errors.append(ValidationError(
                index=DOCUMENT_INDEX,
                message="Prayer ID must be camelCase and start with a letter",
            ))

        count = len(prayer.blocks)
        for index, block in enumerate(prayer.blocks):
            self._validate_block(
                block,
                errors,
                index=index,
                nested_index=None,
                is_first=index == 0,
                is_last=index == count - 1,
                container=None,
            )

        return errors

    def _validate_block(
        self,
        block: Block,
        errors: List[ValidationError],
        index: int,
        nested_index: Optional[int],
        is_first: bool,
        is_last: bool,
        container: Optional[BlockDefinition],
    ) -> None:
        def report(message: str, at: Optional[int] = nested_index) -> None:
            errors.append(ValidationError(index=index, nested_index=at, message=message))

        definition = self.definitions.get(block.type)
        if definition is None:
            report(f"Unknown block type: {block.type}")
            return

        label = definition.label

        if definition.requires_content:
            if not block.content or block.content.strip() == "":
                report(f"{label} block requires content")
            if definition.max_lines is not None and block.content:
                if len(block.content.split("\n")) > definition.max_lines:
                    report(f"{label} must not exceed {definition.max_lines} line(s)")

        position = definition.position
        scope = "block of a prayer" if container is None else f"item in a {container.label}"
        if is_first and position is not None and position.allow_as_first is False:
            report(f"{label} cannot be the first {scope}")
        if is_last and position is not None and position.allow_as_last is False:
            report(f"{label} cannot be the last {scope}")

        if definition.allowed_items is None:
            return

        items = block.items or []
        if not items and definition.min_items > 0:
            report(f"{label} requires {definition.min_items} item(s)")

        allowed = definition.allowed_items
        for item_index, item in enumerate(items):
            if item.type not in allowed:
                item_definition = self.definitions.get(item.type)
                item_label = item_definition.label if item_definition else item.type
                report(
                    f"{item_label} is not allowed here, allowed: {', '.join(allowed)}",
                    at=item_index,
                )
            # Nested items report against the top-level block index
            self._validate_block(
                item,
                errors,
                index=index,
                nested_index=item_index,
                is_first=item_index == 0,
                is_last=item_index == len(items) - 1,
                container=definition,
            )


def validate_prayer(prayer: Prayer, definitions: Optional[BlockDefinitions] = None) -> List[ValidationError]:
    """
    Validate a prayer against the given or the bundled block definitions.
    """
    if definitions is None:
        definitions = get_block_definitions()
    return PrayerValidator(definitions).validate(prayer)


def errors_for_block(
    errors: List[ValidationError],
    index: int,
    nested_index: Optional[int] = None,
) -> List[ValidationError]:
    """Errors addressed to one block; with nested_index None, the block itself."""
    return [e for e in errors if e.index == index and e.nested_index == nested_index]


def is_valid(errors: List[ValidationError]) -> bool:
    return not errors
