"""
Prayer document models for Liturgica.

A prayer is an ordered sequence of typed blocks. Container blocks nest
further blocks in their items. Block definitions describe, per block type,
the structural rules the validator applies.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# Block type tags understood by the editor
BLOCK_TYPES = (
    "heading",
    "subheading",
    "stanza",
    "prose",
    "rubric",
    "cue",
    "collapsible-block",
    "link",
)


class Block(BaseModel):
    """
    One structural unit of a prayer.
    """

    type: str = Field(
        ...,
        description="Block type tag, looked up in the block definitions"
    )

    content: Optional[str] = Field(
        default=None,
        description="Free text content of the block"
    )

    items: Optional[List['Block']] = Field(
        default=None,
        description="Nested blocks, meaningful for container block types"
    )

    route: Optional[str] = Field(
        default=None,
        description="Referenced prayer route, for link blocks"
    )

    filename: Optional[str] = Field(
        default=None,
        description="Referenced prayer file path, for link blocks"
    )


Block.model_rebuild()


class Prayer(BaseModel):
    """
    A complete prayer document as edited and stored.
    """

    model_config = ConfigDict(populate_by_name=True)

    schema_version: int = Field(
        default=1,
        alias="schemaVersion",
        description="Version of the stored document shape"
    )

    id: str = Field(
        ...,
        description="camelCase identifier, also used as the stored file stem"
    )

    title: str = Field(
        ...,
        description="Human readable title"
    )

    language: Optional[str] = Field(
        default=None,
        description="Language code of the prayer text"
    )

    blocks: List[Block] = Field(
        default_factory=list,
        description="Top-level blocks in document order"
    )


class BlockPosition(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    allow_as_first: Optional[bool] = Field(default=None, alias="allowAsFirst")
    allow_as_last: Optional[bool] = Field(default=None, alias="allowAsLast")


class BlockDefinition(BaseModel):
    """
    Structural rules for one block type.
    """

    model_config = ConfigDict(populate_by_name=True)

    label: str
    requires_content: bool = Field(default=False, alias="requiresContent")
    max_lines: Optional[int] = Field(default=None, alias="maxLines")
    position: Optional[BlockPosition] = None
    allowed_items: Optional[List[str]] = Field(default=None, alias="allowedItems")
    min_items: int = Field(default=0, alias="minItems")


class BlockDefinitions(BaseModel):
    """
    The block definition table, keyed by block type tag.
    """

    blocks: Dict[str, BlockDefinition] = Field(default_factory=dict)

    def get(self, block_type: str) -> Optional[BlockDefinition]:
        return self.blocks.get(block_type)

    def __contains__(self, block_type: str) -> bool:
        return block_type in self.blocks


class ValidationError(BaseModel):
    """
    One structural violation found in a prayer.

    index is the position of the top-level block (-1 for document level
    problems); nested_index is the position inside the container's items.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    index: int
    nested_index: Optional[int] = Field(default=None, alias="nestedIndex")
    message: str
