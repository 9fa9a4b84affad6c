"""Data models for Liturgica."""

from .tree import PatternConfig, TreeNodeConfig, TreeNode
from .prayer import (
    BLOCK_TYPES,
    Block,
    Prayer,
    BlockPosition,
    BlockDefinition,
    BlockDefinitions,
    ValidationError,
)

__all__ = [
    "PatternConfig",
    "TreeNodeConfig",
    "TreeNode",
    "BLOCK_TYPES",
    "Block",
    "Prayer",
    "BlockPosition",
    "BlockDefinition",
    "BlockDefinitions",
    "ValidationError",
]
