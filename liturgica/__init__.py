"""
Liturgica: navigation tree generation and structural validation for
liturgical prayer collections.
"""

__version__ = "0.1.0"
__author__ = "Liturgica Project"

# Import main components
from .exceptions import LiturgicaError, ConfigError, ConfigNotFoundError, ConfigParseError, LoadError
from .models import TreeNodeConfig, PatternConfig, TreeNode, Block, Prayer, BlockDefinitions, ValidationError
from .tree import build_tree, build_navigation_tree, load_tree_config, expand_pattern, derive_path
from .validation import validate_prayer, load_block_definitions, PrayerValidator
from .stores import BasePrayerStore, JsonFilePrayerStore, DraftPrayerStore

__all__ = [
    "LiturgicaError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "LoadError",
    "TreeNodeConfig",
    "PatternConfig",
    "TreeNode",
    "Block",
    "Prayer",
    "BlockDefinitions",
    "ValidationError",
    "build_tree",
    "build_navigation_tree",
    "load_tree_config",
    "expand_pattern",
    "derive_path",
    "validate_prayer",
    "load_block_definitions",
    "PrayerValidator",
    "BasePrayerStore",
    "JsonFilePrayerStore",
    "DraftPrayerStore",
]
