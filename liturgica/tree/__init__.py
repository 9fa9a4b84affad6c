"""Navigation tree generation."""

from .patterns import HOURS, DAYS, expand_pattern, pattern_items
from .paths import clean_path_parts, derive_path
from .builder import (
    ROOT_ROUTE,
    DEFAULT_FILE_EXTENSION,
    MIN_VERSION_CODE,
    build_tree,
    build_navigation_tree,
    load_tree_config,
    parse_tree_config,
)
from .navigation import matches_search, search_tree, visible_tree, collect_routes, render_tree

__all__ = [
    "HOURS",
    "DAYS",
    "expand_pattern",
    "pattern_items",
    "clean_path_parts",
    "derive_path",
    "ROOT_ROUTE",
    "DEFAULT_FILE_EXTENSION",
    "MIN_VERSION_CODE",
    "build_tree",
    "build_navigation_tree",
    "load_tree_config",
    "parse_tree_config",
    "matches_search",
    "search_tree",
    "visible_tree",
    "collect_routes",
    "render_tree",
]
