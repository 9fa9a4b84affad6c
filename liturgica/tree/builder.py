"""
Navigation tree construction for Liturgica.

This module loads the tree configuration and recursively turns it into a
TreeNode hierarchy: patterns are expanded, file extensions and the
editorOnly flag are inherited, and content nodes receive derived filenames.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigError, ConfigNotFoundError, ConfigParseError
from ..models import TreeNode, TreeNodeConfig
from .paths import derive_path
from .patterns import expand_pattern

ROOT_ROUTE = "malankara"
DEFAULT_FILE_EXTENSION = ".json"
MIN_VERSION_CODE = 34

DEFAULT_TREE_CONFIG = Path(__file__).parent / "tree.config.json"


def parse_tree_config(data: Any, source: Optional[str] = None) -> TreeNodeConfig:
    """
    Turn already-decoded configuration data into a TreeNodeConfig.

    Raises:
        ConfigParseError: If the data does not have the node configuration shape
    """
    try:
        return TreeNodeConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigParseError(f"Invalid tree config structure: {e}", source) from e


def load_tree_config(config_path: Union[str, Path, None] = None) -> TreeNodeConfig:
    """
    Load the tree structure from a JSON config file.

    Args:
        config_path: Path to the configuration file, the bundled one if None

    Returns:
        The parsed root node configuration

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigParseError: If the file is not valid JSON or has the wrong shape
    """
    path = Path(config_path) if config_path else DEFAULT_TREE_CONFIG

    if not path.is_file():
        raise ConfigNotFoundError("Tree config file not found", str(path))

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in tree config: {e}", str(path)) from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Tree config is not valid UTF-8: {e}", str(path)) from e
    except OSError as e:
        raise ConfigParseError(f"Could not read tree config: {e}", str(path)) from e

    logging.info(f"Tree configuration loaded from {path}")
    return parse_tree_config(data, str(path))


def build_tree(
    config: TreeNodeConfig,
    parent_route: Optional[str] = None,
    ancestors: Sequence[str] = (),
    parent_editor_only: bool = False,
) -> TreeNode:
    """
    Recursively build a TreeNode hierarchy from a node configuration.

    Args:
        config: Node configuration to build
        parent_route: Route of the parent node, None for the root
        ancestors: Ancestor routes used for filename derivation
        parent_editor_only: Resolved editorOnly flag of the parent

    Returns:
        The constructed node with its whole subtree

    Raises:
        ConfigError: If a pattern in the subtree has an unknown type
    """
    route = config.route
    file_extension = config.file_extension or DEFAULT_FILE_EXTENSION
    editor_only = config.editor_only if config.editor_only is not None else parent_editor_only

    children_configs = list(config.children or [])
    if config.pattern is not None:
        pattern_children = expand_pattern(config.pattern)
        if file_extension != DEFAULT_FILE_EXTENSION:
            pattern_children = [
                child if child.file_extension else child.model_copy(update={"file_extension": file_extension})
                for child in pattern_children
            ]
        children_configs.extend(pattern_children)

    if children_configs:
        child_ancestors = [*ancestors, route] if route != ROOT_ROUTE else []
        children = []
        for child_config in children_configs:
            if file_extension != DEFAULT_FILE_EXTENSION and not child_config.file_extension:
                child_config = child_config.model_copy(update={"file_extension": file_extension})
            children.append(build_tree(child_config, route, child_ancestors, editor_only))

        return TreeNode(
            route=route,
            parent=parent_route,
            filename=None,
            last_modified=None,
            min_version_code=MIN_VERSION_CODE,
            children=children,
            editor_only=editor_only,
        )

    path_parts = [*ancestors, route] if route != ROOT_ROUTE else [route]
    return TreeNode(
        route=route,
        parent=parent_route,
        filename=derive_path(path_parts, file_extension),
        last_modified=None,
        min_version_code=MIN_VERSION_CODE,
        children=[],
        editor_only=editor_only,
    )


def build_navigation_tree(config_path: Union[str, Path, None] = None) -> TreeNode:
    """
    Load the tree configuration and build the full navigation tree.

    Raises:
        ConfigError: If the configuration is missing, malformed or uses an
            unknown pattern type
    """
    root_config = load_tree_config(config_path)
    try:
        tree = build_tree(root_config)
    except ConfigError as e:
        logging.error(f"Failed to build navigation tree: {e}")
        raise

    logging.debug(f"Built navigation tree '{tree.route}' with {len(tree.leaves())} content nodes")
    return tree
