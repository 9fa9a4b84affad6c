"""
Block definition loading for Liturgica.

The definition table is data, not code: each block type maps to a
BlockDefinition record. The bundled table is loaded once per process and
treated as read-only afterwards.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigError, ConfigNotFoundError, ConfigParseError
from ..models import BlockDefinitions

DEFAULT_DEFINITIONS_PATH = Path(__file__).parent.parent / "schema" / "block-definitions.json"


def load_block_definitions(path: Union[str, Path, None] = None) -> BlockDefinitions:
    """
    Load a block definition table from JSON.

    Args:
        path: Path to the definitions file, the bundled one if None

    Returns:
        The parsed definition table

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigParseError: If the file is not valid JSON or has the wrong shape
    """
    definitions_path = Path(path) if path else DEFAULT_DEFINITIONS_PATH

    if not definitions_path.is_file():
        raise ConfigNotFoundError("Block definitions file not found", str(definitions_path))

    try:
        with open(definitions_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        definitions = BlockDefinitions.model_validate(data)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in block definitions: {e}", str(definitions_path)) from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Block definitions are not valid UTF-8: {e}", str(definitions_path)) from e
    except OSError as e:
        raise ConfigParseError(f"Could not read block definitions: {e}", str(definitions_path)) from e
    except PydanticValidationError as e:
        raise ConfigParseError(f"Invalid block definitions structure: {e}", str(definitions_path)) from e

    logging.debug(f"Loaded {len(definitions.blocks)} block definitions from {definitions_path}")
    return definitions


_block_definitions: Optional[BlockDefinitions] = None


def get_block_definitions() -> BlockDefinitions:
    """
    Get the process-wide bundled block definitions, loading them on first use.

    Raises:
        ConfigError: If the bundled table cannot be loaded
    """
    global _block_definitions
    if _block_definitions is None:
        try:
            _block_definitions = load_block_definitions()
        except ConfigError as e:
            logging.error(f"Failed to load block definitions: {e}")
            raise
    return _block_definitions
