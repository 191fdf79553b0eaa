"""
Configuration File Loader

Loads YAML or JSON documents (route tables) into plain dictionaries.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from guarded_handlers.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def load_mapping_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a configuration document whose top level is a mapping.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file.

    Returns:
        Parsed configuration dictionary.

    Raises:
        ConfigurationError: If the file is missing, unreadable, has an
            unsupported suffix, or does not contain a mapping.
    """
    file_path = Path(path)
    suffix = file_path.suffix.lower()

    if suffix not in YAML_SUFFIXES and suffix != ".json":
        raise ConfigurationError(f"Unsupported configuration format: {file_path.suffix}", config_key=str(file_path))

    try:
        with open(file_path, "r", encoding="utf-8") as file:
            if suffix in YAML_SUFFIXES:
                config = yaml.safe_load(file)
            else:
                config = json.load(file)

    except FileNotFoundError:
        logger.error("Configuration file not found: %s", file_path)
        raise ConfigurationError(f"Configuration file not found: {file_path}", config_key=str(file_path))

    except (yaml.YAMLError, json.JSONDecodeError) as e:
        logger.error("Error parsing %s: %s", file_path, e)
        raise ConfigurationError(f"Error parsing {file_path}: {e}", config_key=str(file_path)) from e

    except OSError as e:
        raise ConfigurationError(f"Error reading {file_path}: {e}", config_key=str(file_path)) from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"Invalid configuration format in {file_path}", config_key=str(file_path))

    logger.debug("Loaded configuration from %s", file_path)
    return config


__all__ = ["load_mapping_file"]
