"""
Configuration loader for the credentials file.

Two formats are accepted: ``KEY=value`` property files (``dbprops.txt``,
``.env``) and YAML mappings (``.yaml`` / ``.yml``).
"""

from pathlib import Path
from typing import Any, Dict, Union
import logging

import yaml
from dotenv import dotenv_values
from pydantic import ValidationError

from ..exceptions import ConfigError
from .schema import Credentials

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
KNOWN_KEYS = {"HOST", "DATABASE", "USER", "PASSWORD", "PORT"}


def _has_content(config_path: Path) -> bool:
    with open(config_path, 'r', encoding='utf-8') as f:
        return any(line.strip() and not line.lstrip().startswith("#") for line in f)


def _read_raw(config_path: Path) -> Dict[str, Any]:
    if config_path.suffix.lower() in YAML_SUFFIXES:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f)
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file is not a key-value mapping: {config_path}")
        return raw
    raw = dict(dotenv_values(config_path, encoding='utf-8', interpolate=False))
    if not KNOWN_KEYS.intersection(k.upper() for k in raw) and _has_content(config_path):
        raise ConfigError(
            f"No HOST, DATABASE, USER or PASSWORD entry could be parsed from {config_path}"
        )
    return raw


def load_credentials(config_path: Union[str, Path]) -> Credentials:
    """
    Load credentials from a configuration file.

    Args:
        config_path: Path to the properties or YAML file.

    Returns:
        Credentials object. Missing keys are left empty.

    Raises:
        ConfigError: If the file doesn't exist, can't be read or can't be parsed.
    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        raw = _read_raw(config_path)
        credentials = Credentials.from_mapping(raw)
    except ConfigError:
        raise
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", cause=e) from e

    logger.info(f"Loaded database configuration from {config_path.resolve()}")
    return credentials
