"""
Configuration file loading for wxp-mixins.

The vocabulary is layered: built-in defaults < config file < environment
variables < programmatic overrides.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Callable, Optional, Union

import yaml

from .defaults import (
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import MixinConfig

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Configuration loading or parsing error."""

    pass


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _read_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _read_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


_READERS: dict[str, Callable[[Path], Any]] = {
    ".json": _read_json,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".toml": _read_toml,
}


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Load a configuration file, picking the parser by extension.

    Raises:
        ConfigurationError: If the file is missing, has an unsupported
            extension, does not parse, or does not hold a mapping.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ConfigurationError(f"Unsupported configuration format: {path.suffix}")

    try:
        data = reader(path)
    except (ValueError, yaml.YAMLError) as e:
        # json and toml decode errors are ValueErrors
        raise ConfigurationError(f"Cannot parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file must contain a mapping: {path}")

    return data


def find_config_file(search_paths: Optional[list[str]] = None) -> Optional[Path]:
    """Find ``wxp.config.<ext>`` in the search paths, first match wins."""
    for search_path in search_paths or DEFAULT_CONFIG_SEARCH_PATHS:
        search_dir = Path(search_path).expanduser()
        for ext in DEFAULT_CONFIG_EXTENSIONS:
            candidate = search_dir / f"{DEFAULT_CONFIG_FILENAME}{ext}"
            if candidate.exists():
                return candidate
    return None


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Deep merge configuration sections, later configs win."""
    result: dict[str, Any] = {}

    for config in configs:
        for key, value in config.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = merge_configs(result[key], value)
            else:
                result[key] = value

    return result


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
    search_paths: Optional[list[str]] = None,
) -> MixinConfig:
    """Build the merge vocabulary from every configuration source.

    Args:
        config_file: Explicit configuration file; it must exist and parse.
            Without one, the search paths are scanned and a broken file
            found there is skipped with a warning.
        overrides: Programmatic overrides, applied last.
        load_env: Whether to read ``WXP_*`` variables.
        search_paths: Directories scanned when no file is given.

    Returns:
        The validated configuration.
    """
    sources: list[dict[str, Any]] = []

    if config_file is not None:
        sources.append(load_file(config_file))
    else:
        found = find_config_file(search_paths)
        if found is not None:
            try:
                sources.append(load_file(found))
            except ConfigurationError as e:
                logger.warning(f"Ignoring config file {found}: {e}")

    if load_env:
        sources.append(load_env_config())

    if overrides:
        sources.append(overrides)

    config = MixinConfig.from_dict(merge_configs(*sources))
    logger.debug(
        f"Loaded vocabulary: page={config.page.events} app={config.app.events}"
    )
    return config


_default_config: Optional[MixinConfig] = None


def get_default_config() -> MixinConfig:
    """Get the built-in configuration.

    Files and environment variables are not consulted; use ``load_config``
    for that.
    """
    global _default_config
    if _default_config is None:
        _default_config = MixinConfig()
    return _default_config
