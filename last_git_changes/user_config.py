"""Per-directory configuration for last-git-changes.

Reads the optional .last-git-changes.yaml file in the inspected directory.
The file is never created or modified by the tool.

Example:

    exclude:
      - README.md
      - docs
      - "*.lock"
"""

from pathlib import Path
from typing import Union

import yaml


CONFIG_FILE_NAME = ".last-git-changes.yaml"

# Default configuration values
DEFAULT_CONFIG = {
    "exclude": [],
}


class ConfigError(Exception):
    """Raised when the configuration file cannot be used."""

    pass


def get_config_file(directory: Union[str, Path]) -> Path:
    """Return the path of the configuration file for a directory.

    Args:
        directory: The directory git is run in.

    Returns:
        Path to .last-git-changes.yaml inside directory.
    """
    return Path(directory) / CONFIG_FILE_NAME


def load_config(directory: Union[str, Path]) -> dict:
    """Load the configuration for a directory.

    A missing file yields the defaults.

    Args:
        directory: The directory git is run in.

    Returns:
        Configuration dictionary merged with DEFAULT_CONFIG.

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping.
    """
    config_file = get_config_file(directory)

    if not config_file.is_file():
        return {key: list(value) for key, value in DEFAULT_CONFIG.items()}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {config_file}: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to read {config_file}: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"{config_file} must contain a mapping")

    # Merge with defaults for any missing keys
    for key, value in DEFAULT_CONFIG.items():
        if config.get(key) is None:
            config[key] = list(value)
    return config


def get_exclude_patterns(directory: Union[str, Path]) -> list[str]:
    """Get the exclusion patterns configured for a directory.

    Args:
        directory: The directory git is run in.

    Returns:
        List of user patterns from the ``exclude`` key.

    Raises:
        ConfigError: If ``exclude`` is not a list of strings.
    """
    patterns = load_config(directory)["exclude"]
    if isinstance(patterns, str):
        patterns = [patterns]
    if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
        raise ConfigError(
            f"'exclude' in {get_config_file(directory)} must be a list of patterns"
        )
    return patterns
