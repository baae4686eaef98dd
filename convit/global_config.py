"""Global configuration management for convit.

Handles user-level configuration stored in ~/.convit/config.yaml.
API keys are never stored here, they come from the environment.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from convit.config import ConvitConfig

logger = logging.getLogger(__name__)


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".convit"


def get_global_config_dir() -> Path:
    """Get the global convit configuration directory.

    Returns:
        Path to ~/.convit/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.convit/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.convit/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load the raw configuration from ~/.convit/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}") from e

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")

    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save raw configuration to ~/.convit/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}") from e


def load_config() -> ConvitConfig:
    """Load the effective configuration.

    Values from ~/.convit/config.yaml override the defaults; unknown keys
    are ignored.

    Returns:
        The ConvitConfig for this invocation.

    Raises:
        GlobalConfigError: If the file cannot be read or holds invalid values.
    """
    if not is_configured():
        logger.debug("No config file at %s, using defaults", get_config_file_path())
        return ConvitConfig()

    raw = load_global_config()
    known = {key: value for key, value in raw.items() if key in ConvitConfig.model_fields}

    ignored = sorted(set(raw) - set(known))
    if ignored:
        logger.debug("Ignoring unknown config keys: %s", ", ".join(ignored))

    try:
        return ConvitConfig(**known)
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid configuration in {get_config_file_path()}:\n{e}") from e


def save_config(config: ConvitConfig) -> None:
    """Persist a configuration to ~/.convit/config.yaml.

    Args:
        config: The configuration to save.
    """
    save_global_config(config.model_dump())


def is_configured() -> bool:
    """Check if convit has been configured.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
