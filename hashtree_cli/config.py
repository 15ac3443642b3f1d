"""
CLI Configuration

Locates and loads the runtime configuration for the hashtree CLI.
Supports a YAML configuration file plus HASHTREE_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from hashtree.config.runtime import RuntimeConfig


DEFAULT_CONFIG_NAMES = ("hashtree.yaml", ".hashtree.yaml")


def default_config_paths() -> list[Path]:
    """Locations searched when no --config is given, in order."""
    paths = [Path.cwd() / name for name in DEFAULT_CONFIG_NAMES]
    paths.append(Path.home() / ".config" / "hashtree" / "config.yaml")
    return paths


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        Merged configuration

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    if config_path is not None:
        return RuntimeConfig.from_yaml(config_path).with_env_overrides()

    for default_path in default_config_paths():
        if default_path.exists():
            return RuntimeConfig.from_yaml(default_path).with_env_overrides()

    return RuntimeConfig.from_env()
