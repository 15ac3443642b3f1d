"""
Runtime Configuration

Central configuration for tree construction, tree printing, and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from typing import Any, Optional
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


ENV_PREFIX = "HASHTREE_"

DEFAULT_VALUE_SEPARATOR = ";"
DEFAULT_RENDER_INDENT = " -- -- "


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class TreeConfig:
    """Configuration for tree construction."""
    value_separator: str = DEFAULT_VALUE_SEPARATOR


@dataclass
class RenderConfig:
    """Configuration for the depth-first tree printout."""
    indent: str = DEFAULT_RENDER_INDENT
    show_values: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for hashtree.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        This is the SINGLE source of truth for all env var reading.

        Supported variables:
        - HASHTREE_VALUE_SEPARATOR: Joiner for branch informational values
        - HASHTREE_RENDER_INDENT: Indent unit added per tree depth
        - HASHTREE_RENDER_SHOW_VALUES: Print informational values (true/false)
        - HASHTREE_LOG_LEVEL: Log level name
        - HASHTREE_LOG_FILE: Optional log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}VALUE_SEPARATOR") is not None:
            overrides.setdefault("tree", {})["value_separator"] = os.getenv(
                f"{ENV_PREFIX}VALUE_SEPARATOR"
            )

        if os.getenv(f"{ENV_PREFIX}RENDER_INDENT"):
            overrides.setdefault("render", {})["indent"] = os.getenv(
                f"{ENV_PREFIX}RENDER_INDENT"
            )
        if os.getenv(f"{ENV_PREFIX}RENDER_SHOW_VALUES"):
            overrides.setdefault("render", {})["show_values"] = _env_flag(
                f"{ENV_PREFIX}RENDER_SHOW_VALUES", "true"
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(
                f"{ENV_PREFIX}LOG_LEVEL"
            )
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(
                f"{ENV_PREFIX}LOG_FILE"
            )

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        tree_data = data.get("tree", {}) or {}
        render_data = data.get("render", {}) or {}
        logging_data = data.get("logging", {}) or {}

        tree = TreeConfig(**tree_data) if tree_data else TreeConfig()
        render = RenderConfig(**render_data) if render_data else RenderConfig()
        log = LoggingConfig(**logging_data) if logging_data else LoggingConfig()

        return cls(
            tree=tree,
            render=render,
            logging=log,
            extra=data.get("extra", {}) or {},
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for section in ("tree", "render", "logging"):
            for key, value in overrides.get(section, {}).items():
                setattr(getattr(new_config, section), key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "tree": {
                "value_separator": self.tree.value_separator,
            },
            "render": {
                "indent": self.render.indent,
                "show_values": self.render.show_values,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "extra": self.extra,
        }


def get_default_config_template() -> str:
    """Get a template YAML configuration file."""
    return """# hashtree configuration
tree:
  value_separator: ";"
render:
  indent: " -- -- "
  show_values: true
logging:
  level: INFO
  file: null
"""


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration (None resets to env defaults)."""
    global _default_config
    _default_config = config
