"""
Runtime Configuration Module

Provides configuration loading and management for hashtree.
"""

from .runtime import (
    RuntimeConfig,
    TreeConfig,
    RenderConfig,
    LoggingConfig,
    get_default_config,
    set_default_config,
    get_default_config_template,
)

__all__ = [
    "RuntimeConfig",
    "TreeConfig",
    "RenderConfig",
    "LoggingConfig",
    "get_default_config",
    "set_default_config",
    "get_default_config_template",
]
