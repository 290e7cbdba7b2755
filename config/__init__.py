"""
Configuration module for magicquery.

This module provides configuration management including
loading settings from YAML files and environment variables.

Example:
    >>> from config import load_config, apply_settings
    >>> 
    >>> settings = load_config()
    >>> settings.cache_config.regex_cache_size
    256
    >>> apply_settings(settings)
"""

from .settings import (
    Settings,
    CacheConfig,
    load_config,
    apply_settings,
    get_default_config_path,
)

__all__ = [
    "Settings",
    "CacheConfig",
    "load_config",
    "apply_settings",
    "get_default_config_path",
]
