"""
Configuration management for magicquery.

Provides dataclasses for configuration and utilities
for loading settings from YAML files.
"""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class CacheConfig:
    """Bounds for the process-wide caches (0 = unbounded)."""
    path_cache_size: int = 1024
    regex_cache_size: int = 256


@dataclass
class Settings:
    """
    Main settings container for magicquery.
    
    Attributes:
        cache_config: Path accessor and regex cache bounds
        log_level: Level of the "magicquery" logger
        log_file: Optional file the logger also writes to
    """
    cache_config: CacheConfig = field(default_factory=CacheConfig)
    
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    
    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create Settings from dictionary."""
        data = dict(data)
        cache_data = data.pop("cache_config", None) or {}
        
        return cls(
            cache_config=CacheConfig(**cache_data),
            **data
        )
    
    def to_dict(self) -> dict:
        """Convert Settings to dictionary."""
        return asdict(self)


def get_default_config_path() -> Path:
    """Get path to default configuration file."""
    # Environment variable wins
    env_config = os.environ.get("MAGICQUERY_CONFIG")
    if env_config:
        return Path(env_config)
    
    local_config = Path("./config/default_config.yaml")
    if local_config.exists():
        return local_config
    
    return Path(__file__).parent / "default_config.yaml"


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file.
    
    Args:
        config_path: Path to config file. If None, uses default.
        
    Returns:
        Settings object with loaded configuration
        
    Example:
        >>> settings = load_config()
        >>> settings = load_config("./my_config.yaml")
    """
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)
    
    if not path.exists():
        return Settings()
    
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    
    if data is None:
        return Settings()
    
    return Settings.from_dict(data)


def apply_settings(settings: Settings) -> None:
    """
    Apply settings to the running process.
    
    Resizes the path and regex caches and reconfigures the
    "magicquery" logger.
    """
    from magicquery.query.cache import configure_caches
    from magicquery.utils.logging import setup_logger
    
    configure_caches(
        path_cache_size=settings.cache_config.path_cache_size,
        regex_cache_size=settings.cache_config.regex_cache_size,
    )
    setup_logger("magicquery", level=settings.log_level, log_file=settings.log_file)
