"""Configuration loading."""

from commitx.config.settings import (
    get_config,
    get_config_loaded_sources,
    get_config_warnings,
    get_setting,
    load_config,
)

__all__ = [
    "load_config",
    "get_config",
    "get_config_loaded_sources",
    "get_config_warnings",
    "get_setting",
]
