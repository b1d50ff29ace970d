"""Config package exports."""

from .schema import AppConfig, SearchSettings, load_config

__all__ = [
    "AppConfig",
    "SearchSettings",
    "load_config",
]
