"""Core app services: persisted settings and logging."""

from .config import AppConfig, OutputSettings, RenderSettings, load_config, save_config, to_identicon_config
from .logging_setup import JsonFormatter, configure_logging, get_logger

__all__ = [
    "AppConfig",
    "JsonFormatter",
    "OutputSettings",
    "RenderSettings",
    "configure_logging",
    "get_logger",
    "load_config",
    "save_config",
    "to_identicon_config",
]
