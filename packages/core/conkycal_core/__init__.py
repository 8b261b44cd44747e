"""Core services for conky calendar: run configuration and logging."""

from .config import AppConfig, PreviewConfig, RenderConfig, config_from_args, log_level_from_env
from .logging_setup import configure_logging, get_logger, install_crash_hooks

__all__ = [
    "AppConfig",
    "PreviewConfig",
    "RenderConfig",
    "config_from_args",
    "configure_logging",
    "get_logger",
    "install_crash_hooks",
    "log_level_from_env",
]
