"""Popup configuration record, enums and loaders."""

from .loader import ENV_PREFIX, env_overrides, load_config
from .models import ColumnMode, ConfigurationError, InternalHandling, PopupConfig

__all__ = [
    "ColumnMode",
    "ConfigurationError",
    "InternalHandling",
    "PopupConfig",
    "ENV_PREFIX",
    "env_overrides",
    "load_config",
]
