"""Provider configuration."""

from .config_data import ProviderConfig
from .config_loader import CONFIG_PATH, load_config

__all__ = ["ProviderConfig", "load_config", "CONFIG_PATH"]
