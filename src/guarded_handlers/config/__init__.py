"""Settings and configuration file loading."""

from .loader import load_mapping_file
from .settings import ENV_PREFIX, Settings, get_settings

__all__ = ["ENV_PREFIX", "Settings", "get_settings", "load_mapping_file"]
