from .models import SharingConfig
from .system import CONFIG_ENV_VAR, DEFAULT_CONFIG_FILENAME, load_config, resolve_config_path

__all__ = [
    "SharingConfig",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_FILENAME",
    "load_config",
    "resolve_config_path",
]
