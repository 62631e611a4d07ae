from .config_loader import load_wiring_config, resolve_config_dir
from .wiring_config import DEFAULT_APP_NAME, LoggingSettings, WiringConfig

__all__ = [
    "DEFAULT_APP_NAME",
    "LoggingSettings",
    "WiringConfig",
    "load_wiring_config",
    "resolve_config_dir",
]
