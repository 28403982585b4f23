from .config import (
    AppConfig,
    MySQLConfig,
    Settings,
    TestingConfig,
    load_config,
    settings,
)

__all__ = [
    "AppConfig",
    "MySQLConfig",
    "TestingConfig",
    "Settings",
    "load_config",
    "settings",
]
