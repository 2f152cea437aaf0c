from .loader import (
    BrowserSettings,
    ConfigError,
    Credentials,
    SuiteConfig,
    UploadSettings,
    load_config,
)

__all__ = [
    "BrowserSettings",
    "ConfigError",
    "Credentials",
    "SuiteConfig",
    "UploadSettings",
    "load_config",
]
