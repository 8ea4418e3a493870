"""Config – 12-factor settings and loaders."""

from mailpeek.config.settings import (
    EnvSettingsLoader,
    MailPeekSettings,
    Settings,
    SettingsLoader,
    default_output_dir,
)
from mailpeek.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MailPeekSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "default_output_dir",
]
