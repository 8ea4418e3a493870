"""Config settings – 12-factor env-based configuration."""
from mailpeek.config.settings.base import (
    DEVELOPMENT,
    OUTPUT_DIR_ENV,
    MailPeekSettings,
    Settings,
    default_output_dir,
)
from mailpeek.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "DEVELOPMENT",
    "OUTPUT_DIR_ENV",
    "EnvSettingsLoader",
    "MailPeekSettings",
    "Settings",
    "SettingsLoader",
    "default_output_dir",
]
