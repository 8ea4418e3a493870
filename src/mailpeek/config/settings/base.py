"""Config settings – Settings base class and MailPeekSettings."""
from __future__ import annotations

import dataclasses
import os
import tempfile

from mailpeek.config.validation import InvalidSettingValueError

#: Environment variable overriding the directory preview files are written to.
OUTPUT_DIR_ENV = "MAILPEEK_DIR"

DEVELOPMENT = "development"


def default_output_dir() -> str:
    """Return ``$MAILPEEK_DIR`` when set, else the platform temp directory."""
    value = os.environ.get(OUTPUT_DIR_ENV)
    if value is not None:
        return value
    return tempfile.gettempdir()


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class MailPeekSettings(Settings):
    """Settings for :class:`~mailpeek.application.email.FileSender`.

    Read from ``MAILPEEK_DIR``, ``MAILPEEK_OPEN``, ``MAILPEEK_ONLY`` and
    ``MAILPEEK_ENV`` by :class:`~mailpeek.config.settings.EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = "MAILPEEK"

    dir: str = dataclasses.field(default_factory=default_output_dir)
    open: bool = True
    only: list[str] = dataclasses.field(default_factory=list)
    env: str = DEVELOPMENT

    def _validate(self) -> None:
        if not self.dir:
            raise InvalidSettingValueError("dir", self.dir, "output directory must not be empty")

    @property
    def is_development(self) -> bool:
        return self.env in ("", DEVELOPMENT)


__all__ = ["DEVELOPMENT", "OUTPUT_DIR_ENV", "MailPeekSettings", "Settings", "default_output_dir"]
