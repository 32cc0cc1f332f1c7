"""Runtime configuration settings."""

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RuntimeConfig(BaseSettings):
    """Logging switches for a provisioning run."""

    debug: bool = Field(False, alias="DEBUG")
    log_level: LogLevel = Field("WARNING", alias="LOG_LEVEL")
    log_file_name: str = "tilewm-setup.log"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Accept level names in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    def console_level(self, verbose: bool = False) -> int:
        """Level for console output; --verbose and DEBUG both force debug output."""
        if verbose or self.debug:
            return logging.DEBUG
        return logging.getLevelNamesMapping()[self.log_level]

    def file_level(self, verbose: bool = False) -> int:
        """The run log always keeps INFO, and DEBUG when verbose."""
        return logging.DEBUG if verbose or self.debug else logging.INFO
