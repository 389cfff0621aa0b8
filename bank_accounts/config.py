"""Configuration management for the bank accounts package."""

import os
from dataclasses import dataclass

from .logging_config import LOG_FORMATS


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Runtime settings for the bank accounts CLI."""

    log_level: str = "WARNING"
    log_format: str = "standard"

    def __post_init__(self):
        """Normalize and validate settings after creation."""
        self.log_level = self.log_level.upper()
        self.log_format = self.log_format.lower()

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"Invalid log format: {self.log_format}")

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from BANK_LOG_LEVEL
            and BANK_LOG_FORMAT, falling back to the defaults.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """
        return cls(
            log_level=os.getenv('BANK_LOG_LEVEL', cls.log_level),
            log_format=os.getenv('BANK_LOG_FORMAT', cls.log_format),
        )
