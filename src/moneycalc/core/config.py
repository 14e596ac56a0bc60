#!/usr/bin/env python3
"""
Configuration Management for Money Calculator

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dotenv import load_dotenv

from .currency import DEFAULT_CURRENCY_CODE

# Load environment variables from .env file
load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Main configuration class for the money calculator.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Currency assigned to amounts created without an explicit code
    default_currency: str = DEFAULT_CURRENCY_CODE

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("MONEYCALC_ENV", "development"))

        return cls(
            environment=env,
            default_currency=os.getenv("MONEYCALC_DEFAULT_CURRENCY", DEFAULT_CURRENCY_CODE).strip(),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.default_currency:
            errors.append("MONEYCALC_DEFAULT_CURRENCY must not be empty")
        elif any(ch.isspace() for ch in self.default_currency):
            errors.append(f"MONEYCALC_DEFAULT_CURRENCY must not contain whitespace: {self.default_currency!r}")

        if self.log_level not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)
        if self.debug:
            level = logging.DEBUG

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            _config = None
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def get_default_currency() -> str:
    """
    Get the currency code used when none is supplied.

    Reads MONEYCALC_DEFAULT_CURRENCY directly so that creating a value never
    depends on the rest of the configuration being valid. Blank falls back to RUB.
    """
    return os.getenv("MONEYCALC_DEFAULT_CURRENCY", DEFAULT_CURRENCY_CODE).strip() or DEFAULT_CURRENCY_CODE


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
