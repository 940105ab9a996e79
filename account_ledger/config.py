"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal
from typing import Optional

from pydantic import validator
from pydantic_settings import BaseSettings


class LedgerConfig(BaseSettings):
    """Account ledger configuration"""

    # Balance configuration
    initial_balance: Decimal = Decimal("1000.00")
    currency_symbol: str = "$"

    # Logging configuration
    log_level: str = "WARNING"  # The menu owns stdout, keep logs quiet by default
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    @validator("initial_balance")
    def initial_balance_not_negative(cls, value):
        if value < 0:
            raise ValueError("initial_balance must not be negative")
        return value

    @validator("log_level")
    def log_level_known(cls, value):
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @validator("log_format")
    def log_format_known(cls, value):
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value

    class Config:
        env_prefix = "LEDGER_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = LedgerConfig()


def get_config() -> LedgerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> LedgerConfig:
    """Reload configuration from environment"""
    global config
    config = LedgerConfig()
    return config
