"""Configuration loaded from environment variables."""

import os


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _get_env_bool(key: str, default: str) -> bool:
    """Get boolean environment variable with validation."""
    value = os.getenv(key, default).strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value for {key}")


def _get_env_log_level(key: str, default: str) -> str:
    """Get logging level name with validation."""
    value = os.getenv(key, default).strip().upper()
    if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"Invalid log level for {key}")
    return value


class Config:
    """Centralized configuration from environment variables."""

    # Backing file for the solution cache (.json selects the JSON backend)
    QA_CACHE_FILE: str = os.getenv("QA_CACHE_FILE", "m2k-qacache.yaml")

    # Passwords are never written to disk unless explicitly enabled
    QA_PERSIST_PASSWORDS: bool = _get_env_bool("QA_PERSIST_PASSWORDS", "false")

    # metadata.name of written cache documents
    QA_CACHE_NAME: str = os.getenv("QA_CACHE_NAME", "qacache")

    # Logging
    LOG_LEVEL: str = _get_env_log_level("LOG_LEVEL", "INFO")


config = Config()
