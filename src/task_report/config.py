"""
Configuration module for the task-report system.

Single source of truth for:
- Logging settings
- API bind address

All values can be overridden via environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class Config:
    """
    Runtime configuration for the task-report system.

    All fields default from environment variables but can be overridden
    programmatically by constructing Config(...) manually if needed.
    """

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # HTTP API (uvicorn)
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @classmethod
    def from_env(cls) -> "Config":
        """
        Construct a Config object by reading environment variables.

        Environment variables (all optional):
        - TR_LOG_LEVEL  (DEBUG, INFO, WARNING, ...)
        - TR_LOG_FILE   (path; adds a file sink)
        - TR_API_HOST
        - TR_API_PORT   (int)
        """
        return cls(
            log_level=_get_env_str("TR_LOG_LEVEL", default="INFO").upper(),
            log_file=os.getenv("TR_LOG_FILE") or None,
            api_host=_get_env_str("TR_API_HOST", default="127.0.0.1"),
            api_port=_get_env_int("TR_API_PORT", default=8000),
        )


_DEFAULT_CONFIG: Optional[Config] = None


def get_config(force_reload: bool = False) -> Config:
    """
    Return a process-wide Config instance.

    Use `force_reload=True` if environment variables changed at runtime
    and you want to refresh.
    """
    global _DEFAULT_CONFIG
    if _DEFAULT_CONFIG is None or force_reload:
        _DEFAULT_CONFIG = Config.from_env()
    return _DEFAULT_CONFIG
