"""
Configuration for Tasrif
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List


DEFAULT_CORS_ORIGINS: List[str] = []


def _env_list(name: str, default: List[str]) -> List[str]:
    value = os.environ.get(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(',') if item.strip()]


@dataclass
class Settings:
    """Runtime settings, each overridable by a TASRIF_* environment variable."""

    # Server
    host: str = field(default_factory=lambda: os.environ.get('TASRIF_HOST', '127.0.0.1'))
    port: int = field(default_factory=lambda: int(os.environ.get('TASRIF_PORT', '8000')))
    cors_origins: List[str] = field(
        default_factory=lambda: _env_list('TASRIF_CORS_ORIGINS', DEFAULT_CORS_ORIGINS)
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.environ.get('TASRIF_LOG_LEVEL', 'INFO').upper())

    # Initial state of the tabs
    default_root: str = field(default_factory=lambda: os.environ.get('TASRIF_DEFAULT_ROOT', 'كتب'))
    default_irregular: str = field(
        default_factory=lambda: os.environ.get('TASRIF_DEFAULT_IRREGULAR', 'hollow')
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read from the environment once."""
    return Settings()
