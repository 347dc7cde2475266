"""Configuration classes for the Flask application."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yml"


def config_path() -> Path:
    """Return the YAML settings file, honouring ``HEIGHT_COMPARE_CONFIG``."""

    override = os.environ.get("HEIGHT_COMPARE_CONFIG")
    if override:
        return Path(override)
    return DEFAULT_CONFIG_PATH


class BaseConfig:
    MAX_CONTENT_LENGTH = 256 * 1024  # request bodies are small JSON documents
    LOG_LEVEL = os.environ.get("HEIGHT_COMPARE_LOG_LEVEL", "INFO")
    RESPONSE_HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
        "Referrer-Policy": "no-referrer",
        "Cache-Control": "no-store",
    }


class TestingConfig(BaseConfig):
    TESTING = True
    LOG_LEVEL = "WARNING"


__all__ = ["BaseConfig", "TestingConfig", "config_path"]
