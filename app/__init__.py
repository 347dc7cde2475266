"""Application factory for the Height Compare server."""

from __future__ import annotations

import importlib
from pathlib import Path

import yaml
from flask import Flask
from werkzeug.exceptions import HTTPException

from common.errors import AppError, ensure_app_error, from_http_exception
from common.logging import configure_level, get_logger, install_request_logging
from common.responses import fail, ok

from . import config as config_module
from .blueprints import register_plugin_blueprints

logger = get_logger("height_compare.app")


def _load_yaml_config(path: Path) -> dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _load_manifests(plugin_names: list[str], plugin_settings: dict) -> list[dict]:
    manifests: list[dict] = []
    for name in plugin_names:
        module = importlib.import_module(f"plugins.{name}")
        manifest = getattr(module, "manifest", None)
        if not manifest:
            continue
        entry = dict(manifest)
        overrides = plugin_settings.get(name) or {}
        if overrides.get("summary"):
            entry["summary"] = overrides["summary"]
        manifests.append(entry)
    manifests.sort(key=lambda item: item["title"].lower())
    return manifests


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_module.BaseConfig)
    if config_name:
        config_obj = getattr(config_module, config_name, None)
        if config_obj is None:
            raise ValueError(f"Unknown configuration '{config_name}'.")
        app.config.from_object(config_obj)

    yaml_config = _load_yaml_config(config_module.config_path())
    site_settings = yaml_config.get("site") or {}
    plugin_settings = yaml_config.get("plugins") or {}
    app.config["SITE_SETTINGS"] = site_settings
    app.config["PLUGIN_SETTINGS"] = plugin_settings

    configure_level(site_settings.get("log_level") or app.config["LOG_LEVEL"])
    install_request_logging(app)

    disabled = site_settings.get("disabled_plugins") or []
    plugin_names = register_plugin_blueprints(app, disabled=disabled)
    app.config["PLUGIN_MANIFESTS"] = _load_manifests(plugin_names, plugin_settings)
    logger.info("registered plugins: %s", ", ".join(plugin_names) or "none")

    @app.after_request
    def apply_response_headers(response):
        """Attach strict security headers to every outgoing response."""

        for header, value in app.config.get("RESPONSE_HEADERS", {}).items():
            if header not in response.headers:
                response.headers[header] = value
        return response

    @app.get("/")
    def home():
        return ok(
            {
                "name": site_settings.get("name", "Height Compare"),
                "plugins": app.config["PLUGIN_MANIFESTS"],
            }
        )

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError):
        return fail(error)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return fail(from_http_exception(error))

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):  # pragma: no cover - last resort
        logger.exception("unhandled error")
        return fail(ensure_app_error(error, fallback_code="internal_error"))

    return app


__all__ = ["create_app"]
