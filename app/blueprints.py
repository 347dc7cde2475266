"""Plugin discovery and blueprint registration."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Collection, Iterable, Iterator

from flask import Blueprint, Flask

from common.logging import get_logger

PLUGIN_PACKAGE = "plugins"

logger = get_logger("height_compare.app")


def iter_plugin_packages(package: str = PLUGIN_PACKAGE) -> Iterator[str]:
    """Yield dotted import paths for every plugin package."""

    package_path = Path(__file__).resolve().parent.parent / package
    if not package_path.exists():
        return
    for module_info in pkgutil.iter_modules([str(package_path)]):
        if module_info.ispkg:
            yield f"{package}.{module_info.name}"


def _plugin_blueprints(dotted: str) -> Iterable[Blueprint]:
    module = importlib.import_module(f"{dotted}.api")
    module_blueprints = getattr(module, "blueprints", None)
    if module_blueprints:
        return list(module_blueprints)
    blueprint = getattr(module, "bp", None)
    return [blueprint] if blueprint is not None else []


def register_plugin_blueprints(app: Flask, *, disabled: Collection[str] = ()) -> list[str]:
    """Register every enabled plugin's blueprints and return the plugin names."""

    registered: list[str] = []
    for dotted in iter_plugin_packages():
        name = dotted.rsplit(".", 1)[-1]
        if name in disabled:
            logger.info("plugin %s disabled by configuration", name)
            continue
        for bp in _plugin_blueprints(dotted):
            app.register_blueprint(bp)
        registered.append(name)
    return registered


__all__ = ["PLUGIN_PACKAGE", "iter_plugin_packages", "register_plugin_blueprints"]
