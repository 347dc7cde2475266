"""Configuration helpers for the height comparison plugin."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

from .chart import CHART_PADDING_PX, DEFAULT_MAX_HEIGHT_M, GRID_LINE_COUNT
from .formatting import DEFAULT_SIGNIFICANT_DIGITS, MAX_SIGNIFICANT_DIGITS


@dataclass(frozen=True)
class HeightCompareSettings:
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS
    chart_padding_px: float = CHART_PADDING_PX
    grid_lines: int = GRID_LINE_COUNT
    default_max_height_m: float = DEFAULT_MAX_HEIGHT_M
    zoom_step: float = 0.1
    max_heights: int = 500


def _int_setting(
    raw: Mapping[str, object],
    key: str,
    default: int,
    *,
    minimum: int,
    maximum: int | None = None,
) -> int:
    try:
        value = int(float(raw.get(key, default)))
    except (TypeError, ValueError, OverflowError):
        return default
    if value < minimum or (maximum is not None and value > maximum):
        return default
    return value


def _float_setting(raw: Mapping[str, object], key: str, default: float) -> float:
    try:
        value = float(raw.get(key, default))
    except (TypeError, ValueError):
        return default
    if not math.isfinite(value) or value < 0:
        return default
    return value


def load_settings(raw: Mapping[str, object] | None) -> HeightCompareSettings:
    raw = raw or {}
    default_max = _float_setting(raw, "default_max_height_m", DEFAULT_MAX_HEIGHT_M)
    zoom_step = _float_setting(raw, "zoom_step", 0.1)
    return HeightCompareSettings(
        significant_digits=_int_setting(
            raw,
            "significant_digits",
            DEFAULT_SIGNIFICANT_DIGITS,
            minimum=1,
            maximum=MAX_SIGNIFICANT_DIGITS,
        ),
        chart_padding_px=_float_setting(raw, "chart_padding_px", CHART_PADDING_PX),
        grid_lines=_int_setting(raw, "grid_lines", GRID_LINE_COUNT, minimum=2),
        default_max_height_m=default_max if default_max > 0 else DEFAULT_MAX_HEIGHT_M,
        zoom_step=zoom_step if 0 < zoom_step < 1 else 0.1,
        max_heights=_int_setting(raw, "max_heights", 500, minimum=1),
    )


__all__ = ["HeightCompareSettings", "load_settings"]
