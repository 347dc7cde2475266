"""Axis scale and gridline labels for the comparison chart."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from common.logging import get_logger

from .errors import InvalidMagnitudeError
from .formatting import (
    DEFAULT_SIGNIFICANT_DIGITS,
    FormattedResult,
    convert_height_for_grid_imperial,
    convert_height_precision,
)
from .precision import Precision
from .selector import get_best_unit, get_imperial_grid_unit_label
from .units import ensure_length

DEFAULT_MAX_HEIGHT_M = 2.0
CHART_PADDING_PX = 70.0
GRID_LINE_COUNT = 21

logger = get_logger("height_compare.chart")


@dataclass(frozen=True)
class GridLine:
    fraction: float
    pixel_offset: float
    meters: float
    metric: FormattedResult
    imperial: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "fraction": self.fraction,
            "pixel_offset": self.pixel_offset,
            "meters": self.meters,
            "metric": self.metric.to_dict(),
            "imperial": self.imperial,
        }


@dataclass(frozen=True)
class GridScale:
    pixels_per_meter: float
    max_height_m: float
    metric_unit: str
    imperial_label: str
    lines: List[GridLine] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "pixels_per_meter": self.pixels_per_meter,
            "max_height_m": self.max_height_m,
            "metric_unit": self.metric_unit,
            "imperial_label": self.imperial_label,
            "lines": [line.to_dict() for line in self.lines],
        }


def max_height_in_comparison(
    heights: Iterable[float], *, default: float = DEFAULT_MAX_HEIGHT_M
) -> float:
    """Tallest height in meters, or ``default`` for an empty comparison."""

    values = [ensure_length(height, name="height") for height in heights]
    if not values:
        return ensure_length(default, name="default")
    return max(values)


def pixels_per_meter(
    chart_height_px: float,
    max_height_m: float,
    *,
    padding_px: float = CHART_PADDING_PX,
) -> float:
    """Scale that fits ``max_height_m`` into the chart minus its padding."""

    chart_height = ensure_length(chart_height_px, name="chart_height_px")
    available = chart_height - ensure_length(padding_px, name="padding_px")
    if available <= 0:
        raise InvalidMagnitudeError(
            f"Chart height {chart_height} px leaves no room after {padding_px} px padding."
        )
    ratio = Precision.from_value(available).divide(
        Precision.from_value(ensure_length(max_height_m, name="max_height_m"))
    )
    logger.debug(
        "scale ratio available=%s max_height=%s ratio=%s", available, max_height_m, ratio
    )
    return ratio.to_number()


def height_to_pixels(meters: float, pixels_per_m: float) -> float:
    length = ensure_length(meters, name="meters")
    scale = ensure_length(pixels_per_m, name="pixels_per_m")
    return Precision.from_value(length).multiply(scale).to_number()


def apply_zoom(pixels_per_m: float, delta: float) -> float:
    """Grow or shrink a scale by ``delta`` (``0.1`` zooms in ten percent)."""

    scale = Precision.from_value(ensure_length(pixels_per_m, name="pixels_per_m"))
    zoomed = scale.value + scale.multiply(delta).value
    if zoomed <= 0:
        raise InvalidMagnitudeError("Zoom would collapse the chart scale.")
    return Precision.from_value(zoomed).to_number()


def build_grid(
    chart_height_px: float,
    heights: Iterable[float],
    *,
    pixels_per_m: Optional[float] = None,
    line_count: int = GRID_LINE_COUNT,
    padding_px: float = CHART_PADDING_PX,
    default_max_height_m: float = DEFAULT_MAX_HEIGHT_M,
    precision: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> GridScale:
    """Gridlines sharing one metric unit and one imperial band per chart."""

    if line_count < 2:
        raise InvalidMagnitudeError("A grid needs at least two lines.")
    chart_height = ensure_length(chart_height_px, name="chart_height_px")
    max_height = max_height_in_comparison(heights, default=default_max_height_m)
    if pixels_per_m is None:
        scale = pixels_per_meter(chart_height, max_height, padding_px=padding_px)
    else:
        scale = ensure_length(pixels_per_m, name="pixels_per_m")
    if scale == 0:
        raise InvalidMagnitudeError("pixels_per_m must be positive.")

    metric_unit = get_best_unit(max_height, is_metric=True)
    scale_precision = Precision.from_value(scale)
    lines: List[GridLine] = []
    for index in range(line_count):
        fraction = index / (line_count - 1)
        pixel_offset = chart_height * fraction
        meters = Precision.from_value(pixel_offset).divide(scale_precision).to_number()
        lines.append(
            GridLine(
                fraction=fraction,
                pixel_offset=pixel_offset,
                meters=meters,
                metric=convert_height_precision(meters, metric_unit, precision=precision),
                imperial=convert_height_for_grid_imperial(
                    meters, max_height, precision=precision
                ),
            )
        )
    return GridScale(
        pixels_per_meter=scale,
        max_height_m=max_height,
        metric_unit=metric_unit.value,
        imperial_label=get_imperial_grid_unit_label(max_height),
        lines=lines,
    )


__all__ = [
    "DEFAULT_MAX_HEIGHT_M",
    "CHART_PADDING_PX",
    "GRID_LINE_COUNT",
    "GridLine",
    "GridScale",
    "max_height_in_comparison",
    "pixels_per_meter",
    "height_to_pixels",
    "apply_zoom",
    "build_grid",
]
