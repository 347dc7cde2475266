"""Height comparison API with standardized responses."""

from __future__ import annotations

from typing import Literal

from flask import Blueprint, Response, current_app, request
from pydantic import Field

from common.errors import AppError, UnprocessableAppError, ValidationAppError
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    DivisionByZeroError,
    HeightCompareError,
    HeightCompareSettings,
    InvalidMagnitudeError,
    MAX_SIGNIFICANT_DIGITS,
    Unit,
    UnsupportedUnitError,
    apply_zoom,
    build_grid,
    coerce_display_unit,
    convert_height,
    convert_height_precision,
    convert_height_smart,
    convert_height_smart_imperial,
    get_best_unit,
    list_unit_systems,
    load_settings,
    max_height_in_comparison,
    pixels_per_meter,
    to_meters,
    to_unit,
)


class ConvertPayload(SchemaModel):
    value: float | int
    unit: str
    direction: Literal["to_meters", "to_unit"] = "to_meters"


class FormatPayload(SchemaModel):
    meters: float | int
    unit: str = Unit.CM.value
    significant_digits: int | None = Field(default=None, ge=1, le=MAX_SIGNIFICANT_DIGITS)


class PrecisionPayload(SchemaModel):
    meters: float | int
    unit: str
    significant_digits: int | None = Field(default=None, ge=1, le=MAX_SIGNIFICANT_DIGITS)


class ChartPayload(SchemaModel):
    chart_height_px: float | int
    heights: list[float | int] = Field(default_factory=list)
    pixels_per_m: float | int | None = None
    zoom_steps: int = Field(default=0, ge=-50, le=50)
    significant_digits: int | None = Field(default=None, ge=1, le=MAX_SIGNIFICANT_DIGITS)


api_bp = Blueprint("height_compare_api", __name__, url_prefix="/api/height_compare")


def _settings() -> HeightCompareSettings:
    return load_settings(current_app.config.get("PLUGIN_SETTINGS", {}).get("height_compare"))


def _core_error(exc: HeightCompareError) -> AppError:
    if isinstance(exc, UnsupportedUnitError):
        return ValidationAppError(message=str(exc), code="height.unsupported_unit")
    if isinstance(exc, DivisionByZeroError):
        return UnprocessableAppError(message=str(exc), code="height.division_by_zero")
    if isinstance(exc, InvalidMagnitudeError):
        return ValidationAppError(message=str(exc), code="height.invalid_magnitude")
    return ValidationAppError(message=str(exc), code="height.invalid_request")


def _invalid_request(exc: ValidationError) -> Response:
    return fail(
        ValidationAppError(
            message=str(exc),
            code="height.invalid_request",
            details=getattr(exc, "details", None),
        )
    )


@api_bp.get("/units")
def units_endpoint() -> Response:
    return ok(
        {
            "unit_systems": list_unit_systems(),
            "display_units": [unit.value for unit in Unit],
        }
    )


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    try:
        payload = parse_model(ConvertPayload, request.get_json(silent=True))
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        if payload.direction == "to_meters":
            result = {"value": to_meters(payload.value, payload.unit), "unit": "m"}
        else:
            result = {"value": to_unit(payload.value, payload.unit), "unit": payload.unit}
    except HeightCompareError as exc:
        return fail(_core_error(exc))
    return ok(result)


@api_bp.post("/format")
def format_endpoint() -> Response:
    try:
        payload = parse_model(FormatPayload, request.get_json(silent=True))
    except ValidationError as exc:
        return _invalid_request(exc)
    digits = payload.significant_digits or _settings().significant_digits
    try:
        display = coerce_display_unit(payload.unit)
        result = {
            "meters": payload.meters,
            "unit": display.value,
            "formatted": convert_height(payload.meters, display, precision=digits),
            "metric": convert_height_smart(payload.meters, True, precision=digits),
            "imperial": convert_height_smart_imperial(payload.meters, precision=digits),
            "best_unit": {
                "metric": get_best_unit(payload.meters, True).value,
                "imperial": get_best_unit(payload.meters, False).value,
            },
        }
    except HeightCompareError as exc:
        return fail(_core_error(exc))
    return ok(result)


@api_bp.post("/precision")
def precision_endpoint() -> Response:
    try:
        payload = parse_model(PrecisionPayload, request.get_json(silent=True))
    except ValidationError as exc:
        return _invalid_request(exc)
    digits = payload.significant_digits or _settings().significant_digits
    try:
        result = convert_height_precision(payload.meters, payload.unit, precision=digits)
    except HeightCompareError as exc:
        return fail(_core_error(exc))
    return ok(result.to_dict())


@api_bp.post("/chart")
def chart_endpoint() -> Response:
    try:
        payload = parse_model(ChartPayload, request.get_json(silent=True))
    except ValidationError as exc:
        return _invalid_request(exc)
    settings = _settings()
    if len(payload.heights) > settings.max_heights:
        return fail(
            ValidationAppError(
                message=f"At most {settings.max_heights} heights can be compared.",
                code="height.too_many_heights",
            )
        )
    try:
        scale = payload.pixels_per_m
        if payload.zoom_steps:
            if scale is None:
                max_height = max_height_in_comparison(
                    payload.heights, default=settings.default_max_height_m
                )
                scale = pixels_per_meter(
                    payload.chart_height_px,
                    max_height,
                    padding_px=settings.chart_padding_px,
                )
            step = settings.zoom_step if payload.zoom_steps > 0 else -settings.zoom_step
            for _ in range(abs(payload.zoom_steps)):
                scale = apply_zoom(scale, step)
        grid = build_grid(
            payload.chart_height_px,
            payload.heights,
            pixels_per_m=scale,
            line_count=settings.grid_lines,
            padding_px=settings.chart_padding_px,
            default_max_height_m=settings.default_max_height_m,
            precision=payload.significant_digits or settings.significant_digits,
        )
    except HeightCompareError as exc:
        return fail(_core_error(exc))
    return ok(grid.to_dict())


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "units_endpoint",
    "convert_endpoint",
    "format_endpoint",
    "precision_endpoint",
    "chart_endpoint",
]
