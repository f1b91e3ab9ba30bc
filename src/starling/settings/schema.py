"""Schema helpers for the crop engine tunables."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from .. import config

CROP_SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "starling/crop-settings.schema.json",
    "type": "object",
    "required": ["schema", "crop"],
    "properties": {
        "schema": {"const": "starling/crop-settings@1"},
        "crop": {
            "type": "object",
            "properties": {
                "min_size": {"type": "number", "exclusiveMinimum": 0},
                "handler_bounds": {"type": "number", "minimum": 0},
                "threshold": {"type": "number", "minimum": 0},
                "base_translate": {"type": "number", "minimum": 0},
                "auto_pan_interval_ms": {"type": "integer", "minimum": 1},
                "zoom_out_delay_ms": {"type": "integer", "minimum": 0},
                "zoom_out_repeat_ms": {"type": "integer", "minimum": 1},
                "zoom_in_fraction": {
                    "type": "number",
                    "exclusiveMinimum": 0,
                    "maximum": 1,
                },
                "scale_fraction": {
                    "type": "number",
                    "exclusiveMinimum": 0,
                    "maximum": 1,
                },
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": True,
}

DEFAULT_CROP_SETTINGS: dict[str, Any] = {
    "schema": "starling/crop-settings@1",
    "crop": {
        "min_size": config.CROP_MIN_SIZE_PX,
        "handler_bounds": config.CROP_HANDLER_BOUNDS_PX,
        "threshold": config.CROP_THRESHOLD_PX,
        "base_translate": config.CROP_BASE_TRANSLATE_PX,
        "auto_pan_interval_ms": config.CROP_AUTO_PAN_INTERVAL_MS,
        "zoom_out_delay_ms": config.CROP_ZOOM_OUT_DELAY_MS,
        "zoom_out_repeat_ms": config.CROP_ZOOM_OUT_REPEAT_MS,
        "zoom_in_fraction": config.CROP_ZOOM_IN_FRACTION,
        "scale_fraction": config.CROP_SCALE_FRACTION,
    },
}

_validator = Draft202012Validator(CROP_SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_CROP_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_CROP_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "crop" and isinstance(value, dict):
                target = merged.setdefault("crop", {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the crop settings schema."""

    _validator.validate(data)


__all__ = [
    "CROP_SETTINGS_SCHEMA",
    "DEFAULT_CROP_SETTINGS",
    "merge_with_defaults",
    "validate_settings",
]
