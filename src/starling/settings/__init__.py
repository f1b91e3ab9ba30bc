"""Typed access to the crop engine tunables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from jsonschema import ValidationError

from .. import config
from ..errors import SettingsValidationError
from .schema import CROP_SETTINGS_SCHEMA, DEFAULT_CROP_SETTINGS, merge_with_defaults


@dataclass(frozen=True)
class CropSettings:
    """Pixel sizes and delays used by the crop engine."""

    min_size: float = config.CROP_MIN_SIZE_PX
    handler_bounds: float = config.CROP_HANDLER_BOUNDS_PX
    threshold: float = config.CROP_THRESHOLD_PX
    base_translate: float = config.CROP_BASE_TRANSLATE_PX
    auto_pan_interval_ms: int = config.CROP_AUTO_PAN_INTERVAL_MS
    zoom_out_delay_ms: int = config.CROP_ZOOM_OUT_DELAY_MS
    zoom_out_repeat_ms: int = config.CROP_ZOOM_OUT_REPEAT_MS
    zoom_in_fraction: float = config.CROP_ZOOM_IN_FRACTION
    scale_fraction: float = config.CROP_SCALE_FRACTION

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None = None) -> CropSettings:
        """Build settings from a (partial) settings document.

        *values* may either be a full document (``{"schema": ..., "crop":
        {...}}``) or just the ``crop`` section.
        """

        payload: dict[str, Any] | None = None
        if values:
            payload = dict(values)
            if "crop" not in payload and "schema" not in payload:
                payload = {"crop": payload}
        try:
            merged = merge_with_defaults(payload)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc
        return cls(**merged["crop"])

    def as_mapping(self) -> dict[str, Any]:
        """Export the settings as a full, valid settings document."""

        return {"schema": DEFAULT_CROP_SETTINGS["schema"], "crop": asdict(self)}


__all__ = ["CROP_SETTINGS_SCHEMA", "CropSettings"]
