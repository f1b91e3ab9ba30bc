"""Tests for crop settings loading and validation."""

import pytest
from jsonschema import ValidationError

from starling import config
from starling.errors import SettingsError, SettingsValidationError
from starling.settings import CropSettings
from starling.settings.schema import (
    DEFAULT_CROP_SETTINGS,
    merge_with_defaults,
    validate_settings,
)


def test_defaults_match_config():
    settings = CropSettings()
    assert settings.min_size == config.CROP_MIN_SIZE_PX
    assert settings.threshold == config.CROP_THRESHOLD_PX
    assert settings.zoom_out_delay_ms == config.CROP_ZOOM_OUT_DELAY_MS
    assert CropSettings.from_mapping() == settings


def test_partial_crop_section():
    """A bare crop section is merged over the defaults."""
    settings = CropSettings.from_mapping({"min_size": 32, "threshold": 40})
    assert settings.min_size == 32
    assert settings.threshold == 40
    assert settings.handler_bounds == config.CROP_HANDLER_BOUNDS_PX


def test_full_document():
    document = {"schema": "starling/crop-settings@1", "crop": {"scale_fraction": 0.5}}
    assert CropSettings.from_mapping(document).scale_fraction == 0.5


def test_invalid_value_raises():
    with pytest.raises(SettingsValidationError):
        CropSettings.from_mapping({"threshold": "far"})


def test_unknown_key_raises():
    with pytest.raises(SettingsError):
        CropSettings.from_mapping({"crop": {"unknown": 1}})


def test_fraction_out_of_range_raises():
    with pytest.raises(SettingsValidationError):
        CropSettings.from_mapping({"zoom_in_fraction": 1.5})


def test_as_mapping_is_valid():
    document = CropSettings(min_size=48.0).as_mapping()
    validate_settings(document)
    assert document["crop"]["min_size"] == 48.0


def test_merge_with_defaults_does_not_mutate_defaults():
    merged = merge_with_defaults({"crop": {"threshold": 10}})
    assert merged["crop"]["threshold"] == 10
    assert DEFAULT_CROP_SETTINGS["crop"]["threshold"] == config.CROP_THRESHOLD_PX


def test_wrong_schema_tag_rejected():
    with pytest.raises(ValidationError):
        validate_settings({"schema": "other@1", "crop": {}})
