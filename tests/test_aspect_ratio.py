"""Tests for AspectRatio conversions."""

import pytest

from starling.crop.aspect_ratio import AspectRatio


def test_free_ratio_passes_values_through():
    assert AspectRatio.FREE.is_free
    assert AspectRatio.FREE.vertical_for(42.0) == 42.0
    assert AspectRatio.FREE.horizontal_for(-7.0) == -7.0
    assert AspectRatio.FREE.size_within(300.0, 100.0) == (300.0, 100.0)


def test_conversions_are_inverse():
    ratio = AspectRatio.FOUR_THREE
    assert ratio.vertical_for(400.0) == pytest.approx(300.0)
    assert ratio.horizontal_for(300.0) == pytest.approx(400.0)
    assert ratio.horizontal_for(ratio.vertical_for(123.0)) == pytest.approx(123.0)


def test_size_within_width_limited():
    """A wide target is limited by its width."""
    width, height = AspectRatio.FOUR_THREE.size_within(400.0, 1000.0)
    assert (width, height) == pytest.approx((400.0, 300.0))


def test_size_within_height_limited():
    """A tall ratio in a square target is limited by the height."""
    width, height = AspectRatio("PORTRAIT", 3, 4).size_within(1000.0, 1000.0)
    assert height == pytest.approx(1000.0)
    assert width == pytest.approx(750.0)


def test_unbound_original_behaves_as_free():
    assert AspectRatio.ORIGINAL.is_original
    assert AspectRatio.ORIGINAL.is_free


def test_bind_original_to_image_size():
    """Only ORIGINAL picks up the bound proportions."""
    bound = AspectRatio.ORIGINAL.bind(1920, 1080)
    assert bound.is_original
    assert not bound.is_free
    assert bound.vertical_for(1920.0) == pytest.approx(1080.0)
    assert AspectRatio.SQUARE.bind(1920, 1080) is AspectRatio.SQUARE


def test_labels():
    assert AspectRatio.FREE.label == "Free"
    assert AspectRatio.ORIGINAL.label == "Original"
    assert AspectRatio.SIXTEEN_NINE.label == "16:9"


def test_presets_order():
    presets = AspectRatio.presets()
    assert presets[0] is AspectRatio.FREE
    assert presets[1] is AspectRatio.ORIGINAL
    assert AspectRatio.TWENTYONE_NINE in presets
