"""Tests for the CropOverlayModel."""

import pytest
from PySide6.QtCore import QRect, QRectF

from starling.crop.aspect_ratio import AspectRatio
from starling.crop.box import Edges
from starling.crop.overlay import CropOverlayModel


@pytest.fixture
def zooms():
    return []


@pytest.fixture
def overlay(zooms):
    """Create an overlay that records zoom requests."""
    return CropOverlayModel(on_zoom=lambda center, out: zooms.append((center, out)))


def test_uninitialised_overlay_is_inert(overlay):
    assert overlay.box is None
    assert not overlay.start_move(10, 10)
    assert not overlay.on_move(20, 20)
    assert overlay.end_move() == []
    assert overlay.outline == QRect()
    assert overlay.zoom_level == 1.0
    assert not overlay.is_touched()


def test_initialize_free_fills_viewport(overlay, viewport):
    box = overlay.initialize(viewport)
    assert box.edges == Edges(0.0, 0.0, 1000.0, 1000.0)
    assert box.min_dimens == 64.0
    assert overlay.outline == QRect(0, 0, 1000, 1000)
    assert not overlay.is_touched()


def test_initialize_binds_original_ratio(overlay):
    overlay.initialize(QRectF(0, 0, 800, 600), AspectRatio.ORIGINAL)
    assert overlay.aspect_ratio.is_original
    assert not overlay.aspect_ratio.is_free
    assert overlay.aspect_ratio.vertical_for(800.0) == pytest.approx(600.0)
    assert overlay.engine.aspect_ratio == overlay.aspect_ratio


def test_update_ratio_rebuilds_box(overlay):
    overlay.initialize(QRectF(0, 0, 800, 600))
    box = overlay.update_ratio(AspectRatio.SQUARE)
    assert box.edges == pytest.approx(Edges(100.0, 0.0, 700.0, 600.0))
    assert overlay.engine.box is box


def test_reset_rebinds_original(overlay):
    overlay.initialize(QRectF(0, 0, 800, 600), AspectRatio.ORIGINAL)
    overlay.reset(QRectF(0, 0, 400, 400))
    assert overlay.aspect_ratio.vertical_for(400.0) == pytest.approx(400.0)
    assert overlay.box.edges == Edges(0.0, 0.0, 400.0, 400.0)


def test_drag_marks_touched_and_requests_zoom_in(overlay, zooms, viewport):
    """Shrinking the box below half the viewport asks for a zoom-in."""
    overlay.initialize(viewport)
    assert overlay.start_move(0, 0)
    overlay.on_move(0, 0)
    assert overlay.on_move(700, 700)
    assert overlay.is_touched()

    events = overlay.end_move()
    assert len(events) == 1
    assert zooms[0][1] is False
    assert zooms[0][0].x() == pytest.approx(850.0)


def test_on_zoomed_in_applies_scaled_box(overlay, viewport):
    overlay.initialize(viewport)
    overlay.start_move(0, 0)
    overlay.on_move(0, 0)
    overlay.on_move(700, 700)
    overlay.end_move()

    overlay.on_zoomed_in()
    assert overlay.box.edges == pytest.approx(Edges(250.0, 250.0, 1000.0, 1000.0))


def test_restrict_border_after_bounds_change(overlay, viewport):
    overlay.initialize(viewport)
    overlay.update_bounds(QRectF(100, 100, 600, 400))
    overlay.restrict_border()
    assert overlay.box.edges == pytest.approx(Edges(100.0, 100.0, 700.0, 500.0))
    assert overlay.bounds == QRectF(100, 100, 600, 400)


def test_cancel_move_keeps_box(overlay, zooms, viewport):
    overlay.initialize(viewport)
    overlay.start_move(0, 0)
    overlay.on_move(0, 0)
    overlay.on_move(700, 700)
    overlay.cancel_move()
    assert zooms == []
    assert overlay.box.left == pytest.approx(700.0)
    assert not overlay.engine.is_moving


def test_zoom_level_passthrough(overlay, viewport):
    overlay.initialize(viewport)
    overlay.zoom_level = 3.0
    assert overlay.engine.zoom_level == 3.0
    assert overlay.zoom_level == 3.0
