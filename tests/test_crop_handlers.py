"""Tests for the crop handle model."""

import pytest
from PySide6.QtCore import QRectF

from starling.crop.box import Box
from starling.crop.handlers import Axis, HandlerType, describe_handler
from starling.errors import DomainError, InvalidHandlerError


@pytest.fixture
def box():
    return Box(200.0, 300.0, 600.0, 500.0, 100.0)


@pytest.fixture
def bounds():
    return QRectF(0, 0, 1000, 800)


def test_handler_classification():
    assert HandlerType.LEFT.is_edge
    assert not HandlerType.LEFT.is_corner
    assert HandlerType.RIGHT_TOP.is_corner
    assert not HandlerType.BOX.is_edge
    assert HandlerType.TOP.axis is Axis.Y
    assert HandlerType.RIGHT.axis is Axis.X
    assert Axis.X.other is Axis.Y


def test_corner_edges():
    """Corners resolve to their horizontal-axis and vertical-axis edges."""
    assert HandlerType.LEFT_TOP.edges == (HandlerType.LEFT, HandlerType.TOP)
    assert HandlerType.RIGHT_BOTTOM.edges == (HandlerType.RIGHT, HandlerType.BOTTOM)


def test_describe_left_edge(box, bounds):
    handler = describe_handler(HandlerType.LEFT, box, bounds)
    assert handler.value == 200.0
    assert handler.out_bound == 0.0
    assert handler.in_bound == 500.0
    assert handler.center_bound == 350.0
    assert handler.is_horizontal
    assert not handler.is_outer
    assert handler.room_out() == 200.0
    assert handler.room_in() == 300.0
    assert handler.room_center() == 150.0


def test_describe_bottom_edge(box, bounds):
    handler = describe_handler(HandlerType.BOTTOM, box, bounds)
    assert handler.value == 500.0
    assert handler.out_bound == 800.0
    assert handler.in_bound == 400.0
    assert handler.center_bound == 450.0
    assert handler.is_outer
    assert handler.room_out() == 300.0
    assert handler.room_in() == 100.0
    assert handler.room_center() == 50.0


@pytest.mark.parametrize(
    "handler",
    [HandlerType.BOX, HandlerType.NONE, HandlerType.LEFT_TOP],
)
def test_describe_rejects_non_edges(box, bounds, handler):
    """Asking for edge data of anything but an edge fails loudly."""
    with pytest.raises(InvalidHandlerError):
        describe_handler(handler, box, bounds)


def test_invalid_handler_error_hierarchy():
    with pytest.raises(DomainError):
        _ = HandlerType.BOX.axis
    with pytest.raises(ValueError):
        _ = HandlerType.TOP.edges
