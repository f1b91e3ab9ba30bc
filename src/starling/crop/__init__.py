"""Crop box geometry, gesture handling and overlay state."""

from __future__ import annotations

from .aspect_ratio import AspectRatio
from .box import Box, Edges, Line, edges_of, rect_from_edges
from .events import BoundsHit, CropEvent, MoveOutcome, ZoomRequested
from .handlers import AXIS_EDGES, Axis, CropHandler, HandlerType, describe_handler
from .hit_tester import HitTester
from .move_handler import CropMoveHandler
from .overlay import CropOverlayModel
from .session import MoveSession
from .timers import DelayedCall

__all__ = [
    "AXIS_EDGES",
    "AspectRatio",
    "Axis",
    "BoundsHit",
    "Box",
    "CropEvent",
    "CropHandler",
    "CropMoveHandler",
    "CropOverlayModel",
    "DelayedCall",
    "Edges",
    "HandlerType",
    "HitTester",
    "Line",
    "MoveOutcome",
    "MoveSession",
    "ZoomRequested",
    "describe_handler",
    "edges_of",
    "rect_from_edges",
]
