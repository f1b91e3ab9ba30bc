"""
Aspect-ratio policy for the crop box.

An :class:`AspectRatio` converts a horizontal distance into the matching
vertical distance (and back) so that a resize on one axis can be mirrored
on the other.  The ``FREE`` ratio couples nothing and passes values through.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class AspectRatio:
    """Horizontal/vertical proportion a crop box has to keep."""

    name: str
    x_ratio: float
    y_ratio: float

    FREE: ClassVar[AspectRatio]
    SQUARE: ClassVar[AspectRatio]
    FOUR_THREE: ClassVar[AspectRatio]
    SIXTEEN_NINE: ClassVar[AspectRatio]
    TWENTYONE_NINE: ClassVar[AspectRatio]
    FIVE_FOUR: ClassVar[AspectRatio]
    ORIGINAL: ClassVar[AspectRatio]

    @property
    def is_free(self) -> bool:
        """Return True when no coupling between the axes applies.

        An ``ORIGINAL`` ratio that has not been bound to an image yet behaves
        like ``FREE``.
        """
        return self.x_ratio <= 0 or self.y_ratio <= 0

    @property
    def is_original(self) -> bool:
        return self.name == "ORIGINAL"

    @property
    def label(self) -> str:
        """Human readable label, e.g. ``"16:9"``."""
        if self.name == "FREE":
            return "Free"
        if self.is_original:
            return "Original"
        return f"{self.x_ratio:g}:{self.y_ratio:g}"

    def vertical_for(self, horizontal: float) -> float:
        """Return the vertical distance that matches *horizontal*."""
        if self.is_free:
            return horizontal
        return horizontal / self.x_ratio * self.y_ratio

    def horizontal_for(self, vertical: float) -> float:
        """Return the horizontal distance that matches *vertical*."""
        if self.is_free:
            return vertical
        return vertical / self.y_ratio * self.x_ratio

    def size_within(self, width: float, height: float) -> tuple[float, float]:
        """Return the largest ``(width, height)`` with this ratio inside the target.

        At least one side of the result equals the target.  A free ratio
        returns the target unchanged.
        """
        if self.is_free:
            return float(width), float(height)

        fit_width = float(width)
        fit_height = self.vertical_for(fit_width)
        if fit_height > height:
            factor = height / fit_height
            fit_height = float(height)
            fit_width *= factor
        return fit_width, fit_height

    def bind(self, width: float, height: float) -> AspectRatio:
        """Fix an ``ORIGINAL`` ratio to the source image's proportions.

        Other ratios are returned unchanged.
        """
        if not self.is_original:
            return self
        return AspectRatio(self.name, float(width), float(height))

    @classmethod
    def presets(cls) -> tuple[AspectRatio, ...]:
        """Return the selectable ratios in menu order."""
        return (
            cls.FREE,
            cls.ORIGINAL,
            cls.SQUARE,
            cls.FOUR_THREE,
            cls.FIVE_FOUR,
            cls.SIXTEEN_NINE,
            cls.TWENTYONE_NINE,
        )


AspectRatio.FREE = AspectRatio("FREE", 0, 0)
AspectRatio.SQUARE = AspectRatio("SQUARE", 1, 1)
AspectRatio.FOUR_THREE = AspectRatio("FOUR_THREE", 4, 3)
AspectRatio.SIXTEEN_NINE = AspectRatio("SIXTEEN_NINE", 16, 9)
AspectRatio.TWENTYONE_NINE = AspectRatio("TWENTYONE_NINE", 21, 9)
AspectRatio.FIVE_FOUR = AspectRatio("FIVE_FOUR", 5, 4)
AspectRatio.ORIGINAL = AspectRatio("ORIGINAL", 0, 0)


__all__ = ["AspectRatio"]
