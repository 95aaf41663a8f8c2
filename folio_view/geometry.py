"""Axis-aligned rectangles and intersection arithmetic."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class Rect:
    """Document-relative box with its origin at the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return max(self.width, 0.0) * max(self.height, 0.0)

    def contains(self, px: float, py: float) -> bool:
        """Return whether the point lies inside the box, edges included."""
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def intersection(self, other: Rect) -> Rect | None:
        """Return the overlapping box, or ``None`` when the boxes are disjoint."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right < left or bottom < top:
            return None
        return Rect(left, top, right - left, bottom - top)


def intersection_ratio(element: Rect, viewport: Rect) -> float:
    """Return the visible fraction of ``element`` within ``viewport``.

    Parameters
    ----------
    element : Rect
        Bounding box of the observed element.
    viewport : Rect
        Visible rectangle of the page.

    Returns
    -------
    float
        Value in ``[0, 1]``. A zero-area element that touches the viewport
        counts as fully visible.
    """
    overlap = element.intersection(viewport)
    if overlap is None:
        return 0.0
    if element.area == 0:
        return 1.0
    return overlap.area / element.area


__all__ = ["Rect", "intersection_ratio"]
