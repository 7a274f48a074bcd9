"""Rectangle helpers.

All rectangles are integer, axis aligned and expressed in the local
coordinates of the surface they are drawn on. ``x``/``y`` is the top-left
corner; the right and bottom edges are exclusive.
"""

from dataclasses import dataclass

from vt_renderer.objects import Point


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def min(self) -> Point:
        return Point(self.x, self.y)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def translate(self, offset: Point) -> "Rect":
        return Rect(self.x + offset.x, self.y + offset.y, self.width, self.height)

    def shrink(self, amount: int) -> "Rect":
        """Move every edge inwards by ``amount``, never below zero size."""
        width = max(0, self.width - 2 * amount)
        height = max(0, self.height - 2 * amount)
        return Rect(
            self.x + min(amount, self.width // 2),
            self.y + min(amount, self.height // 2),
            width,
            height,
        )

    def intersect(self, other: "Rect") -> "Rect":
        x0 = max(self.x, other.x)
        y0 = max(self.y, other.y)
        x1 = min(self.right, other.right)
        y1 = min(self.bottom, other.bottom)
        return Rect(x0, y0, max(0, x1 - x0), max(0, y1 - y0))


def relative_rect(position: Point, width: int, height: int) -> Rect:
    """Rect of ``width`` x ``height`` whose top-left corner sits at ``position``."""
    return Rect(position.x, position.y, width, height)
