"""A layout placing objects along the edges with the rest in the middle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from panekit.geometry import CanvasObject, Position, Size, clamp_max

_PADDING = 4


def _shows(obj: Optional[CanvasObject]) -> bool:
    return obj is not None and obj.visible


@dataclass(eq=False)
class BorderLayout:
    """Places top, bottom, left and right objects at the sides.

    Every other object in the container fills the centre space.
    """

    top: Optional[CanvasObject] = None
    bottom: Optional[CanvasObject] = None
    left: Optional[CanvasObject] = None
    right: Optional[CanvasObject] = None

    def _is_edge(self, obj: CanvasObject) -> bool:
        return any(obj is edge for edge in (self.top, self.bottom, self.left, self.right))

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Arrange the edge objects and maximise the rest in the middle."""
        top_height = bottom_height = left_width = right_width = 0

        if _shows(self.top):
            height = self.top.min_size().height
            self.top.resize(Size(size.width, height))
            self.top.move(Position(0, 0))
            top_height = height + _PADDING
        if _shows(self.bottom):
            height = self.bottom.min_size().height
            self.bottom.resize(Size(size.width, height))
            self.bottom.move(Position(0, size.height - height))
            bottom_height = height + _PADDING

        middle_height = size.height - top_height - bottom_height
        if _shows(self.left):
            width = self.left.min_size().width
            self.left.resize(Size(width, middle_height))
            self.left.move(Position(0, top_height))
            left_width = width + _PADDING
        if _shows(self.right):
            width = self.right.min_size().width
            self.right.resize(Size(width, middle_height))
            self.right.move(Position(size.width - width, top_height))
            right_width = width + _PADDING

        middle_size = Size(size.width - left_width - right_width, middle_height)
        middle_pos = Position(left_width, top_height)
        for child in objects:
            if child.visible and not self._is_edge(child):
                child.resize(middle_size)
                child.move(middle_pos)

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """Return the union of the centre objects plus the edges and padding."""
        min_size = Size(0, 0)
        for child in objects:
            if child.visible and not self._is_edge(child):
                min_size = min_size.union(child.min_size())

        for side in (self.left, self.right):
            if _shows(side):
                side_min = side.min_size()
                min_size = Size(
                    min_size.width + side_min.width + _PADDING,
                    clamp_max(min_size.height, side_min.height),
                )

        for side in (self.top, self.bottom):
            if _shows(side):
                side_min = side.min_size()
                min_size = Size(
                    clamp_max(min_size.width, side_min.width),
                    min_size.height + side_min.height + _PADDING,
                )

        return min_size