"""Layouts stacking objects in a single row or column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from panekit.geometry import CanvasObject, Position, Size, clamp_max
from panekit.layout.spacer import SpacerObject

_PADDING = 4


@dataclass
class BoxLayout:
    """Stacks objects left to right when horizontal, otherwise top to bottom.

    Visible spacers share out any spare space along the stacking axis.
    """

    horizontal: bool

    def _is_spacer(self, obj: CanvasObject) -> bool:
        # invisible spacers don't impact layout
        if not obj.visible or not isinstance(obj, SpacerObject):
            return False
        return obj.expand_horizontal() if self.horizontal else obj.expand_vertical()

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Pack the objects at their minimum length along the stacking axis."""
        visible = [child for child in objects if child.visible]
        spacer_count = sum(1 for child in visible if self._is_spacer(child))

        total = 0
        for child in visible:
            if self._is_spacer(child):
                continue
            child_min = child.min_size()
            total += child_min.width if self.horizontal else child_min.height

        available = size.width if self.horizontal else size.height
        extra = available - total - _PADDING * (len(objects) - spacer_count - 1)
        extra_cell = int(extra / spacer_count) if spacer_count else 0

        x = y = 0
        for child in visible:
            if self._is_spacer(child):
                if self.horizontal:
                    x += extra_cell
                else:
                    y += extra_cell
                continue

            child_min = child.min_size()
            child.move(Position(x, y))
            if self.horizontal:
                x += _PADDING + child_min.width
                child.resize(Size(child_min.width, size.height))
            else:
                y += _PADDING + child_min.height
                child.resize(Size(size.width, child_min.height))

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """Return the summed length with padding and the largest breadth."""
        width = height = 0
        added = False
        for child in objects:
            if not child.visible or self._is_spacer(child):
                continue

            child_min = child.min_size()
            if self.horizontal:
                width += child_min.width
                height = clamp_max(child_min.height, height)
                if added:
                    width += _PADDING
            else:
                height += child_min.height
                width = clamp_max(child_min.width, width)
                if added:
                    height += _PADDING
            added = True

        return Size(width, height)


def new_hbox_layout() -> BoxLayout:
    """Return a layout stacking objects left to right."""
    return BoxLayout(True)


def new_vbox_layout() -> BoxLayout:
    """Return a layout stacking objects top to bottom."""
    return BoxLayout(False)