"""A layout arranging objects in equal cells with a fixed column count."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from panekit.geometry import CanvasObject, Position, Size

_PADDING = 4


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _leading(cell: float, offset: int) -> int:
    """The top or left edge of the cell at ``offset``."""
    return _round((cell + _PADDING) * offset)


def _trailing(cell: float, offset: int) -> int:
    """The bottom or right edge of the cell at ``offset``."""
    return _leading(cell, offset + 1) - _PADDING


@dataclass
class GridLayout:
    """Arranges visible objects into equal cells, ``cols`` per row."""

    cols: int

    def _count_rows(self, objects: Sequence[CanvasObject]) -> int:
        visible = sum(1 for child in objects if child.visible)
        return math.ceil(visible / self.cols)

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Share ``size`` out into equal cells and fill them in reading order."""
        rows = self._count_rows(objects)
        if rows == 0:
            return

        cell_width = (size.width - (self.cols - 1) * _PADDING) / self.cols
        cell_height = (size.height - (rows - 1) * _PADDING) / rows

        visible = (child for child in objects if child.visible)
        for index, child in enumerate(visible):
            row, col = divmod(index, self.cols)
            x1, y1 = _leading(cell_width, col), _leading(cell_height, row)
            x2, y2 = _trailing(cell_width, col), _trailing(cell_height, row)

            child.move(Position(x1, y1))
            child.resize(Size(x2 - x1, y2 - y1))

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """Return the largest child size times the grid, plus padding between cells."""
        rows = self._count_rows(objects)
        cell = Size(0, 0)
        for child in objects:
            if child.visible:
                cell = cell.union(child.min_size())

        content = Size(cell.width * self.cols, cell.height * rows)
        return content.add(Size(_PADDING * (self.cols - 1), _PADDING * (rows - 1)))