"""A layout placing fixed-size cells in rows that wrap."""

from __future__ import annotations

import math
from typing import Sequence

from panekit.geometry import CanvasObject, Position, Size

_PADDING = 4


class FixedGridLayout:
    """Lays objects out in fixed-size cells, wrapping onto new rows.

    The minimum size depends on how many rows the last layout produced.
    """

    def __init__(self, cell_size: Size) -> None:
        self.cell_size = cell_size
        self._col_count = 1
        self._row_count = 1

    def __repr__(self) -> str:
        return f"FixedGridLayout(cell_size={self.cell_size!r})"

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Place the objects in a row, wrapping when ``size`` is too narrow."""
        self._col_count = 1
        self._row_count = 1

        if size.width > self.cell_size.width:
            self._col_count = math.floor(size.width / (self.cell_size.width + _PADDING))

        x = y = 0
        for index, child in enumerate(objects):
            if not child.visible:
                continue

            child.move(Position(x, y))
            child.resize(self.cell_size)

            if index > 0 and (index + 1) % self._col_count == 0:
                x = 0
                y += self.cell_size.height + _PADDING
                self._row_count += 1
            else:
                x += self.cell_size.width + _PADDING

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """Return one cell wide and as tall as the rows of the last layout."""
        return Size(
            self.cell_size.width,
            self.cell_size.height * self._row_count + (self._row_count - 1) * _PADDING,
        )