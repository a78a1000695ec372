"""A layout stretching every object over the whole space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from panekit.geometry import CanvasObject, Size


@dataclass
class MaxLayout:
    """Sets every object to the full size given."""

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Resize every object to ``size``."""
        for child in objects:
            child.resize(size)

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """Return the union of the minimum sizes of the visible objects."""
        result = Size(0, 0)
        for child in objects:
            if child.visible:
                result = result.union(child.min_size())
        return result