"""A two-column layout pairing each label with its content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from panekit.geometry import CanvasObject, Position, Size, clamp_max

_PADDING = 4
_COLUMNS = 2


def _pairs(objects: Sequence[CanvasObject]) -> list[tuple[CanvasObject, CanvasObject]]:
    """Split ``objects`` into (label, content) pairs, dropping fully hidden rows."""
    if len(objects) % _COLUMNS:
        raise ValueError("a form layout needs its objects in label/content pairs")
    it = iter(objects)
    return [
        (label, content)
        for label, content in zip(it, it)
        if label.visible or content.visible
    ]


@dataclass
class FormLayout:
    """A two-column grid where each row holds a label and a content object.

    Each row is as tall as the taller of its two cells. The label column is as
    wide as the widest label; the content column is as wide as the widest
    content, or fills the remaining width if that is larger.
    """

    def _table(
        self, objects: Sequence[CanvasObject], container_width: int
    ) -> list[tuple[Size, Size]]:
        rows = []
        label_width = content_width = 0
        for label, content in _pairs(objects):
            label_min = label.min_size()
            content_min = content.min_size()
            label_width = clamp_max(label_width, label_min.width)
            content_width = clamp_max(content_width, content_min.width)
            rows.append(clamp_max(label_min.height, content_min.height))

        content_width = clamp_max(content_width, container_width - label_width - _PADDING)
        return [(Size(label_width, height), Size(content_width, height)) for height in rows]

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Place the label and content of each visible row in two columns."""
        table = self._table(objects, size.width)
        y = 0
        for row, ((label, content), (label_cell, content_cell)) in enumerate(
            zip(_pairs(objects), table)
        ):
            if row > 0:
                y += table[row - 1][0].height + _PADDING

            label.move(Position(0, y))
            label.resize(Size(label_cell.width, label_cell.height))
            content.move(Position(_PADDING + label_cell.width, y))
            content.resize(Size(content_cell.width, label_cell.height))

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """Return the widest label plus widest content, and the summed row heights."""
        table = self._table(objects, 0)
        if not table:
            return Size(0, 0)

        width = table[0][0].width + table[0][1].width + _PADDING
        height = sum(label_cell.height for label_cell, _ in table)
        height += _PADDING * (len(table) - 1)
        return Size(width, height)