"""Fitting an image into a rectangle according to its fill mode."""

from __future__ import annotations

import math
import struct
from enum import Enum

from panekit.geometry import Position, Size


class ImageFill(Enum):
    """How an image is drawn within the space it is given."""

    STRETCH = 0
    CONTAIN = 1
    ORIGINAL = 2


def _f32(value: float) -> float:
    """Round a value to single precision."""
    if math.isinf(value) or math.isnan(value):
        return value
    return struct.unpack("f", struct.pack("f", value))[0]


def _ratio(numerator: int, denominator: int) -> float:
    """Single precision division that yields infinity or NaN instead of raising."""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return _f32(numerator / denominator)


def _halve(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return int(value / 2)


def rect_inner_coords(
    size: Size, pos: Position, fill: ImageFill, aspect: float
) -> tuple[Size, Position]:
    """Return the size and position an image of ``aspect`` occupies in a rectangle.

    Contained and original-size images keep their aspect ratio and are
    centred, leaving bars on either side; stretched images fill the rectangle.
    """
    if fill not in (ImageFill.CONTAIN, ImageFill.ORIGINAL):
        return size, pos

    aspect = _f32(aspect)
    view_aspect = _ratio(size.width, size.height)

    new_width, new_height = size.width, size.height
    width_pad = height_pad = 0
    if view_aspect > aspect:
        new_width = int(_f32(_f32(float(size.height)) * aspect))
        width_pad = _halve(size.width - new_width)
    elif view_aspect < aspect:
        new_height = int(_f32(_f32(float(size.width)) / aspect))
        height_pad = _halve(size.height - new_height)

    return Size(new_width, new_height), Position(pos.x + width_pad, pos.y + height_pad)