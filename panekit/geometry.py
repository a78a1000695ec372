"""Sizes, positions and the interfaces shared by canvas objects and layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class Size:
    """A width and height in device-independent units."""

    width: int = 0
    height: int = 0

    def add(self, other: Size) -> Size:
        """Return this size grown by ``other`` in both dimensions."""
        return Size(self.width + other.width, self.height + other.height)

    def subtract(self, other: Size) -> Size:
        """Return this size shrunk by ``other`` in both dimensions."""
        return Size(self.width - other.width, self.height - other.height)

    def union(self, other: Size) -> Size:
        """Return the smallest size that contains both sizes."""
        return Size(max(self.width, other.width), max(self.height, other.height))


@dataclass(frozen=True)
class Position:
    """A point relative to the top-left of a parent."""

    x: int = 0
    y: int = 0

    def add(self, other: Position) -> Position:
        """Return this position offset by ``other``."""
        return Position(self.x + other.x, self.y + other.y)

    def subtract(self, other: Position) -> Position:
        """Return this position offset by the negation of ``other``."""
        return Position(self.x - other.x, self.y - other.y)


@runtime_checkable
class CanvasObject(Protocol):
    """Anything that can be sized, placed, shown and hidden on a canvas."""

    @property
    def size(self) -> Size: ...

    @property
    def position(self) -> Position: ...

    @property
    def visible(self) -> bool: ...

    def min_size(self) -> Size: ...

    def resize(self, size: Size) -> None: ...

    def move(self, pos: Position) -> None: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...


@runtime_checkable
class Layout(Protocol):
    """Arranges canvas objects within a given size."""

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Set the size and position of each object to fit within ``size``."""
        ...

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """Return the smallest size that fits ``objects`` under this layout."""
        ...


def clamp_min(x: int, y: int) -> int:
    """Return the smaller of the two values."""
    return x if x < y else y


def clamp_max(x: int, y: int) -> int:
    """Return the larger of the two values."""
    return x if x > y else y