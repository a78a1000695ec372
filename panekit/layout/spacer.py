"""Spacers that absorb spare room in box layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from panekit.geometry import Position, Size


@runtime_checkable
class SpacerObject(Protocol):
    """Any object that can be used to space out other objects."""

    def expand_vertical(self) -> bool: ...

    def expand_horizontal(self) -> bool: ...


@dataclass(eq=False)
class Spacer:
    """A simple object that fills spare space in a box layout.

    A spacer expands along both axes unless fixed on one of them.
    """

    fix_horizontal: bool = False
    fix_vertical: bool = False
    size: Size = field(default_factory=Size, init=False)
    position: Position = field(default_factory=Position, init=False)
    _hidden: bool = field(default=False, init=False, repr=False)

    def expand_vertical(self) -> bool:
        """Return whether this spacer expands on the vertical axis."""
        return not self.fix_vertical

    def expand_horizontal(self) -> bool:
        """Return whether this spacer expands on the horizontal axis."""
        return not self.fix_horizontal

    def resize(self, size: Size) -> None:
        """Set a new size; called by the layout."""
        self.size = size

    def move(self, pos: Position) -> None:
        """Set a new position; called by the layout."""
        self.position = pos

    def min_size(self) -> Size:
        """A spacer can shrink to nothing, so its minimum size is zero."""
        return Size(0, 0)

    @property
    def visible(self) -> bool:
        """Whether this spacer takes part in layout calculations."""
        return not self._hidden

    def show(self) -> None:
        """Include this spacer in layout calculations."""
        self._hidden = False

    def hide(self) -> None:
        """Remove this spacer from layout calculations."""
        self._hidden = True


def new_spacer() -> Spacer:
    """Return a spacer that fills both vertical and horizontal space."""
    return Spacer()