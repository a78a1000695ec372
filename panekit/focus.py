"""Moving input focus between the focusable objects of a canvas."""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from panekit.geometry import CanvasObject
from panekit.tree import walk_visible_object_tree


@runtime_checkable
class _Focusable(Protocol):
    def focus_gained(self) -> None: ...

    def focus_lost(self) -> None: ...


class _Canvas(Protocol):
    content: CanvasObject

    def focus(self, obj: Optional[Any]) -> None: ...


class FocusManager:
    """The standard manager of input focus for a canvas.

    Objects with a true ``disabled`` attribute never receive focus.
    """

    def __init__(self, canvas: _Canvas) -> None:
        self.canvas = canvas

    def _focus_chain(self, skip_read_only: bool) -> list[Any]:
        chain: list[Any] = []

        def collect(obj, _pos, _clip_pos, _clip_size) -> bool:
            if getattr(obj, "disabled", False):
                return False
            if skip_read_only and getattr(obj, "read_only", False):
                return False
            if isinstance(obj, _Focusable):
                chain.append(obj)
            return False

        walk_visible_object_tree(self.canvas.content, collect)
        return chain

    def next_in_chain(self, current: Optional[Any]) -> Optional[Any]:
        """Return the focusable object after ``current``, wrapping to the first.

        With no ``current`` the first focusable object is returned. Read-only
        objects are skipped.
        """
        chain = self._focus_chain(skip_read_only=True)
        if not chain:
            return None
        if current is None:
            return chain[0]
        for index, obj in enumerate(chain):
            if obj is current:
                return chain[index + 1] if index + 1 < len(chain) else chain[0]
        return chain[0]

    def previous_in_chain(self, current: Optional[Any]) -> Optional[Any]:
        """Return the focusable object before ``current``, wrapping to the last.

        With no ``current`` the last focusable object is returned.
        """
        chain = self._focus_chain(skip_read_only=False)
        if not chain:
            return None
        for index, obj in enumerate(chain):
            if current is not None and obj is current:
                return chain[index - 1] if index > 0 else chain[-1]
        return chain[-1]

    def focus_next(self, current: Optional[Any]) -> None:
        """Focus the object after ``current``, or the first one if it is None."""
        self.canvas.focus(self.next_in_chain(current))

    def focus_previous(self, current: Optional[Any]) -> None:
        """Focus the object before ``current``, or the last one if it is None."""
        self.canvas.focus(self.previous_in_chain(current))