"""Walking a tree of canvas objects with positions and clipping areas.

An object's children are those returned by its ``children()`` method, if it
has one. An object whose ``clips_children`` attribute is true clips everything
beneath it to its own bounds.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from panekit.geometry import CanvasObject, Position, Size

BeforeChildren = Callable[[CanvasObject, Position, Position, Size], bool]
AfterChildren = Callable[[CanvasObject, Optional[CanvasObject]], None]

_MAX_INT32 = 2**31 - 1


def _children_of(obj: CanvasObject) -> Sequence[CanvasObject]:
    children = getattr(obj, "children", None)
    return list(children()) if callable(children) else []


def walk_visible_object_tree(
    obj: CanvasObject,
    before_children: Optional[BeforeChildren] = None,
    after_children: Optional[AfterChildren] = None,
) -> bool:
    """Walk every visible object below and including ``obj``.

    ``before_children(obj, pos, clip_pos, clip_size)`` is called before an
    object's children are visited; returning true stops the walk at once, and
    ``after_children`` is then not called for that object but still is for its
    ancestors. ``after_children(obj, parent)`` is called once the children are
    done. Returns whether the walk was stopped.
    """
    return _walk(obj, None, Position(0, 0), Position(0, 0),
                 Size(_MAX_INT32, _MAX_INT32), before_children, after_children, True)


def walk_complete_object_tree(
    obj: CanvasObject,
    before_children: Optional[BeforeChildren] = None,
    after_children: Optional[AfterChildren] = None,
) -> bool:
    """Walk every object below and including ``obj``, visible or not.

    The callbacks behave as for :func:`walk_visible_object_tree`.
    """
    return _walk(obj, None, Position(0, 0), Position(0, 0),
                 Size(_MAX_INT32, _MAX_INT32), before_children, after_children, False)


def _walk(
    obj: CanvasObject,
    parent: Optional[CanvasObject],
    offset: Position,
    clip_pos: Position,
    clip_size: Size,
    before_children: Optional[BeforeChildren],
    after_children: Optional[AfterChildren],
    require_visible: bool,
) -> bool:
    if require_visible and not obj.visible:
        return False
    pos = obj.position.add(offset)

    children = _children_of(obj)
    if getattr(obj, "clips_children", False):
        clip_pos = pos
        clip_size = obj.size

    if before_children is not None and before_children(obj, pos, clip_pos, clip_size):
        return True

    cancelled = any(
        _walk(child, obj, pos, clip_pos, clip_size,
              before_children, after_children, require_visible)
        for child in children
    )

    if after_children is not None:
        after_children(obj, parent)
    return cancelled