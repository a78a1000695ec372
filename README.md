# panekit

panekit is the geometry and layout core of a retained-mode user interface
toolkit. It sizes and places objects, walks trees of objects and moves
keyboard focus through them. Drawing those objects is up to you.

## What is in it

- `panekit.geometry`: the frozen `Size` and `Position` value types. Each has
  `add` and `subtract`, and `Size` also has `union`. The module defines the
  `CanvasObject` and `Layout` protocols, and the helpers `clamp_min` and
  `clamp_max`.
- `panekit.layout.spacer`: `Spacer`, `new_spacer()` and the `SpacerObject`
  protocol. A spacer soaks up spare room in a box layout.
- `panekit.layout.box`: `BoxLayout` stacks objects in a row or a column. Use
  `new_hbox_layout()` or `new_vbox_layout()` to make one.
- `panekit.layout.border`: `BorderLayout(top, bottom, left, right)` puts those
  four objects at the edges. Every other object fills the middle.
- `panekit.layout.center`: `CenterLayout` gives each object its minimum size
  and centres it.
- `panekit.layout.maximal`: `MaxLayout` stretches every object over the whole
  space.
- `panekit.layout.fixedgrid`: `FixedGridLayout(cell_size)` puts objects in
  cells of a fixed size and wraps them onto new rows. Its `min_size` depends on
  how many rows the last `layout` call made.
- `panekit.layout.form`: `FormLayout` is a two-column grid of label and content
  pairs. It raises `ValueError` if the number of objects is odd.
- `panekit.layout.grid`: `GridLayout(cols)` splits the space into equal cells,
  `cols` cells to a row.
- `panekit.tree`: `walk_visible_object_tree` and `walk_complete_object_tree`
  walk an object and its descendants depth first.
- `panekit.focus`: `FocusManager` moves focus forward or back through the
  focusable objects of a canvas.
- `panekit.menu`: the dataclasses `MenuItem`, `Menu` and `MainMenu`, and the
  functions `new_menu_item`, `new_menu` and `new_main_menu`.
- `panekit.resource`: `StaticResource(name, content)` and the `Resource`
  protocol. `to_code()` returns source text that rebuilds the resource.
- `panekit.keys`: the `KeyName` string enum of key names.
- `panekit.logs`: `log_error(reason, err)` and `log_hint(reason, enabled)`.
  Both log to the `panekit` logger and include the calling code location.
  `log_hint` logs nothing unless `enabled` is true.
- `panekit.imagefill`: the `ImageFill` enum and `rect_inner_coords`.
  `rect_inner_coords` works out where an image with a given aspect ratio sits
  inside a rectangle.

The layouts put 4 units of padding between objects.

## Layouts

Every layout has two methods:

- `layout(objects, size)` moves and resizes the objects to fit inside `size`.
- `min_size(objects)` returns the smallest size that holds the visible objects.

Any object with the following members can be laid out:

- `size`, `position` and `visible`
- `min_size()`
- `resize(size)` and `move(pos)`
- `show()` and `hide()`

```python
from dataclasses import dataclass, field

from panekit.geometry import Position, Size
from panekit.layout.box import new_hbox_layout
from panekit.layout.spacer import new_spacer


@dataclass(eq=False)
class Box:
    minimum: Size
    size: Size = field(default_factory=Size)
    position: Position = field(default_factory=Position)
    visible: bool = True

    def min_size(self):
        return self.minimum

    def resize(self, size):
        self.size = size

    def move(self, pos):
        self.position = pos

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False


a, b = Box(Size(50, 50)), Box(Size(50, 50))
layout = new_hbox_layout()
objects = [new_spacer(), a, b]
layout.layout(objects, Size(300, 100))
print(a.position, b.position)  # Position(x=196, y=0) Position(x=250, y=0)
print(layout.min_size(objects))  # Size(width=104, height=50)
```

## Trees and focus

An object's children are whatever its `children()` method returns, if it has
one. An object whose `clips_children` attribute is true sets the clipping area
reported for everything beneath it.

`FocusManager(canvas)` expects the canvas to have two things:

- a `content` attribute
- a `focus(obj)` method

An object can take focus if it has `focus_gained()` and `focus_lost()`.
Objects whose `disabled` attribute is true are skipped. `next_in_chain` also
skips objects whose `read_only` attribute is true. Both directions wrap around
at the ends.

## Vendoring helper

Run the `panekit-modvendor` command from a Go module root that contains
`go.mod`. It does three things:

1. Runs `go mod vendor -v`.
2. Reads `vendor/modules.txt` to find the module cache path of
   `github.com/go-gl/glfw`.
3. Copies that module's `v3.2/glfw/glfw` C sources into the vendor tree.

It exits with status 1 if any step fails.

```
panekit-modvendor
```

## What it does not do

panekit has no windows, no rendering or drawing, no widgets and no event loop.
It does not deliver mouse or keyboard events. It gives you the layout, tree and
focus logic that such a system is built on.

## Tests

```
pip install .[test]
pytest
```