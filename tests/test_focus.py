import pytest

from panekit.focus import FocusManager
from panekit.geometry import Position, Size


class Label:
    def __init__(self):
        self.size = Size(10, 10)
        self.position = Position()
        self.visible = True


class Entry(Label):
    def __init__(self, read_only=False, disabled=False, visible=True):
        super().__init__()
        self.read_only = read_only
        self.disabled = disabled
        self.visible = visible
        self.focused = False

    def focus_gained(self):
        self.focused = True

    def focus_lost(self):
        self.focused = False


class VBox(Label):
    def __init__(self, *objects):
        super().__init__()
        self.objects = list(objects)

    def children(self):
        return self.objects


class Canvas:
    def __init__(self, content):
        self.content = content
        self.focused = None

    def focus(self, obj):
        if self.focused is not None:
            self.focused.focus_lost()
        self.focused = obj
        if obj is not None:
            obj.focus_gained()


KINDS = {
    "entry": Entry,
    "label": Label,
    "hidden": lambda: Entry(visible=False),
    "disabled": lambda: Entry(disabled=True),
    "readonly": lambda: Entry(read_only=True),
}


def build(kinds):
    objects = [KINDS[kind]() for kind in kinds]
    canvas = Canvas(VBox(*objects))
    return objects, canvas, FocusManager(canvas)


@pytest.mark.parametrize(
    "kinds, current, expected",
    [
        (("entry", "entry"), 0, 1),
        (("entry", "entry"), None, 0),
        (("entry", "label", "entry"), 2, 0),
        (("entry", "hidden", "entry"), 0, 2),
        (("entry", "disabled", "entry"), 0, 2),
        (("entry", "readonly", "entry"), 0, 2),
    ],
    ids=["next", "from-none", "wraps", "hidden", "disabled", "read-only"],
)
def test_next_in_chain(kinds, current, expected):
    objects, _, manager = build(kinds)
    start = None if current is None else objects[current]
    assert manager.next_in_chain(start) is objects[expected]


@pytest.mark.parametrize(
    "kinds, current, expected",
    [
        (("entry", "entry"), 1, 0),
        (("entry", "entry"), None, 1),
        (("entry", "entry"), 0, 1),
        (("entry", "hidden", "entry"), 2, 0),
        (("entry", "disabled", "entry"), 2, 0),
    ],
    ids=["previous", "from-none", "wraps", "hidden", "disabled"],
)
def test_previous_in_chain(kinds, current, expected):
    objects, _, manager = build(kinds)
    start = None if current is None else objects[current]
    assert manager.previous_in_chain(start) is objects[expected]


def test_focus_next():
    (entry1, entry2), canvas, manager = build(("entry", "entry"))
    canvas.focus(entry1)

    manager.focus_next(entry1)

    assert canvas.focused is entry2
    assert (entry1.focused, entry2.focused) == (False, True)


def test_focus_previous():
    (entry1, entry2), canvas, manager = build(("entry", "entry"))
    canvas.focus(entry2)

    manager.focus_previous(entry2)

    assert canvas.focused is entry1
    assert (entry1.focused, entry2.focused) == (True, False)


def test_no_focusable_objects():
    _, _, manager = build(("label", "label"))

    assert manager.next_in_chain(None) is None
    assert manager.previous_in_chain(None) is None