import pytest

from panekit.geometry import Position, Size
from panekit.layout.box import new_hbox_layout, new_vbox_layout
from panekit.layout.spacer import new_spacer

PADDING = 4


class Rect:
    def __init__(self, minimum, visible=True):
        self.minimum = minimum
        self.visible = visible
        self.size = Size()
        self.position = Position()

    def min_size(self):
        return self.minimum

    def resize(self, size):
        self.size = size

    def move(self, pos):
        self.position = pos


class Container:
    """Lays out its objects at their minimum size, and again on resize."""

    def __init__(self, layout, *objects):
        self.layout = layout
        self.objects = list(objects)
        self.resize(self.min_size())

    def min_size(self):
        return self.layout.min_size(self.objects)

    def resize(self, size):
        self.size = size
        self.layout.layout(self.objects, size)


@pytest.fixture(params=[True, False], ids=["hbox", "vbox"])
def horizontal(request):
    return request.param


def layout_for(horizontal):
    return new_hbox_layout() if horizontal else new_vbox_layout()


def along(horizontal, main, cross):
    return Size(main, cross) if horizontal else Size(cross, main)


def at(horizontal, main):
    return Position(main, 0) if horizontal else Position(0, main)


def extent(horizontal, size):
    return size.width if horizontal else size.height


def three(horizontal, cross_of_second=100):
    cell = along(horizontal, 50, 100)
    return cell, Rect(cell), Rect(along(horizontal, 50, cross_of_second)), Rect(cell)


def test_simple(horizontal):
    cell = along(horizontal, 50, 50)
    obj1, obj2, obj3 = Rect(cell), Rect(cell), Rect(cell)
    container = Container(layout_for(horizontal), obj1, obj2, obj3)

    assert container.min_size() == along(horizontal, 150 + PADDING * 2, 50)
    assert obj1.size == cell
    assert obj2.position == at(horizontal, 50 + PADDING)
    assert obj3.position == at(horizontal, 100 + PADDING * 2)


def test_hidden_item(horizontal):
    cell = along(horizontal, 50, 50)
    obj1, obj2, obj3 = Rect(cell), Rect(cell, visible=False), Rect(cell)
    container = Container(layout_for(horizontal), obj1, obj2, obj3)

    assert container.min_size() == along(horizontal, 100 + PADDING, 50)
    assert obj1.size == cell
    assert obj3.position == at(horizontal, 50 + PADDING)


def test_cross_axis_stretches(horizontal):
    cell, obj1, obj2, obj3 = three(horizontal, cross_of_second=75)
    container = Container(layout_for(horizontal), obj1, obj2, obj3)

    assert container.min_size() == along(horizontal, 150 + PADDING * 2, 100)
    assert obj1.size == cell
    assert obj2.size == cell
    assert obj2.position == at(horizontal, 50 + PADDING)
    assert obj3.position == at(horizontal, 100 + PADDING * 2)


def test_extra_space_without_spacer(horizontal):
    _, obj1, obj2, obj3 = three(horizontal, cross_of_second=75)
    container = Container(layout_for(horizontal), obj1, obj2, obj3)
    container.resize(along(horizontal, 308, 100))

    assert container.min_size() == along(horizontal, 150 + PADDING * 2, 100)
    assert extent(horizontal, obj1.size) == 50
    assert extent(horizontal, obj2.size) == 50
    assert obj2.position == at(horizontal, 50 + PADDING)
    assert obj3.position == at(horizontal, 100 + PADDING * 2)


@pytest.mark.parametrize(
    "spacer_index, second_pos",
    [(0, 200 - PADDING), (2, 50 + PADDING)],
    ids=["leading-spacer", "middle-spacer"],
)
def test_spacer(horizontal, spacer_index, second_pos):
    _, obj1, obj2, obj3 = three(horizontal, cross_of_second=75)
    objects = [obj1, obj2, obj3]
    objects.insert(spacer_index, new_spacer())
    container = Container(layout_for(horizontal), *objects)
    container.resize(along(horizontal, 300, 100))

    assert container.min_size() == along(horizontal, 150 + PADDING * 2, 100)
    assert extent(horizontal, obj1.size) == 50
    assert extent(horizontal, obj2.size) == 50
    assert obj2.position == at(horizontal, second_pos)
    assert obj3.position == at(horizontal, 250)


def test_orientation(horizontal):
    assert layout_for(horizontal).horizontal is horizontal