from dataclasses import dataclass, field

import pytest

from panekit.geometry import Position, Size
from panekit.layout.form import FormLayout

PADDING = 4


@dataclass(eq=False)
class Field:
    width: int
    height: int
    visible: bool = True
    size: Size = None
    position: Position = field(default_factory=Position)

    def min_size(self):
        return Size(self.width, self.height)

    def resize(self, size):
        self.size = size

    def move(self, pos):
        self.position = pos


def two_rows(hide_first=False, hide_second=False):
    return [
        Field(50, 50, not hide_first),
        Field(100, 100, not hide_first),
        Field(70, 30, not hide_second),
        Field(120, 80, not hide_second),
    ]


def test_form_layout():
    label1, content1, label2, content2 = two_rows()

    FormLayout().layout([label1, content1, label2, content2], Size(125, 125))

    assert [f.size for f in (label1, content1, label2, content2)] == [
        Size(70, 100),
        Size(120, 100),
        Size(70, 80),
        Size(120, 80),
    ]
    assert label2.position == Position(0, 100 + PADDING)
    assert content2.position == Position(70 + PADDING, 100 + PADDING)


def test_form_layout_hidden():
    objects = [Field(70, 50, False), Field(120, 100, False), Field(50, 30), Field(100, 80)]
    label2, content2 = objects[2:]

    FormLayout().layout(objects, Size(190 + PADDING, 125))

    assert label2.size == Size(50, 80)
    assert content2.size == Size(140, 80)
    assert label2.position == Position(0, 0)
    assert content2.position == Position(50 + PADDING, 0)


def test_form_layout_stretch_x():
    label, content = Field(50, 50), Field(50, 50)

    FormLayout().layout([label, content], Size(150, 50))

    assert label.size == Size(50, 50)
    assert content.size == Size(150 - 50 - PADDING, 50)


@pytest.mark.parametrize(
    "objects, expected",
    [
        (two_rows(), Size(70 + 120 + PADDING, 100 + 80 + PADDING)),
        (two_rows(hide_second=True), Size(50 + 100 + PADDING, 100)),
        ([], Size(0, 0)),
    ],
    ids=["two-rows", "hidden-row", "empty"],
)
def test_form_layout_min_size(objects, expected):
    assert FormLayout().min_size(objects) == expected


def test_form_layout_odd_count_rejected():
    with pytest.raises(ValueError):
        FormLayout().min_size([Field(10, 10)])