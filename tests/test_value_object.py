import pytest
from pydantic import field_validator
from pydantic import ValidationError

from clean_paginate import BadRequest
from clean_paginate import ValueObject


class Color(ValueObject):
    name: str

    @field_validator("name")
    def name_not_empty(cls, v, _):
        assert v != ""
        return v


@pytest.fixture
def color():
    return Color(name="green")


def test_validator():
    with pytest.raises(ValidationError) as e:
        Color(name="")

    assert e.type is ValidationError  # not BadRequest


def test_create(color):
    assert Color.create(name="green") == color


def test_create_err():
    with pytest.raises(BadRequest):
        Color.create(name="")


def test_frozen(color):
    with pytest.raises(ValidationError):
        color.name = "red"


def test_hashable(color):
    assert len({color, color}) == 1


def test_eq(color):
    assert color == color


def test_neq(color):
    assert color != Color(name="red")


def test_merge(color):
    merged = color.merge(name="red")

    assert color.name == "green"
    assert merged == Color(name="red")


def test_merge_nothing(color):
    assert color.merge() is color


def test_merge_validates(color):
    with pytest.raises(BadRequest):
        color.merge(name="")


class Palette(ValueObject):
    colors: list[Color]
    name: str


class NamedColor(Color):
    hex: str


def test_merge_keeps_subclasses():
    palette = Palette(colors=[NamedColor(name="red", hex="#f00")], name="warm")
    merged = palette.merge(name="hot")

    assert isinstance(merged.colors[0], NamedColor)
    assert merged.colors[0].hex == "#f00"
